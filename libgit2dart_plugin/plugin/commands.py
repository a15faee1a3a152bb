"""Closed set of commands the plugin answers."""

from __future__ import annotations

from enum import Enum


class Command(str, Enum):
    GET_PLATFORM_VERSION = "getPlatformVersion"

    @classmethod
    def parse(cls, method: str) -> "Command | None":
        """Exact, case-sensitive lookup. Unknown names return None."""
        try:
            return cls(method)
        except ValueError:
            return None

    @classmethod
    def names(cls) -> list[str]:
        return [member.value for member in cls]
