"""Host operating system identification."""

from __future__ import annotations

import platform
from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class HostPlatform:
    """Snapshot of the running host's OS identification."""

    system: str
    release: str = ""
    version: str = ""
    mac_release: str = ""

    @classmethod
    def current(cls) -> "HostPlatform":
        system = platform.system()
        return cls(
            system=system,
            release=platform.release(),
            version=platform.version(),
            mac_release=platform.mac_ver()[0] if system == "Darwin" else "",
        )


def _join(name: str, detail: str) -> str:
    detail = detail.strip()
    return f"{name} {detail}" if detail else name


def _version_tuple(raw: str) -> tuple[int, int]:
    parts: list[int] = []
    for piece in raw.split(".")[:2]:
        digits = "".join(ch for ch in piece if ch.isdigit())
        if not digits:
            break
        parts.append(int(digits))
    while len(parts) < 2:
        parts.append(0)
    return parts[0], parts[1]


def _windows_label(host: HostPlatform) -> str:
    # platform.release() reports "10" on Windows 11 as well, so go by the NT version.
    major, minor = _version_tuple(host.version or host.release)
    if major >= 10:
        return "10+"
    if (major, minor) >= (6, 2):
        return "8"
    if (major, minor) >= (6, 1):
        return "7"
    return ""


def platform_version(host: HostPlatform) -> str:
    """Return ``"<OS name> <OS version string>"`` for the given host."""
    system = host.system.strip()
    if system == "Darwin":
        return _join("macOS", host.mac_release or host.release)
    if system == "Linux":
        return _join("Linux", host.version)
    if system == "Windows":
        return _join("Windows", _windows_label(host))
    return _join(system or "Unknown", host.release)
