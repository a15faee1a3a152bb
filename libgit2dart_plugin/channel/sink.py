"""One-shot completion sink for method-call results."""

from __future__ import annotations

from typing import Any

from libgit2dart_plugin.channel.types import MethodResult, ResultCallback
from libgit2dart_plugin.utils.exceptions import ResultAlreadySubmittedError


class OneShotResult:
    """Forwards exactly one result to the wrapped callback; later submissions raise."""

    __slots__ = ("_callback", "_method", "_submitted")

    def __init__(self, callback: ResultCallback, method: str | None = None):
        self._callback = callback
        self._method = method
        self._submitted = False

    @classmethod
    def wrap(cls, callback: ResultCallback, method: str | None = None) -> "OneShotResult":
        if isinstance(callback, OneShotResult):
            return callback
        return cls(callback, method=method)

    @property
    def submitted(self) -> bool:
        return self._submitted

    def __call__(self, result: MethodResult) -> None:
        if self._submitted:
            raise ResultAlreadySubmittedError(self._method)
        self._submitted = True
        self._callback(result)

    def success(self, value: Any = None) -> None:
        self(MethodResult.success(value))

    def error(self, code: str, message: str | None = None, details: Any = None) -> None:
        self(MethodResult.failure(code, message, details))

    def not_implemented(self) -> None:
        self(MethodResult.not_implemented())


class CapturingResult:
    """Result callback that records what it received."""

    def __init__(self) -> None:
        self.results: list[MethodResult] = []

    def __call__(self, result: MethodResult) -> None:
        self.results.append(result)

    @property
    def result(self) -> MethodResult | None:
        return self.results[0] if self.results else None
