"""Method-call protocol models shared by the channel and plugin dispatchers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable


@dataclass(slots=True, frozen=True)
class MethodCall:
    """One request on a method channel: a method name plus an opaque argument payload."""

    method: str
    arguments: Any = None


class ResultKind(str, Enum):
    SUCCESS = "success"
    ERROR = "error"
    NOT_IMPLEMENTED = "notImplemented"


@dataclass(slots=True, frozen=True)
class MethodError:
    """Normalized error payload carried by an error result."""

    code: str
    message: str | None = None
    details: Any = None


@dataclass(slots=True, frozen=True)
class MethodResult:
    """
    The single outcome delivered for a call.

    Exactly one of: a success value, an error, or the not-implemented marker.
    Use the constructors rather than building instances by hand.
    """

    kind: ResultKind
    value: Any = None
    error: MethodError | None = None

    @classmethod
    def success(cls, value: Any = None) -> "MethodResult":
        return cls(kind=ResultKind.SUCCESS, value=value)

    @classmethod
    def failure(cls, code: str, message: str | None = None, details: Any = None) -> "MethodResult":
        return cls(kind=ResultKind.ERROR, error=MethodError(code=code, message=message, details=details))

    @classmethod
    def not_implemented(cls) -> "MethodResult":
        return NOT_IMPLEMENTED

    @property
    def ok(self) -> bool:
        return self.kind is ResultKind.SUCCESS

    @property
    def is_not_implemented(self) -> bool:
        return self.kind is ResultKind.NOT_IMPLEMENTED


NOT_IMPLEMENTED = MethodResult(kind=ResultKind.NOT_IMPLEMENTED)

ResultCallback = Callable[[MethodResult], None]
MethodCallHandler = Callable[[MethodCall, ResultCallback], None]
