"""Method channel protocol, codec and in-process transport."""

from .codec import JsonMethodCodec, MethodCodec
from .messenger import BinaryMessenger
from .method_channel import MethodChannel
from .sink import CapturingResult, OneShotResult
from .types import (
    NOT_IMPLEMENTED,
    MethodCall,
    MethodCallHandler,
    MethodError,
    MethodResult,
    ResultCallback,
    ResultKind,
)

__all__ = [
    "BinaryMessenger",
    "CapturingResult",
    "JsonMethodCodec",
    "MethodCall",
    "MethodCallHandler",
    "MethodChannel",
    "MethodCodec",
    "MethodError",
    "MethodResult",
    "NOT_IMPLEMENTED",
    "OneShotResult",
    "ResultCallback",
    "ResultKind",
]
