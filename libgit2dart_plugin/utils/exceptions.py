"""
Exception hierarchy and error handling utilities for libgit2dart_plugin.

Provides:
- Custom exception classes with error codes
- Error categorization used when building error envelopes
- Safe error message formatting (no sensitive data leak)
"""

from __future__ import annotations

import json
import re
from enum import Enum
from typing import Any


class ErrorCategory(Enum):
    """Error categories for classification."""
    FATAL = "fatal"
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    PERMISSION = "permission"
    TIMEOUT = "timeout"
    PROTOCOL = "protocol"


class PluginError(Exception):
    """Base exception for all libgit2dart_plugin errors."""

    def __init__(
        self,
        message: str,
        code: str = "UNKNOWN_ERROR",
        category: ErrorCategory = ErrorCategory.FATAL,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.code,
            "message": self.message,
            "category": self.category.value,
            "details": self.details,
        }

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class CodecError(PluginError):
    """A channel message or reply envelope could not be decoded."""

    def __init__(self, message: str, code: str = "MALFORMED_CALL", payload: Any = None):
        details = {"payload": payload} if payload is not None else {}
        super().__init__(message, code=code, category=ErrorCategory.PROTOCOL, details=details)


class ResultAlreadySubmittedError(PluginError):
    """A completion sink received more than one result."""

    def __init__(self, method: str | None = None):
        label = method or "<unknown>"
        super().__init__(
            f"result already submitted for method: {label}",
            code="RESULT_ALREADY_SUBMITTED",
            category=ErrorCategory.PROTOCOL,
            details={"method": method} if method else {},
        )


class ConfigError(PluginError):
    """Configuration file could not be loaded."""

    def __init__(self, path: str, reason: str):
        super().__init__(
            f"Failed to load config from {path}: {reason}",
            code="CONFIG_ERROR",
            category=ErrorCategory.VALIDATION,
            details={"path": path},
        )


_SENSITIVE_PATTERNS = [
    re.compile(r"(api[_-]?key|token|secret|password|auth)[=:]\s*['\"]?([^\s'\"]+)['\"]?", re.IGNORECASE),
    re.compile(r"bearer\s+[a-zA-Z0-9\-._~+/]+=*", re.IGNORECASE),
    re.compile(r"[a-zA-Z0-9]{32,}"),
]


def sanitize_error_message(message: str, replacement: str = "[REDACTED]") -> str:
    """Remove sensitive information from error messages."""
    sanitized = message
    for pattern in _SENSITIVE_PATTERNS:
        sanitized = pattern.sub(replacement, sanitized)
    return sanitized


def classify_exception(exc: Exception) -> tuple[str, ErrorCategory]:
    """
    Classify an exception and return (error_code, category).

    Used at the channel boundary to turn a failing handler into an error envelope.
    """
    if isinstance(exc, PluginError):
        return exc.code, exc.category

    if isinstance(exc, FileNotFoundError):
        return "FILE_NOT_FOUND", ErrorCategory.NOT_FOUND

    if isinstance(exc, PermissionError):
        return "PERMISSION_DENIED", ErrorCategory.PERMISSION

    if isinstance(exc, TimeoutError):
        return "TIMEOUT", ErrorCategory.TIMEOUT

    if isinstance(exc, json.JSONDecodeError):
        return "JSON_PARSE_ERROR", ErrorCategory.VALIDATION

    if isinstance(exc, ValueError):
        return "INVALID_VALUE", ErrorCategory.VALIDATION

    if isinstance(exc, KeyError):
        return "MISSING_KEY", ErrorCategory.VALIDATION

    if isinstance(exc, TypeError):
        return "TYPE_ERROR", ErrorCategory.VALIDATION

    return "INTERNAL_ERROR", ErrorCategory.FATAL
