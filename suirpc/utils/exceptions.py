"""
Errors raised by suirpc.

Every error carries a stable ``code`` and an ``ErrorCategory``. The three
failure layers of a call stay distinct: TransportError (HTTP status or no
response), ProtocolError (JSON-RPC error member) and DecodeError (unexpected
body shape).
"""

from __future__ import annotations

import asyncio
import json
import re
from enum import Enum
from typing import Any

_RETRYABLE_STATUS = frozenset({408, 425, 429})


class ErrorCategory(Enum):
    """Coarse grouping used by classify_exception."""
    TRANSPORT = "transport"
    RETRYABLE = "retryable"
    PROTOCOL = "protocol"
    DECODE = "decode"
    CONFIG = "config"
    UNSUPPORTED = "unsupported"
    FATAL = "fatal"


class SuiRpcError(Exception):
    """Base exception for all suirpc errors."""

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


class TransportError(SuiRpcError):
    """The node answered with a non-2xx HTTP status."""

    def __init__(self, status_code: int | None, message: str | None = None):
        text = message if message is not None else str(status_code)
        retryable = status_code is not None and (status_code >= 500 or status_code in _RETRYABLE_STATUS)
        super().__init__(
            text,
            code="TRANSPORT_ERROR",
            category=ErrorCategory.RETRYABLE if retryable else ErrorCategory.TRANSPORT,
            details={"status_code": status_code},
        )
        self.status_code = status_code
        self.retryable = retryable


class NetworkError(TransportError):
    """The request never produced an HTTP response (timeout, refused connection, DNS)."""

    def __init__(self, message: str, *, timeout: bool = False):
        super().__init__(None, message)
        self.code = "NETWORK_TIMEOUT" if timeout else "NETWORK_ERROR"
        self.category = ErrorCategory.RETRYABLE
        self.retryable = True
        self.details = {"status_code": None, "timeout": timeout}


class ProtocolError(SuiRpcError):
    """The JSON-RPC envelope carried an ``error`` member."""

    def __init__(self, message: str, rpc_code: int | None = None, data: Any = None):
        super().__init__(
            message,
            code="PROTOCOL_ERROR",
            category=ErrorCategory.PROTOCOL,
            details={"rpc_code": rpc_code, "data": data},
        )
        self.rpc_code = rpc_code
        self.data = data


class DecodeError(SuiRpcError):
    """Response body did not match the shape this client expects."""

    def __init__(self, message: str, body: bytes | str | None = None):
        excerpt = ""
        if body is not None:
            text = body.decode("utf-8", errors="replace") if isinstance(body, bytes) else body
            excerpt = text[:200]
        super().__init__(
            message,
            code="DECODE_ERROR",
            category=ErrorCategory.DECODE,
            details={"body": excerpt},
        )


class ConfigError(SuiRpcError):
    """Client configuration could not be loaded or validated."""

    def __init__(self, message: str, path: str | None = None):
        details = {"path": path} if path else {}
        super().__init__(message, code="CONFIG_ERROR", category=ErrorCategory.CONFIG, details=details)


class UnsupportedMethodError(SuiRpcError):
    """RPC method exposed on the client but not implemented."""

    def __init__(self, method: str):
        super().__init__(
            f"RPC method '{method}' is not supported by this client",
            code="UNSUPPORTED_METHOD",
            category=ErrorCategory.UNSUPPORTED,
            details={"method": method},
        )
        self.method = method


_SENSITIVE_PATTERNS = [
    re.compile(r"(api[_-]?key|token|secret|password|auth)[=:]\s*['\"]?([^\s'\"&]+)['\"]?", re.IGNORECASE),
    re.compile(r"bearer\s+[a-zA-Z0-9\-._~+/]+=*", re.IGNORECASE),
    re.compile(r"(https?://)[^/\s:@]+:[^/\s@]+@", re.IGNORECASE),
]


def sanitize_error_message(message: str, replacement: str = "[REDACTED]") -> str:
    """Remove credentials (query tokens, basic auth in URLs) from error messages."""
    sanitized = message
    for pattern in _SENSITIVE_PATTERNS:
        if pattern.groups == 1:
            sanitized = pattern.sub(lambda m: f"{m.group(1)}{replacement}@", sanitized)
        else:
            sanitized = pattern.sub(replacement, sanitized)
    return sanitized


def classify_exception(exc: Exception) -> tuple[str, ErrorCategory, bool]:
    """
    Classify an exception and return (error_code, category, should_retry).

    Returns:
        Tuple of (error_code, category, should_retry)
    """
    if isinstance(exc, TransportError):
        return exc.code, exc.category, exc.retryable

    if isinstance(exc, SuiRpcError):
        return exc.code, exc.category, exc.category == ErrorCategory.RETRYABLE

    if isinstance(exc, asyncio.TimeoutError):
        return "NETWORK_TIMEOUT", ErrorCategory.RETRYABLE, True

    if isinstance(exc, ConnectionError):
        return "NETWORK_ERROR", ErrorCategory.RETRYABLE, True

    if isinstance(exc, json.JSONDecodeError):
        return "DECODE_ERROR", ErrorCategory.DECODE, False

    return "INTERNAL_ERROR", ErrorCategory.FATAL, False
