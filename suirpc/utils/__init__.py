"""Utility functions for suirpc."""

from suirpc.utils.exceptions import (
    SuiRpcError,
    TransportError,
    NetworkError,
    ProtocolError,
    DecodeError,
    ConfigError,
    UnsupportedMethodError,
    ErrorCategory,
    classify_exception,
    sanitize_error_message,
)
from suirpc.utils.logging import configure_logging

__all__ = [
    "SuiRpcError",
    "TransportError",
    "NetworkError",
    "ProtocolError",
    "DecodeError",
    "ConfigError",
    "UnsupportedMethodError",
    "ErrorCategory",
    "classify_exception",
    "sanitize_error_message",
    "configure_logging",
]
