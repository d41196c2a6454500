"""
Exception hierarchy for netbitcoin.

Provides:
- Custom exception classes with error codes
- Error categorization (api, decode, transport, configuration)
- Safe error message formatting (no credential leak)
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Any


class ErrorCategory(Enum):
    """Error categories for classification."""
    API = "api"
    DECODE = "decode"
    TRANSPORT = "transport"
    CONFIGURATION = "configuration"


class BitcoinRpcError(Exception):
    """Base exception for all netbitcoin errors."""

    def __init__(
        self,
        message: str,
        code: str = "UNKNOWN_ERROR",
        category: ErrorCategory = ErrorCategory.API,
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


class ApiError(BitcoinRpcError):
    """The daemon answered with a JSON-RPC error object."""

    def __init__(self, rpc_code: int, rpc_message: str):
        super().__init__(
            f"RPC error {rpc_code}: {rpc_message}",
            code="API_ERROR",
            category=ErrorCategory.API,
            details={"rpc_code": rpc_code, "rpc_message": rpc_message},
        )
        self.rpc_code = rpc_code
        self.rpc_message = rpc_message


class ResultTypeError(BitcoinRpcError):
    """The response body could not be parsed into the expected envelope or result type.

    ``raw`` holds the exact bytes received so callers can inspect the payload.
    """

    def __init__(self, raw: bytes, reason: str | None = None):
        preview = raw[:200].decode("utf-8", errors="replace")
        message = f"unexpected response body: {preview!r}"
        if reason:
            message += f" ({reason})"
        super().__init__(
            message,
            code="RESULT_TYPE_ERROR",
            category=ErrorCategory.DECODE,
            details={"size": len(raw)},
        )
        self.raw = raw
        self.reason = reason


class InvalidEndpointError(BitcoinRpcError):
    """Endpoint URL could not be parsed. A configuration error, never retried."""

    def __init__(self, url: str, reason: str):
        super().__init__(
            f"invalid endpoint URL {sanitize_error_message(url)!r}: {reason}",
            code="INVALID_ENDPOINT",
            category=ErrorCategory.CONFIGURATION,
            details={"reason": reason},
        )
        self.url = url


class TransportError(BitcoinRpcError):
    """HTTP exchange with the daemon failed below the JSON-RPC layer."""

    def __init__(self, message: str):
        super().__init__(
            sanitize_error_message(message),
            code="TRANSPORT_ERROR",
            category=ErrorCategory.TRANSPORT,
        )


_SENSITIVE_PATTERNS = [
    (re.compile(r"(?P<scheme>[a-zA-Z][a-zA-Z0-9+.\-]*://)[^/@\s]+@"), r"\g<scheme>[REDACTED]@"),
    (re.compile(r"(rpcpassword|password|passwd|auth)([=:]\s*)['\"]?[^\s'\"&]+['\"]?", re.IGNORECASE), r"\1\2[REDACTED]"),
    (re.compile(r"basic\s+[a-zA-Z0-9+/]+=*", re.IGNORECASE), "Basic [REDACTED]"),
]


def sanitize_error_message(message: str) -> str:
    """Remove credentials (URL userinfo, passwords, Basic tokens) from a message."""
    sanitized = message
    for pattern, replacement in _SENSITIVE_PATTERNS:
        sanitized = pattern.sub(replacement, sanitized)
    return sanitized
