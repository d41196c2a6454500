"""Utility functions for netbitcoin."""

from netbitcoin.utils.exceptions import (
    BitcoinRpcError,
    ApiError,
    ResultTypeError,
    InvalidEndpointError,
    TransportError,
    ErrorCategory,
    sanitize_error_message,
)
from netbitcoin.utils.logging import configure_logging, reset_logging

__all__ = [
    "BitcoinRpcError",
    "ApiError",
    "ResultTypeError",
    "InvalidEndpointError",
    "TransportError",
    "ErrorCategory",
    "sanitize_error_message",
    "configure_logging",
    "reset_logging",
]
