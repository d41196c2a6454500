"""JSON-RPC envelope codec: request encoding and typed response decoding."""

from __future__ import annotations

import json
from decimal import Decimal
from functools import lru_cache
from typing import Any, Generic, Sequence, TypeVar

from loguru import logger
from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

from netbitcoin.types import Amount, tj
from netbitcoin.utils.exceptions import ApiError, ResultTypeError, sanitize_error_message

T = TypeVar("T")

JSONRPC_VERSION = "2.0"
# Responses are paired with requests by the synchronous HTTP exchange, not by id.
REQUEST_ID = 1


class RpcErrorObject(BaseModel):
    """Error member of a response: integer code and string message, both required."""
    model_config = ConfigDict(extra="ignore")

    # Integral floats such as -1.0 are rejected as well.
    code: int = Field(strict=True)
    message: str = Field(strict=True)


class RpcResponse(BaseModel, Generic[T]):
    """Response envelope. Both members are required; ``error`` is null on success."""
    model_config = ConfigDict(extra="ignore")

    result: T
    error: RpcErrorObject | None


def build_request(method: str, params: Sequence[Any] = ()) -> dict[str, Any]:
    """Build the request envelope as a dict."""
    return {
        "jsonrpc": JSONRPC_VERSION,
        "method": method,
        "params": [tj(p) for p in params],
        "id": REQUEST_ID,
    }


def encode_request(method: str, params: Sequence[Any] = ()) -> bytes:
    """Serialize the request envelope to compact UTF-8 JSON."""
    payload = build_request(method, params)
    return json.dumps(payload, separators=(",", ":"), allow_nan=False).encode("utf-8")


@lru_cache(maxsize=256)
def _adapter(tp: Any) -> TypeAdapter:
    return TypeAdapter(tp)


def _result_schema(result_type: Any) -> Any:
    return Amount if result_type is Decimal else result_type


def parse_response(raw: bytes, result_type: Any = Any) -> RpcResponse:
    """
    Parse raw bytes into a typed response envelope without raising on ``error``.

    Validation is strict: a JSON string or boolean is never turned into a
    number, and a ``Decimal`` result must be a JSON number.

    Raises:
        ResultTypeError: body is not a JSON object with ``result`` and ``error``,
            ``error`` is neither null nor a {code, message} object, or
            ``result`` does not match ``result_type``.
    """
    try:
        return _adapter(RpcResponse[_result_schema(result_type)]).validate_json(raw, strict=True)
    except ValidationError as exc:
        logger.debug("Undecodable RPC response ({} bytes): {}", len(raw), _summary(exc))
        raise ResultTypeError(raw, _summary(exc)) from exc


def decode_response(raw: bytes, result_type: Any = Any) -> Any:
    """
    Decode raw response bytes into the result, validated as ``result_type``.

    The error member is checked before the result is validated, so an error
    response is reported as ApiError whatever ``result_type`` is.

    Raises:
        ApiError: the daemon returned an error object.
        ResultTypeError: the body or its result does not have the expected shape.
    """
    envelope = parse_response(raw)
    if envelope.error is not None:
        logger.debug(
            "RPC error {}: {}",
            envelope.error.code,
            sanitize_error_message(envelope.error.message),
        )
        raise ApiError(envelope.error.code, envelope.error.message)
    if result_type is Any:
        return envelope.result
    return parse_response(raw, result_type).result


def _summary(exc: ValidationError) -> str:
    errors = exc.errors(include_url=False, include_input=False)
    if not errors:
        return "validation failed"
    first = errors[0]
    loc = ".".join(str(part) for part in first.get("loc", ())) or "body"
    more = f" (+{len(errors) - 1} more)" if len(errors) > 1 else ""
    return f"{loc}: {first.get('msg', 'invalid')}{more}"
