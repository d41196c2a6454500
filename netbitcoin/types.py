"""Value types shared by the RPC layer.

Credentials are the only state a call needs; Address and BTC are kept to their
wire contract (a string and a JSON number).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Annotated, Any, Iterable, Union

import httpx
from pydantic import PlainValidator

from netbitcoin.utils.exceptions import InvalidEndpointError

Address = str
BTC = Union[Decimal, int, float]

JSONRPC_REALM = "jsonrpc"


def _json_number_to_decimal(value: Any) -> Decimal:
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError("amount must be a JSON number")
    return Decimal(str(value))


# Decimal that only accepts JSON numbers; pydantic alone also takes "0.5".
Amount = Annotated[Decimal, PlainValidator(_json_number_to_decimal)]


def parse_endpoint(url: str) -> httpx.URL:
    """Parse an endpoint URL, raising InvalidEndpointError when it is unusable."""
    if not isinstance(url, str) or not url.strip():
        raise InvalidEndpointError(str(url), "empty URL")
    try:
        parsed = httpx.URL(url.strip())
    except (httpx.InvalidURL, TypeError, ValueError) as exc:
        raise InvalidEndpointError(url, str(exc)) from exc
    if parsed.scheme not in {"http", "https"}:
        raise InvalidEndpointError(url, f"unsupported scheme {parsed.scheme or '(none)'!r}")
    if not parsed.host:
        raise InvalidEndpointError(url, "missing host")
    return parsed


@dataclass(frozen=True)
class Credentials:
    """Endpoint URL plus Basic auth username/password for a daemon."""

    url: str
    username: str
    password: str = field(repr=False)

    def __post_init__(self) -> None:
        parse_endpoint(self.url)

    @property
    def endpoint(self) -> httpx.URL:
        return parse_endpoint(self.url)


class AddressAmounts:
    """
    Address -> amount pairs, serialized as a JSON object instead of an array.

    sendmany-style calls expect ``{"<address>": <amount>, ...}``. Duplicate
    addresses are not checked; the last pair wins.
    """

    __slots__ = ("pairs",)

    def __init__(self, pairs: Iterable[tuple[Address, BTC]]):
        self.pairs: tuple[tuple[Address, BTC], ...] = tuple(pairs)

    def to_json(self) -> dict[str, Any]:
        return {address: tj(amount) for address, amount in self.pairs}

    def __len__(self) -> int:
        return len(self.pairs)

    def __repr__(self) -> str:
        return f"AddressAmounts({list(self.pairs)!r})"


def tj(value: Any) -> Any:
    """Shortcut converting a parameter to its JSON-ready form."""
    if isinstance(value, Decimal):
        # Decimal("6") -> 6, Decimal("6.0") -> 6.0
        if value.is_finite() and value.as_tuple().exponent >= 0:
            return int(value)
        return float(value)
    to_json = getattr(value, "to_json", None)
    if callable(to_json):
        return to_json()
    if isinstance(value, dict):
        return {str(k): tj(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [tj(v) for v in value]
    return value
