"""Tests for Credentials, the address-amount adapter and tj."""

from __future__ import annotations

import dataclasses
import json
from decimal import Decimal

import pytest

from netbitcoin.types import AddressAmounts, Credentials, parse_endpoint, tj
from netbitcoin.utils.exceptions import InvalidEndpointError


def test_address_amounts_encode_as_object() -> None:
    encoded = AddressAmounts([("1Addr", 1.5), ("2Addr", 2.0)]).to_json()
    assert json.loads(json.dumps(encoded)) == {"1Addr": 1.5, "2Addr": 2.0}


def test_address_amounts_last_duplicate_wins() -> None:
    encoded = AddressAmounts([("1Addr", 1), ("1Addr", 3)]).to_json()
    assert encoded == {"1Addr": 3}


def test_address_amounts_accepts_decimals_and_generators() -> None:
    pairs = ((f"{i}Addr", Decimal("0.00000001") * i) for i in range(1, 3))
    amounts = AddressAmounts(pairs)
    assert len(amounts) == 2
    assert amounts.to_json() == {"1Addr": 1e-08, "2Addr": 2e-08}


def test_tj_passes_plain_json_through() -> None:
    assert tj("label") == "label"
    assert tj(6) == 6
    assert tj(True) is True
    assert tj(None) is None
    assert tj([Decimal("1"), {"a": Decimal("0.5")}]) == [1, {"a": 0.5}]


def test_credentials_are_immutable_and_hide_password() -> None:
    creds = Credentials("http://127.0.0.1:8332", "user", "s3cret")
    with pytest.raises(dataclasses.FrozenInstanceError):
        creds.password = "other"  # type: ignore[misc]
    assert "s3cret" not in repr(creds)
    assert creds.endpoint.port == 8332


@pytest.mark.parametrize(
    "url",
    ["", "   ", "127.0.0.1:8332", "ftp://127.0.0.1:8332", "http://", "not a url"],
)
def test_unparsable_endpoint_fails_at_construction(url: str) -> None:
    with pytest.raises(InvalidEndpointError):
        Credentials(url, "user", "pass")


def test_parse_endpoint_accepts_wallet_paths() -> None:
    url = parse_endpoint("https://node.example:8332/wallet/cold")
    assert url.host == "node.example"
    assert url.path == "/wallet/cold"
