"""Pytest fixtures and JSON-RPC response builders."""

import json

import httpx
import pytest

from netbitcoin.config import access
from netbitcoin.types import Credentials

RPC_URL = "http://127.0.0.1:18443"
RPC_USER = "testuser"
RPC_PASS = "testpass"


def rpc_success(result, status_code: int = 200) -> httpx.Response:
    """An httpx.Response that looks like a JSON-RPC success."""
    return httpx.Response(status_code, json={"result": result, "error": None, "id": 1})


def rpc_error(code, message, status_code: int = 200) -> httpx.Response:
    """An httpx.Response that looks like a JSON-RPC error."""
    return httpx.Response(
        status_code,
        json={"result": None, "error": {"code": code, "message": message}, "id": 1},
    )


class Recorder:
    """MockTransport handler that records requests and replays canned responses."""

    def __init__(self, *responses: httpx.Response):
        self.responses = list(responses)
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        canned = self.responses.pop(0) if len(self.responses) > 1 else self.responses[0]
        return httpx.Response(canned.status_code, headers=canned.headers, content=canned.content)

    @property
    def last_body(self) -> dict:
        return json.loads(self.requests[-1].content)

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)


@pytest.fixture
def credentials() -> Credentials:
    return Credentials(RPC_URL, RPC_USER, RPC_PASS)


@pytest.fixture(autouse=True)
def _isolated_config(monkeypatch, tmp_path):
    """Point config at a temp home and drop NETBITCOIN_* env for every test."""
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setattr("pathlib.Path.home", lambda: tmp_path)
    for key in ("NETBITCOIN_URL", "NETBITCOIN_USERNAME", "NETBITCOIN_PASSWORD", "NETBITCOIN_TIMEOUT_SECONDS", "NETBITCOIN_LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)
    access.clear_config_cache()
    yield
    access.clear_config_cache()
