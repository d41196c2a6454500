"""Generic JSON-RPC call operation for bitcoind-style daemons."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Sequence

import httpx

from netbitcoin.rpc.envelope import decode_response, encode_request
from netbitcoin.rpc.transport import USE_HTTPX_DEFAULT, post_request
from netbitcoin.types import Credentials
from netbitcoin.utils.logging import configure_logging

if TYPE_CHECKING:
    from netbitcoin.config.schema import RpcConfig

call_api_raw = post_request


def call_api(
    credentials: Credentials,
    method: str,
    params: Sequence[Any] = (),
    result_type: Any = Any,
    *,
    timeout: Any = USE_HTTPX_DEFAULT,
    transport: httpx.BaseTransport | None = None,
) -> Any:
    """
    Make an authenticated API call to the daemon.

        >>> auth = Credentials("http://127.0.0.1:8332", "user", "password")
        >>> call_api(auth, "getbalance", ["*", 6], Decimal)  # doctest: +SKIP

    Args:
        credentials: Endpoint URL, username and password.
        method: RPC command name.
        params: Positional command arguments, each JSON-serializable.
        result_type: Type the ``result`` member is coerced to (pydantic rules).

    Raises:
        ApiError: the daemon reported an error object.
        ResultTypeError: the response could not be parsed as ``result_type``.
        TransportError: the HTTP exchange failed.
        InvalidEndpointError: the endpoint URL is malformed.
    """
    body = encode_request(method, params)
    raw = post_request(credentials, body, timeout=timeout, transport=transport)
    return decode_response(raw, result_type)


class BitcoinRpcClient:
    """Credentials bound once, ``call`` many times. Holds no mutable state."""

    def __init__(
        self,
        credentials: Credentials,
        *,
        timeout: Any = USE_HTTPX_DEFAULT,
        transport: httpx.BaseTransport | None = None,
    ):
        self.credentials = credentials
        self.timeout = timeout
        self.transport = transport

    @classmethod
    def from_config(
        cls,
        config: RpcConfig | None = None,
        *,
        transport: httpx.BaseTransport | None = None,
        enable_logging: bool = False,
    ) -> BitcoinRpcClient:
        """
        Build a client from configuration (file + ``NETBITCOIN_*`` env).

        With ``enable_logging`` the package logs to stderr at the configured
        ``log_level``; otherwise logging is left as the caller set it up.
        """
        if config is None:
            from netbitcoin.config.access import get_config

            config = get_config()
        if enable_logging:
            configure_logging(config.log_level)
        timeout = config.timeout_seconds if config.timeout_seconds is not None else USE_HTTPX_DEFAULT
        return cls(config.to_credentials(), timeout=timeout, transport=transport)

    def call(self, method: str, *params: Any, result_type: Any = Any) -> Any:
        return call_api(
            self.credentials,
            method,
            params,
            result_type,
            timeout=self.timeout,
            transport=self.transport,
        )

    def call_raw(self, body: bytes) -> bytes:
        return post_request(self.credentials, body, timeout=self.timeout, transport=self.transport)

    def __repr__(self) -> str:
        return f"BitcoinRpcClient({self.credentials!r})"
