"""
HTTP transport: one authenticated POST per call, raw body back.

Importing this module raises the ``httpx`` and ``httpcore`` stdlib loggers to
WARNING, since httpx logs every request at INFO. Loggers the host application
has already given a level are left alone.
"""

from __future__ import annotations

import base64
import logging
import re
from typing import Any, Generator

import httpx
from loguru import logger

from netbitcoin.types import JSONRPC_REALM, Credentials, parse_endpoint
from netbitcoin.utils.exceptions import TransportError


def quiet_httpx_loggers() -> None:
    """Raise unconfigured httpx/httpcore loggers to WARNING."""
    for name in ("httpx", "httpcore"):
        stdlib_logger = logging.getLogger(name)
        if stdlib_logger.level == logging.NOTSET:
            stdlib_logger.setLevel(logging.WARNING)


quiet_httpx_loggers()

USE_HTTPX_DEFAULT: Any = object()

_REALM_RE = re.compile(r'realm\s*=\s*"?([^",]*)"?', re.IGNORECASE)


def _authority(url: httpx.URL) -> tuple[str, str, int]:
    port = url.port
    if port is None:
        port = 443 if url.scheme == "https" else 80
    return url.scheme, url.host, port


def challenge_realm(response: httpx.Response) -> str | None:
    """Realm named by a Basic ``WWW-Authenticate`` challenge, if any."""
    header = response.headers.get("www-authenticate", "")
    scheme, _, rest = header.strip().partition(" ")
    if scheme.lower() != "basic":
        return None
    match = _REALM_RE.search(rest)
    return match.group(1) if match else None


class RealmBasicAuth(httpx.Auth):
    """
    HTTP Basic auth scoped to one authority (scheme, host, port) and realm.

    Requests to the authority carry credentials up front; requests anywhere
    else go out without them. A 401 is returned to the caller untouched.
    """

    def __init__(self, username: str, password: str, site: httpx.URL, realm: str = JSONRPC_REALM):
        token = base64.b64encode(f"{username}:{password}".encode("utf-8")).decode("ascii")
        self._header = f"Basic {token}"
        self._authority = _authority(site)
        self.realm = realm

    def in_scope(self, request: httpx.Request) -> bool:
        return _authority(request.url) == self._authority

    def auth_flow(self, request: httpx.Request) -> Generator[httpx.Request, httpx.Response, None]:
        if not self.in_scope(request):
            yield request
            return
        request.headers["Authorization"] = self._header
        response = yield request
        if response.status_code == 401:
            logger.debug(
                "Credentials rejected by {}:{} (challenge realm {!r}, configured realm {!r})",
                self._authority[1],
                self._authority[2],
                challenge_realm(response),
                self.realm,
            )


def display_url(url: httpx.URL) -> str:
    """URL without userinfo, for logs and error messages."""
    return f"{url.scheme}://{url.netloc.decode('ascii')}{url.path}"


def post_request(
    credentials: Credentials,
    body: bytes,
    *,
    timeout: Any = USE_HTTPX_DEFAULT,
    transport: httpx.BaseTransport | None = None,
) -> bytes:
    """
    Send ``body`` to the daemon and return the raw response body.

    The status code is not inspected; a non-2xx answer is returned like any
    other so the envelope decides success or failure. No retries.

    Args:
        credentials: Endpoint and Basic auth credentials.
        body: Serialized JSON-RPC request.
        timeout: httpx timeout for this call; httpx's default when omitted.
        transport: Optional httpx transport (e.g. ``httpx.MockTransport``).

    Raises:
        InvalidEndpointError: the endpoint URL is malformed (before any I/O).
        TransportError: httpx could not complete the exchange.
    """
    url = parse_endpoint(credentials.url)
    safe_url = display_url(url)
    client_kwargs: dict[str, Any] = {
        "auth": RealmBasicAuth(credentials.username, credentials.password, url),
        "transport": transport,
    }
    if timeout is not USE_HTTPX_DEFAULT:
        client_kwargs["timeout"] = timeout
    try:
        with httpx.Client(**client_kwargs) as client:
            request = client.build_request(
                "POST",
                url,
                content=body,
                headers={
                    "Content-Type": "application/json",
                    "Content-Length": str(len(body)),
                },
            )
            response = client.send(request)
            raw = response.content
    except httpx.TimeoutException as exc:
        raise TransportError(f"timeout talking to {safe_url}: {exc}") from exc
    except httpx.HTTPError as exc:
        raise TransportError(f"network error talking to {safe_url}: {exc}") from exc
    logger.debug("POST {} ({} bytes) -> {} ({} bytes)", safe_url, len(body), response.status_code, len(raw))
    return raw
