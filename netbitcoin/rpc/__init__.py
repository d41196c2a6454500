"""JSON-RPC transport, envelope codec and the generic call operation."""

from netbitcoin.rpc.client import BitcoinRpcClient, call_api, call_api_raw
from netbitcoin.rpc.envelope import (
    RpcErrorObject,
    RpcResponse,
    build_request,
    decode_response,
    encode_request,
    parse_response,
)
from netbitcoin.rpc.transport import RealmBasicAuth, post_request

__all__ = [
    "BitcoinRpcClient",
    "call_api",
    "call_api_raw",
    "RpcErrorObject",
    "RpcResponse",
    "build_request",
    "encode_request",
    "decode_response",
    "parse_response",
    "RealmBasicAuth",
    "post_request",
]
