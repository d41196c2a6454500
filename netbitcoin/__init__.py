"""
netbitcoin - JSON-RPC client binding for bitcoind-style daemons.

Silent by default; call ``netbitcoin.utils.configure_logging()`` to see logs.
"""

from loguru import logger

from netbitcoin.rpc import BitcoinRpcClient, call_api, call_api_raw
from netbitcoin.types import BTC, Address, AddressAmounts, Amount, Credentials, tj
from netbitcoin.utils.exceptions import (
    ApiError,
    BitcoinRpcError,
    InvalidEndpointError,
    ResultTypeError,
    TransportError,
)

__version__ = "0.1.0"

logger.disable("netbitcoin")

__all__ = [
    "__version__",
    "Address",
    "AddressAmounts",
    "Amount",
    "BTC",
    "Credentials",
    "BitcoinRpcClient",
    "call_api",
    "call_api_raw",
    "tj",
    "BitcoinRpcError",
    "ApiError",
    "ResultTypeError",
    "InvalidEndpointError",
    "TransportError",
]
