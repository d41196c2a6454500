"""Configuration module for netbitcoin."""

from netbitcoin.config.loader import load_config, get_config_path, save_config
from netbitcoin.config.schema import RpcConfig
from netbitcoin.config.access import get_config, clear_config_cache

__all__ = ["RpcConfig", "load_config", "save_config", "get_config_path", "get_config", "clear_config_cache"]
