"""Process-local config cache keyed by file and ``NETBITCOIN_*`` environment."""

from __future__ import annotations

import os
import threading
from pathlib import Path

from netbitcoin.config.loader import get_config_path, load_config
from netbitcoin.config.schema import RpcConfig

_ENV_PREFIX = RpcConfig.model_config["env_prefix"]

EnvSnapshot = tuple[tuple[str, str], ...]

_lock = threading.RLock()
# resolved path -> (environment it was loaded under, config)
_cache: dict[str, tuple[EnvSnapshot, RpcConfig]] = {}


def _resolved(config_path: Path | None) -> str:
    return str(Path(config_path or get_config_path()).expanduser().resolve())


def _env_snapshot() -> EnvSnapshot:
    return tuple(sorted((k.upper(), v) for k, v in os.environ.items() if k.upper().startswith(_ENV_PREFIX)))


def get_config(*, config_path: Path | None = None, force_reload: bool = False) -> RpcConfig:
    """
    Get the config for ``config_path``, reloading when ``NETBITCOIN_*`` changed.

    The file is read again only when forced, when the relevant environment
    differs from the one the cached entry was built under, or after
    save_config wrote it.
    """
    path = _resolved(config_path)
    env = _env_snapshot()
    with _lock:
        cached = _cache.get(path)
        if force_reload or cached is None or cached[0] != env:
            cached = (env, load_config(Path(path)))
            _cache[path] = cached
        return cached[1]


def clear_config_cache(*, config_path: Path | None = None) -> None:
    """Clear cached config entry (or all cache entries)."""
    with _lock:
        if config_path is None:
            _cache.clear()
            return
        _cache.pop(_resolved(config_path), None)
