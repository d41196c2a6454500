"""Configuration loading utilities."""

import json
from pathlib import Path
from typing import Any

from loguru import logger
from pydantic.alias_generators import to_camel as to_lower_camel, to_snake

from netbitcoin.config.schema import RpcConfig


def get_config_path() -> Path:
    """Get the default configuration file path."""
    return Path.home() / ".netbitcoin" / "config.json"


def load_config(config_path: Path | None = None) -> RpcConfig:
    """
    Load configuration from file, or defaults plus environment when absent.

    Keys may be camelCase (as written by save_config) or snake_case. Keys that
    are not RpcConfig fields are ignored with a warning.

    Args:
        config_path: Optional path to config file. Uses default if not provided.

    Returns:
        Loaded configuration object.
    """
    path = config_path or get_config_path()

    if path.exists():
        try:
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
            if not isinstance(data, dict):
                raise ValueError("config file must be a JSON object")
            return RpcConfig(**from_file_keys(data, source=path))
        except (json.JSONDecodeError, ValueError) as e:
            raise ValueError(
                f"Failed to load config from {path}: {e}. "
                "Fix the file or remove it to use defaults."
            ) from e

    return RpcConfig()


def save_config(config: RpcConfig, config_path: Path | None = None) -> Path:
    """
    Save configuration to file.

    Args:
        config: Configuration to save.
        config_path: Optional path to save to. Uses default if not provided.
    """
    path = config_path or get_config_path()
    path.parent.mkdir(parents=True, exist_ok=True)

    data = to_file_keys(config.model_dump())

    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2)
    from netbitcoin.config.access import clear_config_cache

    clear_config_cache(config_path=path)
    return path


def from_file_keys(data: dict[str, Any], source: Path | None = None) -> dict[str, Any]:
    """Map config file keys to RpcConfig field names, dropping unknown ones."""
    converted = {to_snake(str(key)): value for key, value in data.items()}
    unknown = sorted(set(converted) - set(RpcConfig.model_fields))
    if unknown:
        logger.warning("Ignoring unknown config keys in {}: {}", source or "config", ", ".join(unknown))
    return {key: value for key, value in converted.items() if key in RpcConfig.model_fields}


def to_file_keys(data: dict[str, Any]) -> dict[str, Any]:
    """Map RpcConfig field names to the camelCase keys used on disk."""
    return {to_lower_camel(key): value for key, value in data.items()}
