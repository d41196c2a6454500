"""Loguru helpers for opting in to netbitcoin log output."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Any

from loguru import logger

# destination -> (sink id, level)
_SINKS: dict[str, tuple[int, str]] = {}


def _ensure_sink(key: str, level: str, sink: Any, **options: Any) -> None:
    current = _SINKS.get(key)
    if current is not None:
        if current[1] == level:
            return
        logger.remove(current[0])
    sink_id = logger.add(sink, level=level, filter="netbitcoin", backtrace=False, diagnose=False, **options)
    _SINKS[key] = (sink_id, level)


def configure_logging(level: str = "INFO", log_file: Path | str | None = None) -> Path | None:
    """
    Enable the package logger and attach sinks.

    The package is silent by default. Calling this adds a stderr sink at
    ``level`` and, when ``log_file`` is given, a rotating file sink. Repeated
    calls for the same destination keep one sink, re-added when ``level``
    changes.

    Returns:
        The resolved log file path, or None when only stderr is configured.
    """
    level = level.upper()
    logger.enable("netbitcoin")
    _ensure_sink("stderr", level, sys.stderr)
    if log_file is None:
        return None
    log_path = Path(log_file).expanduser()
    log_path.parent.mkdir(parents=True, exist_ok=True)
    _ensure_sink(
        str(log_path.resolve()),
        level,
        str(log_path),
        rotation="10 MB",
        retention="14 days",
        enqueue=True,
        encoding="utf-8",
    )
    return log_path


def reset_logging() -> None:
    """Remove sinks added by configure_logging and silence the package again."""
    for sink_id, _level in _SINKS.values():
        try:
            logger.remove(sink_id)
        except ValueError:
            pass
    _SINKS.clear()
    logger.disable("netbitcoin")
