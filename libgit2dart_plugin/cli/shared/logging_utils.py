"""Loguru helpers for consistent logging in CLI commands."""

from __future__ import annotations

import sys
from pathlib import Path

from loguru import logger

from libgit2dart_plugin.config.loader import get_log_dir
from libgit2dart_plugin.config.schema import LoggingConfig

_SINK_IDS: dict[str, int] = {}


def configure_stderr(level: str = "WARNING") -> None:
    """Replace loguru's default stderr sink with one at the given level."""
    previous = _SINK_IDS.pop("stderr", None)
    if previous is None:
        logger.remove()
    else:
        logger.remove(previous)
    _SINK_IDS["stderr"] = logger.add(sys.stderr, level=level)


def ensure_rotating_log_file(name: str, settings: LoggingConfig) -> Path:
    """Ensure a rotating log sink for the given command name."""
    log_path = get_log_dir() / f"{name}.log"
    if name in _SINK_IDS:
        return log_path
    log_path.parent.mkdir(parents=True, exist_ok=True)
    sink_id = logger.add(
        str(log_path),
        level=settings.level,
        rotation=settings.rotation,
        retention=settings.retention,
        enqueue=True,
        encoding="utf-8",
        backtrace=False,
        diagnose=False,
    )
    _SINK_IDS[name] = sink_id
    return log_path
