"""Process-local config cache keyed by file path, refreshed when the file changes."""

from __future__ import annotations

import threading
from dataclasses import dataclass
from pathlib import Path

from libgit2dart_plugin.config.loader import get_config_path, load_config
from libgit2dart_plugin.config.schema import Config


@dataclass(slots=True, frozen=True)
class _Entry:
    stamp: tuple[int, int] | None
    config: Config


_lock = threading.RLock()
_cache: dict[Path, _Entry] = {}


def _resolve(config_path: Path | None) -> Path:
    return Path(config_path or get_config_path()).expanduser().resolve()


def _stamp(path: Path) -> tuple[int, int] | None:
    """(mtime_ns, size) of the file, or None when it does not exist."""
    try:
        stat = path.stat()
    except FileNotFoundError:
        return None
    return stat.st_mtime_ns, stat.st_size


def get_config(*, config_path: Path | None = None, force_reload: bool = False) -> Config:
    """Return the cached config for a path, reloading when forced or when the file changed."""
    path = _resolve(config_path)
    stamp = _stamp(path)
    with _lock:
        entry = _cache.get(path)
        if force_reload or entry is None or entry.stamp != stamp:
            entry = _Entry(stamp=stamp, config=load_config(path))
            _cache[path] = entry
        return entry.config


def clear_config_cache(*, config_path: Path | None = None) -> None:
    """Drop one cached path, or every entry when no path is given."""
    with _lock:
        if config_path is None:
            _cache.clear()
            return
        _cache.pop(_resolve(config_path), None)
