# src/text_scanner/utils/load_config.py

"""Load JSON object configs (e.g. demo samples) from a <data/> directory.

The data dir comes from TEXT_SCANNER_DATA_DIR / DATA_DIR, else the first
'data/' found walking up from this module (the packaged text_scanner/data).
Parsed files are cached per (path, mtime) so edits on disk are picked up.
"""

from __future__ import annotations

import json
import logging
import os
import threading
from pathlib import Path
from typing import Any

__all__ = [
    "load_config",
    "clear_config_cache",
    "resolve_data_dir",
    "DataDirNotFound",
    "ConfigFileNotFound",
    "ConfigParseError",
    "ConfigTypeError",
]

DATA_DIR_ENV_VARS = ("TEXT_SCANNER_DATA_DIR", "DATA_DIR")


# ── Exceptions ───────────────────────────────────────────────────────────────
class DataDirNotFound(FileNotFoundError):
    """Raise when no 'data' directory is configured or found."""


class ConfigFileNotFound(FileNotFoundError):
    """Raise when the requested config file cannot be read or resolved."""


class ConfigParseError(ValueError):
    """Raise when a config file is not valid JSON."""


class ConfigTypeError(TypeError):
    """Raise when the parsed JSON is not an object."""


# ── Logging & cache ──────────────────────────────────────────────────────────
log = logging.getLogger(__name__)
_CACHE_LOCK = threading.RLock()
_CONFIG_CACHE: dict[tuple[Path, float], dict[str, Any]] = {}


def clear_config_cache() -> None:
    """Empty the in-memory config cache (pytest/hot-reload)."""
    with _CACHE_LOCK:
        _CONFIG_CACHE.clear()
    log.debug("Config cache cleared.")


def resolve_data_dir(start: Path | None = None) -> Path:
    """Return the env-configured data dir, else the first 'data/' found walking up."""
    for var in DATA_DIR_ENV_VARS:
        value = os.environ.get(var)
        if value:
            env_dir = Path(os.path.expanduser(value)).resolve()
            if not env_dir.is_dir():
                raise DataDirNotFound(f"{var} points to a missing directory: {env_dir}")
            return env_dir

    start = (start or Path(__file__)).resolve()
    tried = [(p / "data") for p in [start, *start.parents]]
    for cand in tried:
        if cand.is_dir():
            return cand
    raise DataDirNotFound("No 'data' directory found.\nTried:\n  " + "\n  ".join(map(str, tried)))


def load_config(file: str, *, base_dir: Path | None = None) -> dict[str, Any]:
    """Load <data>/<file>.json as a dict, caching by modification time."""
    data_dir = (base_dir or resolve_data_dir()).resolve()
    file_name = file if file.endswith(".json") else f"{file}.json"
    path = (data_dir / file_name).resolve()
    try:
        path.relative_to(data_dir)
    except ValueError as e:
        raise ConfigFileNotFound(
            f"Refusing to access file outside data dir: {path} (base={data_dir})"
        ) from e

    try:
        mtime = path.stat().st_mtime
    except OSError as e:
        raise ConfigFileNotFound(f"Config file not found: {path}") from e

    key = (path, mtime)
    with _CACHE_LOCK:
        if key in _CONFIG_CACHE:
            log.debug("Config cache HIT: %s", path.name)
            return _CONFIG_CACHE[key]

    try:
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigParseError(f"Invalid JSON in {path}: {e}") from e
    except OSError as e:
        raise ConfigFileNotFound(f"Cannot read {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigTypeError(f"{path.name}: expected a JSON object, got {type(data).__name__}")

    with _CACHE_LOCK:
        _CONFIG_CACHE[key] = data
    log.debug("Config cache MISS -> STORED: %s", path.name)
    return data
