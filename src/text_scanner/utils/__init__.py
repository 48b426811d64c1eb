# text_scanner/utils/__init__.py
"""

Does: Provide config loading and lightweight topic debug logging.
Returns: Public API via load_config/clear_config_cache and debug/reload_topics.
Used by: The demo CLI and tests.
"""

from __future__ import annotations

from .load_config import (
    ConfigFileNotFound,
    ConfigParseError,
    ConfigTypeError,
    DataDirNotFound,
    clear_config_cache,
    load_config,
    resolve_data_dir,
)
from .log import (
    debug,
    enable_topics,
    reload_topics,
    topic_enabled,
)

__all__ = [
    # Config loading
    "load_config",
    "clear_config_cache",
    "resolve_data_dir",
    "DataDirNotFound",
    "ConfigFileNotFound",
    "ConfigParseError",
    "ConfigTypeError",
    # Logging helpers
    "debug",
    "enable_topics",
    "reload_topics",
    "topic_enabled",
]
