"""
log.py.

Does: Lightweight topic debug printer controlled by TEXT_SCANNER_DEBUG_TOPICS
      (comma-separated topic names, or 'all'). Silent when unset.
Returns: Prints timestamped lines with topic + level. Used by the demo CLI and tests.
"""

import os
import sys
from datetime import datetime
from typing import TextIO

__all__ = ["debug", "enable_topics", "reload_topics", "topic_enabled"]

ENV_VAR = "TEXT_SCANNER_DEBUG_TOPICS"


def _load_topics() -> set[str]:
    raw = os.getenv(ENV_VAR, "")
    return {t.strip().lower() for t in raw.split(",") if t.strip()}


_DEBUG_TOPICS = _load_topics()


def reload_topics() -> None:
    """Does: Reload topics from environment variable TEXT_SCANNER_DEBUG_TOPICS."""
    global _DEBUG_TOPICS
    _DEBUG_TOPICS = _load_topics()


def enable_topics(*topics: str) -> None:
    """Does: Enable extra topics at runtime (on top of the env selection)."""
    _DEBUG_TOPICS.update(t.strip().lower() for t in topics if t.strip())


def topic_enabled(topic: str) -> bool:
    return "all" in _DEBUG_TOPICS or topic.lower().strip() in _DEBUG_TOPICS


def debug(
    msg: str,
    topic: str = "scanner",
    *,
    level: str = "DEBUG",
    stream: TextIO | None = None,
) -> None:
    """Does: Print a timestamped debug line with topic and level
    if enabled via TEXT_SCANNER_DEBUG_TOPICS or enable_topics().
    """
    if not topic_enabled(topic):
        return
    if stream is None:
        stream = sys.stderr
    ts = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    print(f"[{ts}] [{topic.lower().strip()}][{level.upper()}] {msg}", file=stream)
