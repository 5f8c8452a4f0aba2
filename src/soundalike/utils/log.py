"""
log.py.

Does: Opt-in topic tracing. SOUNDALIKE_DEBUG_TOPICS lists the topics to print
      (comma-separated, or 'all'); with the variable unset nothing is printed.
Returns: debug(), is_enabled(), reload_topics().
Used by: The SQL binding (topic 'sql') and the demo CLI (topic 'demo').
"""

import os
import sys
from datetime import datetime
from typing import TextIO

__all__ = ["debug", "reload_topics", "is_enabled"]

ENV_VAR = "SOUNDALIKE_DEBUG_TOPICS"
ALL_TOPICS = "all"


def _parse_topics(raw: str) -> frozenset[str]:
    return frozenset(part.strip().lower() for part in raw.split(",") if part.strip())


_enabled = _parse_topics(os.getenv(ENV_VAR, ""))


def reload_topics() -> frozenset[str]:
    """Does: Re-read SOUNDALIKE_DEBUG_TOPICS. Returns: the enabled topics."""
    global _enabled
    _enabled = _parse_topics(os.getenv(ENV_VAR, ""))
    return _enabled


def is_enabled(topic: str) -> bool:
    return ALL_TOPICS in _enabled or topic.strip().lower() in _enabled


def debug(
    msg: str,
    topic: str = "soundalike",
    *,
    level: str = "DEBUG",
    stream: TextIO | None = None,
) -> None:
    """Does: Print `[time] [topic][LEVEL] msg` to `stream` (stderr) when `topic` is enabled."""
    if not is_enabled(topic):
        return
    stamp = datetime.now().isoformat(sep=" ", timespec="seconds")
    print(f"[{stamp}] [{topic.strip().lower()}][{level.upper()}] {msg}", file=stream or sys.stderr)
