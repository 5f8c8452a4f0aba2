# src/soundalike/utils/__init__.py
"""

Does: Provide settings loading and lightweight debug tracing for soundalike.
Returns: Public API via load_settings/data_dir and debug/is_enabled/reload_topics.
Used by: The SQL binding, the demo CLI, and tests.
"""

from __future__ import annotations

from .log import (
    debug,
    is_enabled,
    reload_topics,
)
from .settings import (
    SettingsFileNotFound,
    SettingsParseError,
    SettingsTypeError,
    data_dir,
    load_settings,
)

__all__ = [
    # Settings
    "load_settings",
    "data_dir",
    "SettingsFileNotFound",
    "SettingsParseError",
    "SettingsTypeError",
    # Tracing
    "debug",
    "is_enabled",
    "reload_topics",
]
