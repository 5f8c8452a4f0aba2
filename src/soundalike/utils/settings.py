# src/soundalike/utils/settings.py

"""
settings.py.

Does: Read the JSON settings files that drive soundalike (the SQL function table).
      Files live in the package's data/ directory; SOUNDALIKE_DATA_DIR points the
      reader at another directory holding files of the same names.
Returns: load_settings(), data_dir(), and the typed settings errors.
Used by: The SQL binding.
"""

from __future__ import annotations

import json
import logging
import os
from collections.abc import Callable
from pathlib import Path
from typing import Any

__all__ = [
    "DATA_DIR_ENV",
    "PACKAGE_DATA_DIR",
    "data_dir",
    "load_settings",
    "SettingsFileNotFound",
    "SettingsParseError",
    "SettingsTypeError",
]

log = logging.getLogger(__name__)

DATA_DIR_ENV = "SOUNDALIKE_DATA_DIR"
PACKAGE_DATA_DIR = Path(__file__).resolve().parent.parent / "data"

Validator = Callable[[dict[str, Any]], dict[str, Any]]


class SettingsFileNotFound(FileNotFoundError):
    """Raise when a settings file is missing or unreadable."""


class SettingsParseError(ValueError):
    """Raise when a settings file is not JSON in its encoding, or fails validation."""


class SettingsTypeError(TypeError):
    """Raise when a settings file does not hold a JSON object."""


def data_dir() -> Path:
    """Does: Return $SOUNDALIKE_DATA_DIR when set, else the packaged data/ directory."""
    override = os.environ.get(DATA_DIR_ENV)
    return Path(override).expanduser() if override else PACKAGE_DATA_DIR


def load_settings(
    name: str,
    *,
    validator: Validator | None = None,
    encoding: str = "utf-8",
) -> dict[str, Any]:
    """
    Does: Parse <data_dir>/<name>.json, require a JSON object and pass it through
          `validator` (whose ValueError/TypeError become SettingsParseError).
    Returns: The settings dict, validated when a validator is given.
    """
    path = data_dir() / f"{name}.json"
    try:
        text = path.read_text(encoding=encoding)
    except UnicodeDecodeError as e:
        raise SettingsParseError(f"{path.name} is not valid {encoding}: {e}") from e
    except OSError as e:
        raise SettingsFileNotFound(f"Cannot read settings file {path}: {e}") from e

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise SettingsParseError(f"Invalid JSON in {path.name}: {e}") from e

    if not isinstance(data, dict):
        raise SettingsTypeError(f"{path.name}: expected a JSON object, got {type(data).__name__}")

    if validator is not None:
        try:
            data = validator(data)
        except (ValueError, TypeError) as e:
            raise SettingsParseError(f"{path.name}: {e}") from e

    log.debug("Loaded settings %s from %s", name, path.parent)
    return data
