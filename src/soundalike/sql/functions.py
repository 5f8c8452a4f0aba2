# src/soundalike/sql/functions.py

"""
functions.py.

Does: Expose the phonetic predicate and the string metrics as two-argument SQLite
      functions: validate arguments (non-NULL text or blob), decode blobs with the
      configured encoding, call the Python implementation, and hand back a value
      SQLite can store (INTEGER or REAL).
Returns: register_functions(), load_sql_config(), FunctionArgumentError.
Used by: Applications running fuzzy / sounds-like matching inside SQL queries.
"""

from __future__ import annotations

import codecs
import logging
import sqlite3
from collections.abc import Callable, Mapping
from typing import Any

from soundalike.metrics import dice_coefficient, jaro_winkler_similarity, levenshtein_distance
from soundalike.phonetic import is_phonetic_match
from soundalike.utils import debug, load_settings

__all__ = [
    "CALLABLES",
    "SQL_CONFIG_FILE",
    "FunctionArgumentError",
    "load_sql_config",
    "register_functions",
]

# ── Logging ──────────────────────────────────────────────────────────────────
log = logging.getLogger(__name__)

SQL_CONFIG_FILE = "sql_functions"
DEFAULT_ENCODING = "utf-8"
ARG_COUNT = 2

SqlValue = int | float
Comparison = Callable[[str, str], Any]

# Keys usable in the "functions" section of the config
CALLABLES: dict[str, Comparison] = {
    "levenshtein_distance": levenshtein_distance,
    "is_phonetic_match": is_phonetic_match,
    "jaro_winkler_similarity": jaro_winkler_similarity,
    "dice_coefficient": dice_coefficient,
}


class FunctionArgumentError(ValueError):
    """Raise when a SQL function receives a NULL, non-string or undecodable argument."""


# ─────────────────────────────────────────────────────────────────────────────
# 1) Config
# ─────────────────────────────────────────────────────────────────────────────


def _validate_sql_config(data: Mapping[str, Any]) -> dict[str, Any]:
    """Does: Check the function table and encoding; fill defaults. Returns: clean dict."""
    functions = data.get("functions")
    if not isinstance(functions, Mapping) or not functions:
        raise ValueError("'functions' must be a non-empty mapping of SQL name → callable key")

    unknown = sorted({str(key) for key in functions.values()} - set(CALLABLES))
    if unknown:
        raise ValueError(f"unknown callable keys: {', '.join(unknown)}")

    encoding = data.get("encoding", DEFAULT_ENCODING)
    try:
        codecs.lookup(encoding)
    except (LookupError, TypeError) as e:
        raise ValueError(f"unknown encoding {encoding!r}") from e

    return {
        "encoding": encoding,
        "deterministic": bool(data.get("deterministic", True)),
        "functions": {str(name): str(key) for name, key in functions.items()},
    }


def load_sql_config() -> dict[str, Any]:
    """Does: Load and validate <data>/sql_functions.json."""
    return load_settings(SQL_CONFIG_FILE, validator=_validate_sql_config)


# ─────────────────────────────────────────────────────────────────────────────
# 2) Argument handling
# ─────────────────────────────────────────────────────────────────────────────


def _decode_arg(value: object, encoding: str) -> str:
    """Does: Accept TEXT as-is, decode BLOB, reject NULL and numbers."""
    if value is None:
        raise FunctionArgumentError("This function requires non-NULL arguments")
    if isinstance(value, str):
        return value
    if isinstance(value, bytes):
        try:
            return value.decode(encoding)
        except UnicodeDecodeError as e:
            raise FunctionArgumentError(f"Cannot decode argument as {encoding}: {e}") from e
    raise FunctionArgumentError("This function requires two string arguments")


def _sql_adapter(func: Comparison, encoding: str) -> Callable[[object, object], SqlValue]:
    """Does: Wrap a (str, str) comparison into a SQLite-callable (a, b) function."""

    def call(a: object, b: object) -> SqlValue:
        result = func(_decode_arg(a, encoding), _decode_arg(b, encoding))
        if isinstance(result, bool):
            return int(result)
        return result

    call.__name__ = f"sql_{func.__name__}"
    return call


# ─────────────────────────────────────────────────────────────────────────────
# 3) Registration
# ─────────────────────────────────────────────────────────────────────────────


def register_functions(
    connection: sqlite3.Connection,
    *,
    config: Mapping[str, Any] | None = None,
) -> list[str]:
    """
    Does: Register every configured function on `connection` with exactly two arguments.
          `config` overrides <data>/sql_functions.json and is validated the same way.
    Returns: The registered SQL names, in config order.
    """
    settings = _validate_sql_config(config) if config is not None else load_sql_config()
    encoding = settings["encoding"]

    registered: list[str] = []
    for sql_name, key in settings["functions"].items():
        connection.create_function(
            sql_name,
            ARG_COUNT,
            _sql_adapter(CALLABLES[key], encoding),
            deterministic=settings["deterministic"],
        )
        log.debug("Registered SQL function %s() → %s", sql_name, key)
        debug(f"registered {sql_name}() → {key} (encoding={encoding})", topic="sql")
        registered.append(sql_name)
    return registered
