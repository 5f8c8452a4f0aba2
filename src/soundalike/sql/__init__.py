# src/soundalike/sql/__init__.py
"""
sql.

Does: Register soundalike comparisons as SQLite functions
(levenshtein, double_metaphone_eq, jaro_winkler, dice by default).

Returns: register_functions(), load_sql_config(), FunctionArgumentError.
Used by: Applications querying with sounds-like / fuzzy predicates.
"""

from __future__ import annotations

from .functions import (
    CALLABLES,
    FunctionArgumentError,
    load_sql_config,
    register_functions,
)

__all__ = [
    "CALLABLES",
    "FunctionArgumentError",
    "load_sql_config",
    "register_functions",
]

__docformat__ = "google"
