# src/soundalike/phonetic/__init__.py
"""
phonetic.

Does: Facade exposing the Double Metaphone encoder, the phonetic equality
predicate, and the bounds-safe word accessor they are built on.

Returns: Public API for phonetic encoding and comparison.
Used by: The soundalike facade, the SQL binding, and the demo CLI.
"""

from __future__ import annotations

# ── Encoder ──────────────────────────────────────────────────────────────────
from .double_metaphone import (
    MAX_CODE_LENGTH,
    double_metaphone,
    is_phonetic_match,
)

# ── Word access ──────────────────────────────────────────────────────────────
from .word import (
    PaddedWord,
    is_slavo_germanic,
    normalize_word,
)

__all__ = [
    # Encoder
    "MAX_CODE_LENGTH",
    "double_metaphone",
    "is_phonetic_match",
    # Word access
    "PaddedWord",
    "normalize_word",
    "is_slavo_germanic",
]

__docformat__ = "google"
