# src/soundalike/metrics/__init__.py
"""
metrics.

Does: Facade over the plain string-similarity metrics: edit distance,
Jaro-Winkler similarity and the bigram Dice coefficient.

Returns: Public API for code-point level string comparison.
Used by: The soundalike facade, the SQL binding, and the demo CLI.
"""

from __future__ import annotations

from .dice import (
    bigrams,
    dice_coefficient,
)
from .edit_distance import (
    levenshtein_distance,
)
from .jaro_winkler import (
    DEFAULT_SCALING_FACTOR,
    jaro_winkler_similarity,
)

__all__ = [
    "levenshtein_distance",
    "jaro_winkler_similarity",
    "DEFAULT_SCALING_FACTOR",
    "dice_coefficient",
    "bigrams",
]

__docformat__ = "google"
