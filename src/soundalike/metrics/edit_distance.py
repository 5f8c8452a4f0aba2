# src/soundalike/metrics/edit_distance.py
from __future__ import annotations

"""
edit_distance.py

Does: Levenshtein distance over code points (insert/delete/substitute, unit cost).
Returns: levenshtein_distance() → int.
Used by: The soundalike facade and the `levenshtein` SQL function.
"""

from rapidfuzz.distance import Levenshtein

__all__ = ["levenshtein_distance"]

__docformat__ = "google"


def levenshtein_distance(a: str, b: str) -> int:
    """
    Does: Count the minimum single code point edits turning `a` into `b`.
          Case and accents are significant; no normalization is applied.
    Returns: Non-negative integer.
    """
    return int(Levenshtein.distance(a, b))
