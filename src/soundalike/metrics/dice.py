# src/soundalike/metrics/dice.py
from __future__ import annotations

"""
dice.py

Does: Dice coefficient over the sets of adjacent code-point pairs (bigrams).
Returns: dice_coefficient() → float in [0,1].
Used by: The soundalike facade and the `dice` SQL function.
"""

__all__ = ["bigrams", "dice_coefficient"]

__docformat__ = "google"


def bigrams(s: str) -> frozenset[str]:
    """Does: Distinct adjacent pairs of `s` ('night' → {'ni','ig','gh','ht'})."""
    return frozenset(s[i : i + 2] for i in range(len(s) - 1))


def dice_coefficient(a: str, b: str) -> float:
    """
    Does: 2·|A ∩ B| / (|A| + |B|) with A, B the bigram sets of a and b.
    Returns: Float in [0,1]; 0.0 when either string is shorter than 2.
    """
    if len(a) < 2 or len(b) < 2:
        return 0.0
    a_pairs, b_pairs = bigrams(a), bigrams(b)
    return 2 * len(a_pairs & b_pairs) / (len(a_pairs) + len(b_pairs))
