# src/soundalike/metrics/jaro_winkler.py
from __future__ import annotations

"""
jaro_winkler.py

Does: Jaro-Winkler similarity: Jaro score boosted by the number of equal code points
      among the first four positions, weighted by a scaling factor.
Returns: jaro_winkler_similarity() → float in [0,1].
Used by: The soundalike facade and the `jaro_winkler` SQL function.
"""

from rapidfuzz.distance import Jaro

__all__ = [
    "DEFAULT_SCALING_FACTOR",
    "jaro_winkler_similarity",
]

__docformat__ = "google"

# ── Tunables ─────────────────────────────────────────────────────────────────
DEFAULT_SCALING_FACTOR = 0.1
MAX_SCALING_FACTOR = 0.25  # 4 × 0.25 keeps the score ≤ 1
PREFIX_WINDOW = 4


def _prefix_matches(a: str, b: str) -> int:
    """
    Does: Count positions among the first PREFIX_WINDOW where a and b agree.
          Every position is checked, a mismatch does not end the count.
    """
    return sum(1 for x, y in zip(a[:PREFIX_WINDOW], b[:PREFIX_WINDOW]) if x == y)


def jaro_winkler_similarity(
    a: str,
    b: str,
    scaling_factor: float = DEFAULT_SCALING_FACTOR,
) -> float:
    """
    Does: Jaro similarity j plus l * scaling_factor * (1 - j), l = _prefix_matches(a, b).
          The boost applies whatever the Jaro score (no 0.7 threshold).
    Returns: Float in [0,1]; 0.0 if either string is empty or nothing matches.
    """
    if not 0.0 <= scaling_factor <= MAX_SCALING_FACTOR:
        raise ValueError(
            f"scaling_factor must be within [0, {MAX_SCALING_FACTOR}], got {scaling_factor}"
        )
    if not a or not b:
        return 0.0

    jaro = Jaro.similarity(a, b)
    if jaro == 0.0:
        return 0.0
    return jaro + _prefix_matches(a, b) * scaling_factor * (1.0 - jaro)
