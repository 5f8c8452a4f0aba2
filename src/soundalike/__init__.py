"""
soundalike
==========

Does: Root package for sounds-like and fuzzy string comparison.
Returns: Double Metaphone encoding/equality, Levenshtein distance, Jaro-Winkler
         similarity, bigram Dice coefficient, and their SQLite registration.
Used by: All imports starting from `soundalike.*`.
"""

from soundalike.metrics import dice_coefficient, jaro_winkler_similarity, levenshtein_distance
from soundalike.phonetic import MAX_CODE_LENGTH, double_metaphone, is_phonetic_match
from soundalike.sql import FunctionArgumentError, register_functions
from soundalike.types import PhoneticCodes

__all__: list[str] = [
    "MAX_CODE_LENGTH",
    "PhoneticCodes",
    "double_metaphone",
    "is_phonetic_match",
    "levenshtein_distance",
    "jaro_winkler_similarity",
    "dice_coefficient",
    "register_functions",
    "FunctionArgumentError",
]
__docformat__ = "google"
