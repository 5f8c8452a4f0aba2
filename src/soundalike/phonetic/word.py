# src/soundalike/phonetic/word.py
"""
word.

Does: Normalize a word for phonetic encoding and expose it through a read-only,
      bounds-safe accessor: character lookup, fixed-span pattern matching,
      vowel test and whole-word origin heuristics.
Returns: normalize_word(), is_slavo_germanic(), PaddedWord.
Used by: The Double Metaphone rule cascade.
"""

from __future__ import annotations

from collections.abc import Sequence

__all__ = [
    "PAD_WIDTH",
    "NO_CHAR",
    "VOWELS",
    "normalize_word",
    "is_slavo_germanic",
    "PaddedWord",
]

__docformat__ = "google"

# Blank positions readable past the real end of the word
PAD_WIDTH = 5
PAD_CHAR = " "
# Returned for any position outside the word and its blank window
NO_CHAR = "\0"

VOWELS = frozenset("AEIOUY")
SLAVO_GERMANIC_MARKERS = ("W", "K", "CZ", "WITZ")
GERMANIC_PREFIXES = ("VAN ", "VON ")


# ──────────────────────────────────────────────────────────────
# 1) Normalization & heuristics
# ──────────────────────────────────────────────────────────────


def normalize_word(word: str) -> str:
    """
    Does: Uppercase each code point on its own. Code points whose uppercase form
          is longer than one code point (e.g. 'ß') are kept as-is.
    Returns: A string with the same length as `word`.
    """
    out = []
    for ch in word:
        up = ch.upper()
        out.append(up if len(up) == 1 else ch)
    return "".join(out)


def is_slavo_germanic(word: str) -> bool:
    """Does: True if the (uppercased) word holds W, K, CZ or WITZ anywhere."""
    return any(marker in word for marker in SLAVO_GERMANIC_MARKERS)


# ──────────────────────────────────────────────────────────────
# 2) Bounded accessor
# ──────────────────────────────────────────────────────────────


class PaddedWord:
    """
    Read-only view of an uppercased word followed by PAD_WIDTH blanks.

    Lookups never fail: positions inside the blank window read as PAD_CHAR and
    positions before the word or past the window read as NO_CHAR.
    """

    __slots__ = ("text", "length", "last", "slavo_germanic", "germanic_prefix", "_padded")

    def __init__(self, word: str):
        self.text = normalize_word(word)
        self.length = len(self.text)
        self.last = self.length - 1
        self._padded = self.text + PAD_CHAR * PAD_WIDTH
        self.slavo_germanic = is_slavo_germanic(self.text)
        # 'van ', 'von ' or 'sch' at start: germanic reading of CH, G, TH
        self.germanic_prefix = self.matches_any(0, 4, GERMANIC_PREFIXES) or self.matches_any(
            0, 3, ("SCH",)
        )

    def __repr__(self) -> str:
        return f"PaddedWord({self.text!r})"

    def __len__(self) -> int:
        return self.length

    def char_at(self, pos: int) -> str:
        """Does: Character at `pos`, PAD_CHAR in the blank window, NO_CHAR elsewhere."""
        if 0 <= pos < len(self._padded):
            return self._padded[pos]
        return NO_CHAR

    def matches_any(self, start: int, span: int, candidates: Sequence[str]) -> bool:
        """
        Does: Compare the `span`-long slice starting at `start` with each candidate.
        Returns: True on the first equal candidate; False if `start` falls outside
                 the padded word or nothing matches.
        """
        if start < 0 or start >= len(self._padded):
            return False
        segment = self._padded[start : start + span]
        return any(segment == cand for cand in candidates)

    def is_vowel(self, pos: int) -> bool:
        return self.char_at(pos) in VOWELS
