# src/soundalike/phonetic/double_metaphone.py
from __future__ import annotations

"""
double_metaphone.py

Does: Double Metaphone encoder (Lawrence Philips, 2000). Scans the uppercased word
      left to right; per-letter rules emit into a primary and a secondary code and
      move the cursor 1–4 positions. Covers English spelling plus Slavic, Germanic,
      Italian, Spanish, French and Greek-root heuristics.
Returns: double_metaphone() → PhoneticCodes, is_phonetic_match() → bool.
Used by: The soundalike facade, the SQL binding, the demo CLI.
"""

import logging
from typing import Callable, NamedTuple

from soundalike.phonetic.word import PaddedWord
from soundalike.types import PhoneticCodes

__all__ = [
    "MAX_CODE_LENGTH",
    "double_metaphone",
    "is_phonetic_match",
]

__docformat__ = "google"

# ── Logging ──────────────────────────────────────────────────────────────────
log = logging.getLogger(__name__)

# ── Tunables ─────────────────────────────────────────────────────────────────
MAX_CODE_LENGTH = 32

# Silent first letter: 'gnome', 'knight', 'pneumatic', 'wright', 'psychology'
SILENT_STARTS = ("GN", "KN", "PN", "WR", "PS")


class Step(NamedTuple):
    """Emission of one rule application."""

    primary: str
    secondary: str
    advance: int


Rule = Callable[[PaddedWord, int], Step]

SKIP = Step("", "", 1)


def _same(code: str, advance: int) -> Step:
    return Step(code, code, advance)


# ─────────────────────────────────────────────────────────────────────────────
# 1) Simple letters
# ─────────────────────────────────────────────────────────────────────────────


def _vowel(word: PaddedWord, pos: int) -> Step:
    # all initial vowels map to 'A'
    if pos == 0:
        return _same("A", 1)
    return SKIP


def _doubled(code: str, letter: str) -> Rule:
    """Does: Build a rule emitting `code` and swallowing an immediate repeat of `letter`."""

    def rule(word: PaddedWord, pos: int) -> Step:
        return _same(code, 2 if word.char_at(pos + 1) == letter else 1)

    return rule


def _c_cedilla(word: PaddedWord, pos: int) -> Step:
    return _same("S", 1)


def _n_tilde(word: PaddedWord, pos: int) -> Step:
    return _same("N", 1)


# ─────────────────────────────────────────────────────────────────────────────
# 2) C
# ─────────────────────────────────────────────────────────────────────────────


def _c(word: PaddedWord, pos: int) -> Step:
    at, matches = word.char_at, word.matches_any

    # various germanic: 'bacher', 'macher' but not 'tichner'
    if (
        pos > 1
        and not word.is_vowel(pos - 2)
        and matches(pos - 1, 3, ("ACH",))
        and at(pos + 2) != "I"
        and (at(pos + 2) != "E" or matches(pos - 2, 6, ("BACHER", "MACHER")))
    ):
        return _same("K", 2)

    if pos == 0 and matches(pos, 6, ("CAESAR",)):
        return _same("S", 2)

    # italian 'chianti'
    if matches(pos, 4, ("CHIA",)):
        return _same("K", 2)

    if matches(pos, 2, ("CH",)):
        return _ch(word, pos)

    # 'czerny'
    if matches(pos, 2, ("CZ",)) and not matches(pos - 2, 4, ("WICZ",)):
        return Step("S", "X", 2)

    # 'focaccia'
    if matches(pos + 1, 3, ("CIA",)):
        return _same("X", 3)

    # double 'C', but not 'McClellan'
    if matches(pos, 2, ("CC",)) and not (pos == 1 and at(0) == "M"):
        # 'bellocchio' but not 'bacchus'
        if matches(pos + 2, 1, ("I", "E", "H")) and not matches(pos + 2, 2, ("HU",)):
            # 'accident', 'accede', 'succeed'
            if (pos == 1 and at(pos - 1) == "A") or matches(pos - 1, 5, ("UCCEE", "UCCES")):
                return _same("KS", 3)
            # 'bacci', 'bertucci'
            return _same("X", 3)
        # Pierce's rule
        return _same("K", 2)

    if matches(pos, 2, ("CK", "CG", "CQ")):
        return _same("K", 2)

    if matches(pos, 2, ("CI", "CE", "CY")):
        # italian vs. english
        if matches(pos, 3, ("CIO", "CIE", "CIA")):
            return Step("S", "X", 2)
        return _same("S", 2)

    # 'mac caffrey', 'mac gregor'
    if matches(pos + 1, 2, (" C", " Q", " G")):
        return _same("K", 3)
    if matches(pos + 1, 1, ("C", "K", "Q")) and not matches(pos + 1, 2, ("CE", "CI")):
        return _same("K", 2)
    return _same("K", 1)


def _ch(word: PaddedWord, pos: int) -> Step:
    matches = word.matches_any

    # 'michael'
    if pos > 0 and matches(pos, 4, ("CHAE",)):
        return Step("K", "X", 2)

    # greek roots: 'chemistry', 'chorus'
    if (
        pos == 0
        and (
            matches(pos + 1, 5, ("HARAC", "HARIS"))
            or matches(pos + 1, 3, ("HOR", "HYM", "HIA", "HEM"))
        )
        and not matches(0, 5, ("CHORE",))
    ):
        return _same("K", 2)

    # germanic, greek, or otherwise 'ch' for 'kh' sound
    if (
        word.germanic_prefix
        # 'architect' but not 'arch', 'orchestra', 'orchid'
        or matches(pos - 2, 6, ("ORCHES", "ARCHIT", "ORCHID"))
        or matches(pos + 2, 1, ("T", "S"))
        # 'wachtler', 'wechsler', but not 'tichner'
        or (
            (matches(pos - 1, 1, ("A", "O", "U", "E")) or pos == 0)
            and matches(pos + 2, 1, ("L", "R", "N", "M", "B", "H", "F", "V", "W", " "))
        )
    ):
        return _same("K", 2)

    if pos > 0:
        # 'McHugh'
        if matches(0, 2, ("MC",)):
            return _same("K", 2)
        return Step("X", "K", 2)
    return _same("X", 2)


# ─────────────────────────────────────────────────────────────────────────────
# 3) D, G, H, J
# ─────────────────────────────────────────────────────────────────────────────


def _d(word: PaddedWord, pos: int) -> Step:
    matches = word.matches_any
    if matches(pos, 2, ("DG",)):
        # 'edge'
        if matches(pos + 2, 1, ("I", "E", "Y")):
            return _same("J", 3)
        # 'edgar'
        return _same("TK", 2)
    if matches(pos, 2, ("DT", "DD")):
        return _same("T", 2)
    return _same("T", 1)


def _g(word: PaddedWord, pos: int) -> Step:
    at, matches = word.char_at, word.matches_any

    if at(pos + 1) == "H":
        return _gh(word, pos)

    if at(pos + 1) == "N":
        if pos == 1 and word.is_vowel(0) and not word.slavo_germanic:
            return Step("KN", "N", 2)
        # not 'cagney'
        if not matches(pos + 2, 2, ("EY",)) and not word.slavo_germanic:
            return Step("N", "KN", 2)
        return _same("KN", 2)

    # 'tagliaro'
    if matches(pos + 1, 2, ("LI",)) and not word.slavo_germanic:
        return Step("KL", "L", 2)

    # -ges-, -gep-, -gel-, -gie- at beginning
    if pos == 0 and (
        at(pos + 1) == "Y"
        or matches(
            pos + 1, 2, ("ES", "EP", "EB", "EL", "EY", "IB", "IL", "IN", "IE", "EI", "ER")
        )
    ):
        return Step("K", "J", 2)

    # -ger-, -gy-
    if (
        (matches(pos + 1, 2, ("ER",)) or at(pos + 1) == "Y")
        and not matches(0, 6, ("DANGER", "RANGER", "MANGER"))
        and not matches(pos - 1, 1, ("E", "I"))
        and not matches(pos - 1, 3, ("RGY", "OGY"))
    ):
        return Step("K", "J", 2)

    # italian 'biaggi'
    if matches(pos + 1, 1, ("E", "I", "Y")) or matches(pos - 1, 4, ("AGGI", "OGGI")):
        if word.germanic_prefix or matches(pos + 1, 2, ("ET",)):
            return _same("K", 2)
        # always soft if french ending
        if matches(pos + 1, 4, ("IER ",)):
            return _same("J", 2)
        return Step("J", "K", 2)

    return _same("K", 2 if at(pos + 1) == "G" else 1)


def _gh(word: PaddedWord, pos: int) -> Step:
    at, matches = word.char_at, word.matches_any

    if pos > 0 and not word.is_vowel(pos - 1):
        return _same("K", 2)

    # 'ghislane', 'ghiradelli'
    if pos == 0:
        return _same("J" if at(pos + 2) == "I" else "K", 2)

    # Parker's rule: 'hugh', 'bough', 'broughton'
    if (
        (pos > 1 and matches(pos - 2, 1, ("B", "H", "D")))
        or (pos > 2 and matches(pos - 3, 1, ("B", "H", "D")))
        or (pos > 3 and matches(pos - 4, 1, ("B", "H")))
    ):
        return Step("", "", 2)

    # 'laugh', 'McLaughlin', 'cough', 'gough', 'rough', 'tough'
    if pos > 2 and at(pos - 1) == "U" and matches(pos - 3, 1, ("C", "G", "L", "R", "T")):
        return _same("F", 2)
    if at(pos - 1) != "I":
        return _same("K", 2)
    return Step("", "", 2)


def _h(word: PaddedWord, pos: int) -> Step:
    # only keep if first & before vowel or between 2 vowels; also covers 'HH'
    if (pos == 0 or word.is_vowel(pos - 1)) and word.is_vowel(pos + 1):
        return _same("H", 2)
    return SKIP


def _j(word: PaddedWord, pos: int) -> Step:
    at, matches = word.char_at, word.matches_any

    # obvious spanish: 'jose', 'san jacinto'
    san_prefix = matches(0, 4, ("SAN ",))
    if matches(pos, 4, ("JOSE",)) or san_prefix:
        if (pos == 0 and at(pos + 4) == " ") or san_prefix:
            return _same("H", 1)
        return Step("J", "H", 1)

    advance = 2 if at(pos + 1) == "J" else 1

    # 'Yankelovich' / 'Jankelowicz'
    if pos == 0:
        return Step("J", "A", advance)
    # spanish 'bajador'
    if word.is_vowel(pos - 1) and not word.slavo_germanic and at(pos + 1) in ("A", "O"):
        return Step("J", "H", advance)
    if pos == word.last:
        return Step("J", "", advance)
    if not matches(pos + 1, 1, ("L", "T", "K", "S", "N", "M", "B", "Z")) and not matches(
        pos - 1, 1, ("S", "K", "L")
    ):
        return _same("J", advance)
    return Step("", "", advance)


# ─────────────────────────────────────────────────────────────────────────────
# 4) L, M, P, R
# ─────────────────────────────────────────────────────────────────────────────


def _l(word: PaddedWord, pos: int) -> Step:
    matches = word.matches_any
    if word.char_at(pos + 1) != "L":
        return _same("L", 1)
    # spanish 'cabrillo', 'gallegos'
    if (pos == word.length - 3 and matches(pos - 1, 4, ("ILLO", "ILLA", "ALLE"))) or (
        (matches(word.last - 1, 2, ("AS", "OS")) or matches(word.last, 1, ("A", "O")))
        and matches(pos - 1, 4, ("ALLE",))
    ):
        return Step("L", "", 2)
    return _same("L", 2)


def _m(word: PaddedWord, pos: int) -> Step:
    matches = word.matches_any
    # 'dumb', 'thumb', 'plumber'
    if (
        matches(pos - 1, 3, ("UMB",))
        and (pos + 1 == word.last or matches(pos + 2, 2, ("ER",)))
    ) or word.char_at(pos + 1) == "M":
        return _same("M", 2)
    return _same("M", 1)


def _p(word: PaddedWord, pos: int) -> Step:
    if word.char_at(pos + 1) == "H":
        return _same("F", 2)
    # 'campbell', 'raspberry'
    if word.matches_any(pos + 1, 1, ("P", "B")):
        return _same("P", 2)
    return _same("P", 1)


def _r(word: PaddedWord, pos: int) -> Step:
    advance = 2 if word.char_at(pos + 1) == "R" else 1
    # french 'rogier', but not 'hochmeier'
    if (
        pos == word.last
        and not word.slavo_germanic
        and word.matches_any(pos - 2, 2, ("IE",))
        and not word.matches_any(pos - 4, 2, ("ME", "MA"))
    ):
        return Step("", "R", advance)
    return _same("R", advance)


# ─────────────────────────────────────────────────────────────────────────────
# 5) S
# ─────────────────────────────────────────────────────────────────────────────


def _s(word: PaddedWord, pos: int) -> Step:
    matches = word.matches_any

    # 'island', 'isle', 'carlisle', 'carlysle'
    if matches(pos - 1, 3, ("ISL", "YSL")):
        return SKIP

    # 'sugar-'
    if pos == 0 and matches(pos, 5, ("SUGAR",)):
        return Step("X", "S", 1)

    if matches(pos, 2, ("SH",)):
        # germanic
        if matches(pos + 1, 4, ("HEIM", "HOEK", "HOLM", "HOLZ")):
            return _same("S", 2)
        return _same("X", 2)

    # italian & armenian
    if matches(pos, 3, ("SIO", "SIA")):
        if word.slavo_germanic:
            return _same("S", 3)
        return Step("S", "X", 3)

    # 'smith' ~ 'schmidt', 'snider' ~ 'schneider'; slavic -sz-
    if (pos == 0 and matches(pos + 1, 1, ("M", "N", "L", "W"))) or matches(pos + 1, 1, ("Z",)):
        return Step("S", "X", 2 if matches(pos + 1, 1, ("Z",)) else 1)

    if matches(pos, 2, ("SC",)):
        return _sc(word, pos)

    advance = 2 if matches(pos + 1, 1, ("S", "Z")) else 1
    # french 'resnais', 'artois'
    if pos == word.last and matches(pos - 2, 2, ("AI", "OI")):
        return Step("", "S", advance)
    return _same("S", advance)


def _sc(word: PaddedWord, pos: int) -> Step:
    matches = word.matches_any

    # Schlesinger's rule
    if word.char_at(pos + 2) == "H":
        # dutch 'school', 'schooner'
        if matches(pos + 3, 2, ("OO", "ER", "EN", "UY", "ED", "EM")):
            # 'schermerhorn', 'schenker'
            if matches(pos + 3, 2, ("ER", "EN")):
                return Step("X", "SK", 3)
            return _same("SK", 3)
        if pos == 0 and not word.is_vowel(3) and word.char_at(3) != "W":
            return Step("X", "S", 3)
        return _same("X", 3)

    if matches(pos + 2, 1, ("I", "E", "Y")):
        return _same("S", 3)
    return _same("SK", 3)


# ─────────────────────────────────────────────────────────────────────────────
# 6) T, W, X, Z
# ─────────────────────────────────────────────────────────────────────────────


def _t(word: PaddedWord, pos: int) -> Step:
    matches = word.matches_any

    if matches(pos, 4, ("TION",)):
        return _same("X", 3)
    if matches(pos, 3, ("TIA", "TCH")):
        return _same("X", 3)

    if matches(pos, 2, ("TH",)) or matches(pos, 3, ("TTH",)):
        # 'thomas', 'thames' or germanic
        if matches(pos + 2, 2, ("OM", "AM")) or word.germanic_prefix:
            return _same("T", 2)
        # '0' is the 'th' sound, not a digit
        return Step("0", "T", 2)

    if matches(pos + 1, 1, ("T", "D")):
        return _same("T", 2)
    return _same("T", 1)


def _w(word: PaddedWord, pos: int) -> Step:
    matches = word.matches_any

    # can also be in the middle of a word
    if matches(pos, 2, ("WR",)):
        return _same("R", 2)

    primary = secondary = ""
    if pos == 0 and (word.is_vowel(pos + 1) or matches(pos, 2, ("WH",))):
        # 'Wasserman' ~ 'Vasserman'; 'Uomo' ~ 'Womo'
        if word.is_vowel(pos + 1):
            primary, secondary = "A", "F"
        else:
            primary, secondary = "A", "A"

    # 'Arnow' ~ 'Arnoff'
    if (
        (pos == word.last and word.is_vowel(pos - 1))
        or matches(pos - 1, 5, ("EWSKI", "EWSKY", "OWSKI", "OWSKY"))
        or matches(0, 3, ("SCH",))
    ):
        return Step(primary, secondary + "F", 1)

    # polish 'filipowicz'
    if matches(pos, 4, ("WICZ", "WITZ")):
        return Step(primary + "TS", secondary + "FX", 4)

    return Step(primary, secondary, 1)


def _x(word: PaddedWord, pos: int) -> Step:
    matches = word.matches_any
    advance = 2 if matches(pos + 1, 1, ("C", "X")) else 1
    # french 'breaux'
    if pos == word.last and (
        matches(pos - 3, 3, ("IAU", "EAU")) or matches(pos - 2, 2, ("AU", "OU"))
    ):
        return Step("", "", advance)
    return _same("KS", advance)


def _z(word: PaddedWord, pos: int) -> Step:
    at = word.char_at

    # chinese pinyin 'zhao'
    if at(pos + 1) == "H":
        return _same("J", 2)

    advance = 2 if at(pos + 1) == "Z" else 1
    if word.matches_any(pos + 1, 2, ("ZO", "ZI", "ZA")) or (
        word.slavo_germanic and pos > 0 and at(pos - 1) != "T"
    ):
        return Step("S", "TS", advance)
    return _same("S", advance)


# ─────────────────────────────────────────────────────────────────────────────
# 7) Dispatch table
# ─────────────────────────────────────────────────────────────────────────────

_RULES: dict[str, Rule] = {
    **{v: _vowel for v in "AEIOUY"},
    "B": _doubled("P", "B"),
    "C": _c,
    "Ç": _c_cedilla,
    "D": _d,
    "F": _doubled("F", "F"),
    "G": _g,
    "H": _h,
    "J": _j,
    "K": _doubled("K", "K"),
    "L": _l,
    "M": _m,
    "N": _doubled("N", "N"),
    "Ñ": _n_tilde,
    "P": _p,
    "Q": _doubled("K", "Q"),
    "R": _r,
    "S": _s,
    "T": _t,
    "V": _doubled("F", "V"),
    "W": _w,
    "X": _x,
    "Z": _z,
}


# ─────────────────────────────────────────────────────────────────────────────
# 8) Public API
# ─────────────────────────────────────────────────────────────────────────────


def double_metaphone(
    word: str,
    *,
    max_length: int = MAX_CODE_LENGTH,
    debug: bool = False,
) -> PhoneticCodes:
    """
    Does: Encode `word` into primary/secondary Double Metaphone codes.
          Scanning goes on while either code is shorter than `max_length`, so the
          code that filled up first may overshoot; both are cut to `max_length`
          once the scan stops.
    Returns: PhoneticCodes(primary, secondary); ("", "") for an empty word.
    Raises: ValueError if `max_length` is below 1.
    """
    if max_length < 1:
        raise ValueError(f"max_length must be at least 1, got {max_length}")
    padded = PaddedWord(word)
    primary = secondary = ""
    pos = 0

    if padded.matches_any(0, 2, SILENT_STARTS):
        pos += 1

    # initial 'X' sounds like 'Z' ('Xavier'), which maps to 'S'
    if padded.char_at(0) == "X":
        primary += "S"
        secondary += "S"
        pos += 1

    while len(primary) < max_length or len(secondary) < max_length:
        if pos >= padded.length:
            break
        letter = padded.char_at(pos)
        rule = _RULES.get(letter)
        step = rule(padded, pos) if rule is not None else SKIP
        if debug:
            log.debug(
                "[%s] pos=%d → %r/%r (+%d)",
                letter,
                pos,
                step.primary,
                step.secondary,
                step.advance,
            )
        primary += step.primary
        secondary += step.secondary
        pos += step.advance

    codes = PhoneticCodes(primary[:max_length], secondary[:max_length])
    if debug:
        log.debug("[CODES] %r → %r", word, codes)
    return codes


def is_phonetic_match(a: str, b: str) -> bool:
    """
    Does: Compare both words' code pairs position-wise (primary with primary,
          secondary with secondary); no cross matching.
    Returns: True iff both codes are identical.
    """
    return double_metaphone(a) == double_metaphone(b)
