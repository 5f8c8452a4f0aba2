# tests/test_metrics.py
from __future__ import annotations

import math

import pytest

from soundalike.metrics import dice as D
from soundalike.metrics import edit_distance as E
from soundalike.metrics import jaro_winkler as JW

"""
Tests: metrics/

Does: Check edit distance, Jaro-Winkler (positional prefix boost, scaling bounds)
      and the bigram Dice coefficient, including the Cyrillic reference pair.
"""

RU_A = "ООО Рага и копыта"
RU_B = "Рога и копыта, ООО"


# ──────────────────────────────────────────────────────────────────────────────
# Edit distance
# ──────────────────────────────────────────────────────────────────────────────


def test_levenshtein_distance_basic():
    assert E.levenshtein_distance("kitten", "sitting") == 3
    assert E.levenshtein_distance("", "abc") == 3
    assert E.levenshtein_distance("abc", "abc") == 0
    assert E.levenshtein_distance("mère", "mere") == 1


def test_levenshtein_distance_reference_pair():
    assert E.levenshtein_distance("ООО Рога и копыта", "Рога и копыта, ООО") == 9


# ──────────────────────────────────────────────────────────────────────────────
# Jaro-Winkler
# ──────────────────────────────────────────────────────────────────────────────


def test_jaro_winkler_classic_pair():
    assert JW.jaro_winkler_similarity("MARTHA", "MARHTA") == pytest.approx(0.9611, abs=1e-4)


def test_jaro_winkler_prefix_counts_every_position():
    # A, B and D agree among the first four; the X/Y mismatch does not stop the count
    jaro = 0.8333333
    expected = jaro + 3 * 0.1 * (1 - jaro)
    assert JW.jaro_winkler_similarity("ABXD", "ABYD") == pytest.approx(expected, abs=1e-4)


def test_jaro_winkler_reference_pair():
    assert math.floor(100 * JW.jaro_winkler_similarity(RU_A, RU_B)) == 70


def test_jaro_winkler_edges():
    assert JW.jaro_winkler_similarity("", "abc") == 0.0
    assert JW.jaro_winkler_similarity("abc", "") == 0.0
    assert JW.jaro_winkler_similarity("abc", "xyz") == 0.0
    assert JW.jaro_winkler_similarity("abc", "abc") == pytest.approx(1.0)


def test_jaro_winkler_scaling_factor():
    base = JW.jaro_winkler_similarity("MARTHA", "MARHTA", scaling_factor=0.0)
    assert base == pytest.approx(0.9444, abs=1e-4)
    boosted = JW.jaro_winkler_similarity("MARTHA", "MARHTA", scaling_factor=0.25)
    assert base < boosted <= 1.0
    with pytest.raises(ValueError):
        JW.jaro_winkler_similarity("a", "b", scaling_factor=0.3)
    with pytest.raises(ValueError):
        JW.jaro_winkler_similarity("a", "b", scaling_factor=-0.1)


# ──────────────────────────────────────────────────────────────────────────────
# Dice
# ──────────────────────────────────────────────────────────────────────────────


def test_bigrams_are_distinct_pairs():
    assert D.bigrams("night") == frozenset({"ni", "ig", "gh", "ht"})
    assert D.bigrams("aaa") == frozenset({"aa"})
    assert D.bigrams("a") == frozenset()


def test_dice_coefficient_basic():
    assert D.dice_coefficient("night", "nacht") == pytest.approx(0.25)
    assert D.dice_coefficient("night", "night") == pytest.approx(1.0)
    assert D.dice_coefficient("ab", "cd") == 0.0


def test_dice_coefficient_short_inputs():
    assert D.dice_coefficient("a", "a") == 0.0
    assert D.dice_coefficient("", "abc") == 0.0
    assert D.dice_coefficient("abc", "b") == 0.0


def test_dice_coefficient_reference_pair():
    # 11 shared bigrams out of 15 + 16
    assert D.dice_coefficient(RU_A, RU_B) == pytest.approx(22 / 31)
    assert math.floor(100 * D.dice_coefficient(RU_A, RU_B)) == 70
