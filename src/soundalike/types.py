# src/soundalike/types.py
from __future__ import annotations

from typing import NamedTuple

"""
types.py.

Does: Define the small value types shared by the phonetic encoder and its callers.
"""


class PhoneticCodes(NamedTuple):
    """Primary and alternate Double Metaphone codes of one word."""

    primary: str
    secondary: str


__all__ = ["PhoneticCodes"]

__docformat__ = "google"
