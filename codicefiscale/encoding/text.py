"""Text normalization shared by name extraction and place lookups."""

from __future__ import annotations

import re
import unicodedata

VOWELS = frozenset("AEIOUY")

_NON_LETTERS = re.compile(r"[^A-Z]")
_WHITESPACE = re.compile(r"\s+")


def strip_accents(text: str) -> str:
    """Decompose accented characters and drop the combining marks."""
    decomposed = unicodedata.normalize("NFKD", text)
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))


def letters_only(text: str) -> str:
    """Uppercase A-Z stream of `text`; accents folded, everything else removed."""
    return _NON_LETTERS.sub("", strip_accents(text).upper())


def is_vowel(letter: str) -> bool:
    return letter in VOWELS


def is_consonant(letter: str) -> bool:
    return not is_vowel(letter)


def normalize_place_name(name: str) -> str:
    """Catalog lookup key: accent-free, uppercase, single-spaced."""
    return _WHITESPACE.sub(" ", strip_accents(name).upper()).strip()
