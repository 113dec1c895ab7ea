"""Surname and name segments of the codice fiscale (positions 1–6).

Both segments are three letters built from the consonants of the
normalized input, then its vowels, then "X" padding. A name with four or
more consonants instead takes the 1st, 3rd and 4th consonant.

Reference: DM 23/12/1976, Allegato.
"""

from __future__ import annotations

from codicefiscale.encoding.text import is_consonant, is_vowel, letters_only

CODE_LENGTH = 3
PADDING = "X"


def _split(text: str) -> tuple[list[str], list[str]]:
    letters = letters_only(text)
    consonants = [c for c in letters if is_consonant(c)]
    vowels = [c for c in letters if is_vowel(c)]
    return consonants, vowels


def _fill(consonants: list[str], vowels: list[str]) -> str:
    code = "".join(consonants + vowels)[:CODE_LENGTH]
    return code.ljust(CODE_LENGTH, PADDING)


def extract_surname_code(surname: str) -> str:
    """Three-letter surname code, e.g. "Rossi" -> "RSS", "Fo" -> "FOX"."""
    consonants, vowels = _split(surname)
    return _fill(consonants, vowels)


def extract_name_code(name: str) -> str:
    """Three-letter name code, e.g. "Roberto" -> "RRT", "Mario" -> "MRA"."""
    consonants, vowels = _split(name)
    if len(consonants) >= 4:
        # The second consonant is skipped, names only.
        return consonants[0] + consonants[2] + consonants[3]
    return _fill(consonants, vowels)


def extract(text: str, is_surname: bool) -> str:
    """Dispatch to the surname or the name rule."""
    if is_surname:
        return extract_surname_code(text)
    return extract_name_code(text)
