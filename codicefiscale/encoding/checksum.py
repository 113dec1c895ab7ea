"""Control character of the codice fiscale (position 16).

Characters in odd positions (1-indexed) are mapped through ODD_VALUES,
characters in even positions through EVEN_VALUES. The sum modulo 26 picks
the control letter from CONTROL_LETTERS.

Reference: DM 23/12/1976, Allegato. The tables are normative.
"""

from __future__ import annotations

import re
import string

from codicefiscale.exceptions import MalformedInputError

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

ODD_VALUES: dict[str, int] = {
    "0": 1, "1": 0, "2": 5, "3": 7, "4": 9, "5": 13, "6": 15,
    "7": 17, "8": 19, "9": 21,
    "A": 1, "B": 0, "C": 5, "D": 7, "E": 9, "F": 13, "G": 15,
    "H": 17, "I": 19, "J": 21, "K": 2, "L": 4, "M": 18, "N": 20,
    "O": 11, "P": 3, "Q": 6, "R": 8, "S": 12, "T": 14, "U": 16,
    "V": 10, "W": 22, "X": 25, "Y": 24, "Z": 23,
}

EVEN_VALUES: dict[str, int] = {
    "0": 0, "1": 1, "2": 2, "3": 3, "4": 4, "5": 5, "6": 6,
    "7": 7, "8": 8, "9": 9,
    "A": 0, "B": 1, "C": 2, "D": 3, "E": 4, "F": 5, "G": 6,
    "H": 7, "I": 8, "J": 9, "K": 10, "L": 11, "M": 12, "N": 13,
    "O": 14, "P": 15, "Q": 16, "R": 17, "S": 18, "T": 19, "U": 20,
    "V": 21, "W": 22, "X": 23, "Y": 24, "Z": 25,
}

# Remainder -> letter, A=0 .. Z=25
CONTROL_LETTERS: str = string.ascii_uppercase

PRELIMINARY_LENGTH = 15
CODE_LENGTH = 16

_PRELIMINARY_PATTERN = re.compile(r"^[A-Z0-9]{15}$")

# Digit-bearing slots also accept the homocode letters L-V (except O).
_D = "[0-9LMNPQRSTUV]"
_CODE_PATTERN = re.compile(
    rf"^[A-Z]{{6}}{_D}{{2}}[ABCDEHLMPRST]{_D}{{2}}[A-Z]{_D}{{3}}[A-Z]$"
)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def compute_checksum(code15: str) -> str:
    """Return the control letter for the first 15 characters of a code.

    Raises:
        MalformedInputError: If `code15` is not 15 uppercase letters/digits.
    """
    if not _PRELIMINARY_PATTERN.match(code15):
        raise MalformedInputError("code", f"expected 15 uppercase letters or digits, got {code15!r}")
    total = 0
    for i, char in enumerate(code15):
        if i % 2 == 0:  # odd position (1-indexed)
            total += ODD_VALUES[char]
        else:  # even position (1-indexed)
            total += EVEN_VALUES[char]
    return CONTROL_LETTERS[total % 26]


def validate_format(code: str) -> bool:
    """Check the 16-character layout, homocodes included."""
    return bool(_CODE_PATTERN.match(code.upper().strip()))


def validate_checksum(code: str) -> bool:
    """Validate the check character (position 16) of a codice fiscale."""
    code = code.upper().strip()
    if len(code) != CODE_LENGTH or not _PRELIMINARY_PATTERN.match(code[:PRELIMINARY_LENGTH]):
        return False
    return code[15] == compute_checksum(code[:PRELIMINARY_LENGTH])
