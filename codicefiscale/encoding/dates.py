"""Birth date and sex segment (positions 7–11).

Two-digit year, month letter, two-digit day; women add 40 to the day.
"""

from __future__ import annotations

from datetime import date

from codicefiscale.exceptions import InvalidDateError
from codicefiscale.models.enums import Sex

# January..December. Non-sequential by decree.
MONTH_LETTERS: tuple[str, ...] = ("A", "B", "C", "D", "E", "H", "L", "M", "P", "R", "S", "T")

FEMALE_DAY_OFFSET = 40


def month_letter(month: int) -> str:
    if not 1 <= month <= 12:
        raise InvalidDateError(month, "month must be between 1 and 12")
    return MONTH_LETTERS[month - 1]


def encode_date_sex(birth_date: date, sex: Sex | str) -> str:
    """Encode a birth date and sex into the 5-character segment.

    Args:
        birth_date: Calendar date of birth.
        sex: "M" or "F".

    Returns:
        e.g. "85C15" for a man born 15 March 1985, "85C55" for a woman.

    Raises:
        InvalidDateError: If the day or month is out of range.
    """
    if not 1 <= birth_date.day <= 31:
        raise InvalidDateError(birth_date, "day must be between 1 and 31")
    sex = Sex(sex)
    day = birth_date.day + (FEMALE_DAY_OFFSET if sex is Sex.F else 0)
    return f"{birth_date.year % 100:02d}{month_letter(birth_date.month)}{day:02d}"
