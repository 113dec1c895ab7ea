"""Homocode substitution — disambiguates people sharing the same code.

Digits in the scan positions are replaced by letters, one per unit of
depth, walking HOMOCODE_POSITIONS strictly in order. Positions already
holding a letter are skipped and do not count. The control character is
left untouched; callers re-derive it.
"""

from __future__ import annotations

import logging

from codicefiscale.encoding.checksum import CODE_LENGTH
from codicefiscale.exceptions import DepthExceededError, MalformedInputError

logger = logging.getLogger(__name__)

# 1-indexed: year units digit, both day digits, the three place code digits
HOMOCODE_POSITIONS: tuple[int, ...] = (7, 10, 11, 13, 14, 15)

HOMOCODE_LETTERS: dict[str, str] = {
    "0": "L", "1": "M", "2": "N", "3": "P", "4": "Q",
    "5": "R", "6": "S", "7": "T", "8": "U", "9": "V",
}


def available_substitutions(code: str) -> int:
    """Number of scan positions of `code` that still hold a digit."""
    return sum(1 for pos in HOMOCODE_POSITIONS if code[pos - 1] in HOMOCODE_LETTERS)


def transform_homocode(code: str, depth: int) -> str:
    """Replace up to `depth` digits with their homocode letters.

    Args:
        code: A 16-character fiscal code.
        depth: Number of substitutions to perform; 0 is a no-op.

    Returns:
        A new 16-character code. Position 16 is copied from the input.

    Raises:
        MalformedInputError: If the code is not 16 characters or depth < 0.
        DepthExceededError: If fewer than `depth` digits are available.
    """
    if len(code) != CODE_LENGTH:
        raise MalformedInputError("code", f"expected {CODE_LENGTH} characters, got {len(code)}")
    if depth < 0:
        raise MalformedInputError("substitution_depth", "must be zero or positive")
    if depth == 0:
        return code

    available = available_substitutions(code)
    if depth > available:
        raise DepthExceededError(depth, available)

    chars = list(code)
    remaining = depth
    for pos in HOMOCODE_POSITIONS:
        if remaining == 0:
            break
        char = chars[pos - 1]
        if char in HOMOCODE_LETTERS:
            chars[pos - 1] = HOMOCODE_LETTERS[char]
            remaining -= 1

    result = "".join(chars)
    logger.debug("Homocode depth=%d: %s -> %s", depth, code, result)
    return result
