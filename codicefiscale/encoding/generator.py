"""Fiscal code generation — wires the segment encoders together.

Pure Python. The only collaborator is the injected PlaceLookup.

Code layout: SSS NNN YY M DD PPPP C
  - SSS:  surname code
  - NNN:  name code
  - YY:   birth year (last 2 digits)
  - M:    birth month letter
  - DD:   birth day (+40 for women)
  - PPPP: place code (Belfiore)
  - C:    control character
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from codicefiscale.encoding.checksum import PRELIMINARY_LENGTH, compute_checksum
from codicefiscale.encoding.dates import encode_date_sex
from codicefiscale.encoding.homocode import transform_homocode
from codicefiscale.encoding.names import extract_name_code, extract_surname_code
from codicefiscale.encoding.place import PlaceCodeResolver
from codicefiscale.exceptions import MalformedInputError
from codicefiscale.schemas.fiscal_code import FiscalCode, PersonalInput

if TYPE_CHECKING:
    from codicefiscale.lookup import PlaceLookup

logger = logging.getLogger(__name__)


def generate_homocode(code: str, substitution_depth: int) -> str:
    """Turn an existing code into its homocode and re-derive the control character.

    Raises:
        DepthExceededError: If the code has fewer digits than requested.
        MalformedInputError: If the code is not 16 characters long.
    """
    code = code.strip().upper()
    transformed = transform_homocode(code, substitution_depth)
    if substitution_depth == 0:
        return transformed
    preliminary = transformed[:PRELIMINARY_LENGTH]
    return preliminary + compute_checksum(preliminary)


class CodeGenerator:
    """Generates codes for people born in places known to `lookup`."""

    def __init__(self, lookup: PlaceLookup) -> None:
        self._places = PlaceCodeResolver(lookup)

    def preliminary_code(self, person: PersonalInput) -> str:
        """First 15 characters, before any homocode substitution."""
        preliminary = (
            extract_surname_code(person.surname)
            + extract_name_code(person.name)
            + encode_date_sex(person.birth_date, person.sex)
            + self._places.resolve(person.birth_nation, person.birth_city)
        )
        if len(preliminary) != PRELIMINARY_LENGTH:
            raise MalformedInputError("place code", f"unexpected length in {preliminary!r}")
        return preliminary

    def generate(self, person: PersonalInput, substitution_depth: int = 0) -> FiscalCode:
        """Generate the fiscal code of `person`.

        Args:
            person: Validated personal data.
            substitution_depth: Homocode depth; 0 for the ordinary code.

        Returns:
            FiscalCode carrying the 16-character code and the depth used.

        Raises:
            UnknownCityError / UnknownNationError: Birthplace not in the catalog.
            DepthExceededError: Depth greater than the digits available.
            MalformedInputError: Negative depth.
        """
        if substitution_depth < 0:
            raise MalformedInputError("substitution_depth", "must be zero or positive")

        preliminary = self.preliminary_code(person)
        code = preliminary + compute_checksum(preliminary)
        if substitution_depth > 0:
            code = generate_homocode(code, substitution_depth)

        logger.debug("Generated code depth=%d: %s", substitution_depth, code)
        return FiscalCode(code=code, substitution_depth=substitution_depth)


def generate_code(
    person: PersonalInput,
    lookup: PlaceLookup,
    substitution_depth: int = 0,
) -> FiscalCode:
    """Functional shortcut for CodeGenerator(lookup).generate(...)."""
    return CodeGenerator(lookup).generate(person, substitution_depth)
