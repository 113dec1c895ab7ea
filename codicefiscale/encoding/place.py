"""Birthplace segment (positions 12–15).

Italian births use the municipality's Belfiore code, foreign births the
nation's Z-code. The catalog is injected, never imported.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from codicefiscale.lookup import PlaceLookup

logger = logging.getLogger(__name__)


class PlaceCodeResolver:
    """Maps (nation, city) to a 4-character place code."""

    def __init__(self, lookup: PlaceLookup) -> None:
        self._lookup = lookup

    def resolve(self, nation: str, city: str) -> str:
        """Return the place code for a birth in `city`, `nation`.

        The city is ignored for foreign nations.

        Raises:
            UnknownCityError: Italian birth, city not in the catalog.
            UnknownNationError: Nation not in the catalog.
        """
        if self._lookup.is_italy(nation):
            code = self._lookup.lookup_city_code(city)
        else:
            code = self._lookup.lookup_nation_code(nation)
        logger.debug("Resolved place nation=%s city=%s -> %s", nation, city, code)
        return code
