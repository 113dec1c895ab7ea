"""Place code lookup collaborators.

The encoding core only depends on the PlaceLookup protocol. SqlPlaceLookup
reads the catalog database; InMemoryPlaceLookup holds plain dicts and is
what tests and catalog-in-memory callers use.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Protocol

from sqlalchemy import select
from sqlalchemy.orm import Session

from codicefiscale.config import settings
from codicefiscale.encoding.text import normalize_place_name
from codicefiscale.exceptions import UnknownCityError, UnknownNationError
from codicefiscale.models.place import City, Nation

logger = logging.getLogger(__name__)


class PlaceLookup(Protocol):
    """Read-only view over the city and nation catalogs."""

    def lookup_city_code(self, name: str) -> str: ...

    def lookup_nation_code(self, name: str) -> str: ...

    def is_italy(self, nation_name: str) -> bool: ...


class SqlPlaceLookup:
    """PlaceLookup backed by the `cities` and `nations` tables."""

    def __init__(self, session: Session, italy_code: str | None = None) -> None:
        self._session = session
        self._italy_code = italy_code or settings.catalog.italy_code

    def _find_nation_code(self, name: str) -> str | None:
        stmt = (
            select(Nation.nation_code)
            .where(Nation.normalized_name == normalize_place_name(name))
            .order_by(Nation.id)
            .limit(1)
        )
        return self._session.scalar(stmt)

    def lookup_city_code(self, name: str) -> str:
        stmt = (
            select(City.city_code)
            .where(City.normalized_name == normalize_place_name(name))
            .order_by(City.id)
            .limit(1)
        )
        code = self._session.scalar(stmt)
        if code is None:
            logger.info("City lookup miss: %s", name)
            raise UnknownCityError(name)
        return code

    def lookup_nation_code(self, name: str) -> str:
        code = self._find_nation_code(name)
        if code is None:
            logger.info("Nation lookup miss: %s", name)
            raise UnknownNationError(name)
        return code

    def is_italy(self, nation_name: str) -> bool:
        return self._find_nation_code(nation_name) == self._italy_code


class InMemoryPlaceLookup:
    """PlaceLookup over name -> code mappings.

    Keys are normalized on construction, so accented or mixed-case catalog
    names match plain queries. When two names normalize alike the first wins.
    """

    def __init__(
        self,
        cities: Mapping[str, str],
        nations: Mapping[str, str],
        italy_code: str | None = None,
    ) -> None:
        self._cities: dict[str, str] = {}
        for name, code in cities.items():
            self._cities.setdefault(normalize_place_name(name), code)
        self._nations: dict[str, str] = {}
        for name, code in nations.items():
            self._nations.setdefault(normalize_place_name(name), code)
        self._italy_code = italy_code or settings.catalog.italy_code

    @classmethod
    def from_pairs(
        cls,
        cities: Iterable[tuple[str, str]],
        nations: Iterable[tuple[str, str]],
    ) -> InMemoryPlaceLookup:
        """Build from (name, code) pairs; the first occurrence of a name wins."""
        city_map: dict[str, str] = {}
        for name, code in cities:
            city_map.setdefault(normalize_place_name(name), code)
        nation_map: dict[str, str] = {}
        for name, code in nations:
            nation_map.setdefault(normalize_place_name(name), code)
        return cls(city_map, nation_map)

    def lookup_city_code(self, name: str) -> str:
        try:
            return self._cities[normalize_place_name(name)]
        except KeyError:
            raise UnknownCityError(name) from None

    def lookup_nation_code(self, name: str) -> str:
        try:
            return self._nations[normalize_place_name(name)]
        except KeyError:
            raise UnknownNationError(name) from None

    def is_italy(self, nation_name: str) -> bool:
        return self._nations.get(normalize_place_name(nation_name)) == self._italy_code
