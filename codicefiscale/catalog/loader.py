"""Catalog loader — populates the database from the JSON catalogs.

The catalogs are `gi_comuni.json` and `gi_nazioni.json` as published at
https://www.gardainformatica.it/database-comuni-italiani. Field names are
Italian; only the ones needed for code generation are kept.

Italy's own nation entry has no Belfiore code and is stored with the
configured sentinel (default "0000") so lookups can recognise it.
"""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter
from sqlalchemy.orm import Session

from codicefiscale.config import settings
from codicefiscale.encoding.text import normalize_place_name
from codicefiscale.models.place import City, Nation

logger = logging.getLogger(__name__)


class CatalogCity(BaseModel):
    """A municipality as found in gi_comuni.json."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    city_name: str = Field(alias="denominazione_ita")
    city_code: str = Field(alias="codice_belfiore")
    province_initials: str | None = Field(default=None, alias="sigla_provincia")


class CatalogNation(BaseModel):
    """A nation as found in gi_nazioni.json."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    nation_name: str = Field(alias="denominazione_nazione")
    nation_code: str = Field(default="", alias="codice_belfiore")
    nation_initials: str | None = Field(default=None, alias="sigla_nazione")


_CITIES = TypeAdapter(list[CatalogCity])
_NATIONS = TypeAdapter(list[CatalogNation])


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------


def load_cities(path: str | Path) -> list[CatalogCity]:
    """Parse the municipalities catalog."""
    return _CITIES.validate_json(Path(path).read_bytes())


def load_nations(path: str | Path) -> list[CatalogNation]:
    """Parse the nations catalog, filling Italy's empty code with the sentinel."""
    nations = _NATIONS.validate_json(Path(path).read_bytes())
    italy_code = settings.catalog.italy_code
    return [
        n if n.nation_code else n.model_copy(update={"nation_code": italy_code})
        for n in nations
    ]


# ---------------------------------------------------------------------------
# Database population
# ---------------------------------------------------------------------------


def populate_db(
    session: Session,
    cities_path: str | Path | None = None,
    nations_path: str | Path | None = None,
) -> tuple[int, int]:
    """Insert every nation and city of the catalogs.

    The caller owns the transaction; nothing is committed here.

    Returns:
        (number of cities, number of nations) inserted.
    """
    cities_path = cities_path or settings.catalog.cities_catalog_path
    nations_path = nations_path or settings.catalog.nations_catalog_path

    nations = load_nations(nations_path)
    session.add_all(
        Nation(
            nation_name=n.nation_name,
            normalized_name=normalize_place_name(n.nation_name),
            nation_code=n.nation_code,
            nation_initials=n.nation_initials,
        )
        for n in nations
    )
    logger.info("Loaded %d nations from %s", len(nations), nations_path)

    cities = load_cities(cities_path)
    session.add_all(
        City(
            city_name=c.city_name,
            normalized_name=normalize_place_name(c.city_name),
            city_code=c.city_code,
            province_initials=c.province_initials,
        )
        for c in cities
    )
    logger.info("Loaded %d cities from %s", len(cities), cities_path)

    session.flush()
    return len(cities), len(nations)
