"""Shared fixtures: in-memory catalog, SQLite session, catalog JSON files."""

from __future__ import annotations

import json
from collections.abc import Generator
from pathlib import Path

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import Session
from sqlalchemy.pool import StaticPool

from codicefiscale.db.engine import init_db
from codicefiscale.lookup import InMemoryPlaceLookup

CITIES = {
    "Roma": "H501",
    "Milano": "F205",
    "Torino": "L219",
    "Forlì": "D704",
}

NATIONS = {
    "Italia": "0000",
    "Germania": "Z112",
    "Stati Uniti d'America": "Z404",
    "Côte d'Ivoire": "Z313",
}

CITIES_JSON = [
    {
        "sigla_provincia": "RM",
        "codice_istat": "058091",
        "denominazione_ita_altra": "Roma",
        "denominazione_ita": "Roma",
        "denominazione_altra": "",
        "flag_capoluogo": "SI",
        "codice_belfiore": "H501",
        "lat": "41.8933203",
        "lon": "12.4829321",
        "superficie_kmq": "1287.3600",
        "codice_sovracomunale": "258",
    },
    {
        "sigla_provincia": "MI",
        "codice_istat": "015146",
        "denominazione_ita_altra": "Milano",
        "denominazione_ita": "Milano",
        "denominazione_altra": "",
        "flag_capoluogo": "SI",
        "codice_belfiore": "F205",
        "lat": "45.4641943",
        "lon": "9.1896346",
        "superficie_kmq": "181.6700",
        "codice_sovracomunale": "215",
    },
    {
        "sigla_provincia": "TO",
        "codice_istat": "001272",
        "denominazione_ita_altra": "Torino",
        "denominazione_ita": "Torino",
        "denominazione_altra": "",
        "flag_capoluogo": "SI",
        "codice_belfiore": "L219",
        "lat": "45.0677551",
        "lon": "7.6824892",
        "superficie_kmq": "130.0100",
        "codice_sovracomunale": "201",
    },
    {
        "sigla_provincia": "FC",
        "codice_istat": "040012",
        "denominazione_ita_altra": "Forlì",
        "denominazione_ita": "Forlì",
        "denominazione_altra": "",
        "flag_capoluogo": "SI",
        "codice_belfiore": "D704",
        "lat": "44.2227398",
        "lon": "12.0407312",
        "superficie_kmq": "228.2000",
        "codice_sovracomunale": "040",
    },
]

NATIONS_JSON = [
    {
        "sigla_nazione": "ITA",
        "codice_belfiore": "",
        "denominazione_nazione": "Italia",
        "denominazione_cittadinanza": "Italiana",
    },
    {
        "sigla_nazione": "DEU",
        "codice_belfiore": "Z112",
        "denominazione_nazione": "Germania",
        "denominazione_cittadinanza": "Tedesca",
    },
    {
        "sigla_nazione": "USA",
        "codice_belfiore": "Z404",
        "denominazione_nazione": "Stati Uniti d'America",
        "denominazione_cittadinanza": "Statunitense",
    },
    {
        "sigla_nazione": "CIV",
        "codice_belfiore": "Z313",
        "denominazione_nazione": "Côte d'Ivoire",
        "denominazione_cittadinanza": "Ivoriana",
    },
]


@pytest.fixture()
def lookup() -> InMemoryPlaceLookup:
    return InMemoryPlaceLookup(CITIES, NATIONS)


@pytest.fixture()
def catalog_files(tmp_path: Path) -> tuple[Path, Path]:
    """(gi_comuni.json, gi_nazioni.json) written to a temp directory."""
    cities_path = tmp_path / "gi_comuni.json"
    nations_path = tmp_path / "gi_nazioni.json"
    cities_path.write_text(json.dumps(CITIES_JSON, ensure_ascii=False), encoding="utf-8")
    nations_path.write_text(json.dumps(NATIONS_JSON, ensure_ascii=False), encoding="utf-8")
    return cities_path, nations_path


@pytest.fixture()
def session() -> Generator[Session, None, None]:
    """Empty in-memory SQLite database with the catalog schema."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(engine)
    with Session(engine) as session:
        yield session
    engine.dispose()
