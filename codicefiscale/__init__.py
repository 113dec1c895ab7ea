"""Italian codice fiscale generation, with homocode support."""

from codicefiscale.encoding.generator import CodeGenerator, generate_code, generate_homocode
from codicefiscale.exceptions import (
    CatalogNotReadyError,
    DepthExceededError,
    FiscalCodeError,
    InvalidDateError,
    MalformedInputError,
    UnknownCityError,
    UnknownNationError,
)
from codicefiscale.lookup import InMemoryPlaceLookup, PlaceLookup, SqlPlaceLookup
from codicefiscale.models.enums import Sex
from codicefiscale.schemas.fiscal_code import FiscalCode, PersonalInput

__version__ = "0.1.0"

__all__ = [
    "CatalogNotReadyError",
    "CodeGenerator",
    "DepthExceededError",
    "FiscalCode",
    "FiscalCodeError",
    "InMemoryPlaceLookup",
    "InvalidDateError",
    "MalformedInputError",
    "PersonalInput",
    "PlaceLookup",
    "Sex",
    "SqlPlaceLookup",
    "UnknownCityError",
    "UnknownNationError",
    "generate_code",
    "generate_homocode",
]
