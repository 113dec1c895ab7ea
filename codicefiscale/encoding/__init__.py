"""Deterministic segment encoders for names, dates, place, checksum and homocode.

The generator that combines them lives in codicefiscale.encoding.generator.
"""

from codicefiscale.encoding.checksum import compute_checksum, validate_checksum, validate_format
from codicefiscale.encoding.dates import encode_date_sex
from codicefiscale.encoding.homocode import transform_homocode
from codicefiscale.encoding.names import extract, extract_name_code, extract_surname_code
from codicefiscale.encoding.place import PlaceCodeResolver

__all__ = [
    "PlaceCodeResolver",
    "compute_checksum",
    "encode_date_sex",
    "extract",
    "extract_name_code",
    "extract_surname_code",
    "transform_homocode",
    "validate_checksum",
    "validate_format",
]
