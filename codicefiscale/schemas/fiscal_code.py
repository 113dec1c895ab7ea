"""Pydantic schemas for fiscal code generation.

Pure data classes, no DB dependencies. PersonalInput validators raise the
package's typed errors directly, so an invalid person never gets built.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from codicefiscale.encoding.checksum import validate_checksum, validate_format
from codicefiscale.exceptions import InvalidDateError, MalformedInputError
from codicefiscale.models.enums import Sex

# ---------------------------------------------------------------------------
# Generation input
# ---------------------------------------------------------------------------


class PersonalInput(BaseModel):
    """Personal data a fiscal code is derived from."""

    model_config = ConfigDict(frozen=True)

    name: str
    surname: str
    sex: Sex
    birth_nation: str
    birth_city: str          # required even when the nation is not Italy
    birth_date: date

    @field_validator("name", "surname", "birth_nation", "birth_city", mode="before")
    @classmethod
    def require_text(cls, v: Any, info: ValidationInfo) -> str:
        """Reject missing or blank text fields."""
        if not isinstance(v, str) or not v.strip():
            raise MalformedInputError(info.field_name, "a non-empty string is required")
        return v.strip()

    @field_validator("sex", mode="before")
    @classmethod
    def normalize_sex(cls, v: Any) -> Any:
        if isinstance(v, str):
            v = v.strip().upper()
            if v not in {s.value for s in Sex}:
                raise MalformedInputError("sex", f"expected M or F, got {v!r}")
        return v

    @field_validator("birth_date", mode="before")
    @classmethod
    def parse_birth_date(cls, v: Any) -> Any:
        """Accept date objects and YYYY-MM-DD strings."""
        if isinstance(v, datetime):
            return v.date()
        if isinstance(v, date):
            return v
        if isinstance(v, str):
            try:
                return date.fromisoformat(v.strip())
            except ValueError as exc:
                raise InvalidDateError(v, "should be YYYY-MM-DD") from exc
        raise InvalidDateError(v, "expected a date")


# ---------------------------------------------------------------------------
# Generation output
# ---------------------------------------------------------------------------


class FiscalCode(BaseModel):
    """A generated codice fiscale, possibly homocodic."""

    model_config = ConfigDict(frozen=True)

    code: str = Field(min_length=16, max_length=16)
    substitution_depth: int = Field(default=0, ge=0)

    @field_validator("code")
    @classmethod
    def check_layout(cls, v: str) -> str:
        if not validate_format(v) or not validate_checksum(v):
            raise MalformedInputError("code", f"not a valid fiscal code: {v!r}")
        return v

    def __str__(self) -> str:
        return self.code


# ---------------------------------------------------------------------------
# HTTP payloads
# ---------------------------------------------------------------------------


class GenerateRequest(PersonalInput):
    """POST /codes body."""

    substitution_depth: int = Field(default=0, ge=0)

    def to_person(self) -> PersonalInput:
        return PersonalInput(**self.model_dump(exclude={"substitution_depth"}))


class HomocodeRequest(BaseModel):
    """POST /homocodes body."""

    code: str
    substitution_depth: int = Field(ge=0)

    @field_validator("code", mode="before")
    @classmethod
    def normalize_code(cls, v: Any) -> Any:
        if isinstance(v, str):
            v = v.strip().upper()
            if not validate_format(v) or not validate_checksum(v):
                raise MalformedInputError("code", f"not a valid fiscal code: {v!r}")
        return v
