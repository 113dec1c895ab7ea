"""Typed errors raised by the fiscal code core and its collaborators.

Every error derives from FiscalCodeError so the CLI and the HTTP layer can
translate them at the edge with a single except clause.
"""

from __future__ import annotations


class FiscalCodeError(Exception):
    """Base class for every error raised by this package."""


class InvalidDateError(FiscalCodeError):
    """Raised when a birth date cannot be parsed or is out of range."""

    def __init__(self, value: object, reason: str | None = None) -> None:
        message = f"Invalid birth date: {value!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)
        self.value = value


class UnknownCityError(FiscalCodeError):
    """Raised when an Italian municipality is not in the catalog."""

    def __init__(self, name: str) -> None:
        super().__init__(f"City not found: {name!r}")
        self.name = name


class UnknownNationError(FiscalCodeError):
    """Raised when a nation is not in the catalog."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Nation not found: {name!r}")
        self.name = name


class DepthExceededError(FiscalCodeError):
    """Raised when more homocode substitutions are requested than digits exist."""

    def __init__(self, depth: int, available: int) -> None:
        super().__init__(
            f"Substitution depth {depth} exceeds the {available} digit positions available"
        )
        self.depth = depth
        self.available = available


class MalformedInputError(FiscalCodeError):
    """Raised on structural violations: missing fields, bad code layout."""

    def __init__(self, field: str, reason: str) -> None:
        super().__init__(f"Malformed {field}: {reason}")
        self.field = field
        self.reason = reason


class CatalogNotReadyError(FiscalCodeError):
    """Raised when the place catalog database is missing or empty."""

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason


__all__ = [
    "CatalogNotReadyError",
    "DepthExceededError",
    "FiscalCodeError",
    "InvalidDateError",
    "MalformedInputError",
    "UnknownCityError",
    "UnknownNationError",
]
