"""Domain enums used across ORM models and Pydantic schemas.

All enums use str mixin for JSON serialization.
"""

from __future__ import annotations

from enum import Enum


class Sex(str, Enum):
    """Sex as encoded in the day field of a fiscal code."""

    M = "M"
    F = "F"
