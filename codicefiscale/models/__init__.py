"""SQLAlchemy ORM models for the place catalog.

Import all models here so Base.metadata.create_all() discovers them.
"""

from __future__ import annotations

from codicefiscale.models.base import Base, CatalogMixin
from codicefiscale.models.enums import Sex
from codicefiscale.models.place import City, Nation

__all__ = ["Base", "CatalogMixin", "City", "Nation", "Sex"]
