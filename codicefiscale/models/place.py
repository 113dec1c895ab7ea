"""Place catalog models — Italian municipalities and nations.

Both tables store the display name as found in the catalog and an
accent-stripped uppercase `normalized_name` used for lookups.
"""

from __future__ import annotations

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from codicefiscale.models.base import Base, CatalogMixin


class City(CatalogMixin, Base):
    """An Italian municipality and its Belfiore code."""

    __tablename__ = "cities"

    city_name: Mapped[str] = mapped_column(String(200), nullable=False)
    normalized_name: Mapped[str] = mapped_column(String(200), nullable=False, index=True)
    city_code: Mapped[str] = mapped_column(String(4), nullable=False, comment="Belfiore code, e.g. H501")
    province_initials: Mapped[str | None] = mapped_column(String(2))

    def __repr__(self) -> str:
        return f"<City id={self.id} name={self.city_name} code={self.city_code}>"


class Nation(CatalogMixin, Base):
    """A nation and its Belfiore code (Z-prefixed abroad, 0000 for Italy)."""

    __tablename__ = "nations"

    nation_name: Mapped[str] = mapped_column(String(200), nullable=False)
    normalized_name: Mapped[str] = mapped_column(String(200), nullable=False, index=True)
    nation_code: Mapped[str] = mapped_column(String(4), nullable=False)
    nation_initials: Mapped[str | None] = mapped_column(String(3))

    def __repr__(self) -> str:
        return f"<Nation id={self.id} name={self.nation_name} code={self.nation_code}>"
