"""Database engine, session factory, and catalog readiness checks.

Uses SQLAlchemy 2.0 in synchronous mode on SQLite. Lookups against the
catalog are read-only, one Session per request.
"""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

from sqlalchemy import Engine, create_engine, func, inspect, select
from sqlalchemy.orm import Session, sessionmaker

from codicefiscale.config import settings
from codicefiscale.exceptions import CatalogNotReadyError
from codicefiscale.models.base import Base
from codicefiscale.models.place import City, Nation

logger = logging.getLogger(__name__)


def make_engine(database_url: str, echo: bool = False) -> Engine:
    """Create an engine for the given URL.

    SQLite connections are shared with the uvicorn threadpool, hence
    check_same_thread is disabled.
    """
    connect_args: dict[str, object] = {}
    if database_url.startswith("sqlite"):
        connect_args["check_same_thread"] = False
    return create_engine(database_url, echo=echo, connect_args=connect_args)


# ── Engine and session factory ───────────────────────────────────────

engine: Engine = make_engine(settings.db.database_url, echo=settings.db.echo_sql)

session_factory = sessionmaker(engine, class_=Session, expire_on_commit=False)


def get_session() -> Generator[Session, None, None]:
    """Dependency for FastAPI — yields a DB session.

    Usage:
        @app.get("/example")
        def handler(session: Session = Depends(get_session)):
            ...
    """
    with session_factory() as session:
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise


# ── Schema and readiness ─────────────────────────────────────────────


def init_db(bind: Engine | None = None) -> None:
    """Create the cities and nations tables if they do not exist."""
    bind = bind or engine
    Base.metadata.create_all(bind)
    logger.info("Database schema ready (%s)", bind.url.render_as_string(hide_password=True))


def database_exists(database_url: str) -> bool:
    """Return False only for a SQLite file URL whose file is missing."""
    prefix = "sqlite:///"
    if not database_url.startswith(prefix):
        return True
    path = database_url[len(prefix):]
    if not path or path == ":memory:":
        return True
    return Path(path).is_file()


def catalog_counts(session: Session) -> tuple[int, int]:
    """Row counts of the (cities, nations) tables."""
    cities = session.scalar(select(func.count()).select_from(City)) or 0
    nations = session.scalar(select(func.count()).select_from(Nation)) or 0
    return cities, nations


def check_db_not_empty(session: Session) -> None:
    """Ensure both catalog tables hold rows.

    Raises:
        CatalogNotReadyError: If the cities or the nations table is missing or empty.
    """
    inspector = inspect(session.get_bind())
    missing = [t for t in (City.__tablename__, Nation.__tablename__) if not inspector.has_table(t)]
    if missing:
        raise CatalogNotReadyError(f"Missing tables: {', '.join(missing)}")
    cities, nations = catalog_counts(session)
    if cities <= 0:
        raise CatalogNotReadyError("Cities table empty!")
    if nations <= 0:
        raise CatalogNotReadyError("Nations table empty!")
    logger.debug("Catalog ready: %d cities, %d nations", cities, nations)
