"""FastAPI application — exposes code generation over HTTP.

Usage:
    python -m codicefiscale.main
    codicefiscale serve
"""
# ruff: noqa: B008  — Depends() in function defaults is standard FastAPI

from __future__ import annotations

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import uvicorn
from fastapi import Depends, FastAPI, Request
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from codicefiscale import __version__
from codicefiscale.config import settings
from codicefiscale.db.engine import check_db_not_empty, get_session, init_db, session_factory
from codicefiscale.encoding.generator import CodeGenerator, generate_homocode
from codicefiscale.exceptions import (
    CatalogNotReadyError,
    DepthExceededError,
    FiscalCodeError,
    InvalidDateError,
    MalformedInputError,
    UnknownCityError,
    UnknownNationError,
)
from codicefiscale.log import configure_logging
from codicefiscale.lookup import PlaceLookup, SqlPlaceLookup
from codicefiscale.schemas.fiscal_code import FiscalCode, GenerateRequest, HomocodeRequest

logger = logging.getLogger(__name__)

_STATUS_BY_ERROR: dict[type[FiscalCodeError], int] = {
    UnknownCityError: 404,
    UnknownNationError: 404,
    InvalidDateError: 422,
    MalformedInputError: 422,
    DepthExceededError: 422,
    CatalogNotReadyError: 503,
}

# ── FastAPI lifespan ─────────────────────────────────────────────────


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application startup and shutdown lifecycle."""
    logger.info("Starting codicefiscale API (env=%s)", settings.environment)
    if not settings.is_production:
        # Production databases are built with `codicefiscale build-database`
        init_db()
    with session_factory() as session:
        try:
            check_db_not_empty(session)
        except CatalogNotReadyError as exc:
            logger.warning("Catalog not ready: %s (run `codicefiscale build-database`)", exc)
    yield
    logger.info("codicefiscale API shutdown complete")


# ── FastAPI app ──────────────────────────────────────────────────────

app = FastAPI(
    title="codicefiscale API",
    description="Italian fiscal code generation with homocode support",
    version=__version__,
    lifespan=lifespan,
)


@app.exception_handler(FiscalCodeError)
async def fiscal_code_error_handler(request: Request, exc: FiscalCodeError) -> JSONResponse:
    status = _STATUS_BY_ERROR.get(type(exc), 400)
    logger.info("%s %s -> %d: %s", request.method, request.url.path, status, exc)
    return JSONResponse(status_code=status, content={"error": type(exc).__name__, "detail": str(exc)})


def get_place_lookup(session: Session = Depends(get_session)) -> PlaceLookup:
    """Dependency — one SQL lookup per request."""
    return SqlPlaceLookup(session)


@app.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "ok", "environment": settings.environment, "version": __version__}


@app.post("/codes", response_model=FiscalCode)
def create_code(
    body: GenerateRequest,
    lookup: PlaceLookup = Depends(get_place_lookup),
) -> FiscalCode:
    """Generate the fiscal code, or its homocode when a depth is given."""
    return CodeGenerator(lookup).generate(body.to_person(), body.substitution_depth)


@app.post("/homocodes", response_model=FiscalCode)
def create_homocode(body: HomocodeRequest) -> FiscalCode:
    """Homocode of an existing code."""
    code = generate_homocode(body.code, body.substitution_depth)
    return FiscalCode(code=code, substitution_depth=body.substitution_depth)


# ── Entry point ──────────────────────────────────────────────────────

if __name__ == "__main__":
    configure_logging()
    uvicorn.run(
        "codicefiscale.main:app",
        host="127.0.0.1",
        port=8000,
        reload=settings.environment == "development",
        log_level=settings.log_level.lower(),
    )
