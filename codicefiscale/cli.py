"""Command line interface.

    codicefiscale generate NAME SURNAME SEX NATION CITY BIRTH_DATE [DEPTH]
    codicefiscale build-database [--cities gi_comuni.json] [--nations gi_nazioni.json]
    codicefiscale serve
"""

from __future__ import annotations

import logging
from datetime import date

import click
import uvicorn
from sqlalchemy.orm import Session

from codicefiscale import __version__
from codicefiscale.catalog.loader import populate_db
from codicefiscale.config import settings
from codicefiscale.db.engine import (
    catalog_counts,
    check_db_not_empty,
    database_exists,
    init_db,
    make_engine,
)
from codicefiscale.encoding.generator import CodeGenerator, generate_homocode
from codicefiscale.exceptions import FiscalCodeError
from codicefiscale.log import configure_logging
from codicefiscale.lookup import SqlPlaceLookup
from codicefiscale.schemas.fiscal_code import PersonalInput

logger = logging.getLogger(__name__)


def _parse_birth_date(ctx: click.Context, param: click.Parameter, value: str) -> date:
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise click.BadParameter("Invalid date format, should be YYYY-MM-DD.") from None


@click.group()
@click.version_option(__version__, prog_name="codicefiscale")
@click.option(
    "--database-url",
    default=settings.db.database_url,
    show_default=True,
    envvar="DATABASE_URL",
    help="SQLAlchemy URL of the cities/nations database.",
)
@click.option(
    "--log-level",
    default=None,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False),
    help="Override LOG_LEVEL.",
)
@click.pass_context
def cli(ctx: click.Context, database_url: str, log_level: str | None) -> None:
    """Calculate Italian fiscal codes (codice fiscale)."""
    configure_logging(log_level)
    ctx.ensure_object(dict)
    ctx.obj["database_url"] = database_url


@cli.command()
@click.argument("name")
@click.argument("surname")
@click.argument("sex", type=click.Choice(["M", "F"], case_sensitive=False))
@click.argument("nation")
@click.argument("city")
@click.argument("birth_date", callback=_parse_birth_date)
@click.argument("substitution_depth", type=click.IntRange(min=0), required=False)
@click.pass_context
def generate(
    ctx: click.Context,
    name: str,
    surname: str,
    sex: str,
    nation: str,
    city: str,
    birth_date: date,
    substitution_depth: int | None,
) -> None:
    """Generate the code.

    CITY is irrelevant if NATION is not Italy, but still needed.
    """
    database_url = ctx.obj["database_url"]
    if not database_exists(database_url):
        raise click.ClickException(
            "A database with all nations and cities is needed.\n"
            "Create one using the build-database command and set the DATABASE_URL "
            "environment variable to the database URL."
        )
    engine = make_engine(database_url)
    try:
        with Session(engine) as session:
            check_db_not_empty(session)
            person = PersonalInput(
                name=name,
                surname=surname,
                sex=sex,
                birth_nation=nation,
                birth_city=city,
                birth_date=birth_date,
            )
            code = CodeGenerator(SqlPlaceLookup(session)).generate(person)
            click.echo(f"Code: {code}")
            if substitution_depth is not None:
                click.echo(f"Homocodic code: {generate_homocode(code.code, substitution_depth)}")
    except FiscalCodeError as exc:
        raise click.ClickException(str(exc)) from exc
    finally:
        engine.dispose()


@cli.command("build-database")
@click.option(
    "--cities",
    "cities_path",
    default=settings.catalog.cities_catalog_path,
    show_default=True,
    type=click.Path(exists=True, dir_okay=False),
)
@click.option(
    "--nations",
    "nations_path",
    default=settings.catalog.nations_catalog_path,
    show_default=True,
    type=click.Path(exists=True, dir_okay=False),
)
@click.pass_context
def build_database(ctx: click.Context, cities_path: str, nations_path: str) -> None:
    """Build the nations and city database."""
    logger.info("Building catalog database from %s and %s", cities_path, nations_path)
    engine = make_engine(ctx.obj["database_url"])
    try:
        init_db(engine)
        with Session(engine) as session:
            if any(catalog_counts(session)):
                raise click.ClickException("Database already populated.")
            n_cities, n_nations = populate_db(session, cities_path, nations_path)
            session.commit()
    finally:
        engine.dispose()
    click.echo(f"Database successfully populated! ({n_cities} cities, {n_nations} nations)")


@cli.command()
@click.option("--host", default="127.0.0.1", show_default=True)
@click.option("--port", default=8000, show_default=True, type=int)
def serve(host: str, port: int) -> None:
    """Serve the HTTP API."""
    uvicorn.run("codicefiscale.main:app", host=host, port=port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    cli()
