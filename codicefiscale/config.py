"""Application configuration via pydantic-settings.

Values are loaded from environment variables (.env file supported).
Settings are organized into logical groups and composed into a single Settings object.
"""

from __future__ import annotations

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class DatabaseSettings(BaseSettings):
    """Place catalog database connection settings."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    database_url: str = Field(
        default="sqlite:///data.db",
        description="SQLAlchemy URL of the cities/nations database",
    )
    echo_sql: bool = Field(default=False, description="Log every SQL statement")


class CatalogSettings(BaseSettings):
    """Location of the externally sourced JSON catalogs."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    cities_catalog_path: str = Field(
        default="gi_comuni.json",
        description="Italian municipalities catalog (gardainformatica.it format)",
    )
    nations_catalog_path: str = Field(
        default="gi_nazioni.json",
        description="Nations catalog (gardainformatica.it format)",
    )
    italy_code: str = Field(
        default="0000",
        description="Sentinel code stored for Italy, whose catalog entry has no Belfiore code",
    )


class Settings(BaseSettings):
    """Root settings composing all sub-settings.

    Usage:
        settings = Settings()
        settings.db.database_url
        settings.catalog.italy_code
    """

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # Environment
    environment: str = Field(default="development")
    log_level: str = Field(default="INFO")

    # Composed settings (loaded from same .env)
    db: DatabaseSettings = Field(default_factory=DatabaseSettings)
    catalog: CatalogSettings = Field(default_factory=CatalogSettings)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensure log level is valid."""
        valid = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid:
            msg = f"Invalid log level: {v}. Must be one of {valid}"
            raise ValueError(msg)
        return upper

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"


# Module-level singleton — import this wherever settings are needed.
settings = Settings()
