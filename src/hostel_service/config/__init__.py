"""
Configuration Module
====================

Application settings and configuration management using Pydantic.

Settings are layered, lowest precedence first:

1. ``appsettings.json`` (required)
2. ``appsettings.{Environment}.json`` (optional)
3. Process environment variables

Nested keys are addressed from the environment with ``__``, e.g.
``CONNECTION_STRINGS__DEFAULT_CONNECTION``.
"""

import json
import os
from functools import lru_cache
from pathlib import Path
from typing import Optional, Tuple, Type

from pydantic import BaseModel, Field, ValidationError, field_validator
from pydantic_settings import (
    BaseSettings,
    JsonConfigSettingsSource,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

from hostel_service.core import ConfigurationException


BASE_SETTINGS_FILE = "appsettings.json"
ENVIRONMENT_VARIABLE = "ENVIRONMENT"
CONFIG_DIR_VARIABLE = "HOSTEL_CONFIG_DIR"
DEFAULT_ENVIRONMENT = "Production"
DEVELOPMENT_ENVIRONMENT = "Development"


class ConnectionStrings(BaseModel):
    """Named database connection strings."""

    default_connection: str = Field(
        default="postgresql+asyncpg://localhost:5432/hostel_service",
        description="SQLAlchemy async connection URL"
    )


class Settings(BaseSettings):
    """
    Application settings snapshot.

    Immutable once loaded. Use :func:`load_settings` to build one from the
    layered sources.
    """

    # ========== Application ==========
    app_name: str = Field(default="hostel-service", description="Application name")
    app_version: str = Field(default="1.0.0", description="Application version")
    environment: str = Field(default=DEFAULT_ENVIRONMENT, description="Deployment environment name")
    log_level: str = Field(default="INFO", description="Root log level")

    # ========== Server ==========
    host: str = Field(default="0.0.0.0", description="Server host")
    port: int = Field(default=8000, description="Server port", ge=1, le=65535)

    # ========== Database ==========
    connection_strings: ConnectionStrings = Field(default_factory=ConnectionStrings)
    migrations_source: str = Field(
        default="hostel_service.infrastructure:migrations",
        description="Alembic script location (path or package:dir)"
    )
    db_pool_size: int = Field(default=5, description="Database connection pool size", ge=1)
    db_max_overflow: int = Field(default=10, description="Max overflow connections", ge=0)
    db_echo: bool = Field(default=False, description="Echo SQL statements")

    # ========== Migrations ==========
    apply_migrations: Optional[str] = Field(
        default=None,
        description="Raw APPLY_MIGRATIONS override ('true' / 'false'); anything else defers to environment"
    )

    model_config = SettingsConfigDict(
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensure log level is a standard logging level name."""
        allowed = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in allowed:
            raise ValueError(f"log_level must be one of {sorted(allowed)}")
        return v.upper()

    @field_validator("apply_migrations", mode="before")
    @classmethod
    def stringify_apply_migrations(cls, v):
        """Accept JSON booleans; the raw flag is kept as text."""
        if isinstance(v, bool):
            return str(v).lower()
        return v

    @property
    def is_development(self) -> bool:
        return self.environment.strip().lower() == DEVELOPMENT_ENVIRONMENT.lower()

    @property
    def database_url(self) -> str:
        return self.connection_strings.default_connection

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: Type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> Tuple[PydanticBaseSettingsSource, ...]:
        # Earlier sources win. JSON files are read in listed order, later files overriding.
        return (init_settings, env_settings, JsonConfigSettingsSource(settings_cls))


def _read_json_object(path: Path, required: bool) -> Optional[dict]:
    """Read a JSON settings file, raising ConfigurationException on bad content."""
    if not path.is_file():
        if required:
            raise ConfigurationException(
                f"Required configuration file not found: {path}",
                {"path": str(path)}
            )
        return None

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        raise ConfigurationException(
            f"Configuration file {path} could not be parsed: {e}",
            {"path": str(path)}
        ) from e

    if not isinstance(data, dict):
        raise ConfigurationException(
            f"Configuration file {path} must contain a JSON object",
            {"path": str(path)}
        )
    return data


def load_settings(
    config_dir: Optional[os.PathLike] = None,
    environment: Optional[str] = None,
) -> Settings:
    """
    Build the settings snapshot from files and environment variables.

    Args:
        config_dir: Directory holding the appsettings files. Defaults to
            ``$HOSTEL_CONFIG_DIR`` or the current working directory.
        environment: Environment name. Defaults to ``$ENVIRONMENT`` or
            ``Production``.

    Returns:
        Settings: Frozen settings instance

    Raises:
        ConfigurationException: If the base file is missing or any source is malformed
    """
    directory = Path(config_dir or os.environ.get(CONFIG_DIR_VARIABLE) or Path.cwd())
    env_name = (environment or os.environ.get(ENVIRONMENT_VARIABLE) or DEFAULT_ENVIRONMENT).strip()

    base_file = directory / BASE_SETTINGS_FILE
    environment_file = directory / f"appsettings.{env_name}.json"

    _read_json_object(base_file, required=True)
    files = [base_file]
    if _read_json_object(environment_file, required=False) is not None:
        files.append(environment_file)

    class LayeredSettings(Settings):
        model_config = SettingsConfigDict(json_file=files, json_file_encoding="utf-8")

    try:
        return LayeredSettings(environment=env_name)
    except ValidationError as e:
        raise ConfigurationException(
            f"Invalid configuration: {e.error_count()} error(s)",
            {"errors": e.errors(include_url=False), "files": [str(f) for f in files]}
        ) from e


@lru_cache()
def get_settings() -> Settings:
    """Returns cached Settings instance."""
    return load_settings()
