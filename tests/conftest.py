"""
Pytest configuration and shared fixtures for Hostel Service tests.

Testing Standards:
- Async tests run under pytest-asyncio (auto mode enabled in pyproject.toml)
- Database tests use an on-disk SQLite database (aiosqlite) in tmp_path,
  migrated with the real Alembic scripts
- API tests talk HTTPS to the TestClient, since plain HTTP is redirected
"""

from pathlib import Path
from typing import AsyncGenerator, Iterator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncSession

from hostel_service.config import Settings
from hostel_service.infrastructure.database import DatabaseContext
from hostel_service.main import create_app
from hostel_service.startup import build_registry

MIGRATIONS_SOURCE = "hostel_service.infrastructure:migrations"

# Environment variables Settings would pick up from the developer's shell
_SETTINGS_ENV_VARS = (
    "ENVIRONMENT",
    "HOSTEL_CONFIG_DIR",
    "APPLY_MIGRATIONS",
    "CONNECTION_STRINGS",
    "CONNECTION_STRINGS__DEFAULT_CONNECTION",
    "MIGRATIONS_SOURCE",
    "APP_NAME",
    "APP_VERSION",
    "LOG_LEVEL",
    "HOST",
    "PORT",
    "DB_POOL_SIZE",
    "DB_MAX_OVERFLOW",
    "DB_ECHO",
)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the caller's environment out of configuration tests."""
    for name in _SETTINGS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def sqlite_url(tmp_path: Path) -> str:
    return f"sqlite+aiosqlite:///{tmp_path / 'hostel_service.db'}"


@pytest.fixture
def migrated_database(sqlite_url: str) -> DatabaseContext:
    """A database context whose schema is at head."""
    database = DatabaseContext(sqlite_url, MIGRATIONS_SOURCE)
    database.migrate()
    return database


@pytest.fixture
async def session(migrated_database: DatabaseContext) -> AsyncGenerator[AsyncSession, None]:
    """A session on the migrated database, committed at the end of the test."""
    async with migrated_database.session() as s:
        yield s
    await migrated_database.dispose()


@pytest.fixture
def dev_settings(sqlite_url: str) -> Settings:
    return Settings(
        environment="Development",
        connection_strings={"default_connection": sqlite_url},
    )


@pytest.fixture
def client(dev_settings: Settings, migrated_database: DatabaseContext) -> Iterator[TestClient]:
    """TestClient for a fully wired app on a migrated SQLite database."""
    app = create_app(dev_settings, database=migrated_database, registry=build_registry())
    with TestClient(app, base_url="https://testserver") as test_client:
        yield test_client
