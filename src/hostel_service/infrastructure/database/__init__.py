"""
Database Infrastructure
=======================

Manages database connections, session lifecycle, engine configuration and
schema migrations.

Uses SQLAlchemy 2.0 async sessions (asyncpg for PostgreSQL) and Alembic for
migrations. Nothing connects until first use, so a bad connection string
only surfaces when the engine is first needed.
"""

import asyncio
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from pathlib import Path
from typing import AsyncGenerator, Optional

from alembic import command
from alembic.config import Config
from sqlalchemy import event, pool, text
from sqlalchemy.engine import URL, make_url
from sqlalchemy.exc import ArgumentError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from hostel_service.core import ConfigurationException
from hostel_service.shared.infrastructure.logging import get_logger, log_latency

logger = get_logger(__name__)


class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy models.

    SQLAlchemy 2.0 style using DeclarativeBase.
    All models inherit from this class.
    """
    pass


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Attach UTC to naive datetimes (SQLite drops the offset on read)."""
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def parse_connection_string(connection_string: str) -> URL:
    """
    Parse a connection string into a SQLAlchemy URL.

    Raises:
        ConfigurationException: If the string is not a valid database URL
    """
    if connection_string.startswith("postgresql+asyncpg"):
        # asyncpg takes ssl=, not libpq's sslmode=
        connection_string = connection_string.replace("sslmode=", "ssl=")

    try:
        url = make_url(connection_string)
    except (ArgumentError, ValueError) as e:
        raise ConfigurationException(f"Invalid database connection string: {e}") from e
    return url


class DatabaseContext:
    """
    Lazily-connected database context.

    One instance is shared by the whole process; each request opens its own
    session through :meth:`session`.
    """

    def __init__(
        self,
        connection_string: str,
        migrations_source: str,
        *,
        pool_size: int = 5,
        max_overflow: int = 10,
        echo: bool = False,
    ):
        self._connection_string = connection_string
        self._migrations_source = migrations_source
        self._pool_size = pool_size
        self._max_overflow = max_overflow
        self._echo = echo
        self._engine: Optional[AsyncEngine] = None
        self._session_maker: Optional[async_sessionmaker[AsyncSession]] = None

    @property
    def migrations_source(self) -> str:
        return self._migrations_source

    @property
    def url(self) -> URL:
        return parse_connection_string(self._connection_string)

    @property
    def engine(self) -> AsyncEngine:
        """
        Get or create the database engine.

        Raises:
            ConfigurationException: If the connection string is malformed
        """
        if self._engine is None:
            url = self.url
            options: dict = {"echo": self._echo, "pool_pre_ping": True}
            if url.get_backend_name() != "sqlite":
                options.update(pool_size=self._pool_size, max_overflow=self._max_overflow)

            self._engine = create_async_engine(url, **options)
            if url.get_backend_name() == "sqlite":
                event.listen(self._engine.sync_engine, "connect", _enable_sqlite_foreign_keys)
            self._session_maker = async_sessionmaker(
                bind=self._engine,
                class_=AsyncSession,
                expire_on_commit=False,  # Prevent lazy loading after commit
                autoflush=False,
            )
        return self._engine

    @property
    def session_maker(self) -> async_sessionmaker[AsyncSession]:
        if self._session_maker is None:
            self.engine  # builds the session maker alongside the engine
        return self._session_maker

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """
        Async context manager for database sessions.

        Commits when the block exits cleanly, rolls back otherwise.

        Usage:
            async with database.session() as session:
                result = await session.execute(select(HostelModel))
        """
        async with self.session_maker() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    async def ping(self) -> bool:
        """Run a trivial query; True when the database answers."""
        async with self.engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
        return True

    async def dispose(self) -> None:
        """Close the engine and dispose of pooled connections."""
        if self._engine is not None:
            await self._engine.dispose()
            self._engine = None
            self._session_maker = None

    # ========== Migrations ==========

    def alembic_config(self) -> Config:
        """Build an Alembic config pointing at this database."""
        config = Config()
        config.set_main_option("script_location", self._migrations_source)
        config.attributes["connection_url"] = self.url
        return config

    def migrate(self) -> None:
        """
        Create the database if it is missing, then apply pending migrations.

        Idempotent: on an up-to-date schema nothing changes. Must be called
        outside a running event loop.
        """
        url = self.url
        with log_latency(logger, "database_migration", backend=url.get_backend_name()):
            ensure_database_exists(url)
            command.upgrade(self.alembic_config(), "head")


def ensure_database_exists(url: URL) -> None:
    """
    Create the backing store for ``url`` if it does not exist yet.

    SQLite creates its file on first connect, so only the parent directory
    is needed. PostgreSQL databases are created through the ``postgres``
    maintenance database.
    """
    backend = url.get_backend_name()
    if backend == "sqlite":
        database = url.database
        if database and database != ":memory:" and not database.startswith("file:"):
            Path(database).expanduser().parent.mkdir(parents=True, exist_ok=True)
        return

    if backend == "postgresql" and url.database:
        asyncio.run(_create_postgres_database(url))


async def _create_postgres_database(url: URL) -> None:
    admin_engine = create_async_engine(
        url.set(database="postgres"),
        isolation_level="AUTOCOMMIT",
        poolclass=pool.NullPool,
    )
    try:
        async with admin_engine.connect() as conn:
            exists = await conn.scalar(
                text("SELECT 1 FROM pg_database WHERE datname = :name"),
                {"name": url.database},
            )
            if not exists:
                quoted = url.database.replace('"', '""')
                await conn.execute(text(f'CREATE DATABASE "{quoted}"'))
                logger.info("Created database", extra={"database": url.database})
    finally:
        await admin_engine.dispose()
