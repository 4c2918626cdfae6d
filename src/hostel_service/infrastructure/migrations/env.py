"""
Alembic Environment
===================

Runs migrations through the async engine. The connection URL is handed
over by ``DatabaseContext.alembic_config()`` via ``config.attributes``;
``sqlalchemy.url`` is honoured when the ``alembic`` CLI is used directly.
"""

import asyncio

from alembic import context
from sqlalchemy import pool
from sqlalchemy.engine import Connection
from sqlalchemy.ext.asyncio import create_async_engine

from hostel_service.infrastructure.database import Base
# Register every slice's tables on Base.metadata
from hostel_service.hostels.infrastructure import models as hostel_models  # noqa: F401
from hostel_service.rooms.infrastructure import models as room_models  # noqa: F401
from hostel_service.hostel_students.infrastructure import models as hostel_student_models  # noqa: F401

config = context.config
target_metadata = Base.metadata


def _connection_url():
    url = config.attributes.get("connection_url")
    if url is None:
        url = config.get_main_option("sqlalchemy.url")
    return url


def run_migrations_offline() -> None:
    """Emit SQL to stdout without a live connection."""
    context.configure(
        url=_connection_url(),
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )

    with context.begin_transaction():
        context.run_migrations()


def do_run_migrations(connection: Connection) -> None:
    context.configure(
        connection=connection,
        target_metadata=target_metadata,
        render_as_batch=connection.dialect.name == "sqlite",
    )

    with context.begin_transaction():
        context.run_migrations()


async def run_async_migrations() -> None:
    connectable = create_async_engine(_connection_url(), poolclass=pool.NullPool)
    try:
        async with connectable.connect() as connection:
            await connection.run_sync(do_run_migrations)
    finally:
        await connectable.dispose()


if context.is_offline_mode():
    run_migrations_offline()
else:
    asyncio.run(run_async_migrations())
