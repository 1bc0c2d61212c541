# pylint: skip-file
# ruff: noqa
"""
Alembic Environment

Runs migrations against DATABASE_URL from settings, never a URL written in
alembic.ini. Online mode drives the async engine through run_sync, the same
engine type the application uses.

SQLite cannot ALTER most constraints in place, so on SQLite URLs the
migration context runs in batch mode (copy-and-move tables).

Commands:
=========
    alembic upgrade head
    alembic revision --autogenerate -m "add column"
    alembic upgrade head --sql > migration.sql     (offline)
"""

import asyncio
from logging.config import fileConfig

from sqlalchemy import pool
from sqlalchemy.engine import Connection
from sqlalchemy.ext.asyncio import async_engine_from_config

from alembic import context

from puppymatch.config.settings import settings

# Importing the package registers every model on Base.metadata
from puppymatch.shared.models import Base, User, UserInterest

REGISTERED_MODELS = (User, UserInterest)

config = context.config
config.set_main_option("sqlalchemy.url", settings.DATABASE_URL)

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = Base.metadata
render_as_batch = settings.is_sqlite


def run_migrations_offline() -> None:
    """Emit SQL to stdout instead of executing it."""
    context.configure(
        url=config.get_main_option("sqlalchemy.url"),
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        render_as_batch=render_as_batch,
    )

    with context.begin_transaction():
        context.run_migrations()


def do_run_migrations(connection: Connection) -> None:
    context.configure(
        connection=connection,
        target_metadata=target_metadata,
        compare_type=True,
        render_as_batch=render_as_batch,
    )

    with context.begin_transaction():
        context.run_migrations()


async def run_async_migrations() -> None:
    """Open a throwaway async engine (no pooling) and migrate through it."""
    connectable = async_engine_from_config(
        config.get_section(config.config_ini_section, {}),
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
    )

    try:
        async with connectable.connect() as connection:
            await connection.run_sync(do_run_migrations)
    finally:
        await connectable.dispose()


if context.is_offline_mode():
    run_migrations_offline()
else:
    asyncio.run(run_async_migrations())
