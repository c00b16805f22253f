# pylint: skip-file
# ruff: noqa
"""
Alembic Environment Configuration

Runs migrations for VFA.gallery through the async engine (asyncpg on
PostgreSQL). The database URL comes from settings.DATABASE_URL, never from
alembic.ini.

    alembic upgrade head              # online, against DATABASE_URL
    alembic upgrade head --sql        # offline, print SQL only
"""

import asyncio
from logging.config import fileConfig

from sqlalchemy import pool
from sqlalchemy.engine import Connection
from sqlalchemy.ext.asyncio import async_engine_from_config

from alembic import context

from vfa_gallery.config.settings import settings
from vfa_gallery.shared.models.base import Base

# Importing the models registers their tables on Base.metadata for autogenerate.
from vfa_gallery.shared.models import (
    User,
    Gallery,
    Collection,
    Artwork,
    CollectionArtwork,
)

REGISTERED_MODELS = (
    User,
    Gallery,
    Collection,
    Artwork,
    CollectionArtwork,
)

config = context.config
config.set_main_option("sqlalchemy.url", settings.DATABASE_URL)

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = Base.metadata


def run_migrations_offline() -> None:
    """Emit migration SQL without connecting."""
    context.configure(
        url=config.get_main_option("sqlalchemy.url"),
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
        compare_type=True,
        compare_server_default=True,
    )

    with context.begin_transaction():
        context.run_migrations()


async def run_async_migrations() -> None:
    """Open a throwaway async engine and run migrations on one connection."""
    connectable = async_engine_from_config(
        config.get_section(config.config_ini_section, {}),
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
    )

    async with connectable.connect() as connection:
        await connection.run_sync(do_run_migrations)

    await connectable.dispose()


if context.is_offline_mode():
    run_migrations_offline()
else:
    asyncio.run(run_async_migrations())
