"""
Alembic Migration Environment
===============================

What:  Runs the migrations in alembic/versions against DATABASE_URL.
How:   Alembic's migration context is synchronous, so online runs open an
       async connection and hand it to the context through run_sync().

Usage:
    alembic upgrade head          # apply 001_create_recipe_schema
    alembic upgrade head --sql    # print the DDL instead (offline mode)
"""

import asyncio
from logging.config import fileConfig

from sqlalchemy import pool
from sqlalchemy.ext.asyncio import async_engine_from_config
from alembic import context

from grandma_recipes.config import settings
from grandma_recipes.database import Base

# Registers grandmas, recipes, ingredients, images, users and both link
# tables on Base.metadata
import grandma_recipes.models  # noqa: F401

config = context.config

# alembic.ini logging sections; the app's setup_logging is not involved here
if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = Base.metadata

# DATABASE_URL from Settings; alembic.ini carries no URL
config.set_main_option("sqlalchemy.url", settings.database_url)


def run_migrations_offline() -> None:
    """Renders the DDL as SQL text (`--sql`) without a database connection."""
    context.configure(
        url=config.get_main_option("sqlalchemy.url"),
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )

    with context.begin_transaction():
        context.run_migrations()


def do_run_migrations(connection):
    context.configure(connection=connection, target_metadata=target_metadata)

    with context.begin_transaction():
        context.run_migrations()


async def run_async_migrations() -> None:
    """
    Applies pending revisions over one async connection.

    NullPool: a migration run is a one-shot process, so nothing is kept open
    after dispose().
    """
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
