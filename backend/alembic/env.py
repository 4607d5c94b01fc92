"""Alembic environment for the posts schema.

Runs against the same database as the application: the URL comes from
``DATABASE_URL`` via ``blog_api.core.config.settings`` and online
migrations reuse the application's engine, so SQLite gets its
connection arguments and batch mode for ALTER TABLE.
"""
from __future__ import annotations

from logging.config import fileConfig

from alembic import context

from blog_api.core.config import settings
from blog_api.db import models  # noqa: F401  registers the posts table
from blog_api.db.base import Base
from blog_api.db.session import engine

if context.config.config_file_name is not None:
    fileConfig(context.config.config_file_name)


def _configure(**options) -> None:
    context.configure(
        target_metadata=Base.metadata,
        compare_type=True,
        render_as_batch=settings.is_sqlite,
        **options,
    )


def run_offline() -> None:
    _configure(url=settings.database_url, literal_binds=True, dialect_opts={"paramstyle": "named"})
    with context.begin_transaction():
        context.run_migrations()


def run_online() -> None:
    with engine.connect() as connection:
        _configure(connection=connection)
        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_offline()
else:
    run_online()
