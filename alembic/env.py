"""
Alembic environment configuration.

Connects to the database and runs migrations.
"""

from logging.config import fileConfig

from sqlalchemy import create_engine, pool

from alembic import context

# Import our models so Alembic can detect them
from db.engine import Base
from db.models import SessionToken  # noqa: F401

# Import settings for DATABASE_URL
from session_tokens.config import settings

# This is the Alembic Config object
config = context.config

# Note: We don't use config.set_main_option for the URL because ConfigParser
# interprets % as interpolation syntax. Instead, we pass the URL directly
# to create_engine in run_migrations_online().

# Interpret the config file for Python logging
if config.config_file_name is not None:
    fileConfig(config.config_file_name)

# Target metadata for autogenerate
target_metadata = Base.metadata


def run_migrations_offline() -> None:
    """
    Run migrations in 'offline' mode.

    Configures the context with just a URL, so calls to context.execute()
    emit SQL to the script output instead of a live database.
    """
    context.configure(
        url=settings.DATABASE_URL,
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )

    with context.begin_transaction():
        context.run_migrations()


def _run_with_connection(connection) -> None:
    context.configure(
        connection=connection,
        target_metadata=target_metadata,
    )

    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    """
    Run migrations in 'online' mode.

    Uses a connection supplied through ``config.attributes["connection"]``
    when present, otherwise creates an engine from DATABASE_URL.
    """
    connection = config.attributes.get("connection")
    if connection is not None:
        _run_with_connection(connection)
        return

    connectable = create_engine(
        settings.DATABASE_URL,
        poolclass=pool.NullPool,
    )

    with connectable.connect() as connection:
        _run_with_connection(connection)


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
