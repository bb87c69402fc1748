"""
SQLAlchemy engine and session factory for the token store.

Usage:
    from db.engine import get_db_context

    with get_db_context() as db:
        token = db.get(SessionToken, identifier)

The engine is built on first use so that importing the models does not
require the database driver to be installed.
"""

from collections.abc import Generator
from contextlib import contextmanager
from functools import lru_cache

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from session_tokens.config import settings


# Base class for all models
Base = declarative_base()


@lru_cache(maxsize=1)
def get_engine() -> Engine:
    """Get the SQLAlchemy engine."""
    options = {
        "pool_pre_ping": True,  # Verify connections before use
        "echo": settings.DB_ECHO,
    }
    if not settings.DATABASE_URL.startswith("sqlite"):
        options["pool_size"] = settings.DB_POOL_SIZE
        options["max_overflow"] = settings.DB_MAX_OVERFLOW
    return create_engine(settings.DATABASE_URL, **options)


@lru_cache(maxsize=1)
def get_session_local() -> sessionmaker:
    """Get the session factory bound to the shared engine."""
    return sessionmaker(autoflush=False, bind=get_engine())


@contextmanager
def get_db_context(
    session_factory: sessionmaker | None = None,
) -> Generator[Session, None, None]:
    """
    Context manager that commits on success and rolls back on error.

    Usage:
        with get_db_context() as db:
            db.add(token)
    """
    db = (session_factory or get_session_local())()
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()
