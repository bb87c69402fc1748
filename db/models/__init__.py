"""
SQLAlchemy models for the token store.

All models inherit from db.engine.Base for Alembic migrations.
"""

from db.models.session_token import SessionToken

__all__ = [
    "SessionToken",
]
