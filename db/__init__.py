"""
Database module for the token store.

Provides the SQLAlchemy model, engine and session helpers for SQL persistence.
"""

from db.engine import Base, get_db_context, get_engine, get_session_local

__all__ = ["Base", "get_db_context", "get_engine", "get_session_local"]
