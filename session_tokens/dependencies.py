"""Session token dependency helpers."""

from __future__ import annotations

from session_tokens.config import settings
from session_tokens.interfaces.token_store import TokenStore
from session_tokens.services.session_manager import SessionManager
from session_tokens.stores.memory_store import MemoryTokenStore
from session_tokens.stores.sqlite_store import SQLiteTokenStore


_memory_token_store = MemoryTokenStore()
_sqlite_token_store: SQLiteTokenStore | None = None
_postgres_token_store: TokenStore | None = None


def get_token_store() -> TokenStore:
    """Get the token store based on SESSION_STORE config."""
    global _sqlite_token_store, _postgres_token_store
    if settings.SESSION_STORE == "postgres":
        if _postgres_token_store is None:
            from session_tokens.stores.postgres_store import PostgresTokenStore

            _postgres_token_store = PostgresTokenStore()
        return _postgres_token_store
    if settings.SESSION_STORE == "sqlite":
        if _sqlite_token_store is None:
            _sqlite_token_store = SQLiteTokenStore(settings.SESSION_DB_FILE)
        return _sqlite_token_store
    # Fallback to memory store for development/testing
    return _memory_token_store


def get_session_manager() -> SessionManager:
    return SessionManager(
        store=get_token_store(),
        expiration_policy=settings.expiration_policy(),
    )
