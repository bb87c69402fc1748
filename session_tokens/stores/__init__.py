"""Token store implementations."""

from session_tokens.stores.memory_store import MemoryTokenStore
from session_tokens.stores.sqlite_store import SQLiteTokenStore

__all__ = ["MemoryTokenStore", "SQLiteTokenStore"]
