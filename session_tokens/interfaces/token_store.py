"""Token store interface for persisted sessions.

Each method must be atomic on its own. The session manager performs no
cross-call transactions: verification reads a record and may later update it
in a separate call. A store whose ``update`` inserts missing records lets a
renewal racing a ``revoke`` bring the revoked session back. Raising
``SessionNotFound`` from ``update`` closes that window.
"""

from __future__ import annotations

from typing import Protocol

from session_tokens.schemas import PersistedSession


class TokenStore(Protocol):
    async def create(self, session: PersistedSession) -> None:
        """Insert a session. Raises ``DuplicateIdentifier`` if it exists."""
        ...

    async def find_by_identifier(self, identifier: str) -> PersistedSession:
        """Raises ``SessionNotFound`` when absent."""
        ...

    async def update(self, session: PersistedSession) -> None:
        """Raises ``SessionNotFound`` for an unknown identifier."""
        ...

    async def revoke(self, identifier: str) -> None:
        ...

    async def list_by_user(self, user_id: str) -> list[PersistedSession]:
        ...
