"""In-memory token store."""

from __future__ import annotations

import asyncio

from session_tokens.exceptions import DuplicateIdentifier, SessionNotFound
from session_tokens.schemas import PersistedSession


class MemoryTokenStore:
    def __init__(self) -> None:
        self._lock = asyncio.Lock()
        self._sessions: dict[str, PersistedSession] = {}

    def __len__(self) -> int:
        return len(self._sessions)

    async def create(self, session: PersistedSession) -> None:
        async with self._lock:
            if session.identifier in self._sessions:
                raise DuplicateIdentifier(f"Session {session.identifier[:8]}... already exists")
            self._sessions[session.identifier] = session

    async def find_by_identifier(self, identifier: str) -> PersistedSession:
        async with self._lock:
            session = self._sessions.get(identifier)
            if session is None:
                raise SessionNotFound(identifier)
            return session

    async def update(self, session: PersistedSession) -> None:
        async with self._lock:
            if session.identifier not in self._sessions:
                raise SessionNotFound(session.identifier)
            self._sessions[session.identifier] = session

    async def revoke(self, identifier: str) -> None:
        async with self._lock:
            self._sessions.pop(identifier, None)

    async def list_by_user(self, user_id: str) -> list[PersistedSession]:
        async with self._lock:
            return [session for session in self._sessions.values() if session.user_id == user_id]
