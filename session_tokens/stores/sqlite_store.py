"""SQLite token store."""

from __future__ import annotations

import logging
import sqlite3
from contextlib import closing
from datetime import datetime

from session_tokens.exceptions import DuplicateIdentifier, SessionNotFound
from session_tokens.schemas import PersistedSession

logger = logging.getLogger(__name__)


class SQLiteTokenStore:
    def __init__(self, db_path: str) -> None:
        self._db_path = db_path
        self._ensure_schema()

    def _connect(self) -> sqlite3.Connection:
        connection = sqlite3.connect(self._db_path, check_same_thread=False)
        connection.row_factory = sqlite3.Row
        return connection

    def _ensure_schema(self) -> None:
        with closing(self._connect()) as conn, conn:
            conn.execute(
                """
                CREATE TABLE IF NOT EXISTS session_tokens (
                    identifier TEXT PRIMARY KEY,
                    verifier_hash TEXT NOT NULL,
                    expiration_datetime TEXT NOT NULL,
                    user_id TEXT NOT NULL,
                    details TEXT NOT NULL DEFAULT ''
                )
                """
            )
            conn.execute(
                "CREATE INDEX IF NOT EXISTS ix_session_tokens_user_id ON session_tokens (user_id)"
            )

    @staticmethod
    def _to_session(row: sqlite3.Row) -> PersistedSession:
        return PersistedSession(
            identifier=row["identifier"],
            verifier_hash=row["verifier_hash"],
            expiration_datetime=datetime.fromisoformat(row["expiration_datetime"]),
            user_id=row["user_id"],
            details=row["details"],
        )

    async def create(self, session: PersistedSession) -> None:
        try:
            with closing(self._connect()) as conn, conn:
                conn.execute(
                    """
                    INSERT INTO session_tokens
                    (identifier, verifier_hash, expiration_datetime, user_id, details)
                    VALUES (?, ?, ?, ?, ?)
                    """,
                    (
                        session.identifier,
                        session.verifier_hash,
                        session.expiration_datetime.isoformat(),
                        session.user_id,
                        session.details,
                    ),
                )
        except sqlite3.IntegrityError as exc:
            logger.warning(f"[TOKEN_STORE] Duplicate identifier {session.identifier[:8]}...")
            raise DuplicateIdentifier(f"Session {session.identifier[:8]}... already exists") from exc

    async def find_by_identifier(self, identifier: str) -> PersistedSession:
        with closing(self._connect()) as conn, conn:
            row = conn.execute(
                "SELECT * FROM session_tokens WHERE identifier = ?",
                (identifier,),
            ).fetchone()
        if not row:
            raise SessionNotFound(identifier)
        return self._to_session(row)

    async def update(self, session: PersistedSession) -> None:
        with closing(self._connect()) as conn, conn:
            cursor = conn.execute(
                """
                UPDATE session_tokens
                SET verifier_hash = ?, expiration_datetime = ?, user_id = ?, details = ?
                WHERE identifier = ?
                """,
                (
                    session.verifier_hash,
                    session.expiration_datetime.isoformat(),
                    session.user_id,
                    session.details,
                    session.identifier,
                ),
            )
        if cursor.rowcount == 0:
            raise SessionNotFound(session.identifier)

    async def revoke(self, identifier: str) -> None:
        with closing(self._connect()) as conn, conn:
            conn.execute("DELETE FROM session_tokens WHERE identifier = ?", (identifier,))

    async def list_by_user(self, user_id: str) -> list[PersistedSession]:
        with closing(self._connect()) as conn, conn:
            rows = conn.execute(
                "SELECT * FROM session_tokens WHERE user_id = ?",
                (user_id,),
            ).fetchall()
        return [self._to_session(row) for row in rows]
