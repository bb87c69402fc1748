"""PostgreSQL token store using SQLAlchemy."""

from __future__ import annotations

import logging

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import sessionmaker

from db.engine import get_db_context
from db.models.session_token import SessionToken
from session_tokens.exceptions import DuplicateIdentifier, SessionNotFound
from session_tokens.schemas import PersistedSession

logger = logging.getLogger(__name__)


class PostgresTokenStore:
    """Token store backed by any SQLAlchemy database, PostgreSQL in production."""

    def __init__(self, session_factory: sessionmaker | None = None) -> None:
        self._session_factory = session_factory

    @staticmethod
    def _to_session(token: SessionToken) -> PersistedSession:
        return PersistedSession(
            identifier=token.identifier,
            verifier_hash=token.verifier_hash,
            expiration_datetime=token.expiration_datetime,
            user_id=token.user_id,
            details=token.details,
        )

    async def create(self, session: PersistedSession) -> None:
        try:
            with get_db_context(self._session_factory) as db:
                db.add(
                    SessionToken(
                        identifier=session.identifier,
                        verifier_hash=session.verifier_hash,
                        expiration_datetime=session.expiration_datetime,
                        user_id=session.user_id,
                        details=session.details,
                    )
                )
        except IntegrityError as exc:
            logger.warning(f"[TOKEN_STORE] Duplicate identifier {session.identifier[:8]}...")
            raise DuplicateIdentifier(f"Session {session.identifier[:8]}... already exists") from exc

    async def find_by_identifier(self, identifier: str) -> PersistedSession:
        with get_db_context(self._session_factory) as db:
            token = db.get(SessionToken, identifier)
            if not token:
                raise SessionNotFound(identifier)
            return self._to_session(token)

    async def update(self, session: PersistedSession) -> None:
        with get_db_context(self._session_factory) as db:
            token = db.get(SessionToken, session.identifier)
            if not token:
                raise SessionNotFound(session.identifier)
            token.verifier_hash = session.verifier_hash
            token.expiration_datetime = session.expiration_datetime
            token.user_id = session.user_id
            token.details = session.details

    async def revoke(self, identifier: str) -> None:
        with get_db_context(self._session_factory) as db:
            db.execute(delete(SessionToken).where(SessionToken.identifier == identifier))

    async def list_by_user(self, user_id: str) -> list[PersistedSession]:
        with get_db_context(self._session_factory) as db:
            tokens = db.execute(
                select(SessionToken).where(SessionToken.user_id == user_id)
            ).scalars().all()
            return [self._to_session(token) for token in tokens]
