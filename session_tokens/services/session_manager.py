"""Core session manager."""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime, timezone

from session_tokens.exceptions import StoreFailure
from session_tokens.interfaces.token_store import TokenStore
from session_tokens.schemas import ExpirationPolicy, PersistedSession, as_utc
from session_tokens.security import (
    TOKEN_BYTES,
    constant_time_equals,
    encode_token,
    parse_token,
    secure_random_bytes,
    sha256_bytes,
)

logger = logging.getLogger(__name__)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class SessionManager:
    """Issues, verifies, lists and revokes opaque session tokens.

    The manager keeps no mutable state of its own; the store is the only
    shared resource, so concurrent use is safe whenever the store is.
    """

    def __init__(
        self,
        store: TokenStore,
        expiration_policy: ExpirationPolicy | None = None,
        *,
        clock: Callable[[], datetime] | None = None,
        random_source: Callable[[int], bytes] | None = None,
    ) -> None:
        self._store = store
        # 30 days until a session expires by default
        self._policy = expiration_policy or ExpirationPolicy()
        self._now = clock or _utc_now
        self._random_source = random_source

    @property
    def expiration_policy(self) -> ExpirationPolicy:
        return self._policy

    def _current_time(self) -> datetime:
        return as_utc(self._now())

    def _random_bytes(self, n: int) -> bytes:
        if self._random_source is None:
            return secure_random_bytes(n)
        return secure_random_bytes(n, self._random_source)

    async def generate(self, user_id: str, details: str = "") -> str:
        """Create a session for ``user_id`` and return its wire token.

        The token is only returned once the store has persisted the record.
        """
        identifier = self._random_bytes(TOKEN_BYTES)
        verifier = self._random_bytes(TOKEN_BYTES)

        session = PersistedSession(
            identifier=identifier.hex(),
            verifier_hash=sha256_bytes(verifier).hex(),
            expiration_datetime=self._current_time() + self._policy.delta(),
            user_id=user_id,
            details=details,
        )

        try:
            await self._store.create(session)
        except Exception as exc:
            logger.warning(f"[SESSION] Store create failed for user {user_id}: {exc}")
            raise

        logger.info(f"[SESSION] Issued session {session.identifier[:8]}... for user {user_id}")
        return encode_token(identifier, verifier)

    async def verify(self, session_token: str) -> bool:
        """Check a wire token, renewing its expiration at most once a day.

        Returns False for an expired session or a wrong verifier. Malformed
        tokens, unknown identifiers and store errors raise.
        """
        parsed = parse_token(session_token)
        saved = await self._store.find_by_identifier(parsed.identifier)

        now = self._current_time()
        expiration = saved.expiration_datetime
        if expiration < now:
            logger.debug(f"[SESSION] Session {saved.identifier[:8]}... expired at {expiration.isoformat()}")
            return False

        # compare dates only; renew when the issue date is not today
        delta = self._policy.delta()
        needs_renewal = (expiration - delta).date() != now.date()

        try:
            stored_hash = bytes.fromhex(saved.verifier_hash)
        except ValueError as exc:
            raise StoreFailure(
                f"Stored verifier hash for {saved.identifier[:8]}... is not valid hex"
            ) from exc

        if not constant_time_equals(stored_hash, sha256_bytes(parsed.verifier)):
            logger.info(f"[SESSION] Verifier mismatch for session {saved.identifier[:8]}...")
            return False

        renewed = now + delta
        if needs_renewal and renewed > expiration:
            try:
                await self._store.update(saved.model_copy(update={"expiration_datetime": renewed}))
            except Exception as exc:
                logger.warning(f"[SESSION] Renewal failed for session {saved.identifier[:8]}...: {exc}")
                raise
            logger.debug(f"[SESSION] Renewed session {saved.identifier[:8]}... until {renewed.isoformat()}")

        return True

    async def list(self, user_id: str) -> list[PersistedSession]:
        return await self._store.list_by_user(user_id)

    async def revoke(self, identifier: str) -> None:
        await self._store.revoke(identifier)
        logger.info(f"[SESSION] Revoked session {identifier[:8]}...")
