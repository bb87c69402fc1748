"""Session token models."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

from pydantic import BaseModel, ConfigDict, Field, field_validator


def as_utc(value: datetime) -> datetime:
    """Return ``value`` as an aware UTC datetime; naive values are read as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class ExpirationPolicy(BaseModel):
    """How long a session lives after issue or renewal.

    A negative ``amount`` is allowed and produces sessions that are already
    expired when they are created.
    """

    model_config = ConfigDict(frozen=True)

    amount: int = 30
    unit: timedelta = Field(default=timedelta(hours=24))

    def delta(self) -> timedelta:
        return self.unit * self.amount


class PersistedSession(BaseModel):
    """Durable half of a session. The verifier itself is never stored."""

    model_config = ConfigDict(frozen=True)

    identifier: str
    verifier_hash: str
    expiration_datetime: datetime
    user_id: str
    details: str = ""

    @field_validator("expiration_datetime")
    @classmethod
    def _as_utc(cls, value: datetime) -> datetime:
        # Backends without timezone support hand back naive UTC values
        return as_utc(value)

    def __repr__(self) -> str:
        return (
            f"<PersistedSession(identifier={self.identifier[:8]}..., "
            f"user_id={self.user_id}, expires={self.expiration_datetime.isoformat()})>"
        )
