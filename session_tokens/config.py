"""Session token configuration management."""

from __future__ import annotations

from datetime import timedelta
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from session_tokens.schemas import ExpirationPolicy


class SessionSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    SESSION_EXPIRATION_AMOUNT: int = Field(default=30, description="Expiration policy multiplier")
    SESSION_EXPIRATION_UNIT_SECONDS: int = Field(default=86400, description="Expiration policy unit in seconds")

    # Token store: "postgres" (production), "sqlite" (single host) or "memory" (testing)
    SESSION_STORE: Literal["memory", "sqlite", "postgres"] = Field(default="memory", description="Token store backend")
    SESSION_DB_FILE: str = Field(default="sessions.db", description="SQLite database file for the sqlite store")

    DATABASE_URL: str = Field(
        default="postgresql+psycopg2://postgres@localhost:5432/session_tokens",
        description="SQLAlchemy database URL for the postgres store",
    )
    DB_POOL_SIZE: int = Field(default=5, description="Database connection pool size")
    DB_MAX_OVERFLOW: int = Field(default=10, description="Connections allowed beyond the pool size")
    DB_ECHO: bool = Field(default=False, description="Enable SQL query logging")

    def expiration_policy(self) -> ExpirationPolicy:
        return ExpirationPolicy(
            amount=self.SESSION_EXPIRATION_AMOUNT,
            unit=timedelta(seconds=self.SESSION_EXPIRATION_UNIT_SECONDS),
        )


settings = SessionSettings()
