"""Opaque session tokens backed by a pluggable token store."""

from session_tokens.exceptions import (
    DuplicateIdentifier,
    MalformedToken,
    RandomSourceFailure,
    SessionNotFound,
    SessionTokenException,
    StoreFailure,
)
from session_tokens.interfaces.token_store import TokenStore
from session_tokens.schemas import ExpirationPolicy, PersistedSession
from session_tokens.security import parse_token
from session_tokens.services.session_manager import SessionManager

__all__ = [
    "SessionManager",
    "TokenStore",
    "ExpirationPolicy",
    "PersistedSession",
    "parse_token",
    # Errors
    "SessionTokenException",
    "RandomSourceFailure",
    "StoreFailure",
    "DuplicateIdentifier",
    "SessionNotFound",
    "MalformedToken",
]
