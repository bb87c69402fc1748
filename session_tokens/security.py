"""Security primitives for session tokens."""

from __future__ import annotations

import hashlib
import hmac
import re
import secrets
from collections.abc import Callable
from typing import NamedTuple

from session_tokens.exceptions import MalformedToken, RandomSourceFailure

TOKEN_BYTES = 16
TOKEN_SEPARATOR = "."

_HEX_SEGMENT = re.compile(r"[0-9a-f]{%d}" % (TOKEN_BYTES * 2))


class ParsedToken(NamedTuple):
    identifier: str
    verifier: bytes


def secure_random_bytes(
    n: int, source: Callable[[int], bytes] = secrets.token_bytes
) -> bytes:
    """Return ``n`` cryptographically secure random bytes."""
    try:
        data = source(n)
    except (OSError, NotImplementedError) as exc:
        raise RandomSourceFailure("Secure random source unavailable") from exc
    if len(data) != n:
        raise RandomSourceFailure(f"Secure random source returned {len(data)} of {n} bytes")
    return data


def sha256_bytes(data: bytes) -> bytes:
    return hashlib.sha256(data).digest()


def constant_time_equals(a: bytes, b: bytes) -> bool:
    """Compare two byte strings without leaking where they differ."""
    return hmac.compare_digest(a, b)


def encode_token(identifier: bytes, verifier: bytes) -> str:
    return identifier.hex() + TOKEN_SEPARATOR + verifier.hex()


def parse_token(token: str) -> ParsedToken:
    """Split a wire token into its hex identifier and raw verifier bytes.

    Raises:
        MalformedToken: if the token is not two 32-character lowercase hex
            segments joined by a single separator.
    """
    if not isinstance(token, str):
        raise MalformedToken("Token must be a string")

    parts = token.split(TOKEN_SEPARATOR)
    if len(parts) != 2:
        raise MalformedToken("Token must contain exactly one separator")

    identifier, verifier = parts
    if not _HEX_SEGMENT.fullmatch(identifier):
        raise MalformedToken("Token identifier is not valid hex")
    if not _HEX_SEGMENT.fullmatch(verifier):
        raise MalformedToken("Token verifier is not valid hex")

    return ParsedToken(identifier=identifier, verifier=bytes.fromhex(verifier))
