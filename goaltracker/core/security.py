"""Session token codec and magic-link token helpers."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from datetime import timedelta
from datetime import timezone
import hashlib
import logging
import secrets
import uuid

import jwt

logger = logging.getLogger(__name__)

SESSION_TOKEN_ALGORITHM = "HS256"


@dataclass(frozen=True)
class SessionIdentity:
    """Signed-in caller as carried by the session token."""

    user_id: uuid.UUID
    email: str | None = None
    name: str | None = None


def issue_session_token(
    identity: SessionIdentity,
    *,
    secret: str,
    max_age_seconds: int,
    now: datetime | None = None,
) -> str:
    """Encode a signed session token for the given identity."""
    if not secret:
        raise RuntimeError("A secret key is required to issue session tokens")
    issued_at = now or datetime.now(timezone.utc)
    claims = {
        "sub": str(identity.user_id),
        "email": identity.email,
        "name": identity.name,
        "iat": issued_at,
        "exp": issued_at + timedelta(seconds=max_age_seconds),
    }
    return jwt.encode(claims, secret, algorithm=SESSION_TOKEN_ALGORITHM)


def read_session_token(token: str | None, *, secret: str) -> SessionIdentity | None:
    """Decode a session token, returning ``None`` for anything not trustworthy."""
    if not token or not secret:
        return None
    try:
        claims = jwt.decode(
            token,
            secret,
            algorithms=[SESSION_TOKEN_ALGORITHM],
            options={"require": ["sub", "exp"]},
        )
    except jwt.ExpiredSignatureError:
        logger.info("Rejected expired session token")
        return None
    except jwt.PyJWTError as exc:
        logger.warning("Rejected invalid session token: %s", exc.__class__.__name__)
        return None

    try:
        user_id = uuid.UUID(str(claims["sub"]))
    except ValueError:
        logger.warning("Rejected session token with malformed subject")
        return None

    return SessionIdentity(user_id=user_id, email=claims.get("email"), name=claims.get("name"))


def generate_verification_token() -> str:
    """Return a fresh URL-safe magic-link token."""
    return secrets.token_urlsafe(32)


def hash_verification_token(token: str) -> str:
    """Hash a magic-link token for storage."""
    return hashlib.sha256(token.encode("utf-8")).hexdigest()
