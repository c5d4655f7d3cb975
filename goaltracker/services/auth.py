"""Magic-link sign-in: issuing links and redeeming them for a session."""

from __future__ import annotations

from datetime import datetime
from datetime import timedelta
from datetime import timezone
import logging
from urllib.parse import urlencode
from urllib.parse import urlsplit

from sqlalchemy.orm import Session

from goaltracker.core.config import Settings
from goaltracker.core.errors import UnauthorizedError
from goaltracker.core.mailer import Mailer
from goaltracker.core.security import SessionIdentity
from goaltracker.core.security import generate_verification_token
from goaltracker.core.security import hash_verification_token
from goaltracker.core.security import issue_session_token
from goaltracker.db.models.user import User
from goaltracker.db.repository.users import create_user
from goaltracker.db.repository.users import delete_verification_token
from goaltracker.db.repository.users import get_user_by_email
from goaltracker.db.repository.users import get_verification_token
from goaltracker.db.repository.users import replace_verification_token
from goaltracker.db.repository.users import update_user

logger = logging.getLogger(__name__)

CALLBACK_PATH = "/api/auth/callback/email"
INVALID_LINK_MESSAGE = "Sign-in link is invalid or has expired"


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def safe_callback_url(callback_url: str | None, settings: Settings) -> str:
    """Return ``callback_url`` when it stays on this site, else the landing path."""
    if not callback_url:
        return settings.landing_path
    if callback_url.startswith("/") and not callback_url.startswith("//"):
        return callback_url
    base = urlsplit(settings.base_url)
    target = urlsplit(callback_url)
    if (target.scheme, target.netloc) == (base.scheme, base.netloc):
        return callback_url
    return settings.landing_path


def request_magic_link(
    session: Session,
    *,
    email: str,
    settings: Settings,
    mailer: Mailer,
    callback_url: str | None = None,
    now: datetime | None = None,
) -> None:
    """Create the user if needed, store a fresh token and deliver the link."""
    issued_at = now or datetime.now(timezone.utc)
    if get_user_by_email(session, email) is None:
        create_user(session, email=email)
        logger.info("Created user for %s on first sign-in request", email)

    token = generate_verification_token()
    replace_verification_token(
        session,
        identifier=email,
        token_hash=hash_verification_token(token),
        expires_at=issued_at + timedelta(seconds=settings.magic_link_max_age_seconds),
    )
    session.commit()

    query = {"token": token, "email": email}
    if callback_url:
        query["callbackUrl"] = safe_callback_url(callback_url, settings)
    mailer.send_magic_link(email=email, url=f"{settings.base_url}{CALLBACK_PATH}?{urlencode(query)}")


def verify_magic_link(
    session: Session,
    *,
    email: str,
    token: str,
    now: datetime | None = None,
) -> User:
    """Consume a sign-in token and return the verified user.

    Tokens are single use: a matching token is deleted whether or not it has
    expired.
    """
    checked_at = now or datetime.now(timezone.utc)
    stored = get_verification_token(session, hash_verification_token(token))
    if stored is None or stored.identifier != email:
        logger.warning("Rejected unknown sign-in token for %s", email)
        raise UnauthorizedError(INVALID_LINK_MESSAGE)

    expired = _as_utc(stored.expires_at) <= checked_at
    delete_verification_token(session, stored)
    if expired:
        session.commit()
        logger.warning("Rejected expired sign-in token for %s", email)
        raise UnauthorizedError(INVALID_LINK_MESSAGE)

    user = get_user_by_email(session, email)
    if user is None:
        user = create_user(session, email=email)
    if user.email_verified is None:
        user = update_user(session, user, email_verified=checked_at)
    session.commit()
    logger.info("Signed in user %s", user.id)
    return user


def issue_session_for(user: User, settings: Settings) -> str:
    """Encode a session token for a verified user."""
    identity = SessionIdentity(user_id=user.id, email=user.email, name=user.name)
    return issue_session_token(
        identity,
        secret=settings.secret_key,
        max_age_seconds=settings.session_max_age_seconds,
    )
