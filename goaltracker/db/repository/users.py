"""Repository primitives for users, preferences and sign-in tokens."""

from __future__ import annotations

from datetime import datetime
from uuid import UUID

from sqlalchemy import delete
from sqlalchemy import select
from sqlalchemy.orm import Session

from goaltracker.db.models.user import DEFAULT_LANGUAGE
from goaltracker.db.models.user import DEFAULT_THEME
from goaltracker.db.models.user import User
from goaltracker.db.models.user import UserPreferences
from goaltracker.db.models.user import VerificationToken
from goaltracker.db.repository.goals import UNSET


def create_user(session: Session, *, email: str, name: str | None = None) -> User:
    """Create and return a user row."""
    user = User(email=email, name=name)
    session.add(user)
    session.flush()
    session.refresh(user)
    return user


def get_user(session: Session, user_id: UUID) -> User | None:
    """Fetch a user by id."""
    return session.get(User, user_id)


def get_user_by_email(session: Session, email: str) -> User | None:
    """Fetch a user by email address."""
    return session.scalars(select(User).where(User.email == email)).first()


def update_user(
    session: Session,
    user: User,
    *,
    name: str | None | object = UNSET,
    email_verified: datetime | None | object = UNSET,
) -> User:
    """Update mutable user fields."""
    if name is not UNSET:
        user.name = name
    if email_verified is not UNSET:
        user.email_verified = email_verified
    session.flush()
    session.refresh(user)
    return user


def get_preferences(session: Session, user_id: UUID) -> UserPreferences | None:
    """Fetch preferences by owning user id."""
    return session.scalars(select(UserPreferences).where(UserPreferences.user_id == user_id)).first()


def create_preferences(
    session: Session,
    *,
    user_id: UUID,
    language: str = DEFAULT_LANGUAGE,
    theme: str = DEFAULT_THEME,
) -> UserPreferences:
    """Create and return a preferences row."""
    preferences = UserPreferences(user_id=user_id, language=language, theme=theme)
    session.add(preferences)
    session.flush()
    session.refresh(preferences)
    return preferences


def update_preferences(
    session: Session,
    preferences: UserPreferences,
    *,
    language: str | object = UNSET,
    theme: str | object = UNSET,
) -> UserPreferences:
    """Update mutable preference fields."""
    if language is not UNSET:
        preferences.language = language
    if theme is not UNSET:
        preferences.theme = theme
    session.flush()
    session.refresh(preferences)
    return preferences


def replace_verification_token(
    session: Session,
    *,
    identifier: str,
    token_hash: str,
    expires_at: datetime,
) -> VerificationToken:
    """Store a sign-in token, dropping earlier ones for the same identifier."""
    session.execute(delete(VerificationToken).where(VerificationToken.identifier == identifier))
    token = VerificationToken(identifier=identifier, token_hash=token_hash, expires_at=expires_at)
    session.add(token)
    session.flush()
    return token


def get_verification_token(session: Session, token_hash: str) -> VerificationToken | None:
    """Fetch a stored sign-in token by hash."""
    return session.get(VerificationToken, token_hash)


def delete_verification_token(session: Session, token: VerificationToken) -> None:
    session.delete(token)
    session.flush()
