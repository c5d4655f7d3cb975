"""Service helpers for the signed-in user's profile and preferences."""

from __future__ import annotations

from uuid import UUID

from sqlalchemy.orm import Session

from goaltracker.core.errors import NotFoundError
from goaltracker.db.models.user import User
from goaltracker.db.models.user import UserPreferences
from goaltracker.db.repository.goals import UNSET
from goaltracker.db.repository.users import create_preferences
from goaltracker.db.repository.users import get_preferences
from goaltracker.db.repository.users import get_user
from goaltracker.db.repository.users import update_preferences
from goaltracker.db.repository.users import update_user
from goaltracker.schemas.user import UserPreferencesUpdate

USER_NOT_FOUND = "User not found"


def get_user_service(session: Session, user_id: UUID) -> User:
    user = get_user(session, user_id)
    if user is None:
        raise NotFoundError(USER_NOT_FOUND)
    return user


def update_user_name_service(session: Session, user_id: UUID, name: str | None) -> User:
    """Set or clear the caller's display name."""
    user = get_user_service(session, user_id)
    user = update_user(session, user, name=name)
    session.commit()
    return user


def get_preferences_service(session: Session, user_id: UUID) -> UserPreferences:
    """Return the caller's preferences, creating the defaults on first use."""
    get_user_service(session, user_id)
    preferences = get_preferences(session, user_id)
    if preferences is None:
        preferences = create_preferences(session, user_id=user_id)
        session.commit()
    return preferences


def update_preferences_service(
    session: Session,
    user_id: UUID,
    payload: UserPreferencesUpdate,
) -> UserPreferences:
    preferences = get_preferences_service(session, user_id)
    preferences = update_preferences(
        session,
        preferences,
        language=payload.language if payload.language is not None else UNSET,
        theme=payload.theme if payload.theme is not None else UNSET,
    )
    session.commit()
    return preferences
