"""Profile, preference, locale and sign-in actions."""

from __future__ import annotations

from typing import Any

from sqlalchemy.orm import Session

from goaltracker.core.actions import run_action
from goaltracker.core.authorization import require_identity
from goaltracker.core.config import Settings
from goaltracker.core.mailer import Mailer
from goaltracker.core.results import ActionResult
from goaltracker.core.results import create_success
from goaltracker.core.results import is_action_error
from goaltracker.core.security import SessionIdentity
from goaltracker.core.validation import validate_payload
from goaltracker.schemas.user import LocaleUpdate
from goaltracker.schemas.user import SignInRequest
from goaltracker.schemas.user import User
from goaltracker.schemas.user import UserNameUpdate
from goaltracker.schemas.user import UserPreferences
from goaltracker.schemas.user import UserPreferencesUpdate
from goaltracker.services.auth import issue_session_for
from goaltracker.services.auth import request_magic_link
from goaltracker.services.auth import verify_magic_link
from goaltracker.services.users import get_preferences_service
from goaltracker.services.users import get_user_service
from goaltracker.services.users import update_preferences_service
from goaltracker.services.users import update_user_name_service


def get_current_user_action(session: Session, identity: SessionIdentity | None) -> ActionResult[User]:
    def _execute() -> User:
        user_id = require_identity(identity, message="You must be logged in to view your profile")
        return User.model_validate(get_user_service(session, user_id))

    return run_action(
        "get_current_user_action",
        session,
        _execute,
        failure_message="Failed to load profile. Please try again.",
    )


def update_user_name_action(session: Session, identity: SessionIdentity | None, data: Any) -> ActionResult[User]:
    validated = validate_payload(UserNameUpdate, data)
    if is_action_error(validated):
        return validated

    def _execute() -> User:
        user_id = require_identity(identity, message="You must be logged in to update your name")
        return User.model_validate(update_user_name_service(session, user_id, validated.name))

    return run_action(
        "update_user_name_action",
        session,
        _execute,
        failure_message="Failed to update name. Please try again.",
    )


def get_user_preferences_action(
    session: Session,
    identity: SessionIdentity | None,
) -> ActionResult[UserPreferences]:
    def _execute() -> UserPreferences:
        user_id = require_identity(identity, message="You must be logged in to view preferences")
        return UserPreferences.model_validate(get_preferences_service(session, user_id))

    return run_action(
        "get_user_preferences_action",
        session,
        _execute,
        failure_message="Failed to load preferences",
    )


def update_user_preferences_action(
    session: Session,
    identity: SessionIdentity | None,
    data: Any,
) -> ActionResult[UserPreferences]:
    validated = validate_payload(UserPreferencesUpdate, data)
    if is_action_error(validated):
        return validated

    def _execute() -> UserPreferences:
        user_id = require_identity(identity, message="You must be logged in to update preferences")
        return UserPreferences.model_validate(update_preferences_service(session, user_id, validated))

    return run_action(
        "update_user_preferences_action",
        session,
        _execute,
        failure_message="Failed to update preferences",
    )


def set_locale_action(data: Any) -> ActionResult[dict[str, str]]:
    """Validate a locale choice; the HTTP layer stores it in a cookie."""
    validated = validate_payload(LocaleUpdate, data)
    if is_action_error(validated):
        return validated
    return create_success({"locale": validated.locale})


def request_sign_in_action(
    session: Session,
    data: Any,
    *,
    settings: Settings,
    mailer: Mailer,
) -> ActionResult[dict[str, str]]:
    validated = validate_payload(SignInRequest, data)
    if is_action_error(validated):
        return validated

    def _execute() -> dict[str, str]:
        request_magic_link(
            session,
            email=validated.email,
            settings=settings,
            mailer=mailer,
            callback_url=validated.callback_url,
        )
        return {"email": validated.email}

    return run_action(
        "request_sign_in_action",
        session,
        _execute,
        failure_message="Failed to send sign-in link. Please try again.",
    )


def complete_sign_in_action(
    session: Session,
    *,
    email: str | None,
    token: str | None,
    settings: Settings,
) -> ActionResult[dict[str, str]]:
    """Redeem a magic link; the data carries the session token to set as a cookie."""

    def _execute() -> dict[str, str]:
        user = verify_magic_link(session, email=(email or "").strip().lower(), token=token or "")
        return {"user_id": str(user.id), "session_token": issue_session_for(user, settings)}

    return run_action(
        "complete_sign_in_action",
        session,
        _execute,
        failure_message="Failed to sign in. Please try again.",
    )
