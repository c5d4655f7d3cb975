"""Profile, preference and locale API routes."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter
from fastapi import Body
from fastapi import Depends
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from goaltracker.actions.users import get_current_user_action
from goaltracker.actions.users import get_user_preferences_action
from goaltracker.actions.users import set_locale_action
from goaltracker.actions.users import update_user_name_action
from goaltracker.actions.users import update_user_preferences_action
from goaltracker.api.deps import get_app_settings
from goaltracker.api.deps import get_session_identity
from goaltracker.core.config import Settings
from goaltracker.core.results import ActionSuccess
from goaltracker.core.results import render_result
from goaltracker.core.security import SessionIdentity
from goaltracker.db.base import get_db_session

router = APIRouter(prefix="/api", tags=["user"])

LOCALE_COOKIE_NAME = "locale"
LOCALE_COOKIE_MAX_AGE_SECONDS = 60 * 60 * 24 * 365


@router.get("/user")
def get_user_endpoint(
    session: Session = Depends(get_db_session),
    identity: SessionIdentity | None = Depends(get_session_identity),
) -> JSONResponse:
    return render_result(get_current_user_action(session, identity))


@router.patch("/user")
def update_user_endpoint(
    payload: Any = Body(default=None),
    session: Session = Depends(get_db_session),
    identity: SessionIdentity | None = Depends(get_session_identity),
) -> JSONResponse:
    """Set or clear the caller's display name."""
    return render_result(update_user_name_action(session, identity, payload))


@router.get("/user/preferences")
def get_preferences_endpoint(
    session: Session = Depends(get_db_session),
    identity: SessionIdentity | None = Depends(get_session_identity),
) -> JSONResponse:
    """Return preferences, creating defaults on first access."""
    return render_result(get_user_preferences_action(session, identity))


@router.patch("/user/preferences")
def update_preferences_endpoint(
    payload: Any = Body(default=None),
    session: Session = Depends(get_db_session),
    identity: SessionIdentity | None = Depends(get_session_identity),
) -> JSONResponse:
    return render_result(update_user_preferences_action(session, identity, payload))


@router.put("/user/locale")
def set_locale_endpoint(
    payload: Any = Body(default=None),
    settings: Settings = Depends(get_app_settings),
) -> JSONResponse:
    """Remember the interface language in a long-lived cookie."""
    result = set_locale_action(payload)
    response = render_result(result)
    if isinstance(result, ActionSuccess):
        response.set_cookie(
            LOCALE_COOKIE_NAME,
            result.data["locale"],
            max_age=LOCALE_COOKIE_MAX_AGE_SECONDS,
            path="/",
            samesite="lax",
            secure=settings.cookie_secure,
        )
    return response
