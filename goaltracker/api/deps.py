"""Request-scoped dependencies shared by the routers."""

from __future__ import annotations

from fastapi import Request

from goaltracker.core.config import Settings
from goaltracker.core.mailer import Mailer
from goaltracker.core.security import SessionIdentity


def get_session_identity(request: Request) -> SessionIdentity | None:
    """Return the identity the session gate attached to this request."""
    return getattr(request.state, "session", None)


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_mailer(request: Request) -> Mailer:
    return request.app.state.mailer
