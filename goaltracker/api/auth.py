"""Magic-link sign-in routes and the two public sign-in pages."""

from __future__ import annotations

from html import escape
import json
import logging
from typing import Any
from urllib.parse import urlencode

from fastapi import APIRouter
from fastapi import Depends
from fastapi import Request
from fastapi import Response
from fastapi.responses import HTMLResponse
from fastapi.responses import JSONResponse
from fastapi.responses import RedirectResponse
from sqlalchemy.orm import Session

from goaltracker.actions.users import complete_sign_in_action
from goaltracker.actions.users import request_sign_in_action
from goaltracker.api.deps import get_app_settings
from goaltracker.api.deps import get_mailer
from goaltracker.api.deps import get_session_identity
from goaltracker.core.config import Settings
from goaltracker.core.mailer import Mailer
from goaltracker.core.middleware import SIGN_IN_PATH
from goaltracker.core.middleware import VERIFY_REQUEST_PATH
from goaltracker.core.results import ActionError
from goaltracker.core.results import render_result
from goaltracker.core.security import SessionIdentity
from goaltracker.db.base import get_db_session
from goaltracker.services.auth import safe_callback_url

logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"])

_SIGN_IN_PAGE = """<!doctype html>
<html lang="en">
<head><meta charset="utf-8"><title>Sign in</title></head>
<body>
<h1>Sign in</h1>
{error}
<form method="post" action="/api/auth/signin/email">
<label for="email">Email</label>
<input id="email" name="email" type="email" required>
<input type="hidden" name="callbackUrl" value="{callback_url}">
<button type="submit">Send sign-in link</button>
</form>
</body>
</html>
"""

_VERIFY_REQUEST_PAGE = """<!doctype html>
<html lang="en">
<head><meta charset="utf-8"><title>Check your email</title></head>
<body>
<h1>Check your email</h1>
<p>A sign-in link has been sent to your email address.</p>
</body>
</html>
"""


async def _read_submission(request: Request) -> Any:
    """Read a JSON body or a submitted form."""
    if _wants_json(request):
        body = await request.body()
        try:
            return json.loads(body or b"null")
        except ValueError:
            return None
    form = await request.form()
    return {key: value for key, value in form.items() if isinstance(value, str)}


def _wants_json(request: Request) -> bool:
    return request.headers.get("content-type", "").startswith("application/json")


@router.get("/auth/signin", response_class=HTMLResponse)
def sign_in_page(callbackUrl: str | None = None, error: str | None = None) -> HTMLResponse:
    """Render the email sign-in form."""
    message = '<p role="alert">That sign-in link is invalid or has expired.</p>' if error else ""
    return HTMLResponse(_SIGN_IN_PAGE.format(error=message, callback_url=escape(callbackUrl or "")))


@router.get("/auth/verify-request", response_class=HTMLResponse)
def verify_request_page() -> HTMLResponse:
    return HTMLResponse(_VERIFY_REQUEST_PAGE)


@router.post("/api/auth/signin/email")
async def request_sign_in_endpoint(
    request: Request,
    session: Session = Depends(get_db_session),
    settings: Settings = Depends(get_app_settings),
    mailer: Mailer = Depends(get_mailer),
) -> Response:
    """Email a magic sign-in link.

    JSON callers receive the action envelope; form submissions are redirected
    to the check-your-email page.
    """
    data = await _read_submission(request)
    result = request_sign_in_action(session, data, settings=settings, mailer=mailer)
    if _wants_json(request) or isinstance(result, ActionError):
        return render_result(result)
    return RedirectResponse(VERIFY_REQUEST_PATH, status_code=303)


@router.get("/api/auth/callback/email")
def sign_in_callback_endpoint(
    token: str | None = None,
    email: str | None = None,
    callbackUrl: str | None = None,
    session: Session = Depends(get_db_session),
    settings: Settings = Depends(get_app_settings),
) -> Response:
    """Redeem a magic link, set the session cookie and continue to the app."""
    result = complete_sign_in_action(session, email=email, token=token, settings=settings)
    if isinstance(result, ActionError):
        logger.info("Sign-in callback rejected with %s", result.code.value)
        return RedirectResponse(f"{SIGN_IN_PATH}?{urlencode({'error': 'Verification'})}", status_code=302)

    response = RedirectResponse(safe_callback_url(callbackUrl, settings), status_code=302)
    response.set_cookie(
        settings.session_cookie_name,
        result.data["session_token"],
        max_age=settings.session_max_age_seconds,
        path="/",
        httponly=True,
        samesite="lax",
        secure=settings.cookie_secure,
    )
    return response


@router.post("/api/auth/signout")
def sign_out_endpoint(settings: Settings = Depends(get_app_settings)) -> Response:
    response = RedirectResponse(SIGN_IN_PATH, status_code=303)
    response.delete_cookie(settings.session_cookie_name, path="/")
    return response


@router.get("/api/auth/session")
def session_endpoint(identity: SessionIdentity | None = Depends(get_session_identity)) -> JSONResponse:
    """Describe the current session; an empty object when signed out."""
    if identity is None:
        return JSONResponse({})
    return JSONResponse(
        {"user": {"id": str(identity.user_id), "email": identity.email, "name": identity.name}}
    )
