"""Request-level session gate.

Every request outside the public allow-list must carry a valid session token.
Requests without one are redirected to the sign-in page before any route
handler runs. Signed-in users are kept out of the sign-in pages.
"""

from __future__ import annotations

from urllib.parse import urlencode

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.middleware.base import RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import RedirectResponse
from starlette.responses import Response
from starlette.types import ASGIApp

from goaltracker.core.config import Settings
from goaltracker.core.security import read_session_token

SIGN_IN_PATH = "/auth/signin"
VERIFY_REQUEST_PATH = "/auth/verify-request"
SIGN_IN_PAGES = frozenset({SIGN_IN_PATH, VERIFY_REQUEST_PATH})

PUBLIC_PREFIXES = ("/auth/", "/api/auth/", "/static/")
PUBLIC_PATHS = frozenset({"/auth", "/favicon.ico", "/robots.txt", "/health"})


def is_public_path(path: str) -> bool:
    """Return True for paths reachable without a session."""
    return path in PUBLIC_PATHS or path.startswith(PUBLIC_PREFIXES)


def sign_in_redirect_url(request: Request) -> str:
    callback = request.url.path
    if request.url.query:
        callback = f"{callback}?{request.url.query}"
    return f"{SIGN_IN_PATH}?{urlencode({'callbackUrl': callback})}"


class SessionGateMiddleware(BaseHTTPMiddleware):
    """Attach the caller's session to ``request.state`` and gate protected routes."""

    def __init__(self, app: ASGIApp, *, settings: Settings) -> None:
        super().__init__(app)
        self.settings = settings

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        token = request.cookies.get(self.settings.session_cookie_name)
        identity = read_session_token(token, secret=self.settings.secret_key)
        request.state.session = identity

        path = request.url.path
        if identity is not None and path.rstrip("/") in SIGN_IN_PAGES:
            return RedirectResponse(self.settings.landing_path, status_code=307)
        if identity is None and not is_public_path(path):
            return RedirectResponse(sign_in_redirect_url(request), status_code=307)
        return await call_next(request)
