"""FastAPI application entrypoint for the goal tracker."""

from __future__ import annotations

import logging

from fastapi import FastAPI

from goaltracker.api.auth import router as auth_router
from goaltracker.api.goals import router as goals_router
from goaltracker.api.regions import router as regions_router
from goaltracker.api.tasks import router as tasks_router
from goaltracker.api.users import router as users_router
from goaltracker.api.weekly_tasks import router as weekly_tasks_router
from goaltracker.core.config import Settings
from goaltracker.core.config import get_settings
from goaltracker.core.errors import register_error_handlers
from goaltracker.core.mailer import Mailer
from goaltracker.core.mailer import build_mailer
from goaltracker.core.middleware import SessionGateMiddleware
from goaltracker.db import models as _models  # noqa: F401

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None, *, mailer: Mailer | None = None) -> FastAPI:
    """Build the application with its session gate, error handlers and routers."""
    settings = settings or get_settings()
    logging.getLogger("goaltracker").setLevel(settings.log_level)
    if not settings.secret_key:
        logger.warning("No secret key configured; sign-in will not be able to issue sessions")
    logger.info("Starting goal tracker with settings=%s", settings.safe_for_logging())

    app = FastAPI(title="Goal Tracker")
    app.state.settings = settings
    app.state.mailer = mailer or build_mailer(settings)

    register_error_handlers(app)
    app.add_middleware(SessionGateMiddleware, settings=settings)
    app.include_router(auth_router)
    app.include_router(goals_router)
    app.include_router(regions_router)
    app.include_router(tasks_router)
    app.include_router(weekly_tasks_router)
    app.include_router(users_router)

    @app.get("/health")
    def health() -> dict[str, str]:
        """Health check endpoint for service readiness."""
        return {"status": "ok"}

    return app


app = create_app()
