"""Goal API routes."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter
from fastapi import Body
from fastapi import Depends
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from goaltracker.actions.goals import create_goal_action
from goaltracker.actions.goals import delete_goal_action
from goaltracker.actions.goals import get_goal_action
from goaltracker.actions.goals import list_goals_action
from goaltracker.actions.goals import update_goal_action
from goaltracker.actions.regions import list_regions_action
from goaltracker.api.deps import get_session_identity
from goaltracker.core.results import render_result
from goaltracker.core.security import SessionIdentity
from goaltracker.db.base import get_db_session

router = APIRouter(prefix="/api", tags=["goals"])


@router.get("/goals")
def list_goals_endpoint(
    session: Session = Depends(get_db_session),
    identity: SessionIdentity | None = Depends(get_session_identity),
) -> JSONResponse:
    """List the caller's goals, newest first."""
    return render_result(list_goals_action(session, identity))


@router.post("/goals")
def create_goal_endpoint(
    payload: Any = Body(default=None),
    session: Session = Depends(get_db_session),
    identity: SessionIdentity | None = Depends(get_session_identity),
) -> JSONResponse:
    """Create a goal."""
    return render_result(create_goal_action(session, identity, payload), success_status=201)


@router.get("/goals/{goal_id}")
def get_goal_endpoint(
    goal_id: str,
    session: Session = Depends(get_db_session),
    identity: SessionIdentity | None = Depends(get_session_identity),
) -> JSONResponse:
    return render_result(get_goal_action(session, identity, goal_id))


@router.put("/goals/{goal_id}")
def update_goal_endpoint(
    goal_id: str,
    payload: Any = Body(default=None),
    session: Session = Depends(get_db_session),
    identity: SessionIdentity | None = Depends(get_session_identity),
) -> JSONResponse:
    """Replace a goal's title and description."""
    data = {**payload, "id": goal_id} if isinstance(payload, dict) else payload
    return render_result(update_goal_action(session, identity, data))


@router.delete("/goals/{goal_id}")
def delete_goal_endpoint(
    goal_id: str,
    session: Session = Depends(get_db_session),
    identity: SessionIdentity | None = Depends(get_session_identity),
) -> JSONResponse:
    """Delete a goal with everything under it."""
    return render_result(delete_goal_action(session, identity, goal_id))


@router.get("/goals/{goal_id}/regions")
def list_goal_regions_endpoint(
    goal_id: str,
    session: Session = Depends(get_db_session),
    identity: SessionIdentity | None = Depends(get_session_identity),
) -> JSONResponse:
    return render_result(list_regions_action(session, identity, goal_id))
