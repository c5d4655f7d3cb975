"""Weekly-task API routes."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter
from fastapi import Body
from fastapi import Depends
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from goaltracker.actions.weekly_tasks import create_weekly_task_action
from goaltracker.actions.weekly_tasks import delete_weekly_task_action
from goaltracker.actions.weekly_tasks import get_weekly_task_action
from goaltracker.actions.weekly_tasks import list_weekly_tasks_action
from goaltracker.actions.weekly_tasks import update_weekly_task_action
from goaltracker.api.deps import get_session_identity
from goaltracker.core.results import render_result
from goaltracker.core.security import SessionIdentity
from goaltracker.db.base import get_db_session

router = APIRouter(prefix="/api", tags=["weekly-tasks"])


@router.get("/weekly-tasks")
def list_weekly_tasks_endpoint(
    task_id: str | None = None,
    week_start_date: str | None = None,
    session: Session = Depends(get_db_session),
    identity: SessionIdentity | None = Depends(get_session_identity),
) -> JSONResponse:
    """List weekly tasks for one task, optionally for a single week."""
    return render_result(list_weekly_tasks_action(session, identity, task_id, week_start_date))


@router.post("/weekly-tasks")
def create_weekly_task_endpoint(
    payload: Any = Body(default=None),
    session: Session = Depends(get_db_session),
    identity: SessionIdentity | None = Depends(get_session_identity),
) -> JSONResponse:
    return render_result(create_weekly_task_action(session, identity, payload), success_status=201)


@router.get("/weekly-tasks/{weekly_task_id}")
def get_weekly_task_endpoint(
    weekly_task_id: str,
    session: Session = Depends(get_db_session),
    identity: SessionIdentity | None = Depends(get_session_identity),
) -> JSONResponse:
    return render_result(get_weekly_task_action(session, identity, weekly_task_id))


@router.put("/weekly-tasks/{weekly_task_id}")
def update_weekly_task_endpoint(
    weekly_task_id: str,
    payload: Any = Body(default=None),
    session: Session = Depends(get_db_session),
    identity: SessionIdentity | None = Depends(get_session_identity),
) -> JSONResponse:
    data = {**payload, "id": weekly_task_id} if isinstance(payload, dict) else payload
    return render_result(update_weekly_task_action(session, identity, data))


@router.delete("/weekly-tasks/{weekly_task_id}")
def delete_weekly_task_endpoint(
    weekly_task_id: str,
    session: Session = Depends(get_db_session),
    identity: SessionIdentity | None = Depends(get_session_identity),
) -> JSONResponse:
    return render_result(delete_weekly_task_action(session, identity, weekly_task_id))
