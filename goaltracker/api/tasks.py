"""Task API routes."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter
from fastapi import Body
from fastapi import Depends
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from goaltracker.actions.tasks import create_task_action
from goaltracker.actions.tasks import delete_task_action
from goaltracker.actions.tasks import get_task_action
from goaltracker.actions.tasks import list_tasks_action
from goaltracker.actions.tasks import update_task_action
from goaltracker.api.deps import get_session_identity
from goaltracker.core.results import render_result
from goaltracker.core.security import SessionIdentity
from goaltracker.db.base import get_db_session

router = APIRouter(prefix="/api", tags=["tasks"])


@router.get("/tasks")
def list_tasks_endpoint(
    region_id: str | None = None,
    session: Session = Depends(get_db_session),
    identity: SessionIdentity | None = Depends(get_session_identity),
) -> JSONResponse:
    """List the caller's tasks with optional region filter."""
    return render_result(list_tasks_action(session, identity, region_id))


@router.post("/tasks")
def create_task_endpoint(
    payload: Any = Body(default=None),
    session: Session = Depends(get_db_session),
    identity: SessionIdentity | None = Depends(get_session_identity),
) -> JSONResponse:
    return render_result(create_task_action(session, identity, payload), success_status=201)


@router.get("/tasks/{task_id}")
def get_task_endpoint(
    task_id: str,
    session: Session = Depends(get_db_session),
    identity: SessionIdentity | None = Depends(get_session_identity),
) -> JSONResponse:
    return render_result(get_task_action(session, identity, task_id))


@router.put("/tasks/{task_id}")
def update_task_endpoint(
    task_id: str,
    payload: Any = Body(default=None),
    session: Session = Depends(get_db_session),
    identity: SessionIdentity | None = Depends(get_session_identity),
) -> JSONResponse:
    data = {**payload, "id": task_id} if isinstance(payload, dict) else payload
    return render_result(update_task_action(session, identity, data))


@router.delete("/tasks/{task_id}")
def delete_task_endpoint(
    task_id: str,
    session: Session = Depends(get_db_session),
    identity: SessionIdentity | None = Depends(get_session_identity),
) -> JSONResponse:
    return render_result(delete_task_action(session, identity, task_id))
