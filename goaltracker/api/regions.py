"""Region API routes."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter
from fastapi import Body
from fastapi import Depends
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from goaltracker.actions.regions import create_region_action
from goaltracker.actions.regions import delete_region_action
from goaltracker.actions.regions import get_region_action
from goaltracker.actions.regions import update_region_action
from goaltracker.api.deps import get_session_identity
from goaltracker.core.results import render_result
from goaltracker.core.security import SessionIdentity
from goaltracker.db.base import get_db_session

router = APIRouter(prefix="/api", tags=["regions"])


@router.post("/regions")
def create_region_endpoint(
    payload: Any = Body(default=None),
    session: Session = Depends(get_db_session),
    identity: SessionIdentity | None = Depends(get_session_identity),
) -> JSONResponse:
    """Create a region under one of the caller's goals."""
    return render_result(create_region_action(session, identity, payload), success_status=201)


@router.get("/regions/{region_id}")
def get_region_endpoint(
    region_id: str,
    session: Session = Depends(get_db_session),
    identity: SessionIdentity | None = Depends(get_session_identity),
) -> JSONResponse:
    return render_result(get_region_action(session, identity, region_id))


@router.put("/regions/{region_id}")
def update_region_endpoint(
    region_id: str,
    payload: Any = Body(default=None),
    session: Session = Depends(get_db_session),
    identity: SessionIdentity | None = Depends(get_session_identity),
) -> JSONResponse:
    data = {**payload, "id": region_id} if isinstance(payload, dict) else payload
    return render_result(update_region_action(session, identity, data))


@router.delete("/regions/{region_id}")
def delete_region_endpoint(
    region_id: str,
    session: Session = Depends(get_db_session),
    identity: SessionIdentity | None = Depends(get_session_identity),
) -> JSONResponse:
    return render_result(delete_region_action(session, identity, region_id))
