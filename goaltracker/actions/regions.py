"""Region actions."""

from __future__ import annotations

from typing import Any

from sqlalchemy.orm import Session

from goaltracker.core.actions import run_action
from goaltracker.core.authorization import require_identity
from goaltracker.core.results import ActionResult
from goaltracker.core.results import is_action_error
from goaltracker.core.security import SessionIdentity
from goaltracker.core.validation import validate_payload
from goaltracker.schemas.region import Region
from goaltracker.schemas.region import RegionCreate
from goaltracker.schemas.region import RegionRef
from goaltracker.schemas.region import RegionsForGoal
from goaltracker.schemas.region import RegionUpdate
from goaltracker.services.regions import create_region_service
from goaltracker.services.regions import delete_region_service
from goaltracker.services.regions import get_region_service
from goaltracker.services.regions import list_regions_service
from goaltracker.services.regions import update_region_service


def create_region_action(session: Session, identity: SessionIdentity | None, data: Any) -> ActionResult[Region]:
    validated = validate_payload(RegionCreate, data)
    if is_action_error(validated):
        return validated

    def _execute() -> Region:
        user_id = require_identity(identity)
        return Region.model_validate(create_region_service(session, user_id, validated))

    return run_action(
        "create_region_action",
        session,
        _execute,
        failure_message="Failed to create region. Please try again.",
    )


def update_region_action(session: Session, identity: SessionIdentity | None, data: Any) -> ActionResult[Region]:
    validated = validate_payload(RegionUpdate, data)
    if is_action_error(validated):
        return validated

    def _execute() -> Region:
        user_id = require_identity(identity)
        return Region.model_validate(update_region_service(session, user_id, validated))

    return run_action(
        "update_region_action",
        session,
        _execute,
        failure_message="Failed to update region. Please try again.",
    )


def delete_region_action(
    session: Session,
    identity: SessionIdentity | None,
    region_id: Any,
) -> ActionResult[dict[str, bool]]:
    validated = validate_payload(RegionRef, {"id": region_id})
    if is_action_error(validated):
        return validated

    def _execute() -> dict[str, bool]:
        user_id = require_identity(identity)
        delete_region_service(session, user_id, validated.id)
        return {"deleted": True}

    return run_action(
        "delete_region_action",
        session,
        _execute,
        failure_message="Failed to delete region. Please try again.",
    )


def list_regions_action(
    session: Session,
    identity: SessionIdentity | None,
    goal_id: Any,
) -> ActionResult[list[Region]]:
    validated = validate_payload(RegionsForGoal, {"goal_id": goal_id})
    if is_action_error(validated):
        return validated

    def _execute() -> list[Region]:
        user_id = require_identity(identity)
        regions = list_regions_service(session, user_id, validated.goal_id)
        return [Region.model_validate(region) for region in regions]

    return run_action(
        "list_regions_action",
        session,
        _execute,
        failure_message="Failed to fetch regions. Please try again.",
    )


def get_region_action(session: Session, identity: SessionIdentity | None, region_id: Any) -> ActionResult[Region]:
    validated = validate_payload(RegionRef, {"id": region_id})
    if is_action_error(validated):
        return validated

    def _execute() -> Region:
        user_id = require_identity(identity)
        return Region.model_validate(get_region_service(session, user_id, validated.id))

    return run_action(
        "get_region_action",
        session,
        _execute,
        failure_message="Failed to fetch region. Please try again.",
    )
