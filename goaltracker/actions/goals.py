"""Goal actions: sanitize, validate, authorize, execute, return a result."""

from __future__ import annotations

from typing import Any

from sqlalchemy.orm import Session

from goaltracker.core.actions import run_action
from goaltracker.core.authorization import require_identity
from goaltracker.core.results import ActionResult
from goaltracker.core.results import is_action_error
from goaltracker.core.security import SessionIdentity
from goaltracker.core.validation import validate_payload
from goaltracker.schemas.goal import Goal
from goaltracker.schemas.goal import GoalCreate
from goaltracker.schemas.goal import GoalRef
from goaltracker.schemas.goal import GoalUpdate
from goaltracker.services.goals import create_goal_service
from goaltracker.services.goals import delete_goal_service
from goaltracker.services.goals import get_goal_service
from goaltracker.services.goals import list_goals_service
from goaltracker.services.goals import update_goal_service


def create_goal_action(session: Session, identity: SessionIdentity | None, data: Any) -> ActionResult[Goal]:
    validated = validate_payload(GoalCreate, data)
    if is_action_error(validated):
        return validated

    def _execute() -> Goal:
        user_id = require_identity(identity)
        return Goal.model_validate(create_goal_service(session, user_id, validated))

    return run_action(
        "create_goal_action",
        session,
        _execute,
        failure_message="Failed to create goal. Please try again.",
    )


def update_goal_action(session: Session, identity: SessionIdentity | None, data: Any) -> ActionResult[Goal]:
    validated = validate_payload(GoalUpdate, data)
    if is_action_error(validated):
        return validated

    def _execute() -> Goal:
        user_id = require_identity(identity)
        return Goal.model_validate(update_goal_service(session, user_id, validated))

    return run_action(
        "update_goal_action",
        session,
        _execute,
        failure_message="Failed to update goal. Please try again.",
    )


def delete_goal_action(
    session: Session,
    identity: SessionIdentity | None,
    goal_id: Any,
) -> ActionResult[dict[str, bool]]:
    validated = validate_payload(GoalRef, {"id": goal_id})
    if is_action_error(validated):
        return validated

    def _execute() -> dict[str, bool]:
        user_id = require_identity(identity)
        delete_goal_service(session, user_id, validated.id)
        return {"deleted": True}

    return run_action(
        "delete_goal_action",
        session,
        _execute,
        failure_message="Failed to delete goal. Please try again.",
    )


def list_goals_action(session: Session, identity: SessionIdentity | None) -> ActionResult[list[Goal]]:
    def _execute() -> list[Goal]:
        user_id = require_identity(identity)
        return [Goal.model_validate(goal) for goal in list_goals_service(session, user_id)]

    return run_action(
        "list_goals_action",
        session,
        _execute,
        failure_message="Failed to fetch goals. Please try again.",
    )


def get_goal_action(session: Session, identity: SessionIdentity | None, goal_id: Any) -> ActionResult[Goal]:
    validated = validate_payload(GoalRef, {"id": goal_id})
    if is_action_error(validated):
        return validated

    def _execute() -> Goal:
        user_id = require_identity(identity)
        return Goal.model_validate(get_goal_service(session, user_id, validated.id))

    return run_action(
        "get_goal_action",
        session,
        _execute,
        failure_message="Failed to fetch goal. Please try again.",
    )
