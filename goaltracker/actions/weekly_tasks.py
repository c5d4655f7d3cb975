"""Weekly-task actions."""

from __future__ import annotations

from typing import Any

from sqlalchemy.orm import Session

from goaltracker.core.actions import run_action
from goaltracker.core.authorization import require_identity
from goaltracker.core.results import ActionResult
from goaltracker.core.results import is_action_error
from goaltracker.core.security import SessionIdentity
from goaltracker.core.validation import validate_payload
from goaltracker.schemas.weekly_task import WeeklyTask
from goaltracker.schemas.weekly_task import WeeklyTaskCreate
from goaltracker.schemas.weekly_task import WeeklyTaskFilter
from goaltracker.schemas.weekly_task import WeeklyTaskRef
from goaltracker.schemas.weekly_task import WeeklyTaskUpdate
from goaltracker.services.weekly_tasks import create_weekly_task_service
from goaltracker.services.weekly_tasks import delete_weekly_task_service
from goaltracker.services.weekly_tasks import get_weekly_task_service
from goaltracker.services.weekly_tasks import list_weekly_tasks_service
from goaltracker.services.weekly_tasks import update_weekly_task_service


def create_weekly_task_action(
    session: Session,
    identity: SessionIdentity | None,
    data: Any,
) -> ActionResult[WeeklyTask]:
    validated = validate_payload(WeeklyTaskCreate, data)
    if is_action_error(validated):
        return validated

    def _execute() -> WeeklyTask:
        user_id = require_identity(identity)
        return WeeklyTask.model_validate(create_weekly_task_service(session, user_id, validated))

    return run_action(
        "create_weekly_task_action",
        session,
        _execute,
        failure_message="Failed to create weekly task. Please try again.",
    )


def update_weekly_task_action(
    session: Session,
    identity: SessionIdentity | None,
    data: Any,
) -> ActionResult[WeeklyTask]:
    validated = validate_payload(WeeklyTaskUpdate, data)
    if is_action_error(validated):
        return validated

    def _execute() -> WeeklyTask:
        user_id = require_identity(identity)
        return WeeklyTask.model_validate(update_weekly_task_service(session, user_id, validated))

    return run_action(
        "update_weekly_task_action",
        session,
        _execute,
        failure_message="Failed to update weekly task. Please try again.",
    )


def delete_weekly_task_action(
    session: Session,
    identity: SessionIdentity | None,
    weekly_task_id: Any,
) -> ActionResult[dict[str, bool]]:
    validated = validate_payload(WeeklyTaskRef, {"id": weekly_task_id})
    if is_action_error(validated):
        return validated

    def _execute() -> dict[str, bool]:
        user_id = require_identity(identity)
        delete_weekly_task_service(session, user_id, validated.id)
        return {"deleted": True}

    return run_action(
        "delete_weekly_task_action",
        session,
        _execute,
        failure_message="Failed to delete weekly task. Please try again.",
    )


def list_weekly_tasks_action(
    session: Session,
    identity: SessionIdentity | None,
    task_id: Any,
    week_start_date: Any = None,
) -> ActionResult[list[WeeklyTask]]:
    validated = validate_payload(
        WeeklyTaskFilter,
        {"task_id": task_id, "week_start_date": week_start_date},
    )
    if is_action_error(validated):
        return validated

    def _execute() -> list[WeeklyTask]:
        user_id = require_identity(identity)
        weekly_tasks = list_weekly_tasks_service(
            session,
            user_id,
            validated.task_id,
            validated.week_start_date,
        )
        return [WeeklyTask.model_validate(weekly_task) for weekly_task in weekly_tasks]

    return run_action(
        "list_weekly_tasks_action",
        session,
        _execute,
        failure_message="Failed to fetch weekly tasks. Please try again.",
    )


def get_weekly_task_action(
    session: Session,
    identity: SessionIdentity | None,
    weekly_task_id: Any,
) -> ActionResult[WeeklyTask]:
    validated = validate_payload(WeeklyTaskRef, {"id": weekly_task_id})
    if is_action_error(validated):
        return validated

    def _execute() -> WeeklyTask:
        user_id = require_identity(identity)
        return WeeklyTask.model_validate(get_weekly_task_service(session, user_id, validated.id))

    return run_action(
        "get_weekly_task_action",
        session,
        _execute,
        failure_message="Failed to fetch weekly task. Please try again.",
    )
