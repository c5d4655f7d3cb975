"""Task actions."""

from __future__ import annotations

from typing import Any

from sqlalchemy.orm import Session

from goaltracker.core.actions import run_action
from goaltracker.core.authorization import require_identity
from goaltracker.core.results import ActionResult
from goaltracker.core.results import is_action_error
from goaltracker.core.security import SessionIdentity
from goaltracker.core.validation import validate_payload
from goaltracker.schemas.task import Task
from goaltracker.schemas.task import TaskCreate
from goaltracker.schemas.task import TaskFilter
from goaltracker.schemas.task import TaskRef
from goaltracker.schemas.task import TaskUpdate
from goaltracker.services.tasks import create_task_service
from goaltracker.services.tasks import delete_task_service
from goaltracker.services.tasks import get_task_service
from goaltracker.services.tasks import list_tasks_service
from goaltracker.services.tasks import update_task_service


def create_task_action(session: Session, identity: SessionIdentity | None, data: Any) -> ActionResult[Task]:
    validated = validate_payload(TaskCreate, data)
    if is_action_error(validated):
        return validated

    def _execute() -> Task:
        user_id = require_identity(identity)
        return Task.model_validate(create_task_service(session, user_id, validated))

    return run_action(
        "create_task_action",
        session,
        _execute,
        failure_message="Failed to create task. Please try again.",
    )


def update_task_action(session: Session, identity: SessionIdentity | None, data: Any) -> ActionResult[Task]:
    validated = validate_payload(TaskUpdate, data)
    if is_action_error(validated):
        return validated

    def _execute() -> Task:
        user_id = require_identity(identity)
        return Task.model_validate(update_task_service(session, user_id, validated))

    return run_action(
        "update_task_action",
        session,
        _execute,
        failure_message="Failed to update task. Please try again.",
    )


def delete_task_action(
    session: Session,
    identity: SessionIdentity | None,
    task_id: Any,
) -> ActionResult[dict[str, bool]]:
    validated = validate_payload(TaskRef, {"id": task_id})
    if is_action_error(validated):
        return validated

    def _execute() -> dict[str, bool]:
        user_id = require_identity(identity)
        delete_task_service(session, user_id, validated.id)
        return {"deleted": True}

    return run_action(
        "delete_task_action",
        session,
        _execute,
        failure_message="Failed to delete task. Please try again.",
    )


def list_tasks_action(
    session: Session,
    identity: SessionIdentity | None,
    region_id: Any = None,
) -> ActionResult[list[Task]]:
    """List the caller's tasks; restricted to one region when ``region_id`` is given."""
    validated = validate_payload(TaskFilter, {"region_id": region_id})
    if is_action_error(validated):
        return validated

    def _execute() -> list[Task]:
        user_id = require_identity(identity)
        tasks = list_tasks_service(session, user_id, validated.region_id)
        return [Task.model_validate(task) for task in tasks]

    return run_action(
        "list_tasks_action",
        session,
        _execute,
        failure_message="Failed to fetch tasks. Please try again.",
    )


def get_task_action(session: Session, identity: SessionIdentity | None, task_id: Any) -> ActionResult[Task]:
    validated = validate_payload(TaskRef, {"id": task_id})
    if is_action_error(validated):
        return validated

    def _execute() -> Task:
        user_id = require_identity(identity)
        return Task.model_validate(get_task_service(session, user_id, validated.id))

    return run_action(
        "get_task_action",
        session,
        _execute,
        failure_message="Failed to fetch task. Please try again.",
    )
