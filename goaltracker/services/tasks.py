"""Service helpers for task operations."""

from __future__ import annotations

from uuid import UUID

from sqlalchemy.orm import Session

from goaltracker.core.authorization import ensure_owned
from goaltracker.db.models.task import Task
from goaltracker.db.models.task import TaskStatusEnum
from goaltracker.db.repository.tasks import create_task
from goaltracker.db.repository.tasks import delete_task
from goaltracker.db.repository.tasks import get_task_with_owner
from goaltracker.db.repository.tasks import list_tasks
from goaltracker.db.repository.tasks import update_task
from goaltracker.schemas.task import TaskCreate
from goaltracker.schemas.task import TaskUpdate
from goaltracker.services.regions import get_region_service

TASK_NOT_FOUND = "Task not found"


def get_task_service(session: Session, user_id: UUID, task_id: UUID) -> Task:
    """Fetch a task whose goal the caller owns or raise not found."""
    return ensure_owned(get_task_with_owner(session, task_id), user_id, message=TASK_NOT_FOUND)


def list_tasks_service(session: Session, user_id: UUID, region_id: UUID | None = None) -> list[Task]:
    """List the caller's tasks, all of them or those of one owned region."""
    if region_id is not None:
        get_region_service(session, user_id, region_id)
    return list_tasks(session, user_id=user_id, region_id=region_id)


def create_task_service(session: Session, user_id: UUID, payload: TaskCreate) -> Task:
    region = get_region_service(session, user_id, payload.region_id)
    task = create_task(
        session,
        region_id=region.id,
        title=payload.title,
        description=payload.description,
        deadline=payload.deadline,
        status=TaskStatusEnum(payload.status),
    )
    session.commit()
    return task


def update_task_service(session: Session, user_id: UUID, payload: TaskUpdate) -> Task:
    task = get_task_service(session, user_id, payload.id)
    task = update_task(
        session,
        task,
        title=payload.title,
        description=payload.description,
        deadline=payload.deadline,
        status=TaskStatusEnum(payload.status),
    )
    session.commit()
    return task


def delete_task_service(session: Session, user_id: UUID, task_id: UUID) -> None:
    task = get_task_service(session, user_id, task_id)
    delete_task(session, task)
    session.commit()
