"""Service helpers for weekly-task operations."""

from __future__ import annotations

from datetime import date
from uuid import UUID

from sqlalchemy.orm import Session

from goaltracker.core.authorization import ensure_owned
from goaltracker.db.models.weekly_task import WeeklyTask
from goaltracker.db.models.weekly_task import WeeklyTaskStatusEnum
from goaltracker.db.repository.weekly_tasks import create_weekly_task
from goaltracker.db.repository.weekly_tasks import delete_weekly_task
from goaltracker.db.repository.weekly_tasks import get_weekly_task_with_owner
from goaltracker.db.repository.weekly_tasks import list_weekly_tasks
from goaltracker.db.repository.weekly_tasks import update_weekly_task
from goaltracker.schemas.weekly_task import WeeklyTaskCreate
from goaltracker.schemas.weekly_task import WeeklyTaskUpdate
from goaltracker.services.tasks import get_task_service

WEEKLY_TASK_NOT_FOUND = "Weekly task not found"


def get_weekly_task_service(session: Session, user_id: UUID, weekly_task_id: UUID) -> WeeklyTask:
    return ensure_owned(
        get_weekly_task_with_owner(session, weekly_task_id),
        user_id,
        message=WEEKLY_TASK_NOT_FOUND,
    )


def list_weekly_tasks_service(
    session: Session,
    user_id: UUID,
    task_id: UUID,
    week_start_date: date | None = None,
) -> list[WeeklyTask]:
    """List weekly tasks of an owned task, optionally for one week."""
    task = get_task_service(session, user_id, task_id)
    return list_weekly_tasks(session, task_id=task.id, week_start_date=week_start_date)


def create_weekly_task_service(session: Session, user_id: UUID, payload: WeeklyTaskCreate) -> WeeklyTask:
    task = get_task_service(session, user_id, payload.task_id)
    weekly_task = create_weekly_task(
        session,
        task_id=task.id,
        title=payload.title,
        description=payload.description,
        priority=payload.priority,
        week_start_date=payload.week_start_date,
    )
    session.commit()
    return weekly_task


def update_weekly_task_service(session: Session, user_id: UUID, payload: WeeklyTaskUpdate) -> WeeklyTask:
    weekly_task = get_weekly_task_service(session, user_id, payload.id)
    weekly_task = update_weekly_task(
        session,
        weekly_task,
        title=payload.title,
        description=payload.description,
        priority=payload.priority,
        week_start_date=payload.week_start_date,
        status=WeeklyTaskStatusEnum(payload.status),
    )
    session.commit()
    return weekly_task


def delete_weekly_task_service(session: Session, user_id: UUID, weekly_task_id: UUID) -> None:
    weekly_task = get_weekly_task_service(session, user_id, weekly_task_id)
    delete_weekly_task(session, weekly_task)
    session.commit()
