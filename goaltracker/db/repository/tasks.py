"""Repository primitives for task entities."""

from __future__ import annotations

from datetime import datetime
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.orm import Session

from goaltracker.db.models.goal import Goal
from goaltracker.db.models.region import Region
from goaltracker.db.models.task import Task
from goaltracker.db.models.task import TaskStatusEnum
from goaltracker.db.repository.goals import UNSET


def create_task(
    session: Session,
    *,
    region_id: UUID,
    title: str,
    deadline: datetime,
    description: str | None = None,
    status: TaskStatusEnum = TaskStatusEnum.ACTIVE,
) -> Task:
    """Create and return a task row."""
    status_value = status.value if isinstance(status, TaskStatusEnum) else status
    task = Task(
        region_id=region_id,
        title=title,
        description=description,
        deadline=deadline,
        status=status_value,
    )
    session.add(task)
    session.flush()
    session.refresh(task)
    return task


def get_task_with_owner(session: Session, task_id: UUID) -> tuple[Task, UUID] | None:
    """Fetch a task together with the user id owning its goal."""
    stmt = (
        select(Task, Goal.user_id)
        .join(Region, Task.region_id == Region.id)
        .join(Goal, Region.goal_id == Goal.id)
        .where(Task.id == task_id)
    )
    row = session.execute(stmt).first()
    if row is None:
        return None
    return row[0], row[1]


def list_tasks(
    session: Session,
    *,
    user_id: UUID,
    region_id: UUID | None = None,
) -> list[Task]:
    """List a user's tasks, optionally within one region, newest first."""
    stmt = (
        select(Task)
        .join(Region, Task.region_id == Region.id)
        .join(Goal, Region.goal_id == Goal.id)
        .where(Goal.user_id == user_id)
    )
    if region_id is not None:
        stmt = stmt.where(Task.region_id == region_id)
    stmt = stmt.order_by(Task.created_at.desc())
    return list(session.scalars(stmt))


def update_task(
    session: Session,
    task: Task,
    *,
    title: str | object = UNSET,
    description: str | None | object = UNSET,
    deadline: datetime | object = UNSET,
    status: TaskStatusEnum | object = UNSET,
) -> Task:
    """Update mutable task fields."""
    if title is not UNSET:
        task.title = title
    if description is not UNSET:
        task.description = description
    if deadline is not UNSET:
        task.deadline = deadline
    if status is not UNSET:
        task.status = status.value if isinstance(status, TaskStatusEnum) else status
    session.flush()
    session.refresh(task)
    return task


def delete_task(session: Session, task: Task) -> None:
    """Delete a task and its weekly tasks."""
    session.delete(task)
    session.flush()
