"""Repository primitives for weekly-task entities."""

from __future__ import annotations

from datetime import date
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.orm import Session

from goaltracker.db.models.goal import Goal
from goaltracker.db.models.region import Region
from goaltracker.db.models.task import Task
from goaltracker.db.models.weekly_task import WeeklyTask
from goaltracker.db.models.weekly_task import WeeklyTaskStatusEnum
from goaltracker.db.repository.goals import UNSET


def create_weekly_task(
    session: Session,
    *,
    task_id: UUID,
    title: str,
    priority: int,
    week_start_date: date,
    description: str | None = None,
) -> WeeklyTask:
    """Create and return a weekly-task row."""
    weekly_task = WeeklyTask(
        task_id=task_id,
        title=title,
        description=description,
        priority=priority,
        week_start_date=week_start_date,
        status=WeeklyTaskStatusEnum.PENDING.value,
    )
    session.add(weekly_task)
    session.flush()
    session.refresh(weekly_task)
    return weekly_task


def get_weekly_task_with_owner(session: Session, weekly_task_id: UUID) -> tuple[WeeklyTask, UUID] | None:
    """Fetch a weekly task together with the user id at the top of its chain."""
    stmt = (
        select(WeeklyTask, Goal.user_id)
        .join(Task, WeeklyTask.task_id == Task.id)
        .join(Region, Task.region_id == Region.id)
        .join(Goal, Region.goal_id == Goal.id)
        .where(WeeklyTask.id == weekly_task_id)
    )
    row = session.execute(stmt).first()
    if row is None:
        return None
    return row[0], row[1]


def list_weekly_tasks(
    session: Session,
    *,
    task_id: UUID,
    week_start_date: date | None = None,
) -> list[WeeklyTask]:
    """List weekly tasks of a task, most important first."""
    stmt = select(WeeklyTask).where(WeeklyTask.task_id == task_id)
    if week_start_date is not None:
        stmt = stmt.where(WeeklyTask.week_start_date == week_start_date)
    stmt = stmt.order_by(WeeklyTask.priority.asc(), WeeklyTask.week_start_date.asc())
    return list(session.scalars(stmt))


def update_weekly_task(
    session: Session,
    weekly_task: WeeklyTask,
    *,
    title: str | object = UNSET,
    description: str | None | object = UNSET,
    priority: int | object = UNSET,
    week_start_date: date | object = UNSET,
    status: WeeklyTaskStatusEnum | object = UNSET,
) -> WeeklyTask:
    """Update mutable weekly-task fields."""
    if title is not UNSET:
        weekly_task.title = title
    if description is not UNSET:
        weekly_task.description = description
    if priority is not UNSET:
        weekly_task.priority = priority
    if week_start_date is not UNSET:
        weekly_task.week_start_date = week_start_date
    if status is not UNSET:
        weekly_task.status = status.value if isinstance(status, WeeklyTaskStatusEnum) else status
    session.flush()
    session.refresh(weekly_task)
    return weekly_task


def delete_weekly_task(session: Session, weekly_task: WeeklyTask) -> None:
    """Delete a weekly task."""
    session.delete(weekly_task)
    session.flush()
