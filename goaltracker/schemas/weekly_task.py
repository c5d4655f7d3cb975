"""Pydantic schemas for weekly-task payloads."""

from __future__ import annotations

from datetime import date
from datetime import datetime
from uuid import UUID

from pydantic import BaseModel
from pydantic import ConfigDict

from goaltracker.core.validation import Description
from goaltracker.core.validation import Priority
from goaltracker.core.validation import Title
from goaltracker.core.validation import WeekStartDate
from goaltracker.core.validation import choice
from goaltracker.core.validation import identifier
from goaltracker.core.validation import required
from goaltracker.db.models.weekly_task import WeeklyTaskStatusEnum
from goaltracker.schemas.task import TaskId

WeeklyTaskId = identifier("Invalid weekly task ID")

WeeklyTaskStatus = choice(
    [status.value for status in WeeklyTaskStatusEnum],
    "Status must be pending, in_progress, or completed",
)


class WeeklyTaskCreate(BaseModel):
    """Payload to plan a weekly task against a task."""

    task_id: TaskId = required()
    title: Title = required()
    description: Description = None
    priority: Priority = required()
    week_start_date: WeekStartDate = required()


class WeeklyTaskUpdate(BaseModel):
    """Payload to replace a weekly task's editable fields."""

    id: WeeklyTaskId = required()
    title: Title = required()
    description: Description = None
    priority: Priority = required()
    week_start_date: WeekStartDate = required()
    status: WeeklyTaskStatus = required()


class WeeklyTaskRef(BaseModel):
    id: WeeklyTaskId = required()


class WeeklyTaskFilter(BaseModel):
    task_id: TaskId = required()
    week_start_date: WeekStartDate | None = None


class WeeklyTask(BaseModel):
    """Weekly-task response payload."""

    model_config = ConfigDict(from_attributes=True, frozen=True)

    id: UUID
    task_id: UUID
    title: str
    description: str | None = None
    priority: int
    week_start_date: date
    status: WeeklyTaskStatusEnum
    created_at: datetime
    updated_at: datetime
