"""Pydantic schemas for task payloads."""

from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel
from pydantic import ConfigDict

from goaltracker.core.validation import Deadline
from goaltracker.core.validation import Description
from goaltracker.core.validation import Title
from goaltracker.core.validation import choice
from goaltracker.core.validation import identifier
from goaltracker.core.validation import required
from goaltracker.db.models.task import TaskStatusEnum
from goaltracker.schemas.region import RegionId

TaskId = identifier("Invalid task ID")

_STATUS_MESSAGE = "Status must be active, incomplete, or completed"
_STATUS_VALUES = [status.value for status in TaskStatusEnum]

TaskStatus = choice(_STATUS_VALUES, _STATUS_MESSAGE)
NewTaskStatus = choice(_STATUS_VALUES, _STATUS_MESSAGE, default=TaskStatusEnum.ACTIVE.value)


class TaskCreate(BaseModel):
    """Payload to create a task in a region."""

    region_id: RegionId = required()
    title: Title = required()
    description: Description = None
    deadline: Deadline = required()
    status: NewTaskStatus = required()


class TaskUpdate(BaseModel):
    """Payload to replace a task's editable fields."""

    id: TaskId = required()
    title: Title = required()
    description: Description = None
    deadline: Deadline = required()
    status: TaskStatus = required()


class TaskRef(BaseModel):
    id: TaskId = required()


class TaskFilter(BaseModel):
    region_id: RegionId | None = None


class Task(BaseModel):
    """Task response payload."""

    model_config = ConfigDict(from_attributes=True, frozen=True)

    id: UUID
    region_id: UUID
    title: str
    description: str | None = None
    deadline: datetime
    status: TaskStatusEnum
    created_at: datetime
    updated_at: datetime
