"""Pydantic schemas for goal payloads."""

from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel
from pydantic import ConfigDict

from goaltracker.core.validation import Description
from goaltracker.core.validation import Title
from goaltracker.core.validation import identifier
from goaltracker.core.validation import required

GoalId = identifier("Invalid goal ID")


class GoalCreate(BaseModel):
    """Payload to create a goal."""

    title: Title = required()
    description: Description = None


class GoalUpdate(GoalCreate):
    """Payload to replace a goal's editable fields."""

    id: GoalId = required()


class GoalRef(BaseModel):
    """Identifies one goal for lookup or deletion."""

    id: GoalId = required()


class Goal(BaseModel):
    """Goal response payload."""

    model_config = ConfigDict(from_attributes=True, frozen=True)

    id: UUID
    user_id: UUID
    title: str
    description: str | None = None
    created_at: datetime
    updated_at: datetime
