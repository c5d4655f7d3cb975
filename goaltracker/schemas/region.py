"""Pydantic schemas for region payloads."""

from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel
from pydantic import ConfigDict

from goaltracker.core.validation import Description
from goaltracker.core.validation import Title
from goaltracker.core.validation import identifier
from goaltracker.core.validation import required
from goaltracker.schemas.goal import GoalId

RegionId = identifier("Invalid region ID")


class RegionCreate(BaseModel):
    """Payload to create a region under a goal."""

    goal_id: GoalId = required()
    title: Title = required()
    description: Description = None


class RegionUpdate(BaseModel):
    """Payload to replace a region's editable fields."""

    id: RegionId = required()
    title: Title = required()
    description: Description = None


class RegionRef(BaseModel):
    id: RegionId = required()


class RegionsForGoal(BaseModel):
    goal_id: GoalId = required()


class Region(BaseModel):
    """Region response payload."""

    model_config = ConfigDict(from_attributes=True, frozen=True)

    id: UUID
    goal_id: UUID
    title: str
    description: str | None = None
    created_at: datetime
    updated_at: datetime
