"""Repository primitives for region entities."""

from __future__ import annotations

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.orm import Session

from goaltracker.db.models.goal import Goal
from goaltracker.db.models.region import Region
from goaltracker.db.repository.goals import UNSET


def create_region(
    session: Session,
    *,
    goal_id: UUID,
    title: str,
    description: str | None = None,
) -> Region:
    """Create and return a region row."""
    region = Region(goal_id=goal_id, title=title, description=description)
    session.add(region)
    session.flush()
    session.refresh(region)
    return region


def get_region_with_owner(session: Session, region_id: UUID) -> tuple[Region, UUID] | None:
    """Fetch a region together with the user id owning its goal."""
    stmt = (
        select(Region, Goal.user_id)
        .join(Goal, Region.goal_id == Goal.id)
        .where(Region.id == region_id)
    )
    row = session.execute(stmt).first()
    if row is None:
        return None
    return row[0], row[1]


def list_regions(
    session: Session,
    *,
    goal_id: UUID,
) -> list[Region]:
    """List regions under a goal, newest first."""
    stmt = (
        select(Region)
        .where(Region.goal_id == goal_id)
        .order_by(Region.created_at.desc())
    )
    return list(session.scalars(stmt))


def update_region(
    session: Session,
    region: Region,
    *,
    title: str | object = UNSET,
    description: str | None | object = UNSET,
) -> Region:
    """Update mutable region fields."""
    if title is not UNSET:
        region.title = title
    if description is not UNSET:
        region.description = description
    session.flush()
    session.refresh(region)
    return region


def delete_region(session: Session, region: Region) -> None:
    """Delete a region and its tasks."""
    session.delete(region)
    session.flush()
