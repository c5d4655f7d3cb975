"""Service helpers for region operations."""

from __future__ import annotations

from uuid import UUID

from sqlalchemy.orm import Session

from goaltracker.core.authorization import ensure_owned
from goaltracker.db.models.region import Region
from goaltracker.db.repository.regions import create_region
from goaltracker.db.repository.regions import delete_region
from goaltracker.db.repository.regions import get_region_with_owner
from goaltracker.db.repository.regions import list_regions
from goaltracker.db.repository.regions import update_region
from goaltracker.schemas.region import RegionCreate
from goaltracker.schemas.region import RegionUpdate
from goaltracker.services.goals import get_goal_service

REGION_NOT_FOUND = "Region not found"


def get_region_service(session: Session, user_id: UUID, region_id: UUID) -> Region:
    """Fetch a region whose goal the caller owns or raise not found."""
    return ensure_owned(get_region_with_owner(session, region_id), user_id, message=REGION_NOT_FOUND)


def list_regions_service(session: Session, user_id: UUID, goal_id: UUID) -> list[Region]:
    """List regions of a goal the caller owns."""
    goal = get_goal_service(session, user_id, goal_id)
    return list_regions(session, goal_id=goal.id)


def create_region_service(session: Session, user_id: UUID, payload: RegionCreate) -> Region:
    goal = get_goal_service(session, user_id, payload.goal_id)
    region = create_region(session, goal_id=goal.id, title=payload.title, description=payload.description)
    session.commit()
    return region


def update_region_service(session: Session, user_id: UUID, payload: RegionUpdate) -> Region:
    region = get_region_service(session, user_id, payload.id)
    region = update_region(session, region, title=payload.title, description=payload.description)
    session.commit()
    return region


def delete_region_service(session: Session, user_id: UUID, region_id: UUID) -> None:
    region = get_region_service(session, user_id, region_id)
    delete_region(session, region)
    session.commit()
