"""Service helpers for goal operations."""

from __future__ import annotations

from uuid import UUID

from sqlalchemy.orm import Session

from goaltracker.core.authorization import ensure_owned
from goaltracker.db.models.goal import Goal
from goaltracker.db.repository.goals import create_goal
from goaltracker.db.repository.goals import delete_goal
from goaltracker.db.repository.goals import get_goal_with_owner
from goaltracker.db.repository.goals import list_goals
from goaltracker.db.repository.goals import update_goal
from goaltracker.schemas.goal import GoalCreate
from goaltracker.schemas.goal import GoalUpdate

GOAL_NOT_FOUND = "Goal not found"


def get_goal_service(session: Session, user_id: UUID, goal_id: UUID) -> Goal:
    """Fetch a goal the caller owns or raise not found."""
    return ensure_owned(get_goal_with_owner(session, goal_id), user_id, message=GOAL_NOT_FOUND)


def list_goals_service(session: Session, user_id: UUID) -> list[Goal]:
    return list_goals(session, user_id=user_id)


def create_goal_service(session: Session, user_id: UUID, payload: GoalCreate) -> Goal:
    """Create and persist a goal for the caller."""
    goal = create_goal(session, user_id=user_id, title=payload.title, description=payload.description)
    session.commit()
    return goal


def update_goal_service(session: Session, user_id: UUID, payload: GoalUpdate) -> Goal:
    goal = get_goal_service(session, user_id, payload.id)
    goal = update_goal(session, goal, title=payload.title, description=payload.description)
    session.commit()
    return goal


def delete_goal_service(session: Session, user_id: UUID, goal_id: UUID) -> None:
    """Delete a goal with its regions, tasks and weekly tasks."""
    goal = get_goal_service(session, user_id, goal_id)
    delete_goal(session, goal)
    session.commit()
