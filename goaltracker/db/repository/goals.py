"""Repository primitives for goal entities."""

from __future__ import annotations

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.orm import Session

from goaltracker.db.models.goal import Goal

UNSET = object()


def create_goal(session: Session, *, user_id: UUID, title: str, description: str | None = None) -> Goal:
    """Create and return a goal row."""
    goal = Goal(user_id=user_id, title=title, description=description)
    session.add(goal)
    session.flush()
    session.refresh(goal)
    return goal


def get_goal_with_owner(session: Session, goal_id: UUID) -> tuple[Goal, UUID] | None:
    """Fetch a goal together with its owning user id."""
    goal = session.get(Goal, goal_id)
    if goal is None:
        return None
    return goal, goal.user_id


def list_goals(
    session: Session,
    *,
    user_id: UUID,
) -> list[Goal]:
    """List a user's goals, newest first."""
    stmt = (
        select(Goal)
        .where(Goal.user_id == user_id)
        .order_by(Goal.created_at.desc())
    )
    return list(session.scalars(stmt))


def update_goal(
    session: Session,
    goal: Goal,
    *,
    title: str | object = UNSET,
    description: str | None | object = UNSET,
) -> Goal:
    """Update mutable goal fields."""
    if title is not UNSET:
        goal.title = title
    if description is not UNSET:
        goal.description = description
    session.flush()
    session.refresh(goal)
    return goal


def delete_goal(session: Session, goal: Goal) -> None:
    """Delete a goal and, through the cascade, everything under it."""
    session.delete(goal)
    session.flush()
