"""Integration tests for the list actions against a populated database."""

from __future__ import annotations

from datetime import datetime
from datetime import timezone

from sqlalchemy.orm import Session

from goaltracker.actions.goals import list_goals_action
from goaltracker.actions.regions import list_regions_action
from goaltracker.actions.tasks import list_tasks_action
from goaltracker.core.results import ActionSuccess
from goaltracker.core.security import SessionIdentity
from goaltracker.db.repository.goals import create_goal
from goaltracker.db.repository.regions import create_region
from goaltracker.db.repository.tasks import create_task
from goaltracker.db.repository.users import create_user

ROW_COUNT = 105
DEADLINE = datetime(2025, 6, 30, 12, 0, tzinfo=timezone.utc)


def test_goal_list_returns_every_goal(db_session: Session) -> None:
    user = create_user(db_session, email="many-goals@example.com")
    for index in range(ROW_COUNT):
        create_goal(db_session, user_id=user.id, title=f"Goal {index}")
    db_session.commit()

    result = list_goals_action(db_session, SessionIdentity(user_id=user.id))

    assert isinstance(result, ActionSuccess)
    assert len(result.data) == ROW_COUNT
    assert {goal.title for goal in result.data} == {f"Goal {index}" for index in range(ROW_COUNT)}


def test_region_and_task_lists_return_every_row(db_session: Session) -> None:
    user = create_user(db_session, email="many-tasks@example.com")
    goal = create_goal(db_session, user_id=user.id, title="Marathon")
    for index in range(ROW_COUNT):
        create_region(db_session, goal_id=goal.id, title=f"Region {index}")
    region = create_region(db_session, goal_id=goal.id, title="Long runs")
    for index in range(ROW_COUNT):
        create_task(db_session, region_id=region.id, title=f"Run {index}", deadline=DEADLINE)
    db_session.commit()
    identity = SessionIdentity(user_id=user.id)

    regions = list_regions_action(db_session, identity, str(goal.id))
    region_tasks = list_tasks_action(db_session, identity, str(region.id))
    all_tasks = list_tasks_action(db_session, identity)

    assert isinstance(regions, ActionSuccess)
    assert len(regions.data) == ROW_COUNT + 1
    assert isinstance(region_tasks, ActionSuccess)
    assert len(region_tasks.data) == ROW_COUNT
    assert isinstance(all_tasks, ActionSuccess)
    assert len(all_tasks.data) == ROW_COUNT
