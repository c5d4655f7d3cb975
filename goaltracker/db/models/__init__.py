"""Model module imports for SQLAlchemy relationship registration."""

from goaltracker.db.models.goal import Goal
from goaltracker.db.models.region import Region
from goaltracker.db.models.task import Task
from goaltracker.db.models.user import Base
from goaltracker.db.models.user import User
from goaltracker.db.models.user import UserPreferences
from goaltracker.db.models.user import VerificationToken
from goaltracker.db.models.weekly_task import WeeklyTask

__all__ = [
    "Base",
    "Goal",
    "Region",
    "Task",
    "User",
    "UserPreferences",
    "VerificationToken",
    "WeeklyTask",
]
