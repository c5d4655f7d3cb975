"""SQLAlchemy model for weekly tasks planned against a task."""

from __future__ import annotations

import uuid
from datetime import date
from datetime import datetime
from enum import Enum
from typing import TYPE_CHECKING

from sqlalchemy import CheckConstraint
from sqlalchemy import Date
from sqlalchemy import DateTime
from sqlalchemy import ForeignKey
from sqlalchemy import Index
from sqlalchemy import Integer
from sqlalchemy import PrimaryKeyConstraint
from sqlalchemy import String
from sqlalchemy import Text
from sqlalchemy import Uuid
from sqlalchemy import func
from sqlalchemy.orm import Mapped
from sqlalchemy.orm import mapped_column
from sqlalchemy.orm import relationship

from goaltracker.db.models.user import Base


class WeeklyTaskStatusEnum(str, Enum):
    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"


if TYPE_CHECKING:
    from goaltracker.db.models.task import Task


class WeeklyTask(Base):
    """Slice of a task scheduled for one week."""

    __tablename__ = "weekly_tasks"
    __table_args__ = (
        PrimaryKeyConstraint("id", name="pk_weekly_tasks"),
        CheckConstraint("priority BETWEEN 1 AND 3", name="ck_weekly_tasks_priority"),
        CheckConstraint(
            "status IN ('pending', 'in_progress', 'completed')",
            name="ck_weekly_tasks_status",
        ),
        Index("ix_weekly_tasks_task_id_week_start_date", "task_id", "week_start_date"),
    )

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    task_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("tasks.id", name="fk_weekly_tasks_task_id_tasks", ondelete="CASCADE"),
        nullable=False,
    )
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    priority: Mapped[int] = mapped_column(Integer, nullable=False)
    week_start_date: Mapped[date] = mapped_column(Date, nullable=False)
    status: Mapped[str] = mapped_column(
        String(16),
        nullable=False,
        default=WeeklyTaskStatusEnum.PENDING.value,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )

    task: Mapped["Task"] = relationship("Task", back_populates="weekly_tasks")
