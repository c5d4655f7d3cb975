"""SQLAlchemy model for tasks."""

from __future__ import annotations

import uuid
from datetime import datetime
from enum import Enum
from typing import TYPE_CHECKING

from sqlalchemy import CheckConstraint
from sqlalchemy import DateTime
from sqlalchemy import ForeignKey
from sqlalchemy import Index
from sqlalchemy import PrimaryKeyConstraint
from sqlalchemy import String
from sqlalchemy import Text
from sqlalchemy import Uuid
from sqlalchemy import func
from sqlalchemy.orm import Mapped
from sqlalchemy.orm import mapped_column
from sqlalchemy.orm import relationship

from goaltracker.db.models.user import Base


class TaskStatusEnum(str, Enum):
    ACTIVE = "active"
    INCOMPLETE = "incomplete"
    COMPLETED = "completed"


if TYPE_CHECKING:
    from goaltracker.db.models.region import Region
    from goaltracker.db.models.weekly_task import WeeklyTask


class Task(Base):
    """Task with a deadline inside a region."""

    __tablename__ = "tasks"
    __table_args__ = (
        PrimaryKeyConstraint("id", name="pk_tasks"),
        CheckConstraint(
            "status IN ('active', 'incomplete', 'completed')",
            name="ck_tasks_status",
        ),
        Index("ix_tasks_region_id", "region_id"),
    )

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    region_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("regions.id", name="fk_tasks_region_id_regions", ondelete="CASCADE"),
        nullable=False,
    )
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    deadline: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    status: Mapped[str] = mapped_column(
        String(16),
        nullable=False,
        default=TaskStatusEnum.ACTIVE.value,
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

    region: Mapped["Region"] = relationship("Region", back_populates="tasks")
    weekly_tasks: Mapped[list["WeeklyTask"]] = relationship(
        "WeeklyTask",
        back_populates="task",
        cascade="all, delete-orphan",
    )
