"""SQLAlchemy model for regions, the focus areas inside a goal."""

from __future__ import annotations

import uuid
from datetime import datetime
from typing import TYPE_CHECKING

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

if TYPE_CHECKING:
    from goaltracker.db.models.goal import Goal
    from goaltracker.db.models.task import Task


class Region(Base):
    """Region under a goal; owned through its goal."""

    __tablename__ = "regions"
    __table_args__ = (
        PrimaryKeyConstraint("id", name="pk_regions"),
        Index("ix_regions_goal_id", "goal_id"),
    )

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    goal_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("goals.id", name="fk_regions_goal_id_goals", ondelete="CASCADE"),
        nullable=False,
    )
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
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

    goal: Mapped["Goal"] = relationship("Goal", back_populates="regions")
    tasks: Mapped[list["Task"]] = relationship(
        "Task",
        back_populates="region",
        cascade="all, delete-orphan",
    )
