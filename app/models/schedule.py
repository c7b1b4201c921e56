"""Weekly workout schedule: which muscle groups a user trains on which weekday."""

from __future__ import annotations

import uuid
from datetime import datetime, timezone

from sqlalchemy import CheckConstraint, DateTime, ForeignKey, Index, Integer, UniqueConstraint, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.base import Base


class WorkoutScheduleEntry(Base):
    """One (day, muscle group) assignment. A row with muscle_group_id NULL marks an explicit rest day."""

    __tablename__ = "workout_schedule"
    __table_args__ = (
        UniqueConstraint("user_id", "muscle_group_id", "day_of_week", name="uq_workout_schedule_user_group_day"),
        CheckConstraint("day_of_week >= 0 AND day_of_week <= 6", name="day_of_week_range"),
        Index("ix_workout_schedule_user_day", "user_id", "day_of_week"),
    )

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id: Mapped[uuid.UUID] = mapped_column(Uuid, nullable=False)
    muscle_group_id: Mapped[uuid.UUID | None] = mapped_column(
        Uuid, ForeignKey("muscle_groups.id", ondelete="CASCADE"), nullable=True
    )
    day_of_week: Mapped[int] = mapped_column(Integer, nullable=False)  # 0 = Sunday
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))

    muscle_group: Mapped["MuscleGroup | None"] = relationship("MuscleGroup", back_populates="schedule_entries")
