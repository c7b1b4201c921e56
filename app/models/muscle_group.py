"""Muscle group model - global training categories shared by all users."""

from __future__ import annotations

import uuid
from datetime import datetime, timezone

from sqlalchemy import DateTime, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.core.constants import MUSCLE_GROUP_NAME_MAX
from app.db.base import Base
from app.models.exercise import exercise_muscle_groups


class MuscleGroup(Base):
    """Training category (e.g. Chest, Quads). Read-only for regular users."""

    __tablename__ = "muscle_groups"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    name: Mapped[str] = mapped_column(String(MUSCLE_GROUP_NAME_MAX), nullable=False, unique=True, index=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))

    exercises: Mapped[list["Exercise"]] = relationship(
        "Exercise",
        secondary=exercise_muscle_groups,
        back_populates="muscle_groups",
    )
    schedule_entries: Mapped[list["WorkoutScheduleEntry"]] = relationship(
        "WorkoutScheduleEntry",
        back_populates="muscle_group",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
