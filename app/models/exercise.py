"""Exercise model - user-owned exercise definitions linked to one or more muscle groups."""

from __future__ import annotations

import uuid
from datetime import datetime, timezone

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    DateTime,
    ForeignKey,
    Integer,
    String,
    Table,
    UniqueConstraint,
    Uuid,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.core.constants import (
    DEFAULT_REST_TIME_SECONDS,
    EXERCISE_DESCRIPTION_MAX,
    EXERCISE_NAME_MAX,
    EXTERNAL_LINK_MAX,
    EXTERNAL_LINK_NAME_MAX,
)
from app.db.base import Base

# Many-to-many: one exercise row can target several muscle groups
exercise_muscle_groups = Table(
    "exercise_muscle_groups",
    Base.metadata,
    Column(
        "exercise_id",
        Uuid,
        ForeignKey("exercises.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "muscle_group_id",
        Uuid,
        ForeignKey("muscle_groups.id", ondelete="CASCADE"),
        primary_key=True,
        index=True,
    ),
)


class Exercise(Base):
    """Exercise definition owned by a user. Name is unique per user."""

    __tablename__ = "exercises"
    __table_args__ = (
        UniqueConstraint("user_id", "name", name="uq_exercises_user_id_name"),
        CheckConstraint("rest_time_seconds >= 0", name="rest_time_non_negative"),
    )

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id: Mapped[uuid.UUID] = mapped_column(Uuid, nullable=False, index=True)
    name: Mapped[str] = mapped_column(String(EXERCISE_NAME_MAX), nullable=False)
    hidden: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    description: Mapped[str | None] = mapped_column(String(EXERCISE_DESCRIPTION_MAX), nullable=True)
    external_link: Mapped[str | None] = mapped_column(String(EXTERNAL_LINK_MAX), nullable=True)
    external_link_name: Mapped[str | None] = mapped_column(String(EXTERNAL_LINK_NAME_MAX), nullable=True)
    rest_time_seconds: Mapped[int] = mapped_column(Integer, default=DEFAULT_REST_TIME_SECONDS, nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))

    muscle_groups: Mapped[list["MuscleGroup"]] = relationship(
        "MuscleGroup",
        secondary=exercise_muscle_groups,
        back_populates="exercises",
        order_by="MuscleGroup.name",
    )
    workout_exercises: Mapped[list["WorkoutExercise"]] = relationship(
        "WorkoutExercise",
        back_populates="exercise",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
