"""WorkoutSession, WorkoutExercise and WorkoutExerciseSet models."""

from __future__ import annotations

import uuid
from datetime import date as date_type, datetime, timezone

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Date,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    Numeric,
    UniqueConstraint,
    Uuid,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.base import Base


class WorkoutSession(Base):
    """A user's record of one calendar day. At most one per user per date."""

    __tablename__ = "workout_sessions"
    __table_args__ = (
        UniqueConstraint("user_id", "date", name="uq_workout_sessions_user_id_date"),
        Index("ix_workout_sessions_user_date", "user_id", "date"),
    )

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id: Mapped[uuid.UUID] = mapped_column(Uuid, nullable=False)
    date: Mapped[date_type] = mapped_column(Date, nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))

    exercises: Mapped[list["WorkoutExercise"]] = relationship(
        "WorkoutExercise",
        back_populates="session",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )


class WorkoutExercise(Base):
    """One exercise performed in a session.

    Uniform entries store weight/reps/sets; per-set entries also own WorkoutExerciseSet rows,
    with weight/reps mirroring set 1 and sets equal to the number of set rows.
    total_weight is computed at save time (kg).
    """

    __tablename__ = "workout_exercises"
    __table_args__ = (
        CheckConstraint("weight > 0 AND weight <= 2900", name="weight_range"),
        CheckConstraint("reps > 0 AND reps <= 2900", name="reps_range"),
        CheckConstraint("sets > 0 AND sets <= 2900", name="sets_range"),
        Index("ix_workout_exercises_session_id", "session_id"),
        Index("ix_workout_exercises_exercise_id", "exercise_id"),
    )

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    session_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("workout_sessions.id", ondelete="CASCADE"), nullable=False
    )
    exercise_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("exercises.id", ondelete="CASCADE"), nullable=False
    )
    weight: Mapped[float] = mapped_column(Numeric(6, 2), nullable=False)
    reps: Mapped[int] = mapped_column(Integer, nullable=False)
    sets: Mapped[int] = mapped_column(Integer, nullable=False)
    uses_individual_sets: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    total_weight: Mapped[float] = mapped_column(Numeric(14, 2), nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))

    session: Mapped["WorkoutSession"] = relationship("WorkoutSession", back_populates="exercises")
    exercise: Mapped["Exercise"] = relationship("Exercise", back_populates="workout_exercises")
    individual_sets: Mapped[list["WorkoutExerciseSet"]] = relationship(
        "WorkoutExerciseSet",
        back_populates="workout_exercise",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="WorkoutExerciseSet.set_number",
    )


class WorkoutExerciseSet(Base):
    """One itemized set of a per-set WorkoutExercise."""

    __tablename__ = "workout_exercise_sets"
    __table_args__ = (
        UniqueConstraint("workout_exercise_id", "set_number", name="uq_workout_exercise_sets_number"),
        CheckConstraint("weight > 0 AND weight <= 2900", name="weight_range"),
        CheckConstraint("reps > 0 AND reps <= 2900", name="reps_range"),
        CheckConstraint("set_number >= 1", name="set_number_positive"),
    )

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    workout_exercise_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("workout_exercises.id", ondelete="CASCADE"), nullable=False, index=True
    )
    set_number: Mapped[int] = mapped_column(Integer, nullable=False)
    weight: Mapped[float] = mapped_column(Numeric(6, 2), nullable=False)
    reps: Mapped[int] = mapped_column(Integer, nullable=False)

    workout_exercise: Mapped["WorkoutExercise"] = relationship("WorkoutExercise", back_populates="individual_sets")
