"""Account data export and deletion of user-owned rows."""

from __future__ import annotations

import uuid
from datetime import datetime, timezone

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.models.exercise import Exercise
from app.models.schedule import WorkoutScheduleEntry
from app.models.workout import WorkoutExercise, WorkoutSession
from app.schemas.account import (
    AccountExport,
    ExportExercise,
    ExportProfile,
    ExportScheduleEntry,
    ExportSession,
    ExportSet,
    ExportWorkoutExercise,
)
from app.services.auth_provider import AuthenticatedUser


async def build_export(db: AsyncSession, user: AuthenticatedUser) -> AccountExport:
    """Profile, exercises, schedule and every session (with exercises and sets) in one document."""
    exercises = (
        await db.execute(
            select(Exercise)
            .where(Exercise.user_id == user.id)
            .options(selectinload(Exercise.muscle_groups))
            .order_by(Exercise.name)
        )
    ).scalars().all()
    names = {ex.id: ex.name for ex in exercises}

    schedule = (
        await db.execute(
            select(WorkoutScheduleEntry)
            .where(WorkoutScheduleEntry.user_id == user.id)
            .options(selectinload(WorkoutScheduleEntry.muscle_group))
            .order_by(WorkoutScheduleEntry.day_of_week)
        )
    ).scalars().all()

    sessions = (
        await db.execute(
            select(WorkoutSession)
            .where(WorkoutSession.user_id == user.id)
            .options(selectinload(WorkoutSession.exercises).selectinload(WorkoutExercise.individual_sets))
            .order_by(WorkoutSession.date)
        )
    ).scalars().all()

    return AccountExport(
        exported_at=datetime.now(timezone.utc),
        profile=ExportProfile(id=user.id, email=user.email, username=user.username),
        exercises=[
            ExportExercise(
                id=ex.id,
                name=ex.name,
                muscle_groups=[mg.name for mg in ex.muscle_groups],
                hidden=ex.hidden,
                description=ex.description,
                external_link=ex.external_link,
                external_link_name=ex.external_link_name,
                rest_time_seconds=ex.rest_time_seconds,
            )
            for ex in exercises
        ],
        schedule=[
            ExportScheduleEntry(
                day_of_week=entry.day_of_week,
                muscle_group=entry.muscle_group.name if entry.muscle_group else None,
            )
            for entry in schedule
        ],
        sessions=[
            ExportSession(
                date=s.date,
                exercises=[
                    ExportWorkoutExercise(
                        exercise_id=we.exercise_id,
                        exercise_name=names.get(we.exercise_id),
                        weight=float(we.weight),
                        reps=we.reps,
                        sets=we.sets,
                        uses_individual_sets=we.uses_individual_sets,
                        total_weight=float(we.total_weight),
                        individual_sets=[
                            ExportSet(set_number=st.set_number, weight=float(st.weight), reps=st.reps)
                            for st in we.individual_sets
                        ],
                    )
                    for we in s.exercises
                ],
            )
            for s in sessions
        ],
    )


async def delete_user_data(db: AsyncSession, user_id: uuid.UUID) -> None:
    """Remove every row the user owns. Sessions and exercises take their children with them."""
    sessions = (await db.execute(select(WorkoutSession).where(WorkoutSession.user_id == user_id))).scalars().all()
    for session in sessions:
        await db.delete(session)
    exercises = (
        await db.execute(
            select(Exercise).where(Exercise.user_id == user_id).options(selectinload(Exercise.muscle_groups))
        )
    ).scalars().all()
    for exercise in exercises:
        await db.delete(exercise)
    await db.execute(delete(WorkoutScheduleEntry).where(WorkoutScheduleEntry.user_id == user_id))
    await db.flush()
