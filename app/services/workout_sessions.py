"""Workout session persistence: fetch by date, save (upsert + replace), previous values, day plan."""

from __future__ import annotations

import uuid
from collections.abc import Iterable, Mapping
from datetime import date, timedelta

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.core.enums import WEEKDAY_NAMES, DayState
from app.models.workout import WorkoutExercise, WorkoutExerciseSet, WorkoutSession
from app.schemas.workout import DayPlan, PerSetEntry, PlanExercise, PlanMuscleGroup, SetEntry, UniformEntry
from app.services.aggregation import Entry, exercise_total
from app.services.schedule import day_of_week_for, get_day_entries, get_plan_groups, resolve_day

# Bound the "last time you did X" scan so it stays fast on long histories
PREVIOUS_LOOKBACK_DAYS = 180


def entry_from_row(row: WorkoutExercise) -> Entry:
    """Stored row -> tagged entry. Per-set rows without set rows fall back to uniform."""
    if row.uses_individual_sets and row.individual_sets:
        return PerSetEntry(
            sets=[SetEntry(weight=float(s.weight), reps=s.reps) for s in row.individual_sets]
        )
    return UniformEntry(weight=float(row.weight), reps=row.reps, sets=row.sets)


def row_from_entry(exercise_id: uuid.UUID, entry: Entry) -> WorkoutExercise:
    """Tagged entry -> new WorkoutExercise (with set rows for per-set entries)."""
    total = exercise_total(entry)
    if isinstance(entry, PerSetEntry):
        first = entry.sets[0]
        return WorkoutExercise(
            exercise_id=exercise_id,
            weight=first.weight,
            reps=first.reps,
            sets=len(entry.sets),
            uses_individual_sets=True,
            total_weight=total,
            individual_sets=[
                WorkoutExerciseSet(set_number=i, weight=s.weight, reps=s.reps)
                for i, s in enumerate(entry.sets, start=1)
            ],
        )
    return WorkoutExercise(
        exercise_id=exercise_id,
        weight=entry.weight,
        reps=entry.reps,
        sets=entry.sets,
        uses_individual_sets=False,
        total_weight=total,
        individual_sets=[],
    )


def _session_query(user_id: uuid.UUID, on_date: date):
    return (
        select(WorkoutSession)
        .where(WorkoutSession.user_id == user_id, WorkoutSession.date == on_date)
        .options(selectinload(WorkoutSession.exercises).selectinload(WorkoutExercise.individual_sets))
    )


async def get_session(db: AsyncSession, user_id: uuid.UUID, on_date: date) -> WorkoutSession | None:
    result = await db.execute(_session_query(user_id, on_date))
    return result.scalar_one_or_none()


async def get_exercise_data(db: AsyncSession, user_id: uuid.UUID, on_date: date) -> dict[uuid.UUID, Entry] | None:
    """Exercise map saved for the date, or None when there is no session that day."""
    session = await get_session(db, user_id, on_date)
    if session is None:
        return None
    return {row.exercise_id: entry_from_row(row) for row in session.exercises}


async def save_workout(
    db: AsyncSession,
    user_id: uuid.UUID,
    on_date: date,
    entries: Mapping[uuid.UUID, Entry],
) -> WorkoutSession:
    """Create the day's session if needed and replace all its exercises and sets.

    Runs inside the request transaction, so the replace is all-or-nothing.
    """
    session = await get_session(db, user_id, on_date)
    if session is None:
        session = WorkoutSession(user_id=user_id, date=on_date, exercises=[])
        db.add(session)
    else:
        session.exercises.clear()
    # Flush deletes before inserts so replaced rows never coexist
    await db.flush()
    session.exercises.extend(row_from_entry(ex_id, entry) for ex_id, entry in entries.items())
    await db.flush()
    return session


async def delete_session(db: AsyncSession, user_id: uuid.UUID, on_date: date) -> bool:
    result = await db.execute(
        select(WorkoutSession).where(WorkoutSession.user_id == user_id, WorkoutSession.date == on_date)
    )
    session = result.scalar_one_or_none()
    if session is None:
        return False
    await db.delete(session)
    await db.flush()
    return True


async def get_previous_entries(
    db: AsyncSession,
    user_id: uuid.UUID,
    on_date: date,
    exercise_ids: Iterable[uuid.UUID],
) -> dict[uuid.UUID, Entry]:
    """Prefill values per exercise.

    Values saved on on_date win; otherwise the most recent earlier session containing
    the exercise (within PREVIOUS_LOOKBACK_DAYS).
    """
    wanted = set(exercise_ids)
    if not wanted:
        return {}
    result = await db.execute(
        select(WorkoutExercise, WorkoutSession.date)
        .join(WorkoutSession, WorkoutSession.id == WorkoutExercise.session_id)
        .where(
            WorkoutSession.user_id == user_id,
            WorkoutSession.date <= on_date,
            WorkoutSession.date >= on_date - timedelta(days=PREVIOUS_LOOKBACK_DAYS),
            WorkoutExercise.exercise_id.in_(wanted),
        )
        .options(selectinload(WorkoutExercise.individual_sets))
        .order_by(WorkoutSession.date.desc())
    )
    previous: dict[uuid.UUID, Entry] = {}
    for row, _ in result.all():
        if row.exercise_id not in previous:
            previous[row.exercise_id] = entry_from_row(row)
    return previous


async def get_plan_exercise_ids(
    db: AsyncSession, user_id: uuid.UUID, on_date: date
) -> tuple[DayState, dict[uuid.UUID, list[uuid.UUID]]]:
    """Day state plus muscle group id -> exercise ids, as used by the aggregation."""
    dow = day_of_week_for(on_date)
    day = resolve_day(dow, await get_day_entries(db, user_id, dow))
    groups = await get_plan_groups(db, user_id, day.muscle_group_ids)
    return day.state, {group.id: [ex.id for ex in exercises] for group, exercises in groups}


async def build_day_plan(db: AsyncSession, user_id: uuid.UUID, on_date: date) -> DayPlan:
    """Resolved schedule for the date, with exercises and their prefill values."""
    dow = day_of_week_for(on_date)
    day = resolve_day(dow, await get_day_entries(db, user_id, dow))
    groups = await get_plan_groups(db, user_id, day.muscle_group_ids)
    previous = await get_previous_entries(
        db, user_id, on_date, (ex.id for _, exercises in groups for ex in exercises)
    )
    return DayPlan(
        date=on_date,
        day_of_week=dow,
        day_name=WEEKDAY_NAMES[dow],
        state=day.state,
        muscle_groups=[
            PlanMuscleGroup(
                id=group.id,
                name=group.name,
                exercises=[
                    PlanExercise(
                        id=ex.id,
                        name=ex.name,
                        description=ex.description,
                        external_link=ex.external_link,
                        external_link_name=ex.external_link_name,
                        rest_time_seconds=ex.rest_time_seconds,
                        previous=previous.get(ex.id),
                    )
                    for ex in exercises
                ],
            )
            for group, exercises in groups
        ],
    )
