"""Schedule resolver: which muscle groups a user trains on a given weekday.

Days are numbered 0 = Sunday .. 6 = Saturday. A day is in one of three states:
- unscheduled: no schedule row at all
- rest: only rows whose muscle_group_id is NULL (explicit rest day)
- training: at least one row with a muscle group
"""

from __future__ import annotations

import uuid
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from datetime import date

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.core.enums import DayState
from app.models.exercise import Exercise
from app.models.muscle_group import MuscleGroup
from app.models.schedule import WorkoutScheduleEntry

# Display order: Monday first, Sunday last
MONDAY_FIRST = (1, 2, 3, 4, 5, 6, 0)


@dataclass(frozen=True)
class DaySchedule:
    day_of_week: int
    state: DayState
    muscle_group_ids: tuple[uuid.UUID, ...] = field(default_factory=tuple)


def day_of_week_for(d: date) -> int:
    """0 = Sunday (date.weekday() is 0 = Monday)."""
    return (d.weekday() + 1) % 7


def ordered_days(today: int) -> list[int]:
    """Monday-first week with today moved to the front."""
    return [today] + [d for d in MONDAY_FIRST if d != today]


def resolve_day(day_of_week: int, entries: Iterable[WorkoutScheduleEntry]) -> DaySchedule:
    """Resolve the state of one day from the user's schedule rows (rows for other days are ignored)."""
    rows = [e for e in entries if e.day_of_week == day_of_week]
    if not rows:
        return DaySchedule(day_of_week, DayState.UNSCHEDULED)
    group_ids = tuple(e.muscle_group_id for e in rows if e.muscle_group_id is not None)
    if group_ids:
        return DaySchedule(day_of_week, DayState.TRAINING, group_ids)
    return DaySchedule(day_of_week, DayState.REST)


async def get_week_entries(db: AsyncSession, user_id: uuid.UUID) -> list[WorkoutScheduleEntry]:
    result = await db.execute(
        select(WorkoutScheduleEntry)
        .where(WorkoutScheduleEntry.user_id == user_id)
        .options(selectinload(WorkoutScheduleEntry.muscle_group))
        .execution_options(populate_existing=True)
        .order_by(WorkoutScheduleEntry.day_of_week)
    )
    return list(result.scalars().all())


async def get_day_entries(db: AsyncSession, user_id: uuid.UUID, day_of_week: int) -> list[WorkoutScheduleEntry]:
    result = await db.execute(
        select(WorkoutScheduleEntry)
        .where(WorkoutScheduleEntry.user_id == user_id, WorkoutScheduleEntry.day_of_week == day_of_week)
        .options(selectinload(WorkoutScheduleEntry.muscle_group))
        .execution_options(populate_existing=True)
    )
    return list(result.scalars().all())


async def toggle_muscle_group(
    db: AsyncSession,
    user_id: uuid.UUID,
    day_of_week: int,
    muscle_group_id: uuid.UUID,
) -> bool:
    """Remove the (day, group) row if present, otherwise add it. Returns True when now scheduled.

    A rest sentinel on the day is left in place: the day reads as training while any group is
    scheduled and goes back to rest once the last one is toggled off. No version check: last write wins.
    """
    result = await db.execute(
        select(WorkoutScheduleEntry).where(
            WorkoutScheduleEntry.user_id == user_id,
            WorkoutScheduleEntry.day_of_week == day_of_week,
            WorkoutScheduleEntry.muscle_group_id == muscle_group_id,
        )
    )
    existing = result.scalar_one_or_none()
    if existing:
        await db.delete(existing)
        await db.flush()
        return False

    db.add(WorkoutScheduleEntry(user_id=user_id, day_of_week=day_of_week, muscle_group_id=muscle_group_id))
    await db.flush()
    return True


async def clear_day(db: AsyncSession, user_id: uuid.UUID, day_of_week: int) -> int:
    """Delete every row for (user, day); the day becomes unscheduled. Returns rows removed."""
    result = await db.execute(
        delete(WorkoutScheduleEntry).where(
            WorkoutScheduleEntry.user_id == user_id,
            WorkoutScheduleEntry.day_of_week == day_of_week,
        )
    )
    await db.flush()
    return result.rowcount or 0


async def set_rest_day(db: AsyncSession, user_id: uuid.UUID, day_of_week: int) -> None:
    """Replace the day's rows with the single rest-day sentinel."""
    await clear_day(db, user_id, day_of_week)
    db.add(WorkoutScheduleEntry(user_id=user_id, day_of_week=day_of_week, muscle_group_id=None))
    await db.flush()


async def get_plan_groups(
    db: AsyncSession,
    user_id: uuid.UUID,
    muscle_group_ids: Sequence[uuid.UUID],
) -> list[tuple[MuscleGroup, list[Exercise]]]:
    """Scheduled muscle groups (by name) with the user's visible exercises.

    An exercise targeting several scheduled groups is listed once, under the first of them.
    """
    if not muscle_group_ids:
        return []
    groups_result = await db.execute(
        select(MuscleGroup).where(MuscleGroup.id.in_(muscle_group_ids)).order_by(MuscleGroup.name)
    )
    groups = list(groups_result.scalars().all())

    exercises_result = await db.execute(
        select(Exercise)
        .where(
            Exercise.user_id == user_id,
            Exercise.hidden.is_(False),
            Exercise.muscle_groups.any(MuscleGroup.id.in_(muscle_group_ids)),
        )
        .options(selectinload(Exercise.muscle_groups))
        .order_by(Exercise.name)
    )
    exercises = list(exercises_result.scalars().all())

    listed: set[uuid.UUID] = set()
    plan: list[tuple[MuscleGroup, list[Exercise]]] = []
    for group in groups:
        group_exercises = []
        for ex in exercises:
            if ex.id in listed:
                continue
            if any(mg.id == group.id for mg in ex.muscle_groups):
                group_exercises.append(ex)
                listed.add(ex.id)
        plan.append((group, group_exercises))
    return plan
