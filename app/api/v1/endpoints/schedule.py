"""Weekly schedule: assign muscle groups to weekdays (0 = Sunday .. 6 = Saturday)."""

from __future__ import annotations

import uuid
from datetime import date
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Path
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_current_user
from app.core.enums import WEEKDAY_NAMES
from app.db.session import get_db
from app.models.muscle_group import MuscleGroup
from app.models.schedule import WorkoutScheduleEntry
from app.schemas.muscle_group import MuscleGroupRead
from app.schemas.schedule import DayScheduleRead, ToggleResult, WeekScheduleRead
from app.services import schedule as schedule_service
from app.services.auth_provider import AuthenticatedUser

router = APIRouter()

DayOfWeek = Annotated[int, Path(ge=0, le=6, description="0 = Sunday .. 6 = Saturday")]


def _day_read(day_of_week: int, entries: list[WorkoutScheduleEntry], today: int) -> DayScheduleRead:
    resolved = schedule_service.resolve_day(day_of_week, entries)
    groups = sorted(
        (e.muscle_group for e in entries if e.day_of_week == day_of_week and e.muscle_group is not None),
        key=lambda mg: mg.name,
    )
    return DayScheduleRead(
        day_of_week=day_of_week,
        day_name=WEEKDAY_NAMES[day_of_week],
        state=resolved.state,
        is_today=day_of_week == today,
        muscle_groups=[MuscleGroupRead.model_validate(mg) for mg in groups],
    )


async def _read_day(db: AsyncSession, user_id: uuid.UUID, day_of_week: int) -> DayScheduleRead:
    entries = await schedule_service.get_day_entries(db, user_id, day_of_week)
    return _day_read(day_of_week, entries, schedule_service.day_of_week_for(date.today()))


@router.get("", response_model=WeekScheduleRead)
async def get_week(
    db: AsyncSession = Depends(get_db),
    user: AuthenticatedUser = Depends(get_current_user),
):
    """The whole week, Monday first, with today moved to the front."""
    today = schedule_service.day_of_week_for(date.today())
    entries = await schedule_service.get_week_entries(db, user.id)
    return WeekScheduleRead(
        today=today,
        days=[_day_read(d, entries, today) for d in schedule_service.ordered_days(today)],
    )


@router.get("/{day_of_week}", response_model=DayScheduleRead)
async def get_day(
    day_of_week: DayOfWeek,
    db: AsyncSession = Depends(get_db),
    user: AuthenticatedUser = Depends(get_current_user),
):
    return await _read_day(db, user.id, day_of_week)


@router.post("/{day_of_week}/muscle-groups/{muscle_group_id}/toggle", response_model=ToggleResult)
async def toggle_muscle_group(
    muscle_group_id: uuid.UUID,
    day_of_week: DayOfWeek,
    db: AsyncSession = Depends(get_db),
    user: AuthenticatedUser = Depends(get_current_user),
):
    """Add the muscle group to the day, or remove it if already there."""
    exists = await db.execute(select(MuscleGroup.id).where(MuscleGroup.id == muscle_group_id))
    if exists.scalar_one_or_none() is None:
        raise HTTPException(status_code=404, detail="Muscle group not found")
    scheduled = await schedule_service.toggle_muscle_group(db, user.id, day_of_week, muscle_group_id)
    return ToggleResult(
        muscle_group_id=muscle_group_id,
        scheduled=scheduled,
        day=await _read_day(db, user.id, day_of_week),
    )


@router.put("/{day_of_week}/rest", response_model=DayScheduleRead)
async def set_rest_day(
    day_of_week: DayOfWeek,
    db: AsyncSession = Depends(get_db),
    user: AuthenticatedUser = Depends(get_current_user),
):
    """Mark the day as an explicit rest day (replaces its muscle groups)."""
    await schedule_service.set_rest_day(db, user.id, day_of_week)
    return await _read_day(db, user.id, day_of_week)


@router.delete("/{day_of_week}", response_model=DayScheduleRead)
async def clear_day(
    day_of_week: DayOfWeek,
    db: AsyncSession = Depends(get_db),
    user: AuthenticatedUser = Depends(get_current_user),
):
    """Remove every entry for the day; it becomes unscheduled (not a rest day)."""
    await schedule_service.clear_day(db, user.id, day_of_week)
    return await _read_day(db, user.id, day_of_week)
