"""Workout schedule schemas."""

from uuid import UUID

from pydantic import BaseModel

from app.core.enums import DayState
from app.schemas.muscle_group import MuscleGroupRead


class DayScheduleRead(BaseModel):
    day_of_week: int
    day_name: str
    state: DayState
    is_today: bool = False
    muscle_groups: list[MuscleGroupRead] = []


class WeekScheduleRead(BaseModel):
    """Monday-first week with today's entry moved to the front."""

    today: int
    days: list[DayScheduleRead]


class ToggleResult(BaseModel):
    muscle_group_id: UUID
    scheduled: bool
    day: DayScheduleRead
