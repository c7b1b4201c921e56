"""Statistics chart schemas. Weights are in tonnes."""

from datetime import date
from uuid import UUID

from pydantic import BaseModel


class ChartPoint(BaseModel):
    date: date
    weight: float
    label: str


class ChartSeries(BaseModel):
    """One chart. has_data=False is the explicit "no data" state."""

    points: list[ChartPoint] = []
    has_data: bool = False

    @classmethod
    def of(cls, points: list[ChartPoint]) -> "ChartSeries":
        return cls(points=points, has_data=bool(points))


class WeeklyStats(BaseModel):
    from_date: date
    to_date: date
    series: ChartSeries


class MuscleGroupSeries(BaseModel):
    muscle_group_id: UUID
    name: str
    series: ChartSeries


class MuscleGroupStats(BaseModel):
    from_date: date
    to_date: date
    muscle_groups: list[MuscleGroupSeries]


class DailyStats(BaseModel):
    from_date: date
    to_date: date
    series: ChartSeries


class WeekdaySeries(BaseModel):
    day_of_week: int
    name: str
    series: ChartSeries


class WeekdayStats(BaseModel):
    from_date: date
    to_date: date
    weekdays: list[WeekdaySeries]
