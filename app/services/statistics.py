"""Statistics: time-bucketed lifted weight for charts.

Every series follows the same steps: sum kg per date (or per week start), sort ascending
by date, then keep the last N so "last N" means the most recent N. Weights are reported
in tonnes.
"""

from __future__ import annotations

import uuid
from collections import defaultdict
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date, timedelta

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.enums import WeekStart
from app.models.exercise import exercise_muscle_groups
from app.models.workout import WorkoutExercise, WorkoutSession
from app.schemas.statistics import ChartPoint
from app.services.schedule import day_of_week_for


@dataclass(frozen=True)
class WeightPoint:
    """Lifted kg attributed to one date."""

    date: date
    total_kg: float


def to_tonnes(kg: float) -> float:
    return round(kg / 1000, 4)


def sum_by_date(points: Iterable[WeightPoint]) -> dict[date, float]:
    totals: dict[date, float] = defaultdict(float)
    for p in points:
        totals[p.date] += p.total_kg
    return dict(totals)


def week_start(d: date, first_weekday: WeekStart = WeekStart.SUNDAY) -> date:
    if first_weekday == WeekStart.MONDAY:
        return d - timedelta(days=d.weekday())
    return d - timedelta(days=(d.weekday() + 1) % 7)


def week_year(start: date, first_weekday: WeekStart = WeekStart.SUNDAY) -> int:
    """The year a week is numbered in, which differs from start.year for weeks straddling 1 January."""
    if first_weekday == WeekStart.MONDAY:
        return start.isocalendar()[0]
    return (start + timedelta(days=6)).year


def week_number(start: date, first_weekday: WeekStart = WeekStart.SUNDAY) -> int:
    """ISO week for Monday weeks; for Sunday weeks, week 1 is the one containing 1 January."""
    if first_weekday == WeekStart.MONDAY:
        return start.isocalendar()[1]
    year = week_year(start, first_weekday)
    first = week_start(date(year, 1, 1), first_weekday)
    return (start - first).days // 7 + 1


def last_n(points: list[ChartPoint], n: int | None) -> list[ChartPoint]:
    """Sort ascending by date, then keep the n most recent."""
    ordered = sorted(points, key=lambda p: p.date)
    if n is None:
        return ordered
    return ordered[-n:] if n > 0 else []


def daily_buckets(points: Iterable[WeightPoint], n: int | None = None) -> list[ChartPoint]:
    chart = [
        ChartPoint(date=d, weight=to_tonnes(total), label=d.strftime("%d/%m/%Y"))
        for d, total in sum_by_date(points).items()
    ]
    return last_n(chart, n)


def weekly_buckets(
    points: Iterable[WeightPoint],
    first_weekday: WeekStart = WeekStart.SUNDAY,
) -> list[ChartPoint]:
    totals: dict[date, float] = defaultdict(float)
    for d, total in sum_by_date(points).items():
        totals[week_start(d, first_weekday)] += total
    chart = [
        ChartPoint(
            date=start,
            weight=to_tonnes(total),
            label=f"W{week_number(start, first_weekday)} {week_year(start, first_weekday)}",
        )
        for start, total in totals.items()
    ]
    return last_n(chart, None)


def weekday_buckets(points: Iterable[WeightPoint], day_of_week: int, n: int | None = None) -> list[ChartPoint]:
    """Daily buckets restricted to one weekday (0 = Sunday)."""
    return daily_buckets((p for p in points if day_of_week_for(p.date) == day_of_week), n)


# ── Loaders ──────────────────────────────────────────────────────────────


async def load_daily_points(
    db: AsyncSession,
    user_id: uuid.UUID,
    from_date: date,
    to_date: date,
) -> list[WeightPoint]:
    """Per-date kg totals for the user's sessions in [from_date, to_date]. Summed in SQL."""
    result = await db.execute(
        select(WorkoutSession.date, func.sum(WorkoutExercise.total_weight).label("total"))
        .join(WorkoutExercise, WorkoutExercise.session_id == WorkoutSession.id)
        .where(
            WorkoutSession.user_id == user_id,
            WorkoutSession.date >= from_date,
            WorkoutSession.date <= to_date,
        )
        .group_by(WorkoutSession.date)
    )
    return [WeightPoint(date=_as_date(r.date), total_kg=float(r.total or 0)) for r in result.all()]


async def load_muscle_group_points(
    db: AsyncSession,
    user_id: uuid.UUID,
    from_date: date,
    to_date: date,
) -> dict[uuid.UUID, list[WeightPoint]]:
    """Per-date kg totals keyed by muscle group. An exercise counts toward every group it targets."""
    mg_id = exercise_muscle_groups.c.muscle_group_id
    result = await db.execute(
        select(mg_id, WorkoutSession.date, func.sum(WorkoutExercise.total_weight).label("total"))
        .select_from(WorkoutExercise)
        .join(WorkoutSession, WorkoutSession.id == WorkoutExercise.session_id)
        .join(exercise_muscle_groups, exercise_muscle_groups.c.exercise_id == WorkoutExercise.exercise_id)
        .where(
            WorkoutSession.user_id == user_id,
            WorkoutSession.date >= from_date,
            WorkoutSession.date <= to_date,
        )
        .group_by(mg_id, WorkoutSession.date)
    )
    by_group: dict[uuid.UUID, list[WeightPoint]] = defaultdict(list)
    for r in result.all():
        by_group[r.muscle_group_id].append(WeightPoint(date=_as_date(r.date), total_kg=float(r.total or 0)))
    return dict(by_group)


def _as_date(value) -> date:
    # SQLite hands grouped dates back as ISO strings
    if isinstance(value, str):
        return date.fromisoformat(value)
    return value
