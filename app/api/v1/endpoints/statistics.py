"""Statistics for charts: weekly, per muscle group, daily and per weekday (tonnes)."""

from __future__ import annotations

from datetime import date, timedelta

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_current_user
from app.core.config import get_settings
from app.core.constants import (
    DAILY_LOOKBACK_DAYS,
    DEFAULT_STATS_RANGE_WEEKS,
    LAST_N_BUCKETS,
    WEEKDAY_LOOKBACK_WEEKS,
)
from app.core.enums import WEEKDAY_NAMES
from app.db.session import get_db
from app.models.muscle_group import MuscleGroup
from app.schemas.statistics import (
    ChartSeries,
    DailyStats,
    MuscleGroupSeries,
    MuscleGroupStats,
    WeekdaySeries,
    WeekdayStats,
    WeeklyStats,
)
from app.services import statistics as stats
from app.services.auth_provider import AuthenticatedUser

router = APIRouter()


def _date_range(from_date: date | None, to_date: date | None) -> tuple[date, date]:
    """Selected range; defaults to the last few weeks up to today."""
    end = to_date or date.today()
    start = from_date or end - timedelta(weeks=DEFAULT_STATS_RANGE_WEEKS)
    if start > end:
        raise HTTPException(status_code=400, detail="from_date must be on or before to_date")
    return start, end


@router.get("/weekly", response_model=WeeklyStats)
async def weekly_weight(
    from_date: date | None = None,
    to_date: date | None = None,
    db: AsyncSession = Depends(get_db),
    user: AuthenticatedUser = Depends(get_current_user),
):
    """Total weight lifted per week in the selected range."""
    start, end = _date_range(from_date, to_date)
    points = await stats.load_daily_points(db, user.id, start, end)
    series = stats.weekly_buckets(points, get_settings().week_starts_on)
    return WeeklyStats(from_date=start, to_date=end, series=ChartSeries.of(series))


@router.get("/muscle-groups", response_model=MuscleGroupStats)
async def muscle_group_weight(
    from_date: date | None = None,
    to_date: date | None = None,
    db: AsyncSession = Depends(get_db),
    user: AuthenticatedUser = Depends(get_current_user),
):
    """Per muscle group: the most recent training days in the range."""
    start, end = _date_range(from_date, to_date)
    groups = (await db.execute(select(MuscleGroup).order_by(MuscleGroup.name))).scalars().all()
    by_group = await stats.load_muscle_group_points(db, user.id, start, end)
    return MuscleGroupStats(
        from_date=start,
        to_date=end,
        muscle_groups=[
            MuscleGroupSeries(
                muscle_group_id=mg.id,
                name=mg.name,
                series=ChartSeries.of(stats.daily_buckets(by_group.get(mg.id, []), LAST_N_BUCKETS)),
            )
            for mg in groups
        ],
    )


@router.get("/daily", response_model=DailyStats)
async def daily_weight(
    db: AsyncSession = Depends(get_db),
    user: AuthenticatedUser = Depends(get_current_user),
):
    """Total weight per day over the last week (today included)."""
    end = date.today()
    start = end - timedelta(days=DAILY_LOOKBACK_DAYS)
    points = await stats.load_daily_points(db, user.id, start, end)
    return DailyStats(from_date=start, to_date=end, series=ChartSeries.of(stats.daily_buckets(points)))


@router.get("/weekdays", response_model=WeekdayStats)
async def weekday_weight(
    db: AsyncSession = Depends(get_db),
    user: AuthenticatedUser = Depends(get_current_user),
):
    """For each weekday (Sunday first), its most recent occurrences over the last weeks."""
    end = date.today()
    start = end - timedelta(weeks=WEEKDAY_LOOKBACK_WEEKS)
    points = await stats.load_daily_points(db, user.id, start, end)
    return WeekdayStats(
        from_date=start,
        to_date=end,
        weekdays=[
            WeekdaySeries(
                day_of_week=dow,
                name=WEEKDAY_NAMES[dow],
                series=ChartSeries.of(stats.weekday_buckets(points, dow, LAST_N_BUCKETS)),
            )
            for dow in range(7)
        ],
    )
