from datetime import date, timedelta

import pytest

from app.core.enums import WeekStart
from app.services.statistics import (
    WeightPoint,
    daily_buckets,
    sum_by_date,
    week_number,
    week_year,
    week_start,
    weekday_buckets,
    weekly_buckets,
)


def test_same_date_points_are_summed():
    points = [WeightPoint(date(2024, 1, 1), 100), WeightPoint(date(2024, 1, 1), 50)]
    assert sum_by_date(points) == {date(2024, 1, 1): 150}


def test_weekly_bucket_sums_the_week_in_tonnes():
    points = [WeightPoint(date(2024, 1, 1), 100), WeightPoint(date(2024, 1, 3), 100)]
    [bucket] = weekly_buckets(points)
    assert bucket.weight == 0.2
    assert bucket.date == date(2023, 12, 31)
    assert bucket.label == "W1 2024"


def test_monday_weeks_use_iso_numbering():
    points = [WeightPoint(date(2024, 1, 1), 100), WeightPoint(date(2024, 1, 7), 300)]
    [bucket] = weekly_buckets(points, WeekStart.MONDAY)
    assert bucket.date == date(2024, 1, 1)
    assert bucket.weight == 0.4
    assert bucket.label == "W1 2024"


def test_week_start_and_number():
    assert week_start(date(2024, 1, 10)) == date(2024, 1, 7)
    assert week_start(date(2024, 1, 10), WeekStart.MONDAY) == date(2024, 1, 8)
    assert week_number(date(2024, 1, 7)) == 2
    assert week_number(date(2024, 12, 29)) == 1


def test_week_label_uses_the_numbering_year():
    assert week_year(date(2023, 12, 31)) == 2024
    assert week_year(date(2024, 12, 29)) == 2025
    assert week_year(date(2024, 12, 22)) == 2024
    # ISO years: 2024-12-30 opens W1 2025, 2020-12-28 is W53 2020
    assert week_year(date(2024, 12, 30), WeekStart.MONDAY) == 2025
    assert week_year(date(2020, 12, 28), WeekStart.MONDAY) == 2020

    points = [WeightPoint(date(2024, 12, 31), 1000)]
    assert weekly_buckets(points)[0].label == "W1 2025"
    assert weekly_buckets(points, WeekStart.MONDAY)[0].label == "W1 2025"


def test_weekly_buckets_are_ascending():
    points = [WeightPoint(date(2024, 1, 15), 100), WeightPoint(date(2024, 1, 1), 100)]
    assert [b.date for b in weekly_buckets(points)] == [date(2023, 12, 31), date(2024, 1, 14)]


def test_last_n_keeps_most_recent_in_ascending_order():
    start = date(2024, 1, 1)
    points = [WeightPoint(start + timedelta(days=i), 1000 * (i + 1)) for i in reversed(range(10))]
    buckets = daily_buckets(points, 7)
    assert [b.date for b in buckets] == [start + timedelta(days=i) for i in range(3, 10)]
    assert buckets[0].weight == 4.0
    assert buckets[0].label == "04/01/2024"


def test_weekday_buckets_only_keep_that_weekday():
    start = date(2024, 1, 1)  # Monday
    points = [WeightPoint(start + timedelta(days=i), 500) for i in range(21)]
    buckets = weekday_buckets(points, 1)
    assert [b.date for b in buckets] == [date(2024, 1, 1), date(2024, 1, 8), date(2024, 1, 15)]


def test_no_points_means_no_buckets():
    assert daily_buckets([]) == []
    assert weekly_buckets([]) == []


async def _save(client, on_date, exercise_data):
    resp = await client.post("/api/v1/workouts", json={"currentDate": on_date, "exerciseData": exercise_data})
    assert resp.status_code == 200, resp.text


@pytest.mark.asyncio
async def test_weekly_endpoint(client, muscle_groups, make_exercise):
    bench = await make_exercise("Bench Press", muscle_groups["Chest"])
    await _save(client, "2024-01-01", {bench: {"weight": 50, "reps": 8, "sets": 3}})
    await _save(client, "2024-01-03", {bench: {"weight": 50, "reps": 8, "sets": 3}})

    resp = await client.get(
        "/api/v1/statistics/weekly", params={"from_date": "2023-12-25", "to_date": "2024-01-10"}
    )
    assert resp.status_code == 200
    series = resp.json()["series"]
    assert series["has_data"] is True
    assert series["points"] == [{"date": "2023-12-31", "weight": 2.4, "label": "W1 2024"}]


@pytest.mark.asyncio
async def test_weekly_endpoint_without_data(client):
    resp = await client.get(
        "/api/v1/statistics/weekly", params={"from_date": "2024-01-01", "to_date": "2024-01-31"}
    )
    assert resp.json()["series"] == {"points": [], "has_data": False}


@pytest.mark.asyncio
async def test_reversed_range_is_rejected(client):
    resp = await client.get(
        "/api/v1/statistics/weekly", params={"from_date": "2024-02-01", "to_date": "2024-01-01"}
    )
    assert resp.status_code == 400


@pytest.mark.asyncio
async def test_multi_group_exercise_counts_toward_each_group(client, muscle_groups, make_exercise):
    dips = await make_exercise("Dips", muscle_groups["Chest"], muscle_groups["Triceps"])
    await _save(client, "2024-01-01", {dips: {"weight": 20, "reps": 10, "sets": 3}})

    resp = await client.get(
        "/api/v1/statistics/muscle-groups", params={"from_date": "2023-12-25", "to_date": "2024-01-10"}
    )
    assert resp.status_code == 200
    by_name = {g["name"]: g["series"] for g in resp.json()["muscle_groups"]}
    assert len(by_name) == len(muscle_groups)
    assert by_name["Chest"]["points"] == [{"date": "2024-01-01", "weight": 0.6, "label": "01/01/2024"}]
    assert by_name["Triceps"]["points"] == by_name["Chest"]["points"]
    assert by_name["Back"]["has_data"] is False


@pytest.mark.asyncio
async def test_daily_and_weekday_endpoints(client, muscle_groups, make_exercise):
    bench = await make_exercise("Bench Press", muscle_groups["Chest"])
    today = date.today()
    await _save(client, today.isoformat(), {bench: {"weight": 100, "reps": 10, "sets": 1}})

    resp = await client.get("/api/v1/statistics/daily")
    assert resp.status_code == 200
    assert resp.json()["series"]["points"] == [
        {"date": today.isoformat(), "weight": 1.0, "label": today.strftime("%d/%m/%Y")}
    ]

    resp = await client.get("/api/v1/statistics/weekdays")
    weekdays = resp.json()["weekdays"]
    assert [w["day_of_week"] for w in weekdays] == list(range(7))
    with_data = [w for w in weekdays if w["series"]["has_data"]]
    assert len(with_data) == 1
    assert with_data[0]["day_of_week"] == (today.weekday() + 1) % 7


@pytest.mark.asyncio
async def test_muscle_group_series_keeps_last_seven_training_days(client, muscle_groups, make_exercise):
    bench = await make_exercise("Bench Press", muscle_groups["Chest"])
    first = date(2024, 1, 1)
    for i in range(9):
        on_date = first + timedelta(days=2 * i)
        await _save(client, on_date.isoformat(), {bench: {"weight": 10 * (i + 1), "reps": 10, "sets": 1}})

    resp = await client.get(
        "/api/v1/statistics/muscle-groups", params={"from_date": "2023-12-25", "to_date": "2024-02-01"}
    )
    by_name = {g["name"]: g["series"] for g in resp.json()["muscle_groups"]}
    points = by_name["Chest"]["points"]
    assert [p["date"] for p in points] == [(first + timedelta(days=2 * i)).isoformat() for i in range(2, 9)]
    assert points[0]["weight"] == 0.3
    assert points[-1]["weight"] == 0.9


@pytest.mark.asyncio
async def test_daily_window_covers_the_last_seven_days(client, muscle_groups, make_exercise):
    bench = await make_exercise("Bench Press", muscle_groups["Chest"])
    today = date.today()
    for days_ago in (8, 7, 0):
        on_date = today - timedelta(days=days_ago)
        await _save(client, on_date.isoformat(), {bench: {"weight": 100, "reps": 10, "sets": 1}})

    resp = await client.get("/api/v1/statistics/daily")
    body = resp.json()
    assert body["from_date"] == (today - timedelta(days=7)).isoformat()
    assert [p["date"] for p in body["series"]["points"]] == [
        (today - timedelta(days=7)).isoformat(),
        today.isoformat(),
    ]
