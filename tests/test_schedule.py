import uuid
from datetime import date

import pytest

from app.core.enums import DayState
from app.models.schedule import WorkoutScheduleEntry
from app.services.schedule import day_of_week_for, ordered_days, resolve_day

MONDAY = 1


def test_day_numbering_starts_on_sunday():
    assert day_of_week_for(date(2024, 1, 7)) == 0
    assert day_of_week_for(date(2024, 1, 1)) == 1
    assert day_of_week_for(date(2024, 1, 6)) == 6


def test_week_is_monday_first_with_today_in_front():
    assert ordered_days(1) == [1, 2, 3, 4, 5, 6, 0]
    assert ordered_days(0) == [0, 1, 2, 3, 4, 5, 6]
    assert ordered_days(3) == [3, 1, 2, 4, 5, 6, 0]


def test_resolve_day_states():
    group = uuid.uuid4()
    entries = [
        WorkoutScheduleEntry(day_of_week=1, muscle_group_id=group),
        WorkoutScheduleEntry(day_of_week=3, muscle_group_id=None),
    ]
    assert resolve_day(1, entries).state == DayState.TRAINING
    assert resolve_day(1, entries).muscle_group_ids == (group,)
    assert resolve_day(3, entries).state == DayState.REST
    assert resolve_day(5, entries).state == DayState.UNSCHEDULED


@pytest.mark.asyncio
async def test_toggle_twice_leaves_day_unscheduled(client, muscle_groups):
    chest = muscle_groups["Chest"]
    url = f"/api/v1/schedule/{MONDAY}/muscle-groups/{chest}/toggle"

    resp = await client.post(url)
    assert resp.status_code == 200
    body = resp.json()
    assert body["scheduled"] is True
    assert body["day"]["state"] == "training"
    assert [mg["name"] for mg in body["day"]["muscle_groups"]] == ["Chest"]

    resp = await client.post(url)
    body = resp.json()
    assert body["scheduled"] is False
    assert body["day"]["state"] == "unscheduled"


@pytest.mark.asyncio
async def test_rest_day_is_distinct_from_unscheduled(client, muscle_groups, schedule_group):
    await schedule_group(MONDAY, muscle_groups["Chest"])

    resp = await client.put(f"/api/v1/schedule/{MONDAY}/rest")
    assert resp.status_code == 200
    assert resp.json()["state"] == "rest"
    assert resp.json()["muscle_groups"] == []

    resp = await client.delete(f"/api/v1/schedule/{MONDAY}")
    assert resp.status_code == 200
    assert resp.json()["state"] == "unscheduled"


@pytest.mark.asyncio
async def test_adding_group_to_rest_day_makes_it_training(client, muscle_groups, schedule_group):
    await client.put(f"/api/v1/schedule/{MONDAY}/rest")
    await schedule_group(MONDAY, muscle_groups["Back"])

    resp = await client.get(f"/api/v1/schedule/{MONDAY}")
    assert resp.json()["state"] == "training"
    assert [mg["name"] for mg in resp.json()["muscle_groups"]] == ["Back"]


@pytest.mark.asyncio
async def test_toggle_twice_on_rest_day_returns_to_rest(client, muscle_groups):
    await client.put(f"/api/v1/schedule/{MONDAY}/rest")
    url = f"/api/v1/schedule/{MONDAY}/muscle-groups/{muscle_groups['Chest']}/toggle"

    resp = await client.post(url)
    assert resp.json()["day"]["state"] == "training"
    resp = await client.post(url)
    assert resp.json()["scheduled"] is False
    assert resp.json()["day"]["state"] == "rest"

    resp = await client.get(f"/api/v1/schedule/{MONDAY}")
    assert resp.json()["state"] == "rest"


@pytest.mark.asyncio
async def test_week_lists_every_day_today_first(client, muscle_groups, schedule_group):
    await schedule_group(MONDAY, muscle_groups["Quads"])
    await schedule_group(MONDAY, muscle_groups["Chest"])

    resp = await client.get("/api/v1/schedule")
    assert resp.status_code == 200
    body = resp.json()
    days = body["days"]
    assert len(days) == 7
    assert days[0]["day_of_week"] == body["today"]
    assert days[0]["is_today"] is True
    assert sorted(d["day_of_week"] for d in days) == list(range(7))
    monday = next(d for d in days if d["day_of_week"] == MONDAY)
    assert monday["day_name"] == "Monday"
    assert [mg["name"] for mg in monday["muscle_groups"]] == ["Chest", "Quads"]


@pytest.mark.asyncio
async def test_unknown_group_and_bad_day(client, muscle_groups):
    resp = await client.post(f"/api/v1/schedule/{MONDAY}/muscle-groups/{uuid.uuid4()}/toggle")
    assert resp.status_code == 404

    resp = await client.post(f"/api/v1/schedule/7/muscle-groups/{muscle_groups['Chest']}/toggle")
    assert resp.status_code == 422
