import uuid

import pytest
from pydantic import ValidationError

from app.schemas.workout import PerSetEntry, SetEntry, UniformEntry, WorkoutSave
from app.services.aggregation import (
    all_exercises_filled,
    exercise_total,
    muscle_group_totals,
    summarize,
    sync_first_set,
    to_per_set,
    to_uniform,
    workout_total,
)

CHEST = uuid.uuid4()
BACK = uuid.uuid4()
BENCH = uuid.uuid4()
FLY = uuid.uuid4()
ROW = uuid.uuid4()


def test_uniform_total_is_weight_reps_sets():
    assert exercise_total(UniformEntry(weight=50, reps=8, sets=3)) == 1200


def test_per_set_total_sums_each_set():
    entry = PerSetEntry(sets=[SetEntry(weight=50, reps=8), SetEntry(weight=55, reps=6)])
    assert exercise_total(entry) == 730


def test_fractional_weight_rounds_to_two_decimals():
    assert exercise_total(UniformEntry(weight=22.5, reps=3, sets=1)) == 67.5
    assert exercise_total(PerSetEntry(sets=[SetEntry(weight=0.1, reps=3)])) == 0.3


def test_group_and_workout_totals():
    plan = {CHEST: [BENCH, FLY], BACK: [ROW]}
    entries = {
        BENCH: UniformEntry(weight=100, reps=5, sets=5),
        FLY: UniformEntry(weight=20, reps=10, sets=3),
        ROW: PerSetEntry(sets=[SetEntry(weight=80, reps=10), SetEntry(weight=80, reps=8)]),
    }
    totals = muscle_group_totals(plan, entries)
    assert totals == {CHEST: 3100, BACK: 1440}
    assert workout_total(totals) == 4540


def test_missing_entry_counts_as_zero_and_blocks_save():
    plan = {CHEST: [BENCH, FLY]}
    entries = {BENCH: UniformEntry(weight=100, reps=5, sets=5)}
    assert muscle_group_totals(plan, entries) == {CHEST: 2500}
    assert all_exercises_filled(plan, entries) is False


def test_empty_plan_is_filled():
    assert all_exercises_filled({}, {}) is True


def test_summarize_without_plan_sums_logged_entries():
    entries = {BENCH: UniformEntry(weight=50, reps=8, sets=3), ROW: UniformEntry(weight=40, reps=10, sets=2)}
    summary = summarize({}, entries)
    assert summary.workout_total == 2000
    assert summary.muscle_group_totals == {}
    assert summary.exercise_totals == {BENCH: 1200, ROW: 800}
    assert summary.all_exercises_filled is True


def test_summarize_with_plan_matches_group_sum():
    plan = {CHEST: [BENCH], BACK: [ROW]}
    entries = {BENCH: UniformEntry(weight=50, reps=8, sets=3), ROW: UniformEntry(weight=40, reps=10, sets=2)}
    summary = summarize(plan, entries)
    assert summary.workout_total == sum(summary.muscle_group_totals.values())
    assert summary.all_exercises_filled is True


def test_switch_to_per_set_copies_uniform_values():
    entry = to_per_set(UniformEntry(weight=60, reps=10, sets=3))
    assert [(s.weight, s.reps) for s in entry.sets] == [(60, 10)] * 3
    assert exercise_total(entry) == 1800


def test_switch_back_to_uniform_uses_first_set():
    entry = PerSetEntry(sets=[SetEntry(weight=60, reps=10), SetEntry(weight=70, reps=6)])
    uniform = to_uniform(entry)
    assert (uniform.weight, uniform.reps, uniform.sets) == (60, 10, 2)


def test_simple_values_stay_authoritative_for_first_set():
    entry = PerSetEntry(sets=[SetEntry(weight=60, reps=10), SetEntry(weight=70, reps=6)])
    synced = sync_first_set(entry, 65, 8)
    assert [(s.weight, s.reps) for s in synced.sets] == [(65, 8), (70, 6)]


def test_flat_shape_is_normalized():
    payload = WorkoutSave.model_validate(
        {
            "currentDate": "2024-01-01",
            "exerciseData": {
                str(BENCH): {"weight": 50, "reps": 8, "sets": 3},
                str(ROW): {
                    "weight": 40,
                    "reps": 10,
                    "sets": 2,
                    "usesIndividualSets": True,
                    "individualSets": [{"weight": 40, "reps": 10}, {"weight": 45, "reps": 8}],
                },
            },
        }
    )
    assert payload.exercise_data[BENCH] == UniformEntry(weight=50, reps=8, sets=3)
    assert isinstance(payload.exercise_data[ROW], PerSetEntry)
    assert len(payload.exercise_data[ROW].sets) == 2


def test_tagged_shape_is_accepted():
    payload = WorkoutSave.model_validate(
        {
            "current_date": "2024-01-01",
            "exercise_data": {str(BENCH): {"mode": "per_set", "sets": [{"weight": 50, "reps": 8}]}},
        }
    )
    assert isinstance(payload.exercise_data[BENCH], PerSetEntry)


@pytest.mark.parametrize(
    "entry",
    [
        {"weight": 0, "reps": 8, "sets": 3},
        {"weight": 2901, "reps": 8, "sets": 3},
        {"weight": 50, "reps": 0, "sets": 3},
        {"weight": 50, "reps": 8, "sets": 2901},
        {"mode": "per_set", "sets": []},
    ],
)
def test_out_of_range_entries_are_rejected(entry):
    with pytest.raises(ValidationError):
        WorkoutSave.model_validate({"currentDate": "2024-01-01", "exerciseData": {str(BENCH): entry}})
