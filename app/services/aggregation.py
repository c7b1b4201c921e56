"""Session aggregation: turn exercise entries into comparable kg totals.

Per-exercise total:
- uniform entry: weight * reps * sets
- per-set entry: sum of weight * reps over the sets

Totals roll up exercise -> muscle group -> workout. A day plan maps each muscle group
to the exercises listed under it; an exercise is listed under one group only, so the
workout total never counts it twice.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from uuid import UUID

from app.schemas.workout import PerSetEntry, SetEntry, UniformEntry, WorkoutSummary

Entry = UniformEntry | PerSetEntry


def exercise_total(entry: Entry) -> float:
    """Total lifted weight (kg) for one exercise entry, to 2 decimals."""
    if isinstance(entry, PerSetEntry):
        total = sum(s.weight * s.reps for s in entry.sets)
    else:
        total = entry.weight * entry.reps * entry.sets
    return round(total, 2)


def is_filled(entry: Entry | None) -> bool:
    if entry is None:
        return False
    if isinstance(entry, PerSetEntry):
        return bool(entry.sets) and all(s.weight > 0 and s.reps > 0 for s in entry.sets)
    return entry.weight > 0 and entry.reps > 0 and entry.sets > 0


def muscle_group_totals(
    plan: Mapping[UUID, Iterable[UUID]],
    entries: Mapping[UUID, Entry],
) -> dict[UUID, float]:
    """Sum exercise totals per muscle group. Exercises without an entry count as 0."""
    totals: dict[UUID, float] = {}
    for group_id, exercise_ids in plan.items():
        group_total = sum(exercise_total(entries[ex_id]) for ex_id in exercise_ids if ex_id in entries)
        totals[group_id] = round(group_total, 2)
    return totals


def workout_total(group_totals: Mapping[UUID, float]) -> float:
    return round(sum(group_totals.values()), 2)


def all_exercises_filled(
    plan: Mapping[UUID, Iterable[UUID]],
    entries: Mapping[UUID, Entry],
) -> bool:
    """Save gate: every planned exercise has an entry with weight, reps and sets above zero."""
    return all(is_filled(entries.get(ex_id)) for exercise_ids in plan.values() for ex_id in exercise_ids)


def summarize(
    plan: Mapping[UUID, Iterable[UUID]],
    entries: Mapping[UUID, Entry],
) -> WorkoutSummary:
    """Everything the workout screen shows: per-exercise, per-group and workout totals."""
    plan = {group_id: list(exercise_ids) for group_id, exercise_ids in plan.items()}
    group_totals = muscle_group_totals(plan, entries)
    exercise_totals = {ex_id: exercise_total(entry) for ex_id, entry in entries.items()}
    if plan:
        total = workout_total(group_totals)
    else:
        # Unscheduled day: nothing to group by, sum whatever was logged
        total = round(sum(exercise_totals.values()), 2)
    return WorkoutSummary(
        exercise_totals=exercise_totals,
        muscle_group_totals=group_totals,
        workout_total=total,
        all_exercises_filled=all_exercises_filled(plan, entries),
    )


# ── Mode switching ───────────────────────────────────────────────────────


def to_per_set(entry: Entry) -> PerSetEntry:
    """Switch to per-set mode; each set starts from the uniform weight/reps."""
    if isinstance(entry, PerSetEntry):
        return entry
    return PerSetEntry(sets=[SetEntry(weight=entry.weight, reps=entry.reps) for _ in range(entry.sets)])


def to_uniform(entry: Entry) -> UniformEntry:
    """Switch back to uniform mode; set 1 supplies weight/reps and the set count is kept."""
    if isinstance(entry, UniformEntry):
        return entry
    first = entry.sets[0]
    return UniformEntry(weight=first.weight, reps=first.reps, sets=len(entry.sets))


def sync_first_set(entry: PerSetEntry, weight: float, reps: int) -> PerSetEntry:
    """Apply the simple-mode weight/reps to set 1; they stay authoritative for it."""
    first = SetEntry(weight=weight, reps=reps)
    return PerSetEntry(sets=[first, *entry.sets[1:]])


def edit_entry(entry: Entry, mode: str, first_set: SetEntry | None = None) -> Entry:
    """Switch mode, then apply typed simple-mode values to set 1 (or to the uniform entry)."""
    if mode == "per_set":
        edited = to_per_set(entry)
        if first_set is not None:
            edited = sync_first_set(edited, first_set.weight, first_set.reps)
        return edited
    edited = to_uniform(entry)
    if first_set is not None:
        edited = UniformEntry(weight=first_set.weight, reps=first_set.reps, sets=edited.sets)
    return edited
