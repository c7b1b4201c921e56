"""Workout session schemas.

An exercise entry is either uniform (one weight/reps pair applied to every set) or
per-set (weight/reps for each set). The older flat shape
``{weight, reps, sets, usesIndividualSets, individualSets}`` is accepted on input
and normalized to one of the two.
"""

from datetime import date
from typing import Annotated, Any, Literal, Union
from uuid import UUID

from pydantic import AfterValidator, AliasChoices, BaseModel, BeforeValidator, ConfigDict, Field

from app.core.constants import MAX_REPS, MAX_SETS, MAX_WEIGHT
from app.core.enums import DayState


def _at_most_two_decimals(value: float) -> float:
    # Stored as NUMERIC(6, 2); anything finer would be rounded away on save
    if round(value, 2) != value:
        raise ValueError("Weight can have at most 2 decimal places")
    return value


Weight = Annotated[float, Field(gt=0, le=MAX_WEIGHT), AfterValidator(_at_most_two_decimals)]
Reps = Annotated[int, Field(ge=1, le=MAX_REPS)]
SetCount = Annotated[int, Field(ge=1, le=MAX_SETS)]


class SetEntry(BaseModel):
    weight: Weight
    reps: Reps


class UniformEntry(BaseModel):
    mode: Literal["uniform"] = "uniform"
    weight: Weight
    reps: Reps
    sets: SetCount


class PerSetEntry(BaseModel):
    mode: Literal["per_set"] = "per_set"
    sets: list[SetEntry] = Field(..., min_length=1, max_length=MAX_SETS)


def _normalize_entry(value: Any) -> Any:
    """Map the flat legacy shape onto the tagged one; tagged input passes through."""
    if not isinstance(value, dict) or "mode" in value:
        return value
    uses_individual = value.get("usesIndividualSets", value.get("uses_individual_sets", False))
    individual = value.get("individualSets", value.get("individual_sets")) or []
    if uses_individual and individual:
        return {"mode": "per_set", "sets": individual}
    return {
        "mode": "uniform",
        "weight": value.get("weight"),
        "reps": value.get("reps"),
        "sets": value.get("sets"),
    }


ExerciseEntry = Annotated[
    Annotated[Union[UniformEntry, PerSetEntry], Field(discriminator="mode")],
    BeforeValidator(_normalize_entry),
]


class WorkoutSave(BaseModel):
    """Body of the save-workout call: the day and its exercise map."""

    model_config = ConfigDict(populate_by_name=True)
    current_date: date = Field(..., validation_alias=AliasChoices("current_date", "currentDate"))
    exercise_data: dict[UUID, ExerciseEntry] = Field(
        default_factory=dict, validation_alias=AliasChoices("exercise_data", "exerciseData")
    )


class WorkoutSummaryRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)
    current_date: date | None = Field(None, validation_alias=AliasChoices("current_date", "currentDate"))
    exercise_data: dict[UUID, ExerciseEntry] = Field(
        default_factory=dict, validation_alias=AliasChoices("exercise_data", "exerciseData")
    )


class WorkoutSummary(BaseModel):
    """Totals in kg for one day's entries, plus the save gate."""

    exercise_totals: dict[UUID, float] = {}
    muscle_group_totals: dict[UUID, float] = {}
    workout_total: float = 0.0
    all_exercises_filled: bool = False


class EntryEdit(BaseModel):
    """An entry being edited: switch it to `mode`, optionally typing new simple-mode values for set 1."""

    entry: ExerciseEntry
    mode: Literal["uniform", "per_set"]
    first_set: SetEntry | None = None


class EditedEntry(BaseModel):
    entry: ExerciseEntry
    total: float


class WorkoutByDate(BaseModel):
    exercise_data: dict[UUID, ExerciseEntry] | None = None


class WorkoutSaved(BaseModel):
    message: str
    session_id: UUID
    date: date
    summary: WorkoutSummary


class PlanExercise(BaseModel):
    id: UUID
    name: str
    description: str | None = None
    external_link: str | None = None
    external_link_name: str | None = None
    rest_time_seconds: int
    previous: ExerciseEntry | None = None


class PlanMuscleGroup(BaseModel):
    id: UUID
    name: str
    exercises: list[PlanExercise] = []


class DayPlan(BaseModel):
    """What to train on a date: the resolved schedule state plus exercises with prefill values."""

    date: date
    day_of_week: int
    day_name: str
    state: DayState
    muscle_groups: list[PlanMuscleGroup] = []
