"""ORM models - import all so Base.metadata is complete for migrations."""

from app.models.exercise import Exercise, exercise_muscle_groups
from app.models.muscle_group import MuscleGroup
from app.models.schedule import WorkoutScheduleEntry
from app.models.workout import WorkoutExercise, WorkoutExerciseSet, WorkoutSession

__all__ = [
    "Exercise",
    "MuscleGroup",
    "WorkoutExercise",
    "WorkoutExerciseSet",
    "WorkoutScheduleEntry",
    "WorkoutSession",
    "exercise_muscle_groups",
]
