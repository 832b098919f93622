"""ORM models - import all so Base.metadata is complete for migrations."""

from planner.models.exercise import Exercise, ExerciseMuscle
from planner.models.muscle import Muscle, MuscleCategory
from planner.models.plan import Plan
from planner.models.workout import SetExercise, Workout, WorkoutSet

__all__ = [
    "Exercise",
    "ExerciseMuscle",
    "Muscle",
    "MuscleCategory",
    "Plan",
    "SetExercise",
    "Workout",
    "WorkoutSet",
]
