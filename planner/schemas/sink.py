"""Nested plan tree returned by the sink endpoint."""

from uuid import UUID

from planner.schemas.base import CamelModel


class SinkMuscle(CamelModel):
    muscle_id: UUID
    muscle_category_id: UUID
    name: str


class SinkExercise(CamelModel):
    exercise_id: UUID
    name: str
    description: str | None = None
    image_url: str | None = None
    order: int = 0
    duration: str | None = None
    unit: str | None = None
    count: int = 0
    muscles: list[SinkMuscle] = []


class SinkSet(CamelModel):
    set_id: UUID
    name: str
    order: int = 0
    exercises: list[SinkExercise] = []


class SinkWorkout(CamelModel):
    workout_id: UUID
    name: str
    description: str | None = None
    sets: list[SinkSet] = []


class SinkPlan(CamelModel):
    plan_id: UUID
    name: str
    description: str | None = None
    workouts: list[SinkWorkout] = []
