"""Set and SetExercise schemas."""

from uuid import UUID

from pydantic import Field

from planner.schemas.base import CamelModel


class SetBase(CamelModel):
    workout_id: UUID
    name: str = Field(..., min_length=1, max_length=255)
    order: int = 0


class SetCreate(SetBase):
    pass


class SetUpdate(SetBase):
    pass


class SetRead(SetBase):
    set_id: UUID


class SetExerciseBase(CamelModel):
    set_id: UUID
    exercise_id: UUID
    order: int = 0
    duration: str | None = Field(None, max_length=50)
    unit: str | None = Field(None, max_length=20)
    count: int = 0


class SetExerciseCreate(SetExerciseBase):
    pass


class SetExerciseUpdate(SetExerciseBase):
    pass


class SetExerciseRead(SetExerciseBase):
    id: UUID


class SetExerciseDetail(SetExerciseRead):
    """Set exercise row joined with its exercise (name, description, image)."""

    exercise_name: str
    description: str | None = None
    image_url: str | None = None
