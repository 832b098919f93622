"""Exercise and ExerciseMuscle schemas."""

from uuid import UUID

from pydantic import Field

from planner.schemas.base import CamelModel


class ExerciseBase(CamelModel):
    name: str = Field(..., min_length=1, max_length=255)
    description: str | None = Field(None, max_length=1000)
    image_url: str | None = Field(None, max_length=1000)


class ExerciseCreate(ExerciseBase):
    pass


class ExerciseUpdate(ExerciseBase):
    pass


class ExerciseRead(ExerciseBase):
    exercise_id: UUID


class ExerciseMuscleBase(CamelModel):
    exercise_id: UUID
    muscle_id: UUID


class ExerciseMuscleCreate(ExerciseMuscleBase):
    pass


class ExerciseMuscleUpdate(ExerciseMuscleBase):
    pass


class ExerciseMuscleRead(ExerciseMuscleBase):
    id: UUID
