"""Plan and Workout schemas."""

from uuid import UUID

from pydantic import Field

from planner.schemas.base import CamelModel


class PlanBase(CamelModel):
    name: str = Field(..., min_length=1, max_length=255)
    description: str | None = None


class PlanCreate(PlanBase):
    pass


class PlanUpdate(PlanBase):
    """Full replace: every field is required/overwritten."""

    pass


class PlanRead(PlanBase):
    plan_id: UUID


class WorkoutBase(CamelModel):
    plan_id: UUID
    name: str = Field(..., min_length=1, max_length=255)
    description: str | None = None


class WorkoutCreate(WorkoutBase):
    pass


class WorkoutUpdate(WorkoutBase):
    pass


class WorkoutRead(WorkoutBase):
    workout_id: UUID
