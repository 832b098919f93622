"""Muscle and MuscleCategory schemas."""

from uuid import UUID

from pydantic import Field

from planner.schemas.base import CamelModel


class MuscleCategoryBase(CamelModel):
    name: str = Field(..., min_length=1, max_length=100)


class MuscleCategoryCreate(MuscleCategoryBase):
    pass


class MuscleCategoryUpdate(MuscleCategoryBase):
    pass


class MuscleCategoryRead(MuscleCategoryBase):
    muscle_category_id: UUID


class MuscleBase(CamelModel):
    muscle_category_id: UUID
    name: str = Field(..., min_length=1, max_length=100)


class MuscleCreate(MuscleBase):
    pass


class MuscleUpdate(MuscleBase):
    pass


class MuscleRead(MuscleBase):
    muscle_id: UUID
