"""Workout, WorkoutSet and SetExercise models.

Parent references are plain indexed columns: existence is checked by the
endpoints at write time and deletes never cascade.
"""

from __future__ import annotations

import uuid

from sqlalchemy import Index, Integer, String, Text
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column

from planner.db.base import Base


class Workout(Base):
    """A named session within a plan."""

    __tablename__ = "workouts"
    __table_args__ = (Index("ix_workouts_plan_id", "plan_id"),)

    workout_id: Mapped[uuid.UUID] = mapped_column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    plan_id: Mapped[uuid.UUID] = mapped_column(UUID(as_uuid=True), nullable=False)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)


class WorkoutSet(Base):
    """An ordered group of exercises within a workout."""

    __tablename__ = "sets"
    __table_args__ = (Index("ix_sets_workout_id", "workout_id"),)

    set_id: Mapped[uuid.UUID] = mapped_column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    workout_id: Mapped[uuid.UUID] = mapped_column(UUID(as_uuid=True), nullable=False)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    order: Mapped[int] = mapped_column(Integer, default=0, nullable=False)


class SetExercise(Base):
    """One exercise inside a set, with how it is performed (duration/unit/count)."""

    __tablename__ = "set_exercises"
    __table_args__ = (
        Index("ix_set_exercises_set_id", "set_id"),
        Index("ix_set_exercises_exercise_id", "exercise_id"),
    )

    id: Mapped[uuid.UUID] = mapped_column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    set_id: Mapped[uuid.UUID] = mapped_column(UUID(as_uuid=True), nullable=False)
    exercise_id: Mapped[uuid.UUID] = mapped_column(UUID(as_uuid=True), nullable=False)
    order: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    duration: Mapped[str | None] = mapped_column(String(50), nullable=True)  # e.g. "30", "1:30"
    unit: Mapped[str | None] = mapped_column(String(20), nullable=True)  # e.g. "s", "reps", "kg"
    count: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
