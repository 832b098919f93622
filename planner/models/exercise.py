"""Exercise model and its many-to-many link to muscles."""

from __future__ import annotations

import uuid

from sqlalchemy import Index, String
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column

from planner.db.base import Base


class Exercise(Base):
    """A named physical movement, optionally illustrated."""

    __tablename__ = "exercises"

    exercise_id: Mapped[uuid.UUID] = mapped_column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    description: Mapped[str | None] = mapped_column(String(1000), nullable=True)
    image_url: Mapped[str | None] = mapped_column(String(1000), nullable=True)


class ExerciseMuscle(Base):
    """Join row: exercise targets muscle."""

    __tablename__ = "exercise_muscles"
    __table_args__ = (
        Index("ix_exercise_muscles_exercise_id", "exercise_id"),
        Index("ix_exercise_muscles_muscle_id", "muscle_id"),
    )

    id: Mapped[uuid.UUID] = mapped_column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    exercise_id: Mapped[uuid.UUID] = mapped_column(UUID(as_uuid=True), nullable=False)
    muscle_id: Mapped[uuid.UUID] = mapped_column(UUID(as_uuid=True), nullable=False)
