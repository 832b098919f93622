"""Muscle and MuscleCategory models - classify exercises by body part."""

from __future__ import annotations

import uuid

from sqlalchemy import Index, String
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column

from planner.db.base import Base


class MuscleCategory(Base):
    """Body-part grouping (e.g. Legs, Core). Names are unique."""

    __tablename__ = "muscle_categories"

    muscle_category_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4
    )
    name: Mapped[str] = mapped_column(String(100), nullable=False, unique=True, index=True)


class Muscle(Base):
    """A single muscle (e.g. Quads) within a category."""

    __tablename__ = "muscles"
    __table_args__ = (Index("ix_muscles_muscle_category_id", "muscle_category_id"),)

    muscle_id: Mapped[uuid.UUID] = mapped_column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    muscle_category_id: Mapped[uuid.UUID] = mapped_column(UUID(as_uuid=True), nullable=False)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
