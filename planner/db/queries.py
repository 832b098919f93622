"""Join queries that span more than one table."""

from __future__ import annotations

import uuid
from collections.abc import Iterable
from typing import Any

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from planner.models.exercise import Exercise, ExerciseMuscle
from planner.models.muscle import Muscle
from planner.models.workout import SetExercise, WorkoutSet


async def set_exercise_details(
    db: AsyncSession,
    set_id: uuid.UUID,
    set_exercise_id: uuid.UUID | None = None,
) -> list[dict[str, Any]]:
    """SetExercise ⋈ Set ⋈ Exercise rows for one set, ordered by `order`.

    Rows whose set or exercise no longer exists drop out (inner joins).
    """
    stmt = (
        select(SetExercise, Exercise)
        .join(WorkoutSet, WorkoutSet.set_id == SetExercise.set_id)
        .join(Exercise, Exercise.exercise_id == SetExercise.exercise_id)
        .where(SetExercise.set_id == set_id)
        .order_by(SetExercise.order)
    )
    if set_exercise_id is not None:
        stmt = stmt.where(SetExercise.id == set_exercise_id)
    result = await db.execute(stmt)
    return [detail_row(se, ex) for se, ex in result.all()]


def detail_row(se: SetExercise, ex: Exercise) -> dict[str, Any]:
    return {
        "id": se.id,
        "set_id": se.set_id,
        "exercise_id": se.exercise_id,
        "order": se.order,
        "duration": se.duration,
        "unit": se.unit,
        "count": se.count,
        "exercise_name": ex.name,
        "description": ex.description,
        "image_url": ex.image_url,
    }


async def exercises_for_sets(db: AsyncSession, set_ids: Iterable[uuid.UUID]) -> list[Any]:
    """One flat row per set/exercise pairing for the given sets (unordered)."""
    set_ids = set(set_ids)
    if not set_ids:
        return []
    result = await db.execute(
        select(
            SetExercise.set_id,
            SetExercise.order,
            SetExercise.duration,
            SetExercise.unit,
            # Row.count is the tuple method; expose the column under another name
            SetExercise.count.label("set_count"),
            Exercise.exercise_id,
            Exercise.name,
            Exercise.description,
            Exercise.image_url,
        )
        .join(Exercise, Exercise.exercise_id == SetExercise.exercise_id)
        .where(SetExercise.set_id.in_(set_ids))
    )
    return list(result.all())


async def muscles_for_exercises(db: AsyncSession, exercise_ids: Iterable[uuid.UUID]) -> list[Any]:
    """Muscle ⋈ ExerciseMuscle rows (muscle fields + exercise_id) for the given exercises."""
    exercise_ids = set(exercise_ids)
    if not exercise_ids:
        return []
    result = await db.execute(
        select(
            Muscle.muscle_id,
            Muscle.muscle_category_id,
            Muscle.name,
            ExerciseMuscle.exercise_id,
        )
        .join(ExerciseMuscle, ExerciseMuscle.muscle_id == Muscle.muscle_id)
        .where(ExerciseMuscle.exercise_id.in_(exercise_ids))
    )
    return list(result.all())
