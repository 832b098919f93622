"""Exercise CRUD endpoints."""

from __future__ import annotations

import logging
import uuid

from fastapi import APIRouter, Depends, Response

from planner.api.deps import get_repository, require_target
from planner.db.repository import Repository
from planner.models.exercise import Exercise
from planner.schemas.exercise import ExerciseCreate, ExerciseRead, ExerciseUpdate

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("", response_model=list[ExerciseRead])
async def list_exercises(exercises: Repository[Exercise] = Depends(get_repository(Exercise))):
    """List exercises ordered by name."""
    return await exercises.list(order_by=Exercise.name)


@router.get("/{exercise_id}", response_model=ExerciseRead)
async def get_exercise(
    exercise_id: uuid.UUID,
    exercises: Repository[Exercise] = Depends(get_repository(Exercise)),
):
    return await require_target(exercises, exercise_id, "Exercise not found")


@router.post("", response_model=ExerciseRead, status_code=201)
async def create_exercise(
    payload: ExerciseCreate,
    exercises: Repository[Exercise] = Depends(get_repository(Exercise)),
):
    exercise = await exercises.insert(Exercise(exercise_id=uuid.uuid4(), **payload.model_dump()))
    logger.info("created exercise %s (%s)", exercise.exercise_id, exercise.name)
    return exercise


@router.put("/{exercise_id}", response_model=ExerciseRead, status_code=202)
async def update_exercise(
    exercise_id: uuid.UUID,
    payload: ExerciseUpdate,
    exercises: Repository[Exercise] = Depends(get_repository(Exercise)),
):
    """Replace an exercise (full, not partial: omitted optional fields are cleared)."""
    exercise = await require_target(exercises, exercise_id, "Exercise not found")
    exercise = await exercises.replace(exercise, payload.model_dump())
    logger.info("updated exercise %s", exercise_id)
    return exercise


@router.delete("/{exercise_id}", status_code=200, response_class=Response)
async def delete_exercise(
    exercise_id: uuid.UUID,
    exercises: Repository[Exercise] = Depends(get_repository(Exercise)),
):
    """Delete an exercise. Set and muscle links pointing at it are left in place."""
    exercise = await require_target(exercises, exercise_id, "Exercise not found")
    await exercises.delete(exercise)
    logger.info("deleted exercise %s", exercise_id)
    return Response(status_code=200)
