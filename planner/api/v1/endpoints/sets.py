"""Set CRUD - ordered groups of exercises within a workout."""

from __future__ import annotations

import logging
import uuid

from fastapi import APIRouter, Depends, Response

from planner.api.deps import get_repository, require_parent, require_target
from planner.db.repository import Repository
from planner.models.workout import Workout, WorkoutSet
from planner.schemas.set import SetCreate, SetRead, SetUpdate

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("", response_model=list[SetRead])
async def list_sets(sets: Repository[WorkoutSet] = Depends(get_repository(WorkoutSet))):
    """List all sets ordered by `order`."""
    return await sets.list(order_by=WorkoutSet.order)


@router.get("/{workout_id}", response_model=list[SetRead])
async def list_workout_sets(
    workout_id: uuid.UUID,
    sets: Repository[WorkoutSet] = Depends(get_repository(WorkoutSet)),
):
    """Sets of one workout ordered by `order`."""
    return await sets.list_by(WorkoutSet.workout_id, workout_id, order_by=WorkoutSet.order)


@router.post("", response_model=SetRead, status_code=201)
async def create_set(
    payload: SetCreate,
    sets: Repository[WorkoutSet] = Depends(get_repository(WorkoutSet)),
    workouts: Repository[Workout] = Depends(get_repository(Workout)),
):
    await require_parent(workouts, payload.workout_id, "Workout does not exist")
    workout_set = await sets.insert(WorkoutSet(set_id=uuid.uuid4(), **payload.model_dump()))
    logger.info("created set %s in workout %s", workout_set.set_id, workout_set.workout_id)
    return workout_set


@router.put("/{set_id}", response_model=SetRead, status_code=202)
async def update_set(
    set_id: uuid.UUID,
    payload: SetUpdate,
    sets: Repository[WorkoutSet] = Depends(get_repository(WorkoutSet)),
    workouts: Repository[Workout] = Depends(get_repository(Workout)),
):
    workout_set = await require_target(sets, set_id, "Set not found")
    await require_parent(workouts, payload.workout_id, "Workout does not exist")
    workout_set = await sets.replace(workout_set, payload.model_dump())
    logger.info("updated set %s", set_id)
    return workout_set


@router.delete("/{set_id}", status_code=200, response_class=Response)
async def delete_set(
    set_id: uuid.UUID,
    sets: Repository[WorkoutSet] = Depends(get_repository(WorkoutSet)),
):
    workout_set = await require_target(sets, set_id, "Set not found")
    await sets.delete(workout_set)
    logger.info("deleted set %s", set_id)
    return Response(status_code=200)
