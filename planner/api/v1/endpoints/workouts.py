"""Workout CRUD - named sessions within a plan."""

from __future__ import annotations

import logging
import uuid

from fastapi import APIRouter, Depends, Response

from planner.api.deps import get_repository, require_parent, require_target
from planner.db.repository import Repository
from planner.models.plan import Plan
from planner.models.workout import Workout
from planner.schemas.plan import WorkoutCreate, WorkoutRead, WorkoutUpdate

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("", response_model=list[WorkoutRead])
async def list_workouts(workouts: Repository[Workout] = Depends(get_repository(Workout))):
    """List all workouts."""
    return await workouts.list()


@router.get("/{plan_id}", response_model=list[WorkoutRead])
async def list_plan_workouts(
    plan_id: uuid.UUID,
    workouts: Repository[Workout] = Depends(get_repository(Workout)),
):
    """Workouts of one plan (empty list if the plan has none or does not exist)."""
    return await workouts.list_by(Workout.plan_id, plan_id)


@router.post("", response_model=WorkoutRead, status_code=201)
async def create_workout(
    payload: WorkoutCreate,
    workouts: Repository[Workout] = Depends(get_repository(Workout)),
    plans: Repository[Plan] = Depends(get_repository(Plan)),
):
    await require_parent(plans, payload.plan_id, "Plan does not exist")
    workout = await workouts.insert(Workout(workout_id=uuid.uuid4(), **payload.model_dump()))
    logger.info("created workout %s in plan %s", workout.workout_id, workout.plan_id)
    return workout


@router.put("/{workout_id}", response_model=WorkoutRead, status_code=202)
async def update_workout(
    workout_id: uuid.UUID,
    payload: WorkoutUpdate,
    workouts: Repository[Workout] = Depends(get_repository(Workout)),
    plans: Repository[Plan] = Depends(get_repository(Plan)),
):
    """Replace a workout; the target is checked before the plan it points to."""
    workout = await require_target(workouts, workout_id, "Workout not found")
    await require_parent(plans, payload.plan_id, "Plan does not exist")
    workout = await workouts.replace(workout, payload.model_dump())
    logger.info("updated workout %s", workout_id)
    return workout


@router.delete("/{workout_id}", status_code=200, response_class=Response)
async def delete_workout(
    workout_id: uuid.UUID,
    workouts: Repository[Workout] = Depends(get_repository(Workout)),
):
    workout = await require_target(workouts, workout_id, "Workout not found")
    await workouts.delete(workout)
    logger.info("deleted workout %s", workout_id)
    return Response(status_code=200)
