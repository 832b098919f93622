"""Muscle CRUD - each muscle belongs to a muscle category."""

from __future__ import annotations

import logging
import uuid

from fastapi import APIRouter, Depends, Response

from planner.api.deps import get_repository, require_parent, require_target
from planner.db.repository import Repository
from planner.models.muscle import Muscle, MuscleCategory
from planner.schemas.muscle import MuscleCreate, MuscleRead, MuscleUpdate

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("", response_model=list[MuscleRead])
async def list_muscles(muscles: Repository[Muscle] = Depends(get_repository(Muscle))):
    """List all muscles."""
    return await muscles.list()


@router.get("/{muscle_id}", response_model=MuscleRead)
async def get_muscle(
    muscle_id: uuid.UUID,
    muscles: Repository[Muscle] = Depends(get_repository(Muscle)),
):
    return await require_target(muscles, muscle_id, "Muscle not found")


@router.post("", response_model=MuscleRead, status_code=201)
async def create_muscle(
    payload: MuscleCreate,
    muscles: Repository[Muscle] = Depends(get_repository(Muscle)),
    categories: Repository[MuscleCategory] = Depends(get_repository(MuscleCategory)),
):
    await require_parent(categories, payload.muscle_category_id, "Muscle category does not exist")
    muscle = await muscles.insert(Muscle(muscle_id=uuid.uuid4(), **payload.model_dump()))
    logger.info("created muscle %s (%s)", muscle.muscle_id, muscle.name)
    return muscle


@router.put("/{muscle_id}", response_model=MuscleRead, status_code=202)
async def update_muscle(
    muscle_id: uuid.UUID,
    payload: MuscleUpdate,
    muscles: Repository[Muscle] = Depends(get_repository(Muscle)),
    categories: Repository[MuscleCategory] = Depends(get_repository(MuscleCategory)),
):
    muscle = await require_target(muscles, muscle_id, "Muscle not found")
    await require_parent(categories, payload.muscle_category_id, "Muscle category does not exist")
    muscle = await muscles.replace(muscle, payload.model_dump())
    logger.info("updated muscle %s", muscle_id)
    return muscle


@router.delete("/{muscle_id}", status_code=200, response_class=Response)
async def delete_muscle(
    muscle_id: uuid.UUID,
    muscles: Repository[Muscle] = Depends(get_repository(Muscle)),
):
    muscle = await require_target(muscles, muscle_id, "Muscle not found")
    await muscles.delete(muscle)
    logger.info("deleted muscle %s", muscle_id)
    return Response(status_code=200)
