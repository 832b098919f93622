"""Exercise <-> muscle links, including the bulk "replace this exercise's muscles" call."""

from __future__ import annotations

import logging
import uuid

from fastapi import APIRouter, Depends, Response

from planner.api.deps import bulk_replace, get_repository, require_parent, require_target
from planner.db.repository import Repository
from planner.models.exercise import Exercise, ExerciseMuscle
from planner.models.muscle import Muscle
from planner.schemas.exercise import (
    ExerciseMuscleCreate,
    ExerciseMuscleRead,
    ExerciseMuscleUpdate,
)

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("", response_model=list[ExerciseMuscleRead])
async def list_exercise_muscles(
    links: Repository[ExerciseMuscle] = Depends(get_repository(ExerciseMuscle)),
):
    return await links.list()


@router.get("/{muscle_id}", response_model=list[ExerciseMuscleRead])
async def list_muscle_exercises(
    muscle_id: uuid.UUID,
    links: Repository[ExerciseMuscle] = Depends(get_repository(ExerciseMuscle)),
):
    """Links for one muscle (which exercises target it)."""
    return await links.list_by(ExerciseMuscle.muscle_id, muscle_id)


@router.post("", response_model=list[ExerciseMuscleRead], status_code=201)
async def replace_exercise_muscles(
    payload: list[ExerciseMuscleCreate],
    links: Repository[ExerciseMuscle] = Depends(get_repository(ExerciseMuscle)),
    exercises: Repository[Exercise] = Depends(get_repository(Exercise)),
    muscles: Repository[Muscle] = Depends(get_repository(Muscle)),
):
    """
    Bulk replace: every exercise named in the list loses its current muscle
    links and gets exactly the listed ones. If any muscle or exercise is
    unknown nothing is deleted or inserted.
    """
    rows = [ExerciseMuscle(id=uuid.uuid4(), **item.model_dump()) for item in payload]
    stored = await bulk_replace(
        links,
        "exercise_id",
        rows,
        [
            (muscles, "muscle_id", "Muscle does not exist"),
            (exercises, "exercise_id", "Exercise does not exist"),
        ],
    )
    logger.info(
        "replaced muscles of %d exercises (%d links)", len({r.exercise_id for r in rows}), len(rows)
    )
    return stored


@router.put("/{link_id}", response_model=ExerciseMuscleRead, status_code=202)
async def update_exercise_muscle(
    link_id: uuid.UUID,
    payload: ExerciseMuscleUpdate,
    links: Repository[ExerciseMuscle] = Depends(get_repository(ExerciseMuscle)),
    exercises: Repository[Exercise] = Depends(get_repository(Exercise)),
    muscles: Repository[Muscle] = Depends(get_repository(Muscle)),
):
    link = await require_target(links, link_id, "Exercise muscle not found")
    await require_parent(exercises, payload.exercise_id, "Exercise does not exist")
    await require_parent(muscles, payload.muscle_id, "Muscle does not exist")
    link = await links.replace(link, payload.model_dump())
    logger.info("updated exercise muscle %s", link_id)
    return link


@router.delete("/{link_id}", status_code=200, response_class=Response)
async def delete_exercise_muscle(
    link_id: uuid.UUID,
    links: Repository[ExerciseMuscle] = Depends(get_repository(ExerciseMuscle)),
):
    link = await require_target(links, link_id, "Exercise muscle not found")
    await links.delete(link)
    logger.info("deleted exercise muscle %s", link_id)
    return Response(status_code=200)
