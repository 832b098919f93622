"""Set exercises - which exercises a set contains and how they are performed."""

from __future__ import annotations

import logging
import uuid

from fastapi import APIRouter, Depends, HTTPException, Response
from sqlalchemy.ext.asyncio import AsyncSession

from planner.api.deps import bulk_replace, get_repository, require_parent
from planner.core.constants import PARENT_NOT_FOUND, TARGET_NOT_FOUND
from planner.db.queries import detail_row, set_exercise_details
from planner.db.repository import Repository
from planner.db.session import get_db
from planner.models.exercise import Exercise
from planner.models.workout import SetExercise, WorkoutSet
from planner.schemas.set import (
    SetExerciseCreate,
    SetExerciseDetail,
    SetExerciseRead,
    SetExerciseUpdate,
)

logger = logging.getLogger(__name__)
router = APIRouter()


def _check_path_matches_body(path_set_id: uuid.UUID, body_set_id: uuid.UUID) -> None:
    if path_set_id != body_set_id:
        raise HTTPException(status_code=400, detail="setId in body does not match path")


@router.get("/{set_id}", response_model=list[SetExerciseDetail])
async def list_set_exercises(
    set_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
):
    """Exercises of one set joined with exercise details, ordered by `order`."""
    return await set_exercise_details(db, set_id)


@router.get("/{set_id}/{set_exercise_id}", response_model=SetExerciseDetail)
async def get_set_exercise(
    set_id: uuid.UUID,
    set_exercise_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
):
    rows = await set_exercise_details(db, set_id, set_exercise_id)
    if not rows:
        raise HTTPException(status_code=TARGET_NOT_FOUND, detail="Set exercise not found")
    return rows[0]


@router.post("/{set_id}", response_model=SetExerciseDetail, status_code=201)
async def create_set_exercise(
    set_id: uuid.UUID,
    payload: SetExerciseCreate,
    set_exercises: Repository[SetExercise] = Depends(get_repository(SetExercise)),
    sets: Repository[WorkoutSet] = Depends(get_repository(WorkoutSet)),
    exercises: Repository[Exercise] = Depends(get_repository(Exercise)),
):
    """Add one exercise to a set; echoes the denormalized row."""
    _check_path_matches_body(set_id, payload.set_id)
    await require_parent(sets, payload.set_id, "Set does not exist")
    exercise = await exercises.get(payload.exercise_id)
    if exercise is None:
        raise HTTPException(status_code=PARENT_NOT_FOUND, detail="Exercise does not exist")
    se = await set_exercises.insert(SetExercise(id=uuid.uuid4(), **payload.model_dump()))
    logger.info("added exercise %s to set %s as %s", se.exercise_id, se.set_id, se.id)
    return detail_row(se, exercise)


@router.put("", response_model=list[SetExerciseRead], status_code=202)
async def replace_set_exercises(
    payload: list[SetExerciseCreate],
    set_exercises: Repository[SetExercise] = Depends(get_repository(SetExercise)),
    sets: Repository[WorkoutSet] = Depends(get_repository(WorkoutSet)),
    exercises: Repository[Exercise] = Depends(get_repository(Exercise)),
):
    """
    Bulk replace: for every set named in the list, drop its current exercises
    and store the listed ones. All-or-nothing: any unknown set or exercise
    rejects the call before anything is deleted.
    """
    rows = [SetExercise(id=uuid.uuid4(), **item.model_dump()) for item in payload]
    stored = await bulk_replace(
        set_exercises,
        "set_id",
        rows,
        [
            (sets, "set_id", "Set does not exist"),
            (exercises, "exercise_id", "Exercise does not exist"),
        ],
    )
    logger.info("replaced exercises of %d sets (%d rows)", len({r.set_id for r in rows}), len(rows))
    return stored


@router.put("/{set_id}/{set_exercise_id}", response_model=SetExerciseDetail, status_code=202)
async def update_set_exercise(
    set_id: uuid.UUID,
    set_exercise_id: uuid.UUID,
    payload: SetExerciseUpdate,
    set_exercises: Repository[SetExercise] = Depends(get_repository(SetExercise)),
    sets: Repository[WorkoutSet] = Depends(get_repository(WorkoutSet)),
    exercises: Repository[Exercise] = Depends(get_repository(Exercise)),
):
    """Replace a set exercise. The body may move it to another set."""
    se = await set_exercises.find_by(SetExercise.id == set_exercise_id, SetExercise.set_id == set_id)
    if se is None:
        raise HTTPException(status_code=TARGET_NOT_FOUND, detail="Set exercise not found")
    await require_parent(sets, payload.set_id, "Set does not exist")
    exercise = await exercises.get(payload.exercise_id)
    if exercise is None:
        raise HTTPException(status_code=PARENT_NOT_FOUND, detail="Exercise does not exist")
    se = await set_exercises.replace(se, payload.model_dump())
    logger.info("updated set exercise %s", set_exercise_id)
    return detail_row(se, exercise)


@router.delete("/{set_id}/{set_exercise_id}", status_code=200, response_class=Response)
async def delete_set_exercise(
    set_id: uuid.UUID,
    set_exercise_id: uuid.UUID,
    set_exercises: Repository[SetExercise] = Depends(get_repository(SetExercise)),
):
    se = await set_exercises.find_by(SetExercise.id == set_exercise_id, SetExercise.set_id == set_id)
    if se is None:
        raise HTTPException(status_code=TARGET_NOT_FOUND, detail="Set exercise not found")
    await set_exercises.delete(se)
    logger.info("deleted set exercise %s", set_exercise_id)
    return Response(status_code=200)
