"""Muscle category CRUD - names are unique."""

from __future__ import annotations

import logging
import uuid

from fastapi import APIRouter, Depends, HTTPException, Response

from planner.api.deps import get_repository, require_target
from planner.core.constants import DUPLICATE_NAME
from planner.db.repository import Repository
from planner.models.muscle import MuscleCategory
from planner.schemas.muscle import MuscleCategoryCreate, MuscleCategoryRead, MuscleCategoryUpdate

logger = logging.getLogger(__name__)
router = APIRouter()


async def _ensure_name_free(
    categories: Repository[MuscleCategory],
    name: str,
    exclude_id: uuid.UUID | None = None,
) -> None:
    existing = await categories.find_by(MuscleCategory.name == name)
    if existing is not None and existing.muscle_category_id != exclude_id:
        raise HTTPException(status_code=DUPLICATE_NAME, detail="Muscle category with this name already exists")


@router.get("", response_model=list[MuscleCategoryRead])
async def list_muscle_categories(
    categories: Repository[MuscleCategory] = Depends(get_repository(MuscleCategory)),
):
    return await categories.list()


@router.get("/{muscle_category_id}", response_model=MuscleCategoryRead)
async def get_muscle_category(
    muscle_category_id: uuid.UUID,
    categories: Repository[MuscleCategory] = Depends(get_repository(MuscleCategory)),
):
    return await require_target(categories, muscle_category_id, "Muscle category not found")


@router.post("", response_model=MuscleCategoryRead, status_code=201)
async def create_muscle_category(
    payload: MuscleCategoryCreate,
    categories: Repository[MuscleCategory] = Depends(get_repository(MuscleCategory)),
):
    """Create a muscle category; a name already in use is rejected."""
    await _ensure_name_free(categories, payload.name)
    category = await categories.insert(
        MuscleCategory(muscle_category_id=uuid.uuid4(), **payload.model_dump())
    )
    logger.info("created muscle category %s (%s)", category.muscle_category_id, category.name)
    return category


@router.put("/{muscle_category_id}", response_model=MuscleCategoryRead, status_code=202)
async def update_muscle_category(
    muscle_category_id: uuid.UUID,
    payload: MuscleCategoryUpdate,
    categories: Repository[MuscleCategory] = Depends(get_repository(MuscleCategory)),
):
    """Rename a category; keeping its own name is fine, taking another's is not."""
    category = await require_target(categories, muscle_category_id, "Muscle category not found")
    await _ensure_name_free(categories, payload.name, exclude_id=muscle_category_id)
    category = await categories.replace(category, payload.model_dump())
    logger.info("updated muscle category %s", muscle_category_id)
    return category


@router.delete("/{muscle_category_id}", status_code=200, response_class=Response)
async def delete_muscle_category(
    muscle_category_id: uuid.UUID,
    categories: Repository[MuscleCategory] = Depends(get_repository(MuscleCategory)),
):
    """Delete a category. Muscles in it are left in place."""
    category = await require_target(categories, muscle_category_id, "Muscle category not found")
    await categories.delete(category)
    logger.info("deleted muscle category %s", muscle_category_id)
    return Response(status_code=200)
