"""Sink - the whole plan hierarchy in one call."""

from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from planner.core.constants import TARGET_NOT_FOUND
from planner.db.session import get_db
from planner.schemas.sink import SinkPlan
from planner.services.sink import assemble_plan

router = APIRouter()


@router.get("/{plan_id}", response_model=SinkPlan)
async def get_sink(
    plan_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
):
    """Plan -> workouts -> sets (by order) -> exercises (by order) -> muscles."""
    tree = await assemble_plan(db, plan_id)
    if tree is None:
        raise HTTPException(status_code=TARGET_NOT_FOUND, detail="Plan not found")
    return tree
