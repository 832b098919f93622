"""Plan CRUD - top-level workout programs."""

from __future__ import annotations

import logging
import uuid

from fastapi import APIRouter, Depends, Response

from planner.api.deps import get_repository, require_target
from planner.db.repository import Repository
from planner.models.plan import Plan
from planner.schemas.plan import PlanCreate, PlanRead, PlanUpdate

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("", response_model=list[PlanRead])
async def list_plans(plans: Repository[Plan] = Depends(get_repository(Plan))):
    """List all plans."""
    return await plans.list()


@router.get("/{plan_id}", response_model=PlanRead)
async def get_plan(
    plan_id: uuid.UUID,
    plans: Repository[Plan] = Depends(get_repository(Plan)),
):
    return await require_target(plans, plan_id, "Plan not found")


@router.post("", response_model=PlanRead, status_code=201)
async def create_plan(
    payload: PlanCreate,
    plans: Repository[Plan] = Depends(get_repository(Plan)),
):
    """Create a plan (server assigns plan_id)."""
    plan = await plans.insert(Plan(plan_id=uuid.uuid4(), **payload.model_dump()))
    logger.info("created plan %s", plan.plan_id)
    return plan


@router.put("/{plan_id}", response_model=PlanRead, status_code=202)
async def update_plan(
    plan_id: uuid.UUID,
    payload: PlanUpdate,
    plans: Repository[Plan] = Depends(get_repository(Plan)),
):
    """Replace every field of a plan except its id."""
    plan = await require_target(plans, plan_id, "Plan not found")
    plan = await plans.replace(plan, payload.model_dump())
    logger.info("updated plan %s", plan_id)
    return plan


@router.delete("/{plan_id}", status_code=200, response_class=Response)
async def delete_plan(
    plan_id: uuid.UUID,
    plans: Repository[Plan] = Depends(get_repository(Plan)),
):
    """Delete a plan. Its workouts are left in place."""
    plan = await require_target(plans, plan_id, "Plan not found")
    await plans.delete(plan)
    logger.info("deleted plan %s", plan_id)
    return Response(status_code=200)
