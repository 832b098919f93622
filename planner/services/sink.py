"""Sink: assemble a plan's full Workout -> Set -> Exercise -> Muscle tree.

Four flat queries, all issued before any nesting, then an in-memory join
over grouped lookups (parent id -> children) built once per call.
"""

from __future__ import annotations

import logging
import uuid
from collections import defaultdict
from typing import Any, Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from planner.db.queries import exercises_for_sets, muscles_for_exercises
from planner.models.plan import Plan
from planner.models.workout import Workout, WorkoutSet
from planner.schemas.sink import SinkExercise, SinkMuscle, SinkPlan, SinkSet, SinkWorkout

logger = logging.getLogger(__name__)


def _group_by(rows: Sequence[Any], attr: str) -> dict[Any, list[Any]]:
    groups: dict[Any, list[Any]] = defaultdict(list)
    for row in rows:
        groups[getattr(row, attr)].append(row)
    return groups


def build_plan_tree(
    plan: Any,
    workouts: Sequence[Any],
    sets: Sequence[Any],
    exercise_rows: Sequence[Any],
    muscle_rows: Sequence[Any],
) -> SinkPlan:
    """
    Nest already-fetched flat rows into a SinkPlan.
    Sets and exercises are sorted by `order` (stable, so ties keep fetch order);
    workouts and muscles keep fetch order. Missing children give empty lists.
    """
    sets_by_workout = _group_by(sets, "workout_id")
    exercises_by_set = _group_by(exercise_rows, "set_id")
    muscles_by_exercise = _group_by(muscle_rows, "exercise_id")

    def exercise_node(row: Any) -> SinkExercise:
        return SinkExercise(
            exercise_id=row.exercise_id,
            name=row.name,
            description=row.description,
            image_url=row.image_url,
            order=row.order,
            duration=row.duration,
            unit=row.unit,
            count=row.set_count,
            muscles=[
                SinkMuscle(muscle_id=m.muscle_id, muscle_category_id=m.muscle_category_id, name=m.name)
                for m in muscles_by_exercise.get(row.exercise_id, [])
            ],
        )

    def set_node(s: Any) -> SinkSet:
        rows = sorted(exercises_by_set.get(s.set_id, []), key=lambda r: r.order)
        return SinkSet(
            set_id=s.set_id,
            name=s.name,
            order=s.order,
            exercises=[exercise_node(r) for r in rows],
        )

    return SinkPlan(
        plan_id=plan.plan_id,
        name=plan.name,
        description=plan.description,
        workouts=[
            SinkWorkout(
                workout_id=w.workout_id,
                name=w.name,
                description=w.description,
                sets=[
                    set_node(s)
                    for s in sorted(sets_by_workout.get(w.workout_id, []), key=lambda s: s.order)
                ],
            )
            for w in workouts
        ],
    )


async def assemble_plan(db: AsyncSession, plan_id: uuid.UUID) -> SinkPlan | None:
    """Return the nested tree for plan_id, or None if the plan does not exist."""
    plan = (await db.execute(select(Plan).where(Plan.plan_id == plan_id))).scalar_one_or_none()
    if plan is None:
        return None

    workouts = list(
        (await db.execute(select(Workout).where(Workout.plan_id == plan_id))).scalars().all()
    )
    workout_ids = {w.workout_id for w in workouts}

    sets: list[WorkoutSet] = []
    if workout_ids:
        sets = list(
            (await db.execute(select(WorkoutSet).where(WorkoutSet.workout_id.in_(workout_ids))))
            .scalars()
            .all()
        )

    exercise_rows = await exercises_for_sets(db, (s.set_id for s in sets))
    muscle_rows = await muscles_for_exercises(db, (r.exercise_id for r in exercise_rows))

    logger.debug(
        "sink %s: %d workouts, %d sets, %d set exercises, %d muscle links",
        plan_id,
        len(workouts),
        len(sets),
        len(exercise_rows),
        len(muscle_rows),
    )
    return build_plan_tree(plan, workouts, sets, exercise_rows, muscle_rows)
