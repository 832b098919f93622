"""Tests for the plan tree: the pure builder and the /sink endpoint."""

import uuid
from types import SimpleNamespace

from httpx import AsyncClient

from planner.services.sink import build_plan_tree


def _plan():
    return SimpleNamespace(plan_id=uuid.uuid4(), name="Plan", description=None)


def _workout(name):
    return SimpleNamespace(workout_id=uuid.uuid4(), name=name, description=None)


def _set(workout, name, order):
    return SimpleNamespace(set_id=uuid.uuid4(), workout_id=workout.workout_id, name=name, order=order)


def _exercise_row(workout_set, name, order, exercise_id=None):
    return SimpleNamespace(
        set_id=workout_set.set_id,
        exercise_id=exercise_id or uuid.uuid4(),
        name=name,
        description=None,
        image_url=None,
        order=order,
        duration=None,
        unit="reps",
        set_count=10,
    )


class TestBuildPlanTree:
    def test_empty_plan(self):
        plan = _plan()

        tree = build_plan_tree(plan, [], [], [], [])

        assert tree.plan_id == plan.plan_id
        assert tree.workouts == []

    def test_children_sorted_by_order_and_nested(self):
        plan = _plan()
        workout = _workout("Day A")
        late = _set(workout, "Late", 2)
        early = _set(workout, "Early", 1)
        second = _exercise_row(early, "Second", 2)
        first = _exercise_row(early, "First", 1)
        muscle = SimpleNamespace(
            exercise_id=first.exercise_id, muscle_id=uuid.uuid4(), muscle_category_id=uuid.uuid4(), name="Quads"
        )

        tree = build_plan_tree(plan, [workout], [late, early], [second, first], [muscle])

        [w] = tree.workouts
        assert [s.name for s in w.sets] == ["Early", "Late"]
        assert [e.name for e in w.sets[0].exercises] == ["First", "Second"]
        assert w.sets[1].exercises == []
        assert [m.name for m in w.sets[0].exercises[0].muscles] == ["Quads"]
        assert w.sets[0].exercises[1].muscles == []
        assert w.sets[0].exercises[0].count == 10

    def test_equal_orders_keep_fetch_order(self):
        plan = _plan()
        workout = _workout("Day A")
        workout_set = _set(workout, "Main", 0)
        rows = [_exercise_row(workout_set, name, 0) for name in ("A", "B", "C")]

        tree = build_plan_tree(plan, [workout], [workout_set], rows, [])

        assert [e.name for e in tree.workouts[0].sets[0].exercises] == ["A", "B", "C"]

    def test_exercise_in_two_sets_shares_muscles(self):
        plan = _plan()
        workout = _workout("Day A")
        a = _set(workout, "A", 0)
        b = _set(workout, "B", 1)
        exercise_id = uuid.uuid4()
        muscle = SimpleNamespace(
            exercise_id=exercise_id, muscle_id=uuid.uuid4(), muscle_category_id=uuid.uuid4(), name="Lats"
        )

        tree = build_plan_tree(
            plan,
            [workout],
            [a, b],
            [_exercise_row(a, "Row", 0, exercise_id), _exercise_row(b, "Row", 0, exercise_id)],
            [muscle],
        )

        for workout_set in tree.workouts[0].sets:
            assert [m.muscle_id for m in workout_set.exercises[0].muscles] == [muscle.muscle_id]


class TestSinkEndpoint:
    async def test_unknown_plan(self, client: AsyncClient):
        assert (await client.get(f"/sink/{uuid.uuid4()}")).status_code == 416

    async def test_malformed_id(self, client: AsyncClient):
        assert (await client.get("/sink/not-a-guid")).status_code == 400

    async def test_plan_without_workouts(self, client: AsyncClient, make):
        plan = await make.plan("Empty", description="nothing yet")

        response = await client.get(f"/sink/{plan['planId']}")

        assert response.status_code == 200
        assert response.json() == {
            "planId": plan["planId"],
            "name": "Empty",
            "description": "nothing yet",
            "workouts": [],
        }

    async def test_full_tree(self, client: AsyncClient, make):
        plan = await make.plan()
        category = await make.category()
        quads = await make.muscle(category["muscleCategoryId"], "Quadriceps")
        squat = await make.exercise("Squat")
        press = await make.exercise("Press")
        await make.link_muscles([{"exerciseId": squat["exerciseId"], "muscleId": quads["muscleId"]}])

        for day in ("Day A", "Day B"):
            workout = await make.workout(plan["planId"], day)
            workout_set = await make.set(workout["workoutId"])
            await make.set_exercise(workout_set["setId"], squat["exerciseId"], order=2, count=5, unit="kg")
            await make.set_exercise(workout_set["setId"], press["exerciseId"], order=1)

        response = await client.get(f"/sink/{plan['planId']}")

        assert response.status_code == 200
        tree = response.json()
        assert tree["planId"] == plan["planId"]
        assert sorted(w["name"] for w in tree["workouts"]) == ["Day A", "Day B"]
        for workout in tree["workouts"]:
            [workout_set] = workout["sets"]
            assert [e["name"] for e in workout_set["exercises"]] == ["Press", "Squat"]
            press_node, squat_node = workout_set["exercises"]
            assert press_node["muscles"] == []
            assert squat_node["count"] == 5
            assert squat_node["unit"] == "kg"
            assert squat_node["muscles"] == [
                {
                    "muscleId": quads["muscleId"],
                    "muscleCategoryId": category["muscleCategoryId"],
                    "name": "Quadriceps",
                }
            ]

    async def test_other_plans_not_included(self, client: AsyncClient, make):
        plan = await make.plan("Mine")
        other = await make.plan("Other")
        await make.workout(other["planId"], "Not mine")

        tree = (await client.get(f"/sink/{plan['planId']}")).json()
        assert tree["workouts"] == []
