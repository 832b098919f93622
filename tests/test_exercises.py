"""Tests for /exercise."""

import uuid

from httpx import AsyncClient


async def test_list_is_ordered_by_name(client: AsyncClient, make):
    for name in ("Squat", "Bench press", "Row"):
        await make.exercise(name)

    response = await client.get("/exercise")

    assert response.status_code == 200
    assert [e["name"] for e in response.json()] == ["Bench press", "Row", "Squat"]


async def test_get_by_id(client: AsyncClient, make):
    exercise = await make.exercise("Pull-up", imageUrl="http://img/pullup.png")

    response = await client.get(f"/exercise/{exercise['exerciseId']}")

    assert response.status_code == 200
    assert response.json()["imageUrl"] == "http://img/pullup.png"


async def test_get_unknown(client: AsyncClient):
    assert (await client.get(f"/exercise/{uuid.uuid4()}")).status_code == 416


async def test_update_is_full_replace(client: AsyncClient, auth, make):
    exercise = await make.exercise("Curl", description="biceps", imageUrl="http://img/curl.png")

    response = await client.put(
        f"/exercise/{exercise['exerciseId']}", json={"name": "Hammer curl"}, headers=auth
    )

    assert response.status_code == 202
    body = response.json()
    assert body["exerciseId"] == exercise["exerciseId"]
    assert body["name"] == "Hammer curl"
    assert body["description"] is None
    assert body["imageUrl"] is None


async def test_update_unknown(client: AsyncClient, auth):
    response = await client.put(f"/exercise/{uuid.uuid4()}", json={"name": "X"}, headers=auth)
    assert response.status_code == 416


async def test_description_too_long(client: AsyncClient, auth):
    response = await client.post(
        "/exercise", json={"name": "Plank", "description": "x" * 1001}, headers=auth
    )
    assert response.status_code == 400


async def test_delete_leaves_set_exercises(client: AsyncClient, auth, make):
    plan = await make.plan()
    workout = await make.workout(plan["planId"])
    workout_set = await make.set(workout["workoutId"])
    exercise = await make.exercise()
    await make.set_exercise(workout_set["setId"], exercise["exerciseId"])

    response = await client.delete(f"/exercise/{exercise['exerciseId']}", headers=auth)

    assert response.status_code == 200
    assert (await client.get(f"/exercise/{exercise['exerciseId']}")).status_code == 416
    # The join hides rows whose exercise is gone
    assert (await client.get(f"/set-exercises/{workout_set['setId']}")).json() == []
