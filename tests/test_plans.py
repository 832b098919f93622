"""Tests for /plan."""

import uuid

from httpx import AsyncClient


class TestCreateAndRead:
    async def test_create_then_get_returns_input_plus_id(self, client: AsyncClient, auth):
        response = await client.post(
            "/plan", json={"name": "Hypertrophy", "description": "8 weeks"}, headers=auth
        )

        assert response.status_code == 201
        created = response.json()
        uuid.UUID(created["planId"])
        assert created["name"] == "Hypertrophy"
        assert created["description"] == "8 weeks"

        fetched = await client.get(f"/plan/{created['planId']}")
        assert fetched.status_code == 200
        assert fetched.json() == created

    async def test_server_assigns_id_ignoring_client_value(self, client: AsyncClient, auth):
        mine = str(uuid.uuid4())
        response = await client.post("/plan", json={"planId": mine, "name": "P"}, headers=auth)

        assert response.status_code == 201
        assert response.json()["planId"] != mine

    async def test_list_plans(self, client: AsyncClient, make):
        await make.plan("A")
        await make.plan("B")

        response = await client.get("/plan")

        assert response.status_code == 200
        assert sorted(p["name"] for p in response.json()) == ["A", "B"]

    async def test_get_unknown_plan(self, client: AsyncClient):
        response = await client.get(f"/plan/{uuid.uuid4()}")
        assert response.status_code == 416

    async def test_missing_name_is_bad_request(self, client: AsyncClient, auth):
        response = await client.post("/plan", json={"description": "no name"}, headers=auth)
        assert response.status_code == 400

    async def test_empty_name_is_bad_request(self, client: AsyncClient, auth):
        response = await client.post("/plan", json={"name": ""}, headers=auth)
        assert response.status_code == 400

    async def test_malformed_json_is_bad_request(self, client: AsyncClient, auth):
        response = await client.post(
            "/plan", content=b"{not json", headers={**auth, "content-type": "application/json"}
        )
        assert response.status_code == 400


class TestUpdate:
    async def test_update_replaces_all_fields_and_keeps_id(self, client: AsyncClient, auth, make):
        plan = await make.plan("Old", description="old description")

        response = await client.put(f"/plan/{plan['planId']}", json={"name": "New"}, headers=auth)

        assert response.status_code == 202
        body = response.json()
        assert body["planId"] == plan["planId"]
        assert body["name"] == "New"
        assert body["description"] is None

    async def test_update_unknown_plan(self, client: AsyncClient, auth):
        response = await client.put(f"/plan/{uuid.uuid4()}", json={"name": "X"}, headers=auth)
        assert response.status_code == 416

    async def test_update_with_malformed_id(self, client: AsyncClient, auth):
        response = await client.put("/plan/not-a-guid", json={"name": "X"}, headers=auth)
        assert response.status_code == 400


class TestDelete:
    async def test_delete_then_get_is_not_found(self, client: AsyncClient, auth, make):
        plan = await make.plan()

        response = await client.delete(f"/plan/{plan['planId']}", headers=auth)

        assert response.status_code == 200
        assert (await client.get(f"/plan/{plan['planId']}")).status_code == 416

    async def test_delete_unknown_plan(self, client: AsyncClient, auth):
        response = await client.delete(f"/plan/{uuid.uuid4()}", headers=auth)
        assert response.status_code == 416

    async def test_delete_with_malformed_id(self, client: AsyncClient, auth):
        response = await client.delete("/plan/123", headers=auth)
        assert response.status_code == 400

    async def test_delete_does_not_cascade_to_workouts(self, client: AsyncClient, auth, make):
        plan = await make.plan()
        workout = await make.workout(plan["planId"])

        await client.delete(f"/plan/{plan['planId']}", headers=auth)

        response = await client.get(f"/workout/{plan['planId']}")
        assert response.status_code == 200
        assert [w["workoutId"] for w in response.json()] == [workout["workoutId"]]
