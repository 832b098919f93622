"""Shared-secret header on mutating calls."""

import uuid

import pytest
from httpx import AsyncClient

from planner.core.security import api_key_matches


class TestApiKeyMatches:
    def test_exact_match(self):
        assert api_key_matches("s3cret", "s3cret")

    @pytest.mark.parametrize(
        "provided, expected",
        [("wrong", "s3cret"), (None, "s3cret"), ("", "s3cret"), ("anything", ""), (None, "")],
    )
    def test_rejections(self, provided, expected):
        assert not api_key_matches(provided, expected)


class TestMiddleware:
    async def test_post_without_key(self, client: AsyncClient):
        response = await client.post("/plan", json={"name": "P"})
        assert response.status_code == 401

    async def test_post_with_wrong_key(self, client: AsyncClient):
        response = await client.post("/plan", json={"name": "P"}, headers={"x-api-key": "nope"})
        assert response.status_code == 401

    async def test_auth_checked_before_body_validation(self, client: AsyncClient):
        response = await client.post(
            "/plan", content=b"{broken", headers={"content-type": "application/json"}
        )
        assert response.status_code == 401

    async def test_auth_checked_before_id_validation(self, client: AsyncClient):
        assert (await client.put("/plan/not-a-guid", json={})).status_code == 401
        assert (await client.delete("/plan/not-a-guid")).status_code == 401

    async def test_auth_checked_before_existence(self, client: AsyncClient):
        response = await client.delete(f"/muscle/{uuid.uuid4()}")
        assert response.status_code == 401

    async def test_reads_need_no_key(self, client: AsyncClient):
        assert (await client.get("/plan")).status_code == 200
        assert (await client.get("/exercise")).status_code == 200

    async def test_rejected_write_changes_nothing(self, client: AsyncClient):
        await client.post("/exercise", json={"name": "Lunge"})
        assert (await client.get("/exercise")).json() == []
