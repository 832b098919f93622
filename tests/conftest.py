"""Test configuration and fixtures for the workout planner API."""

import os
from collections.abc import AsyncGenerator
from typing import Any

# Settings are read once (lru_cache); point them at SQLite before planner is imported
TEST_DATABASE_URL = "sqlite+aiosqlite://"
TEST_API_KEY = "test-api-key"
os.environ["DATABASE_URL_OVERRIDE"] = TEST_DATABASE_URL
os.environ["API_KEY"] = TEST_API_KEY

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from planner.db.base import Base
from planner.db.session import get_db
from planner.main import create_application
from planner import models  # noqa: F401


@pytest.fixture(scope="function")
async def test_engine():
    """In-memory SQLite shared by every session of one test."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture(scope="function")
def session_maker(test_engine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autocommit=False,
        autoflush=False,
    )


@pytest.fixture(scope="function")
async def db_session(session_maker) -> AsyncGenerator[AsyncSession, None]:
    async with session_maker() as session:
        yield session


@pytest.fixture(scope="function")
async def client(session_maker) -> AsyncGenerator[AsyncClient, None]:
    """Client against a fresh app; each request gets its own committed/rolled-back session."""
    app = create_application()

    async def override_get_db() -> AsyncGenerator[AsyncSession, None]:
        async with session_maker() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = override_get_db

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as client:
        yield client

    app.dependency_overrides.clear()


@pytest.fixture
def auth() -> dict[str, str]:
    return {"x-api-key": TEST_API_KEY}


# =============================================================================
# Builders: create rows through the API so tests exercise the real write path
# =============================================================================


@pytest.fixture
def make(client: AsyncClient, auth: dict[str, str]):
    """Helpers that POST an entity and return its JSON."""

    class Make:
        async def _post(self, path: str, body: Any) -> Any:
            response = await client.post(path, json=body, headers=auth)
            assert response.status_code == 201, response.text
            return response.json()

        async def plan(self, name: str = "Strength block", **extra: Any) -> dict:
            return await self._post("/plan", {"name": name, **extra})

        async def workout(self, plan_id: str, name: str = "Day A", **extra: Any) -> dict:
            return await self._post("/workout", {"planId": plan_id, "name": name, **extra})

        async def set(self, workout_id: str, name: str = "Main", order: int = 0) -> dict:
            return await self._post("/set", {"workoutId": workout_id, "name": name, "order": order})

        async def exercise(self, name: str = "Squat", **extra: Any) -> dict:
            return await self._post("/exercise", {"name": name, **extra})

        async def category(self, name: str = "Legs") -> dict:
            return await self._post("/muscle-category", {"name": name})

        async def muscle(self, category_id: str, name: str = "Quadriceps") -> dict:
            return await self._post("/muscle", {"muscleCategoryId": category_id, "name": name})

        async def set_exercise(self, set_id: str, exercise_id: str, order: int = 0, **extra: Any) -> dict:
            return await self._post(
                f"/set-exercises/{set_id}",
                {"setId": set_id, "exerciseId": exercise_id, "order": order, **extra},
            )

        async def link_muscles(self, links: list[dict]) -> list[dict]:
            return await self._post("/exercise-muscles", links)

    return Make()
