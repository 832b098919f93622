import asyncio
import os
import sys

# Add parent directory to path so we can import planner modules
sys.path.append(os.path.join(os.path.dirname(__file__), ".."))

from sqlalchemy import text

from planner.db.base import Base
from planner.db.session import engine
from planner.models import *  # noqa: F401, F403


async def drop_tables():
    print("Dropping all tables...")
    async with engine.begin() as conn:
        await conn.execute(text("DROP TABLE IF EXISTS alembic_version"))
        await conn.run_sync(Base.metadata.drop_all)
    print("Tables dropped.")
    await engine.dispose()


if __name__ == "__main__":
    asyncio.run(drop_tables())
