import asyncio
import os
import sys

# Add parent directory to path so we can import planner modules
sys.path.append(os.path.join(os.path.dirname(__file__), ".."))

from sqlalchemy import text

from planner.db.session import async_session_maker, engine
from planner.models import *  # noqa: F401, F403
from planner.db.base import Base


async def check_data():
    async with async_session_maker() as session:
        tables = list(Base.metadata.tables)
        print(f"Checking tables: {tables}")
        for table in tables:
            try:
                result = await session.execute(text(f'SELECT count(*) FROM "{table}"'))
                print(f"Table '{table}' row count: {result.scalar()}")
            except Exception as e:
                print(f"Error querying {table}: {e}")
    await engine.dispose()


if __name__ == "__main__":
    asyncio.run(check_data())
