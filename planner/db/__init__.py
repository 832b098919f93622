"""Database package: engine, session, base, repository."""

from planner.db.repository import Repository
from planner.db.session import async_session_maker, get_db

__all__ = ["Repository", "async_session_maker", "get_db"]
