"""Generic per-entity data access on top of the request session.

Every entity table gets the same small surface: list, list by parent,
exists, get, insert, replace, delete, plus the bulk replace used by the
join tables. Methods only flush; the request-scoped session in
``get_db`` owns commit and rollback.
"""

from __future__ import annotations

import uuid
from collections.abc import Iterable, Sequence
from typing import Any, Generic, TypeVar

from sqlalchemy import ColumnElement, delete, inspect, select
from sqlalchemy.ext.asyncio import AsyncSession

from planner.db.base import Base

ModelT = TypeVar("ModelT", bound=Base)


class Repository(Generic[ModelT]):
    """Data access for one mapped model, keyed by its single primary key column."""

    def __init__(self, session: AsyncSession, model: type[ModelT]):
        self.session = session
        self.model = model
        self.key = inspect(model).primary_key[0]

    async def list(self, order_by: Any = None) -> list[ModelT]:
        stmt = select(self.model)
        if order_by is not None:
            stmt = stmt.order_by(order_by)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def list_by(self, column: Any, value: Any, order_by: Any = None) -> list[ModelT]:
        stmt = select(self.model).where(column == value)
        if order_by is not None:
            stmt = stmt.order_by(order_by)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def list_in(self, column: Any, values: Iterable[Any], order_by: Any = None) -> list[ModelT]:
        values = list(values)
        if not values:
            return []
        stmt = select(self.model).where(column.in_(values))
        if order_by is not None:
            stmt = stmt.order_by(order_by)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def get(self, ident: uuid.UUID) -> ModelT | None:
        result = await self.session.execute(select(self.model).where(self.key == ident))
        return result.scalar_one_or_none()

    async def exists(self, ident: uuid.UUID) -> bool:
        result = await self.session.execute(select(self.key).where(self.key == ident).limit(1))
        return result.first() is not None

    async def existing_ids(self, idents: Iterable[uuid.UUID]) -> set[uuid.UUID]:
        """Subset of idents that exist, in one query."""
        idents = set(idents)
        if not idents:
            return set()
        result = await self.session.execute(select(self.key).where(self.key.in_(idents)))
        return set(result.scalars().all())

    async def find_by(self, *criteria: ColumnElement[bool]) -> ModelT | None:
        result = await self.session.execute(select(self.model).where(*criteria).limit(1))
        return result.scalars().first()

    async def insert(self, obj: ModelT) -> ModelT:
        self.session.add(obj)
        await self.session.flush()
        await self.session.refresh(obj)
        return obj

    async def replace(self, obj: ModelT, values: dict[str, Any]) -> ModelT:
        """Overwrite every given field; the identifier is never touched."""
        for k, v in values.items():
            if k == self.key.key:
                continue
            setattr(obj, k, v)
        await self.session.flush()
        await self.session.refresh(obj)
        return obj

    async def delete(self, obj: ModelT) -> None:
        await self.session.delete(obj)
        await self.session.flush()

    async def replace_for_parents(
        self,
        parent_column: Any,
        parent_ids: Iterable[uuid.UUID],
        rows: Sequence[ModelT],
    ) -> list[ModelT]:
        """Delete every row owned by ``parent_ids`` and insert ``rows`` in their place.

        Callers validate all rows before calling; nothing here checks references.
        """
        parent_ids = set(parent_ids)
        if parent_ids:
            await self.session.execute(delete(self.model).where(parent_column.in_(parent_ids)))
        self.session.add_all(rows)
        await self.session.flush()
        return list(rows)
