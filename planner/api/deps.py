"""Endpoint dependencies and the shared existence checks."""

from __future__ import annotations

import uuid
from collections.abc import Callable, Sequence
from typing import Any

from fastapi import Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from planner.core.constants import PARENT_NOT_FOUND, TARGET_NOT_FOUND
from planner.db.repository import ModelT, Repository
from planner.db.session import get_db


def get_repository(model: type[ModelT]) -> Callable[[AsyncSession], Repository[ModelT]]:
    """Dependency factory: a Repository for `model` bound to the request session."""

    def _get_repository(db: AsyncSession = Depends(get_db)) -> Repository[ModelT]:
        return Repository(db, model)

    return _get_repository


async def require_target(repo: Repository[ModelT], ident: uuid.UUID, detail: str) -> ModelT:
    """The row being read/updated/deleted; 416 if it does not exist."""
    obj = await repo.get(ident)
    if obj is None:
        raise HTTPException(status_code=TARGET_NOT_FOUND, detail=detail)
    return obj


async def require_parent(repo: Repository[Any], ident: uuid.UUID, detail: str) -> None:
    """A referenced row; 417 if it does not exist."""
    if not await repo.exists(ident):
        raise HTTPException(status_code=PARENT_NOT_FOUND, detail=detail)


async def bulk_replace(
    repo: Repository[ModelT],
    parent_attr: str,
    rows: Sequence[ModelT],
    references: Sequence[tuple[Repository[Any], str, str]],
) -> list[ModelT]:
    """
    Replace every row owned by the parents named in `rows` with `rows`.
    All references are checked first: (repository, attribute on row, detail).
    Any missing reference rejects the whole batch with 417 before anything is written.
    """
    for ref_repo, attr, detail in references:
        wanted = {getattr(r, attr) for r in rows}
        if wanted - await ref_repo.existing_ids(wanted):
            raise HTTPException(status_code=PARENT_NOT_FOUND, detail=detail)
    parent_column = getattr(repo.model, parent_attr)
    parent_ids = {getattr(r, parent_attr) for r in rows}
    return await repo.replace_for_parents(parent_column, parent_ids, rows)
