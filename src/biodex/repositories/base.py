# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2026 Biodex Contributors

from __future__ import annotations

from typing import Any, Generic, TypeVar
from uuid import UUID

from sqlalchemy import Select
from sqlalchemy.ext.asyncio import AsyncSession

from biodex.models.base import Base

T = TypeVar("T", bound=Base)


class BaseRepository(Generic[T]):
    """Session-bound data access for one mapped model."""

    def __init__(self, session: AsyncSession, model: type[T]) -> None:
        self.session = session
        self.model = model

    async def get_by_id(self, entity_id: UUID) -> T | None:
        return await self.session.get(self.model, entity_id)

    async def create(self, entity: T) -> T:
        """Add and flush so server-side defaults and the id are assigned."""
        self.session.add(entity)
        await self.session.flush()
        return entity

    async def _all(self, stmt: Select[Any]) -> list[T]:
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def _one_or_none(self, stmt: Select[Any]) -> T | None:
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()
