# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2026 Biodex Contributors

from __future__ import annotations

import os
from collections.abc import AsyncIterator, Sequence
from uuid import UUID, uuid4

# Settings are read lazily, but biodex.main builds the CORS middleware at import.
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from biodex.models.base import Base
from biodex.models.species import Species
from biodex.search.types import CatalogFilters, RankedHit


def _get_test_database_url() -> str:
    """Return the test database URL from env, falling back to SQLite for unit tests."""
    return os.environ.get(
        "TEST_DATABASE_URL",
        "sqlite+aiosqlite:///:memory:",
    )


@pytest.fixture
async def async_engine() -> AsyncIterator[AsyncEngine]:
    """Create an async engine for the test database."""
    url = _get_test_database_url()
    if url.startswith("sqlite"):
        # One shared connection, otherwise every checkout sees an empty :memory: db.
        engine = create_async_engine(url, echo=False, poolclass=StaticPool)
    else:
        engine = create_async_engine(url, echo=False)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def db_session(
    async_engine: AsyncEngine,
) -> AsyncIterator[AsyncSession]:
    """Provide a transactional database session that rolls back after each test."""
    session_factory = async_sessionmaker(
        async_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )
    async with session_factory() as session:
        yield session
        await session.rollback()


# ---------------------------------------------------------------------------
# Factory helpers for creating model instances in tests
# ---------------------------------------------------------------------------


def make_species(
    *,
    scientific_name: str = "Panthera leo",
    common_name: str | None = "Lion",
    kingdom: str | None = "Animalia",
    iucn_status: str | None = None,
    featured: bool = False,
    slug: str | None = None,
    image_urls: object = None,
    habitat_map_coords: object = None,
) -> dict[str, object]:
    """Return kwargs suitable for constructing a Species model instance."""
    return {
        "id": uuid4(),
        "scientific_name": scientific_name,
        "common_name": common_name,
        "slug": slug or f"{scientific_name.lower().replace(' ', '-')}-{uuid4().hex[:6]}",
        "kingdom": kingdom,
        "iucn_status": iucn_status,
        "featured": featured,
        "image_urls": image_urls if image_urls is not None else [],
        "habitat_map_coords": habitat_map_coords,
    }


# ---------------------------------------------------------------------------
# In-memory SpeciesStore
# ---------------------------------------------------------------------------


class FakeSpeciesStore:
    """Dict-backed SpeciesStore with call recording and failure injection.

    ``find_by_ids`` deliberately returns records in reverse id order so tests
    catch any reliance on the bulk fetch preserving order.
    """

    def __init__(self, records: Sequence[Species] = ()) -> None:
        self.records: dict[UUID, Species] = {r.id: r for r in records}
        self.hits: object = []
        self.fail_on: set[str] = set()
        self.calls: list[str] = []

    def _enter(self, name: str) -> None:
        self.calls.append(name)
        if name in self.fail_on:
            raise RuntimeError(f"{name} unavailable")

    @staticmethod
    def _matches(record: Species, filters: CatalogFilters) -> bool:
        if filters.featured and not record.featured:
            return False
        if filters.kingdom and filters.kingdom.lower() not in (record.kingdom or "").lower():
            return False
        if filters.iucn_status and record.iucn_status != filters.iucn_status:
            return False
        return True

    async def rank_search(self, term: str) -> Sequence[RankedHit]:
        self._enter("rank_search")
        return self.hits  # type: ignore[return-value]

    async def exists_filtered(
        self, ids: Sequence[UUID], filters: CatalogFilters
    ) -> set[UUID]:
        self._enter("exists_filtered")
        return {
            i for i in ids if i in self.records and self._matches(self.records[i], filters)
        }

    async def find_by_ids(self, ids: Sequence[UUID]) -> list[Species]:
        self._enter("find_by_ids")
        found = [self.records[i] for i in ids if i in self.records]
        return sorted(found, key=lambda r: str(r.id), reverse=True)

    async def search_basic(
        self,
        term: str | None,
        filters: CatalogFilters,
        limit: int,
        offset: int,
    ) -> tuple[list[Species], int]:
        self._enter("search_basic")
        needle = (term or "").lower()
        matched = [
            r
            for r in self.records.values()
            if self._matches(r, filters)
            and (
                not needle
                or needle in r.scientific_name.lower()
                or needle in (r.common_name or "").lower()
            )
        ]
        matched.sort(key=lambda r: (not r.featured, r.scientific_name, str(r.id)))
        return matched[offset : offset + limit], len(matched)

    async def rollback(self) -> None:
        self._enter("rollback")
