# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2026 Biodex Contributors

from __future__ import annotations

import asyncio
import os
from collections.abc import AsyncIterator
from pathlib import Path

import pytest
from alembic import command
from alembic.config import Config
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from biodex.config import get_settings
from biodex.models.species import Species
from biodex.repositories.species_repository import SpeciesRepository
from biodex.search.orchestrator import CatalogSearch
from biodex.search.types import CatalogConfig, CatalogFilters, SearchMode
from tests.conftest import make_species

needs_db = pytest.mark.skipif(
    "TEST_DATABASE_URL" not in os.environ,
    reason="TEST_DATABASE_URL not set; skipping integration test",
)

_MIGRATIONS = Path(__file__).resolve().parents[2] / "src" / "biodex" / "db" / "migrations"


def _alembic_config() -> Config:
    # No ini file: env.py then leaves the test run's logging setup alone.
    config = Config()
    config.set_main_option("script_location", str(_MIGRATIONS))
    return config


@pytest.fixture
async def migrated_session(monkeypatch: pytest.MonkeyPatch) -> AsyncIterator[AsyncSession]:
    """Session on a database built by the migrations, ranking function included."""
    url = os.environ["TEST_DATABASE_URL"]
    monkeypatch.setenv("DATABASE_URL", url)
    get_settings.cache_clear()
    config = _alembic_config()
    # env.py drives its own event loop, so it runs off this one.
    await asyncio.to_thread(command.upgrade, config, "head")

    engine = create_async_engine(url)
    session_factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    try:
        async with session_factory() as session:
            yield session
    finally:
        await engine.dispose()
        await asyncio.to_thread(command.downgrade, config, "base")
        get_settings.cache_clear()


@pytest.fixture
async def felines(migrated_session: AsyncSession) -> dict[str, Species]:
    rows = {
        "lion": Species(
            **make_species(scientific_name="Panthera leo", common_name="Lion")  # type: ignore[arg-type]
        ),
        "jellyfish": Species(
            **make_species(  # type: ignore[arg-type]
                scientific_name="Cyanea capillata",
                common_name="Lion's mane jellyfish",
                featured=True,
            )
        ),
        "oak": Species(
            **make_species(  # type: ignore[arg-type]
                scientific_name="Quercus robur", common_name="English oak", kingdom="Plantae"
            )
        ),
    }
    migrated_session.add_all(rows.values())
    await migrated_session.commit()
    return rows


def _catalog(session: AsyncSession) -> CatalogSearch:
    return CatalogSearch(SpeciesRepository(session), CatalogConfig(default_limit=24, max_limit=100))


@needs_db
class TestRankedSearchOnPostgres:
    async def test_rank_search_returns_best_first(
        self, migrated_session: AsyncSession, felines: dict[str, Species]
    ) -> None:
        hits = await SpeciesRepository(migrated_session).rank_search("lion")

        assert [hit.id for hit in hits] == [felines["lion"].id, felines["jellyfish"].id]
        assert hits[0].rank > hits[1].rank

    async def test_ranked_mode_keeps_rank_order(
        self, migrated_session: AsyncSession, felines: dict[str, Species]
    ) -> None:
        expected = [felines["lion"].id, felines["jellyfish"].id]
        envelope = await _catalog(migrated_session).search("lion")

        assert envelope.mode is SearchMode.RANKED
        assert [r.id for r in envelope.data] == expected
        assert envelope.count == 2

    async def test_ranked_mode_applies_filters(
        self, migrated_session: AsyncSession, felines: dict[str, Species]
    ) -> None:
        jellyfish_id = felines["jellyfish"].id
        envelope = await _catalog(migrated_session).search("lion", CatalogFilters(featured=True))

        assert envelope.mode is SearchMode.RANKED
        assert [r.id for r in envelope.data] == [jellyfish_id]

    async def test_underscore_is_literal_in_both_modes(
        self, migrated_session: AsyncSession, felines: dict[str, Species]
    ) -> None:
        repo = SpeciesRepository(migrated_session)

        assert await repo.rank_search("_") == []
        records, total = await repo.search_basic("_", CatalogFilters(), limit=10, offset=0)
        assert records == []
        assert total == 0
