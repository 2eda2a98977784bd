# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2026 Biodex Contributors

from __future__ import annotations

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from biodex.config import Settings, get_settings
from biodex.db.session import get_db
from biodex.repositories.species_repository import SpeciesRepository
from biodex.search.orchestrator import CatalogSearch
from biodex.search.store import SpeciesStore
from biodex.search.types import CatalogConfig


async def get_species_repository(
    db: AsyncSession = Depends(get_db),
) -> SpeciesRepository:
    return SpeciesRepository(db)


async def get_species_store(
    repo: SpeciesRepository = Depends(get_species_repository),
) -> SpeciesStore:
    return repo


async def get_catalog_search(
    store: SpeciesStore = Depends(get_species_store),
    settings: Settings = Depends(get_settings),
) -> CatalogSearch:
    """Orchestrator configured for the full species listing."""
    config = CatalogConfig(
        default_limit=settings.catalog_default_limit,
        max_limit=settings.catalog_max_limit,
    )
    return CatalogSearch(store, config)


async def get_quick_search(
    store: SpeciesStore = Depends(get_species_store),
    settings: Settings = Depends(get_settings),
) -> CatalogSearch:
    """Orchestrator configured for the search-as-you-type dropdown."""
    config = CatalogConfig(
        default_limit=settings.quick_search_default_limit,
        max_limit=settings.quick_search_max_limit,
        require_term=True,
    )
    return CatalogSearch(store, config)
