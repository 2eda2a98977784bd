# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2026 Biodex Contributors

from biodex.search.errors import (
    CatalogSearchError,
    FallbackStoreError,
    HydrationStoreError,
    IntersectionStoreError,
    RankedPathError,
    RankProviderError,
)
from biodex.search.orchestrator import CatalogSearch
from biodex.search.sanitize import sanitize_term, slugify
from biodex.search.store import SpeciesStore
from biodex.search.types import (
    CatalogConfig,
    CatalogFilters,
    RankedHit,
    ResultEnvelope,
    SearchMode,
)

__all__ = [
    "CatalogConfig",
    "CatalogFilters",
    "CatalogSearch",
    "CatalogSearchError",
    "FallbackStoreError",
    "HydrationStoreError",
    "IntersectionStoreError",
    "RankProviderError",
    "RankedHit",
    "RankedPathError",
    "ResultEnvelope",
    "SearchMode",
    "SpeciesStore",
    "sanitize_term",
    "slugify",
]
