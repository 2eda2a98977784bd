# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2026 Biodex Contributors

from __future__ import annotations

import logging

from biodex.models.species import Species
from biodex.search.errors import FallbackStoreError
from biodex.search.sanitize import sanitize_term
from biodex.search.store import SpeciesStore
from biodex.search.types import CatalogFilters

logger = logging.getLogger(__name__)


async def fallback_search(
    store: SpeciesStore,
    term: str | None,
    filters: CatalogFilters,
    limit: int,
    offset: int,
) -> tuple[list[Species], int]:
    """Run the basic substring + filter query in a single store call.

    Results are ordered featured-first, then by scientific name. ``term`` is
    sanitized here as well so raw input can never reach the LIKE clause.
    """
    cleaned = sanitize_term(term) or None
    try:
        return await store.search_basic(cleaned, filters, limit, offset)
    except Exception as exc:
        logger.exception("Basic species query failed")
        raise FallbackStoreError(str(exc) or "species query failed") from exc
