# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2026 Biodex Contributors

"""Stages of the ranked search path: rank -> intersect -> paginate -> hydrate.

Every stage keeps the relevance order produced by the rank provider. Store
failures are re-raised as the matching :class:`RankedPathError` subclass so
the orchestrator can report which stage degraded.
"""

from __future__ import annotations

from collections.abc import Sequence

from biodex.models.species import Species
from biodex.search.errors import (
    HydrationStoreError,
    IntersectionStoreError,
    RankProviderError,
)
from biodex.search.store import SpeciesStore
from biodex.search.types import CatalogFilters, Page, SpeciesId


async def rank_candidates(store: SpeciesStore, term: str) -> list[SpeciesId]:
    """Ask the rank provider for ``term`` and return distinct ids, best first."""
    try:
        hits = await store.rank_search(term)
    except Exception as exc:
        raise RankProviderError(f"rank provider failed: {exc}") from exc

    if not isinstance(hits, list):
        raise RankProviderError(
            f"rank provider returned {type(hits).__name__}, expected list"
        )

    ordered: list[SpeciesId] = []
    seen: set[SpeciesId] = set()
    for hit in hits:
        hit_id = getattr(hit, "id", None)
        if not hit_id or hit_id in seen:
            continue
        seen.add(hit_id)
        ordered.append(hit_id)
    return ordered


async def intersect(
    store: SpeciesStore,
    ordered_ids: Sequence[SpeciesId],
    filters: CatalogFilters,
) -> list[SpeciesId]:
    """Keep the ids that satisfy ``filters``, in their original order."""
    if not ordered_ids:
        return []
    if filters.is_empty:
        return list(ordered_ids)

    try:
        allowed = await store.exists_filtered(ordered_ids, filters)
    except Exception as exc:
        raise IntersectionStoreError(f"filter check failed: {exc}") from exc

    return [species_id for species_id in ordered_ids if species_id in allowed]


def paginate(ordered_ids: Sequence[SpeciesId], limit: int, offset: int) -> Page:
    """Slice one page out of ``ordered_ids``. Never raises for large offsets."""
    return Page(ids=list(ordered_ids[offset : offset + limit]), total=len(ordered_ids))


async def hydrate(store: SpeciesStore, page_ids: Sequence[SpeciesId]) -> list[Species]:
    """Fetch full records for ``page_ids`` and return them in that order.

    Ids the store no longer knows about (deleted after ranking) are dropped.
    """
    if not page_ids:
        return []

    try:
        records = await store.find_by_ids(page_ids)
    except Exception as exc:
        raise HydrationStoreError(f"bulk fetch failed: {exc}") from exc

    by_id = {record.id: record for record in records}
    return [by_id[species_id] for species_id in page_ids if species_id in by_id]
