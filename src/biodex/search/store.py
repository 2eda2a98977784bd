# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2026 Biodex Contributors

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from biodex.models.species import Species
from biodex.search.types import CatalogFilters, RankedHit, SpeciesId


class SpeciesStore(Protocol):
    """Read-only species access needed by the catalog search.

    :class:`~biodex.repositories.species_repository.SpeciesRepository` is the
    SQL implementation. Implementations raise on failure; the pipeline
    decides whether a failure is recoverable.
    """

    async def rank_search(self, term: str) -> Sequence[RankedHit]:
        """Return hits ordered by relevance, best first."""
        ...

    async def exists_filtered(
        self, ids: Sequence[SpeciesId], filters: CatalogFilters
    ) -> set[SpeciesId]:
        """Return the subset of ``ids`` matching ``filters`` (unordered)."""
        ...

    async def find_by_ids(self, ids: Sequence[SpeciesId]) -> list[Species]:
        """Bulk fetch. Order of the result is unspecified."""
        ...

    async def search_basic(
        self,
        term: str | None,
        filters: CatalogFilters,
        limit: int,
        offset: int,
    ) -> tuple[list[Species], int]:
        """Substring + filter query ordered featured-first, then by name.

        Returns the requested page and the exact number of matches.
        """
        ...

    async def rollback(self) -> None:
        """Discard work left behind by a failed call.

        PostgreSQL refuses further statements in a transaction after an
        error, so this runs before the basic query replaces a failed ranked
        attempt.
        """
        ...
