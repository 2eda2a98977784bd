# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2026 Biodex Contributors

"""Catalog search entry point.

Usage:
    A request with a usable term first tries the ranked path
    (rank -> intersect -> paginate -> hydrate). Any failure on that path
    produces a :class:`Degraded` outcome and the request is answered by one
    full run of the basic query with the original arguments. Requests
    without a term go straight to the basic query.

    The ``mode`` of the returned :class:`ResultEnvelope` records which path
    answered.
"""

from __future__ import annotations

import logging

from biodex.models.species import Species
from biodex.search.errors import FallbackStoreError, RankedPathError
from biodex.search.fallback import fallback_search
from biodex.search.pipeline import hydrate, intersect, paginate, rank_candidates
from biodex.search.sanitize import sanitize_term
from biodex.search.store import SpeciesStore
from biodex.search.types import (
    CatalogConfig,
    CatalogFilters,
    Degraded,
    RankedOutcome,
    RankedPage,
    ResultEnvelope,
    SearchMode,
    SearchQuery,
)

logger = logging.getLogger(__name__)


class CatalogSearch:
    """Ranked species search with a basic-query fallback."""

    def __init__(self, store: SpeciesStore, config: CatalogConfig) -> None:
        self._store = store
        self._config = config

    @property
    def config(self) -> CatalogConfig:
        return self._config

    def build_query(
        self,
        term: str | None = None,
        filters: CatalogFilters | None = None,
        limit: int | None = None,
        offset: int | None = None,
    ) -> SearchQuery:
        """Sanitize the term and clamp pagination to this call site's policy."""
        return SearchQuery(
            term=sanitize_term(term),
            filters=filters or CatalogFilters(),
            limit=self._config.clamp_limit(limit),
            offset=self._config.clamp_offset(offset),
        )

    async def search(
        self,
        term: str | None = None,
        filters: CatalogFilters | None = None,
        limit: int | None = None,
        offset: int | None = None,
    ) -> ResultEnvelope:
        query = self.build_query(term, filters, limit, offset)

        if not query.term and self._config.require_term:
            return self._envelope(query, [], 0, SearchMode.BASIC)

        if query.term:
            outcome = await self._attempt_ranked(query)
            if isinstance(outcome, RankedPage):
                return self._envelope(query, outcome.records, outcome.total, SearchMode.RANKED)
            logger.warning(
                "Ranked search degraded at %s stage, using basic query: %s",
                outcome.stage,
                outcome.reason,
            )
            try:
                await self._store.rollback()
            except Exception as exc:
                raise FallbackStoreError(f"could not reset store: {exc}") from exc

        records, total = await fallback_search(
            self._store, term, query.filters, query.limit, query.offset
        )
        return self._envelope(query, records, total, SearchMode.BASIC)

    async def _attempt_ranked(self, query: SearchQuery) -> RankedOutcome:
        """Run the ranked pipeline once. Never raises for store failures."""
        try:
            ranked_ids = await rank_candidates(self._store, query.term)
            filtered_ids = await intersect(self._store, ranked_ids, query.filters)
            page = paginate(filtered_ids, query.limit, query.offset)
            records = await hydrate(self._store, page.ids)
        except RankedPathError as exc:
            return Degraded(stage=exc.stage, reason=str(exc), error=exc)
        except Exception as exc:
            return Degraded(stage="unexpected", reason=repr(exc), error=exc)
        return RankedPage(records=records, total=page.total)

    @staticmethod
    def _envelope(
        query: SearchQuery,
        records: list[Species],
        total: int,
        mode: SearchMode,
    ) -> ResultEnvelope:
        return ResultEnvelope(
            data=records,
            count=total,
            limit=query.limit,
            offset=query.offset,
            filters=query.filters,
            mode=mode,
            term=query.term or None,
        )
