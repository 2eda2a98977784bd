# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2026 Biodex Contributors

"""Errors raised by the catalog search pipeline.

``RankedPathError`` subclasses are recovered inside the orchestrator by
running the basic query instead. ``FallbackStoreError`` is the only error a
caller of :class:`~biodex.search.orchestrator.CatalogSearch` ever sees.
"""

from __future__ import annotations


class CatalogSearchError(Exception):
    """Base class for catalog search failures."""


class RankedPathError(CatalogSearchError):
    """A stage of the ranked pipeline failed."""

    stage = "ranked"


class RankProviderError(RankedPathError):
    """The ranking function failed or returned malformed data."""

    stage = "rank"


class IntersectionStoreError(RankedPathError):
    """The structured-filter existence check failed."""

    stage = "intersect"


class HydrationStoreError(RankedPathError):
    """The bulk fetch of a ranked page failed."""

    stage = "hydrate"


class FallbackStoreError(CatalogSearchError):
    """The basic query failed. Not recoverable."""
