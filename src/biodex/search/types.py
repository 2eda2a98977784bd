# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2026 Biodex Contributors

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from uuid import UUID

from biodex.models.species import Species

SpeciesId = UUID


class SearchMode(str, enum.Enum):
    RANKED = "rpc-search"
    BASIC = "basic-query"


@dataclass(frozen=True, slots=True)
class CatalogFilters:
    """Structured (non-text) predicates applied in both search modes."""

    featured: bool = False
    kingdom: str | None = None
    iucn_status: str | None = None

    @classmethod
    def from_params(
        cls,
        *,
        featured: bool = False,
        kingdom: str | None = None,
        iucn_status: str | None = None,
    ) -> CatalogFilters:
        """Build filters from raw request values, treating blanks as unset."""
        return cls(
            featured=featured,
            kingdom=(kingdom or "").strip() or None,
            iucn_status=(iucn_status or "").strip() or None,
        )

    @property
    def is_empty(self) -> bool:
        return not (self.featured or self.kingdom or self.iucn_status)


@dataclass(frozen=True, slots=True)
class RankedHit:
    id: SpeciesId
    rank: float


@dataclass(frozen=True, slots=True)
class Page:
    ids: list[SpeciesId]
    total: int


@dataclass(frozen=True, slots=True)
class CatalogConfig:
    """Per-call-site pagination policy for :class:`CatalogSearch`."""

    default_limit: int
    max_limit: int
    # Empty terms return an empty envelope instead of listing the catalog.
    require_term: bool = False

    def clamp_limit(self, limit: int | None) -> int:
        if not limit:
            return self.default_limit
        return min(max(limit, 1), self.max_limit)

    @staticmethod
    def clamp_offset(offset: int | None) -> int:
        return max(offset or 0, 0)


@dataclass(frozen=True, slots=True)
class SearchQuery:
    term: str
    filters: CatalogFilters
    limit: int
    offset: int


@dataclass(frozen=True, slots=True)
class ResultEnvelope:
    data: list[Species]
    count: int
    limit: int
    offset: int
    filters: CatalogFilters
    mode: SearchMode
    term: str | None = None


# -- Outcome of the ranked attempt -------------------------------------------


@dataclass(frozen=True, slots=True)
class RankedPage:
    records: list[Species]
    total: int


@dataclass(frozen=True, slots=True)
class Degraded:
    stage: str
    reason: str
    error: BaseException | None = field(default=None, compare=False)


RankedOutcome = RankedPage | Degraded
