# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2026 Biodex Contributors

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel

from biodex.schemas.species import SpeciesResponse
from biodex.search.types import ResultEnvelope


class CatalogFiltersEcho(BaseModel):
    featured: bool
    kingdom: str | None
    iucn_status: str | None
    search: str | None


class CatalogMetadata(BaseModel):
    count: int
    limit: int
    offset: int
    filters: CatalogFiltersEcho
    mode: Literal["rpc-search", "basic-query"]


class CatalogResponse(BaseModel):
    data: list[SpeciesResponse]
    metadata: CatalogMetadata

    @classmethod
    def from_envelope(cls, envelope: ResultEnvelope) -> CatalogResponse:
        return cls(
            data=[SpeciesResponse.model_validate(record) for record in envelope.data],
            metadata=CatalogMetadata(
                count=envelope.count,
                limit=envelope.limit,
                offset=envelope.offset,
                filters=CatalogFiltersEcho(
                    featured=envelope.filters.featured,
                    kingdom=envelope.filters.kingdom,
                    iucn_status=envelope.filters.iucn_status,
                    search=envelope.term,
                ),
                mode=envelope.mode.value,
            ),
        )
