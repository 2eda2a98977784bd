# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2026 Biodex Contributors

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query

from biodex.api.dependencies import get_catalog_search, get_species_repository
from biodex.api.params import lenient_int
from biodex.repositories.species_repository import SpeciesRepository
from biodex.schemas.catalog import CatalogResponse
from biodex.schemas.common import ErrorResponse
from biodex.schemas.species import SpeciesDetailEnvelope, SpeciesDetailResponse
from biodex.search.orchestrator import CatalogSearch
from biodex.search.types import CatalogFilters

router = APIRouter(prefix="/species", tags=["species"])


@router.get(
    "",
    response_model=CatalogResponse,
    responses={500: {"model": ErrorResponse}},
)
async def list_species(
    search: str | None = Query(None),
    kingdom: str | None = Query(None),
    iucn_status: str | None = Query(None),
    featured: str | None = Query(None, description='Only the literal "true" enables it'),
    limit: str | None = Query(None),
    offset: str | None = Query(None),
    catalog: CatalogSearch = Depends(get_catalog_search),
) -> CatalogResponse:
    """Paginated species catalog with optional ranked full-text search.

    ``limit`` and ``offset`` are clamped rather than rejected.
    """
    filters = CatalogFilters.from_params(
        featured=featured == "true",
        kingdom=kingdom,
        iucn_status=iucn_status,
    )
    envelope = await catalog.search(search, filters, lenient_int(limit), lenient_int(offset))
    return CatalogResponse.from_envelope(envelope)


@router.get("/{identifier}", response_model=SpeciesDetailEnvelope)
async def get_species(
    identifier: str,
    repo: SpeciesRepository = Depends(get_species_repository),
) -> SpeciesDetailEnvelope:
    species = await repo.get_by_identifier(identifier)
    if species is None:
        raise HTTPException(status_code=404, detail="Species not found")
    return SpeciesDetailEnvelope(data=SpeciesDetailResponse.model_validate(species))
