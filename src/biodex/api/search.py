# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2026 Biodex Contributors

from fastapi import APIRouter, Depends, Query, Request

from biodex.api.dependencies import get_quick_search
from biodex.api.params import lenient_int
from biodex.api.rate_limit import limiter, search_rate_limit
from biodex.schemas.catalog import CatalogResponse
from biodex.schemas.common import ErrorResponse
from biodex.search.orchestrator import CatalogSearch

router = APIRouter(prefix="/search", tags=["search"])


@router.get(
    "",
    response_model=CatalogResponse,
    responses={500: {"model": ErrorResponse}},
)
@limiter.limit(search_rate_limit)
async def quick_search(
    request: Request,
    q: str | None = Query(None),
    query: str | None = Query(None),
    search: str | None = Query(None),
    limit: str | None = Query(None),
    catalog: CatalogSearch = Depends(get_quick_search),
) -> CatalogResponse:
    """Search-as-you-type lookup. Accepts ``q``, ``query`` or ``search``.

    An empty term returns an empty result without touching the database.
    """
    term = q or query or search
    envelope = await catalog.search(term, limit=lenient_int(limit))
    return CatalogResponse.from_envelope(envelope)
