# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2026 Biodex Contributors

from fastapi import APIRouter

from biodex.api.search import router as search_router
from biodex.api.species import router as species_router

v1_router = APIRouter()
v1_router.include_router(species_router)
v1_router.include_router(search_router)
