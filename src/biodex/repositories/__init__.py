# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2026 Biodex Contributors

from biodex.repositories.base import BaseRepository
from biodex.repositories.species_repository import SpeciesRepository

__all__ = [
    "BaseRepository",
    "SpeciesRepository",
]
