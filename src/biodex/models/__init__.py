# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2026 Biodex Contributors

from biodex.models.base import Base, CreatedAtMixin, TimestampMixin, UUIDMixin
from biodex.models.species import (
    ConservationData,
    Species,
    SpeciesImage,
    TaxonomyHierarchy,
)

__all__ = [
    "Base",
    "ConservationData",
    "CreatedAtMixin",
    "Species",
    "SpeciesImage",
    "TaxonomyHierarchy",
    "TimestampMixin",
    "UUIDMixin",
]
