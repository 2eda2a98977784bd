# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2026 Biodex Contributors

from __future__ import annotations

from datetime import date, datetime
from typing import Any
from uuid import UUID

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
)


def _class_field() -> Any:
    # ``class`` is a keyword, so the ORM attribute is ``class_``.
    return Field(
        None,
        validation_alias=AliasChoices("class_", "class"),
        serialization_alias="class",
    )


class HabitatCoords(BaseModel):
    latitude: float
    longitude: float


class SpeciesResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: UUID
    scientific_name: str
    common_name: str | None = None
    slug: str
    kingdom: str | None = None
    phylum: str | None = None
    class_: str | None = _class_field()
    order: str | None = None
    family: str | None = None
    genus: str | None = None
    species: str | None = None
    description: str | None = None
    morphology: str | None = None
    habitat_description: str | None = None
    conservation_status: str | None = None
    iucn_status: str | None = None
    featured: bool = False
    image_urls: list[str] = []
    habitat_map_coords: HabitatCoords | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @field_validator("image_urls", mode="before")
    @classmethod
    def _coerce_image_urls(cls, value: object) -> list[str]:
        # Rows written before the column was typed may hold anything.
        if not isinstance(value, list):
            return []
        return [url for url in value if isinstance(url, str) and url]

    @field_validator("habitat_map_coords", mode="before")
    @classmethod
    def _coerce_coords(cls, value: object) -> HabitatCoords | None:
        if isinstance(value, HabitatCoords):
            return value
        if not isinstance(value, dict):
            return None
        try:
            return HabitatCoords.model_validate(value)
        except ValidationError:
            return None


class TaxonomyResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: UUID
    species_id: UUID
    kingdom: str | None = None
    phylum: str | None = None
    class_: str | None = _class_field()
    order: str | None = None
    family: str | None = None
    genus: str | None = None
    species: str | None = None
    subspecies: str | None = None


class ConservationResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    species_id: UUID
    iucn_status: str | None = None
    iucn_category: str | None = None
    population_trend: str | None = None
    population_size: str | None = None
    threat_level: str | None = None
    threats: list[str] = []
    conservation_actions: list[str] = []
    habitat_protection: bool | None = None
    last_assessed: date | None = None
    assessor: str | None = None


class SpeciesImageResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    image_url: str
    alt_text: str | None = None
    caption: str | None = None
    photographer: str | None = None
    license: str | None = None
    is_primary: bool = False
    sort_order: int = 0


class SpeciesDetailResponse(SpeciesResponse):
    taxonomy: TaxonomyResponse | None = None
    conservation: ConservationResponse | None = None
    images: list[SpeciesImageResponse] = []


class SpeciesDetailEnvelope(BaseModel):
    data: SpeciesDetailResponse
