# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2026 Biodex Contributors

from __future__ import annotations

from biodex.models.species import Species
from biodex.schemas.catalog import CatalogResponse
from biodex.schemas.species import SpeciesResponse
from biodex.search.types import CatalogFilters, ResultEnvelope, SearchMode
from tests.conftest import make_species


def _species(**kwargs: object) -> Species:
    return Species(**make_species(**kwargs))  # type: ignore[arg-type]


class TestSpeciesResponseNormalisation:
    def test_image_urls_non_list_becomes_empty(self) -> None:
        response = SpeciesResponse.model_validate(_species(image_urls={"a": 1}))
        assert response.image_urls == []

    def test_image_urls_filters_junk_entries(self) -> None:
        response = SpeciesResponse.model_validate(
            _species(image_urls=["https://img/1.jpg", "", 7, "https://img/2.jpg"])
        )
        assert response.image_urls == ["https://img/1.jpg", "https://img/2.jpg"]

    def test_coords_object_kept(self) -> None:
        response = SpeciesResponse.model_validate(
            _species(habitat_map_coords={"latitude": -1.5, "longitude": 36.8})
        )
        assert response.habitat_map_coords is not None
        assert response.habitat_map_coords.latitude == -1.5

    def test_coords_malformed_become_none(self) -> None:
        for raw in ("-1.5,36.8", {"lat": 1}, [1, 2]):
            response = SpeciesResponse.model_validate(_species(habitat_map_coords=raw))
            assert response.habitat_map_coords is None

    def test_class_serialised_under_keyword(self) -> None:
        record = _species()
        record.class_ = "Mammalia"
        dumped = SpeciesResponse.model_validate(record).model_dump(by_alias=True)
        assert dumped["class"] == "Mammalia"
        assert "class_" not in dumped


class TestCatalogResponse:
    def test_from_envelope(self) -> None:
        lion = _species(featured=True)
        envelope = ResultEnvelope(
            data=[lion],
            count=1,
            limit=10,
            offset=0,
            filters=CatalogFilters(kingdom="Animalia"),
            mode=SearchMode.RANKED,
            term="lion",
        )
        body = CatalogResponse.from_envelope(envelope).model_dump(mode="json", by_alias=True)

        assert body["data"][0]["id"] == str(lion.id)
        assert body["metadata"] == {
            "count": 1,
            "limit": 10,
            "offset": 0,
            "filters": {
                "featured": False,
                "kingdom": "Animalia",
                "iucn_status": None,
                "search": "lion",
            },
            "mode": "rpc-search",
        }
