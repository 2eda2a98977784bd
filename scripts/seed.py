#!/usr/bin/env python3
# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2026 Biodex Contributors
"""Seed the Biodex database with a handful of demo species.

Rows are written straight through the ORM, so the database must already be
migrated (``alembic upgrade head``). Existing slugs are skipped, which makes
the script safe to re-run.

Usage:
    python scripts/seed.py                     # uses DATABASE_URL
    python scripts/seed.py --database-url postgresql+asyncpg://...
"""

from __future__ import annotations

import argparse
import asyncio
import sys

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from biodex.config import get_settings
from biodex.models.species import ConservationData, Species, SpeciesImage, TaxonomyHierarchy
from biodex.repositories.species_repository import SpeciesRepository
from biodex.search.sanitize import slugify

# ---------------------------------------------------------------------------
# Seed data definitions
# ---------------------------------------------------------------------------

SPECIES: list[dict] = [
    {
        "scientific_name": "Panthera leo",
        "common_name": "Lion",
        "taxonomy": ("Animalia", "Chordata", "Mammalia", "Carnivora", "Felidae", "Panthera"),
        "iucn_status": "VU",
        "featured": True,
        "description": "Large social cat of African savannas, living in prides.",
        "habitat_map_coords": {"latitude": -2.33, "longitude": 34.83},
        "threats": ["habitat loss", "human-wildlife conflict"],
    },
    {
        "scientific_name": "Panthera tigris",
        "common_name": "Tiger",
        "taxonomy": ("Animalia", "Chordata", "Mammalia", "Carnivora", "Felidae", "Panthera"),
        "iucn_status": "EN",
        "featured": True,
        "description": "The largest living cat, a solitary ambush predator of Asian forests.",
        "habitat_map_coords": {"latitude": 21.7, "longitude": 79.3},
        "threats": ["poaching", "habitat fragmentation"],
    },
    {
        "scientific_name": "Lynx lynx",
        "common_name": "Eurasian lynx",
        "taxonomy": ("Animalia", "Chordata", "Mammalia", "Carnivora", "Felidae", "Lynx"),
        "iucn_status": "LC",
        "featured": False,
        "description": "Medium-sized wild cat of boreal and mountain forests.",
        "habitat_map_coords": None,
        "threats": [],
    },
    {
        "scientific_name": "Quercus robur",
        "common_name": "English oak",
        "taxonomy": ("Plantae", "Tracheophyta", "Magnoliopsida", "Fagales", "Fagaceae", "Quercus"),
        "iucn_status": "LC",
        "featured": True,
        "description": "Long-lived deciduous tree supporting hundreds of insect species.",
        "habitat_map_coords": {"latitude": 51.5, "longitude": -0.12},
        "threats": [],
    },
    {
        "scientific_name": "Morchella esculenta",
        "common_name": "Common morel",
        "taxonomy": ("Fungi", "Ascomycota", "Pezizomycetes", "Pezizales", "Morchellaceae", "Morchella"),
        "iucn_status": None,
        "featured": False,
        "description": "Edible spring mushroom with a honeycomb-like cap.",
        "habitat_map_coords": None,
        "threats": [],
    },
    {
        "scientific_name": "Dermochelys coriacea",
        "common_name": "Leatherback sea turtle",
        "taxonomy": ("Animalia", "Chordata", "Reptilia", "Testudines", "Dermochelyidae", "Dermochelys"),
        "iucn_status": "VU",
        "featured": False,
        "description": "The largest living turtle, ranging across tropical and temperate oceans.",
        "habitat_map_coords": {"latitude": 10.0, "longitude": -85.0},
        "threats": ["bycatch", "egg harvesting", "plastic ingestion"],
    },
]


def build_species(entry: dict) -> Species:
    kingdom, phylum, class_, order, family, genus = entry["taxonomy"]
    slug = slugify(entry["scientific_name"])
    return Species(
        scientific_name=entry["scientific_name"],
        common_name=entry["common_name"],
        slug=slug,
        kingdom=kingdom,
        phylum=phylum,
        class_=class_,
        order=order,
        family=family,
        genus=genus,
        species=entry["scientific_name"].split(" ", 1)[1],
        description=entry["description"],
        iucn_status=entry["iucn_status"],
        featured=entry["featured"],
        image_urls=[f"https://images.biodex.example/{slug}.jpg"],
        habitat_map_coords=entry["habitat_map_coords"],
    )


# ---------------------------------------------------------------------------
# Main seed logic
# ---------------------------------------------------------------------------


async def seed(database_url: str) -> None:
    engine = create_async_engine(database_url)
    session_factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    created = 0
    async with session_factory() as session:
        repo = SpeciesRepository(session)
        print("\n=== Creating species ===")
        for entry in SPECIES:
            slug = slugify(entry["scientific_name"])
            if await repo.get_by_slug(slug) is not None:
                print(f"  {slug}: (exists)")
                continue

            species = await repo.create(build_species(entry))
            kingdom, phylum, class_, order, family, genus = entry["taxonomy"]
            session.add_all(
                [
                    TaxonomyHierarchy(
                        species_id=species.id,
                        kingdom=kingdom,
                        phylum=phylum,
                        class_=class_,
                        order=order,
                        family=family,
                        genus=genus,
                        species=species.species,
                    ),
                    ConservationData(
                        species_id=species.id,
                        iucn_status=entry["iucn_status"],
                        threats=entry["threats"],
                    ),
                    SpeciesImage(
                        species_id=species.id,
                        image_url=species.image_urls[0],
                        alt_text=entry["common_name"],
                        is_primary=True,
                    ),
                ]
            )
            created += 1
            print(f"  {slug}: {species.id}")

        await session.commit()

    await engine.dispose()

    print("\n=== Seed complete ===")
    print(f"  Species created: {created}")
    print(f"  Species skipped: {len(SPECIES) - created}")


# ---------------------------------------------------------------------------
# CLI
# ---------------------------------------------------------------------------

if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Seed Biodex with demo species")
    parser.add_argument(
        "--database-url",
        default=None,
        help="SQLAlchemy async URL (default: DATABASE_URL from the environment)",
    )
    args = parser.parse_args()
    url = args.database_url or get_settings().database_url
    try:
        asyncio.run(seed(url))
    except KeyboardInterrupt:
        sys.exit(130)
