# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2026 Biodex Contributors

from __future__ import annotations

from datetime import date
from uuid import UUID

from sqlalchemy import (
    JSON,
    Boolean,
    CheckConstraint,
    Date,
    ForeignKey,
    Index,
    Integer,
    String,
    Text,
    text,
)
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import Mapped, mapped_column, relationship

from biodex.models.base import Base, CreatedAtMixin, TimestampMixin, UUIDMixin

# JSONB on PostgreSQL, plain JSON elsewhere (SQLite in unit tests).
_JSONType = JSON().with_variant(JSONB(), "postgresql")


class Species(UUIDMixin, TimestampMixin, Base):
    __tablename__ = "species"

    scientific_name: Mapped[str] = mapped_column(Text, nullable=False)
    common_name: Mapped[str | None] = mapped_column(Text, default=None)
    slug: Mapped[str] = mapped_column(Text, nullable=False, unique=True)

    # Denormalised taxonomy, kept for filtering without a join
    kingdom: Mapped[str | None] = mapped_column(Text, default=None)
    phylum: Mapped[str | None] = mapped_column(Text, default=None)
    class_: Mapped[str | None] = mapped_column("class", Text, default=None)
    order: Mapped[str | None] = mapped_column("order", Text, default=None)
    family: Mapped[str | None] = mapped_column(Text, default=None)
    genus: Mapped[str | None] = mapped_column(Text, default=None)
    species: Mapped[str | None] = mapped_column(Text, default=None)

    description: Mapped[str | None] = mapped_column(Text, default=None)
    morphology: Mapped[str | None] = mapped_column(Text, default=None)
    habitat_description: Mapped[str | None] = mapped_column(Text, default=None)
    conservation_status: Mapped[str | None] = mapped_column(Text, default=None)
    iucn_status: Mapped[str | None] = mapped_column(String(8), default=None)
    featured: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False, server_default=text("false")
    )

    image_urls: Mapped[object | None] = mapped_column(_JSONType, default=list)
    habitat_map_coords: Mapped[object | None] = mapped_column(_JSONType, default=None)

    # Relationships (loaded explicitly by the detail lookup only)
    taxonomy: Mapped[TaxonomyHierarchy | None] = relationship(
        back_populates="species_record",
        uselist=False,
        lazy="raise",
    )
    conservation: Mapped[ConservationData | None] = relationship(
        back_populates="species_record",
        uselist=False,
        lazy="raise",
    )
    images: Mapped[list[SpeciesImage]] = relationship(
        back_populates="species_record",
        order_by="SpeciesImage.sort_order",
        lazy="raise",
    )

    __table_args__ = (
        CheckConstraint("length(scientific_name) > 0", name="scientific_name"),
        Index("idx_species_featured_name", "featured", "scientific_name"),
        Index("idx_species_iucn_status", "iucn_status"),
    )


class TaxonomyHierarchy(UUIDMixin, CreatedAtMixin, Base):
    __tablename__ = "taxonomy_hierarchy"

    species_id: Mapped[UUID] = mapped_column(
        ForeignKey("species.id", ondelete="CASCADE"),
        nullable=False,
        unique=True,
    )
    kingdom: Mapped[str | None] = mapped_column(Text, default=None)
    phylum: Mapped[str | None] = mapped_column(Text, default=None)
    class_: Mapped[str | None] = mapped_column("class", Text, default=None)
    order: Mapped[str | None] = mapped_column("order", Text, default=None)
    family: Mapped[str | None] = mapped_column(Text, default=None)
    genus: Mapped[str | None] = mapped_column(Text, default=None)
    species: Mapped[str | None] = mapped_column(Text, default=None)
    subspecies: Mapped[str | None] = mapped_column(Text, default=None)

    species_record: Mapped[Species] = relationship(back_populates="taxonomy")


class ConservationData(UUIDMixin, TimestampMixin, Base):
    __tablename__ = "conservation_data"

    species_id: Mapped[UUID] = mapped_column(
        ForeignKey("species.id", ondelete="CASCADE"),
        nullable=False,
        unique=True,
    )
    iucn_status: Mapped[str | None] = mapped_column(String(8), default=None)
    iucn_category: Mapped[str | None] = mapped_column(Text, default=None)
    population_trend: Mapped[str | None] = mapped_column(Text, default=None)
    population_size: Mapped[str | None] = mapped_column(Text, default=None)
    threat_level: Mapped[str | None] = mapped_column(Text, default=None)
    threats: Mapped[list[str]] = mapped_column(_JSONType, default=list)
    conservation_actions: Mapped[list[str]] = mapped_column(_JSONType, default=list)
    habitat_protection: Mapped[bool | None] = mapped_column(Boolean, default=None)
    last_assessed: Mapped[date | None] = mapped_column(Date, default=None)
    assessor: Mapped[str | None] = mapped_column(Text, default=None)

    species_record: Mapped[Species] = relationship(back_populates="conservation")


class SpeciesImage(UUIDMixin, CreatedAtMixin, Base):
    __tablename__ = "species_images"

    species_id: Mapped[UUID] = mapped_column(
        ForeignKey("species.id", ondelete="CASCADE"),
        nullable=False,
    )
    image_url: Mapped[str] = mapped_column(Text, nullable=False)
    alt_text: Mapped[str | None] = mapped_column(Text, default=None)
    caption: Mapped[str | None] = mapped_column(Text, default=None)
    photographer: Mapped[str | None] = mapped_column(Text, default=None)
    license: Mapped[str | None] = mapped_column(Text, default=None)
    is_primary: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    sort_order: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    species_record: Mapped[Species] = relationship(back_populates="images")

    __table_args__ = (Index("idx_species_images_species", "species_id", "sort_order"),)
