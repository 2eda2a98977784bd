# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2026 Biodex Contributors

"""Initial schema: species catalog tables and the ranking function.

Revision ID: 001
Revises:
Create Date: 2026-10-19
"""

from __future__ import annotations

import sqlalchemy as sa
from alembic import op
from sqlalchemy.dialects import postgresql

revision: str = "001"
down_revision: str | None = None
branch_labels: tuple[str, ...] | None = None
depends_on: tuple[str, ...] | None = None


def _id_column() -> sa.Column:
    return sa.Column(
        "id",
        sa.Uuid(),
        primary_key=True,
        server_default=sa.text("gen_random_uuid()"),
    )


def _timestamp_column(name: str) -> sa.Column:
    return sa.Column(
        name,
        sa.DateTime(timezone=True),
        nullable=False,
        server_default=sa.text("now()"),
    )


def _species_fk() -> sa.Column:
    return sa.Column(
        "species_id",
        sa.Uuid(),
        sa.ForeignKey("species.id", ondelete="CASCADE"),
        nullable=False,
    )


def upgrade() -> None:
    # ------------------------------------------------------------------
    # 1. species
    # ------------------------------------------------------------------
    op.create_table(
        "species",
        _id_column(),
        sa.Column("scientific_name", sa.Text(), nullable=False),
        sa.Column("common_name", sa.Text(), nullable=True),
        sa.Column("slug", sa.Text(), nullable=False, unique=True),
        sa.Column("kingdom", sa.Text(), nullable=True),
        sa.Column("phylum", sa.Text(), nullable=True),
        sa.Column("class", sa.Text(), nullable=True),
        sa.Column("order", sa.Text(), nullable=True),
        sa.Column("family", sa.Text(), nullable=True),
        sa.Column("genus", sa.Text(), nullable=True),
        sa.Column("species", sa.Text(), nullable=True),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("morphology", sa.Text(), nullable=True),
        sa.Column("habitat_description", sa.Text(), nullable=True),
        sa.Column("conservation_status", sa.Text(), nullable=True),
        sa.Column("iucn_status", sa.String(8), nullable=True),
        sa.Column(
            "featured",
            sa.Boolean(),
            nullable=False,
            server_default=sa.text("false"),
        ),
        sa.Column(
            "image_urls",
            postgresql.JSONB(),
            nullable=True,
            server_default=sa.text("'[]'::jsonb"),
        ),
        sa.Column("habitat_map_coords", postgresql.JSONB(), nullable=True),
        sa.Column(
            "search_tsv",
            postgresql.TSVECTOR(),
            sa.Computed(
                "setweight(to_tsvector('simple', coalesce(common_name, '')), 'A') || "
                "setweight(to_tsvector('simple', coalesce(scientific_name, '')), 'A') || "
                "setweight(to_tsvector('simple', coalesce(family, '') || ' ' "
                "|| coalesce(genus, '')), 'B') || "
                "setweight(to_tsvector('simple', coalesce(description, '')), 'C')",
                persisted=True,
            ),
        ),
        _timestamp_column("created_at"),
        _timestamp_column("updated_at"),
        sa.CheckConstraint(
            "length(scientific_name) > 0",
            name="ck_species_scientific_name",
        ),
    )
    op.create_index(
        "idx_species_featured_name", "species", ["featured", "scientific_name"]
    )
    op.create_index("idx_species_iucn_status", "species", ["iucn_status"])
    op.create_index(
        "idx_species_search_tsv",
        "species",
        ["search_tsv"],
        postgresql_using="gin",
    )

    # ------------------------------------------------------------------
    # 2. taxonomy_hierarchy
    # ------------------------------------------------------------------
    op.create_table(
        "taxonomy_hierarchy",
        _id_column(),
        _species_fk(),
        sa.Column("kingdom", sa.Text(), nullable=True),
        sa.Column("phylum", sa.Text(), nullable=True),
        sa.Column("class", sa.Text(), nullable=True),
        sa.Column("order", sa.Text(), nullable=True),
        sa.Column("family", sa.Text(), nullable=True),
        sa.Column("genus", sa.Text(), nullable=True),
        sa.Column("species", sa.Text(), nullable=True),
        sa.Column("subspecies", sa.Text(), nullable=True),
        _timestamp_column("created_at"),
        sa.UniqueConstraint("species_id", name="uq_taxonomy_hierarchy_species"),
    )

    # ------------------------------------------------------------------
    # 3. conservation_data
    # ------------------------------------------------------------------
    op.create_table(
        "conservation_data",
        _id_column(),
        _species_fk(),
        sa.Column("iucn_status", sa.String(8), nullable=True),
        sa.Column("iucn_category", sa.Text(), nullable=True),
        sa.Column("population_trend", sa.Text(), nullable=True),
        sa.Column("population_size", sa.Text(), nullable=True),
        sa.Column("threat_level", sa.Text(), nullable=True),
        sa.Column(
            "threats",
            postgresql.JSONB(),
            nullable=False,
            server_default=sa.text("'[]'::jsonb"),
        ),
        sa.Column(
            "conservation_actions",
            postgresql.JSONB(),
            nullable=False,
            server_default=sa.text("'[]'::jsonb"),
        ),
        sa.Column("habitat_protection", sa.Boolean(), nullable=True),
        sa.Column("last_assessed", sa.Date(), nullable=True),
        sa.Column("assessor", sa.Text(), nullable=True),
        _timestamp_column("created_at"),
        _timestamp_column("updated_at"),
        sa.UniqueConstraint("species_id", name="uq_conservation_data_species"),
    )

    # ------------------------------------------------------------------
    # 4. species_images
    # ------------------------------------------------------------------
    op.create_table(
        "species_images",
        _id_column(),
        _species_fk(),
        sa.Column("image_url", sa.Text(), nullable=False),
        sa.Column("alt_text", sa.Text(), nullable=True),
        sa.Column("caption", sa.Text(), nullable=True),
        sa.Column("photographer", sa.Text(), nullable=True),
        sa.Column("license", sa.Text(), nullable=True),
        sa.Column(
            "is_primary",
            sa.Boolean(),
            nullable=False,
            server_default=sa.text("false"),
        ),
        sa.Column(
            "sort_order",
            sa.Integer(),
            nullable=False,
            server_default=sa.text("0"),
        ),
        _timestamp_column("created_at"),
    )
    op.create_index(
        "idx_species_images_species", "species_images", ["species_id", "sort_order"]
    )

    # ------------------------------------------------------------------
    # 5. search_species(): ranked candidate ids, best first
    # ------------------------------------------------------------------
    # Substring matches use strpos, so _ and % in the term are literal
    # exactly as in the basic query.
    op.execute(
        """
        CREATE OR REPLACE FUNCTION search_species(search_query text)
        RETURNS TABLE (id uuid, rank real)
        LANGUAGE sql STABLE
        AS $$
            SELECT s.id,
                   ts_rank(s.search_tsv, websearch_to_tsquery('simple', search_query))
                   + CASE
                         WHEN lower(s.common_name) = lower(search_query)
                           OR lower(s.scientific_name) = lower(search_query) THEN 1.0
                         ELSE 0.0
                     END AS rank
            FROM species s
            WHERE s.search_tsv @@ websearch_to_tsquery('simple', search_query)
               OR strpos(lower(s.scientific_name), lower(search_query)) > 0
               OR strpos(lower(s.common_name), lower(search_query)) > 0
            ORDER BY rank DESC, s.scientific_name ASC
        $$
        """
    )


def downgrade() -> None:
    op.execute("DROP FUNCTION IF EXISTS search_species(text)")
    op.drop_table("species_images")
    op.drop_table("conservation_data")
    op.drop_table("taxonomy_hierarchy")
    op.drop_table("species")
