# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2026 Biodex Contributors

from __future__ import annotations

from collections.abc import Sequence
from uuid import UUID

from sqlalchemy import ColumnElement, Float, Select, Uuid, column, func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from biodex.models.species import Species
from biodex.repositories.base import BaseRepository
from biodex.search.types import CatalogFilters, RankedHit, SpeciesId


def filter_conditions(filters: CatalogFilters) -> list[ColumnElement[bool]]:
    """WHERE clauses shared by the existence check and the basic query."""
    conditions: list[ColumnElement[bool]] = []
    if filters.featured:
        conditions.append(Species.featured.is_(True))
    if filters.kingdom:
        conditions.append(Species.kingdom.icontains(filters.kingdom, autoescape=True))
    if filters.iucn_status:
        conditions.append(Species.iucn_status == filters.iucn_status)
    return conditions


def term_condition(term: str) -> ColumnElement[bool]:
    return or_(
        Species.scientific_name.icontains(term, autoescape=True),
        Species.common_name.icontains(term, autoescape=True),
    )


def rank_statement(term: str) -> Select[tuple[SpeciesId, float]]:
    """SELECT over ``search_species(term)`` in the function's own output order.

    WITH ORDINALITY keeps that order authoritative, including how it breaks
    rank ties. The derived column list must be rendered: PostgreSQL names an
    undeclared ordinality column ``ordinality``.
    """
    ranked = (
        func.search_species(term)
        .table_valued(column("id", Uuid), column("rank", Float), with_ordinality="position")
        .render_derived()
    )
    return select(ranked.c.id, ranked.c.rank).order_by(ranked.c.position)


class SpeciesRepository(BaseRepository[Species]):
    """SQL implementation of :class:`~biodex.search.store.SpeciesStore`."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Species)

    async def rank_search(self, term: str) -> list[RankedHit]:
        result = await self.session.execute(rank_statement(term))
        return [RankedHit(id=row.id, rank=float(row.rank)) for row in result]

    async def exists_filtered(
        self, ids: Sequence[SpeciesId], filters: CatalogFilters
    ) -> set[SpeciesId]:
        if not ids:
            return set()
        stmt = select(Species.id).where(Species.id.in_(ids), *filter_conditions(filters))
        result = await self.session.execute(stmt)
        return set(result.scalars().all())

    async def find_by_ids(self, ids: Sequence[SpeciesId]) -> list[Species]:
        if not ids:
            return []
        return await self._all(select(Species).where(Species.id.in_(ids)))

    async def search_basic(
        self,
        term: str | None,
        filters: CatalogFilters,
        limit: int,
        offset: int,
    ) -> tuple[list[Species], int]:
        conditions = filter_conditions(filters)
        if term:
            conditions.append(term_condition(term))

        total_col = func.count().over().label("total")
        stmt = (
            select(Species, total_col)
            .where(*conditions)
            .order_by(
                Species.featured.desc(),
                Species.scientific_name.asc(),
                Species.id.asc(),
            )
            .limit(limit)
            .offset(offset)
        )
        rows = (await self.session.execute(stmt)).all()
        if rows:
            return [row[0] for row in rows], int(rows[0].total)
        if offset == 0:
            return [], 0
        # Page past the end: the window count has no row to ride on.
        return [], await self.count_matching(term, filters)

    async def count_matching(self, term: str | None, filters: CatalogFilters) -> int:
        conditions = filter_conditions(filters)
        if term:
            conditions.append(term_condition(term))
        stmt = select(func.count()).select_from(Species).where(*conditions)
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def rollback(self) -> None:
        await self.session.rollback()

    async def get_by_identifier(self, identifier: str) -> Species | None:
        """Look up by UUID when ``identifier`` parses as one, else by slug.

        Taxonomy, conservation data and images are eagerly loaded.
        """
        try:
            column_match = Species.id == UUID(identifier)
        except ValueError:
            column_match = Species.slug == identifier

        stmt = (
            select(Species)
            .where(column_match)
            .options(
                selectinload(Species.taxonomy),
                selectinload(Species.conservation),
                selectinload(Species.images),
            )
        )
        return await self._one_or_none(stmt)

    async def get_by_slug(self, slug: str) -> Species | None:
        return await self._one_or_none(select(Species).where(Species.slug == slug))
