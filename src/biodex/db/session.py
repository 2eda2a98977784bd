# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2026 Biodex Contributors

from collections.abc import AsyncIterator
from functools import lru_cache
from typing import Any

from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from biodex.config import Settings, get_settings


def engine_options(settings: Settings) -> dict[str, Any]:
    """Pool options for ``settings.database_url``.

    SQLite drivers use a single-connection pool that rejects sizing arguments.
    """
    if make_url(settings.database_url).get_backend_name() == "sqlite":
        return {}
    return {
        "pool_size": settings.database_pool_size,
        "max_overflow": 10,
        "pool_timeout": settings.database_pool_timeout,
        "pool_pre_ping": True,
    }


@lru_cache
def get_engine() -> AsyncEngine:
    """Create and cache the async database engine."""
    settings = get_settings()
    return create_async_engine(settings.database_url, **engine_options(settings))


@lru_cache
def get_session_factory() -> async_sessionmaker[AsyncSession]:
    # Handlers return ORM objects after commit, so keep them loaded.
    return async_sessionmaker(
        get_engine(),
        class_=AsyncSession,
        expire_on_commit=False,
    )


async def get_db() -> AsyncIterator[AsyncSession]:
    """FastAPI dependency yielding one session per request.

    The catalog endpoints only read, so nothing is committed here.
    """
    async with get_session_factory()() as session:
        yield session
