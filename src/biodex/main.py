# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2026 Biodex Contributors

import logging
import subprocess
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from biodex.api.rate_limit import limiter
from biodex.api.router import v1_router
from biodex.config import get_settings
from biodex.db.session import get_engine
from biodex.logging_config import configure_logging
from biodex.search.errors import FallbackStoreError

__version__ = "0.1.0"

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    settings = get_settings()
    configure_logging(settings)

    # Development databases track head automatically; elsewhere migrations are a deploy step.
    if settings.environment == "development":
        subprocess.run(["alembic", "upgrade", "head"], check=True)

    logger.info("Biodex API %s starting (environment=%s)", __version__, settings.environment)
    yield
    await get_engine().dispose()


app = FastAPI(
    title="Biodex Species Catalog",
    version=__version__,
    lifespan=lifespan,
)

app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)


@app.exception_handler(FallbackStoreError)
async def fallback_store_error_handler(
    request: Request, exc: FallbackStoreError
) -> JSONResponse:
    """Both search strategies failed; the message is safe to show callers."""
    return JSONResponse(status_code=500, content={"error": str(exc)})


app.add_middleware(
    CORSMiddleware,
    allow_origins=get_settings().cors_origins,
    allow_methods=["GET", "OPTIONS"],
    allow_headers=["Content-Type"],
)

app.include_router(v1_router, prefix="/v1")


@app.get("/health")
async def health() -> dict[str, str]:
    """Liveness check."""
    return {"status": "healthy", "version": __version__}


@app.get("/ready", response_model=None)
async def ready() -> dict[str, str] | JSONResponse:
    """Readiness check. 503 until the database answers."""
    try:
        async with get_engine().connect() as conn:
            await conn.execute(text("SELECT 1"))
    except (SQLAlchemyError, OSError):
        logger.exception("Readiness check failed")
        return JSONResponse(status_code=503, content={"status": "unavailable"})
    return {"status": "ready"}
