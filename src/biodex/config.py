# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2026 Biodex Contributors

from functools import lru_cache

from pydantic import model_validator
from pydantic_settings import BaseSettings

_LOG_FORMATS = {"json", "text"}


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    database_url: str
    environment: str = "production"
    log_level: str = "info"
    log_format: str = "json"
    cors_origins: list[str] = []
    database_pool_size: int = 20
    database_pool_timeout: float = 30.0

    # Species listing (/v1/species)
    catalog_default_limit: int = 24
    catalog_max_limit: int = 100

    # Quick search dropdown (/v1/search)
    quick_search_default_limit: int = 6
    quick_search_max_limit: int = 25
    search_rate_limit: str = "60/minute"

    model_config = {"env_file": ".env"}

    @model_validator(mode="after")
    def _validate_limits(self) -> "Settings":
        if self.catalog_default_limit < 1 or self.quick_search_default_limit < 1:
            raise ValueError("default page sizes must be at least 1")
        if self.catalog_max_limit < self.catalog_default_limit:
            raise ValueError("catalog_max_limit must be >= catalog_default_limit")
        if self.quick_search_max_limit < self.quick_search_default_limit:
            raise ValueError(
                "quick_search_max_limit must be >= quick_search_default_limit"
            )
        if self.log_format not in _LOG_FORMATS:
            raise ValueError(f"log_format must be one of {sorted(_LOG_FORMATS)}")
        return self


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance. Lazy-loaded to avoid import-time failures."""
    return Settings()
