# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2026 Biodex Contributors

from slowapi import Limiter
from slowapi.util import get_remote_address

from biodex.config import get_settings

limiter = Limiter(key_func=get_remote_address)


def search_rate_limit() -> str:
    """Resolved per request so tests and deployments can tune it via settings."""
    return get_settings().search_rate_limit
