# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2026 Biodex Contributors

from __future__ import annotations

import re

# Characters that break LIKE patterns and comma-separated filter expressions.
_UNSAFE_CHARS = re.compile(r"[,%()]")


def sanitize_term(raw: str | None) -> str:
    """Strip pattern-breaking characters and surrounding whitespace.

    An empty result means "no effective search term".
    """
    if not raw:
        return ""
    return _UNSAFE_CHARS.sub("", raw).strip()


def slugify(value: str) -> str:
    """Lowercase, drop punctuation and hyphenate whitespace runs."""
    slug = value.lower().strip()
    slug = re.sub(r"[^a-z0-9\s-]", "", slug)
    slug = re.sub(r"\s+", "-", slug)
    return re.sub(r"-+", "-", slug)
