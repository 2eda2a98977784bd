# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2026 Biodex Contributors

from __future__ import annotations


def lenient_int(raw: str | None) -> int | None:
    """Parse a paging query value, returning None for anything unusable.

    Pagination is clamped rather than rejected, so ``limit=abc`` behaves like
    an absent ``limit`` and ``limit=12.9`` like ``12``.
    """
    if raw is None:
        return None
    try:
        return int(float(raw.strip()))
    except (ValueError, OverflowError):
        return None
