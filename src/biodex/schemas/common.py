# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2026 Biodex Contributors

from __future__ import annotations

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    error: str
