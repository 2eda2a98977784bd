# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2026 Biodex Contributors

from __future__ import annotations

import logging
import sys
from collections.abc import Iterator

import orjson
import pytest

from biodex.config import Settings
from biodex.logging_config import JsonFormatter, configure_logging


def _record(msg: str, *args: object, **extra: object) -> logging.LogRecord:
    record = logging.LogRecord("biodex.test", logging.WARNING, __file__, 1, msg, args, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestJsonFormatter:
    def test_core_fields(self) -> None:
        entry = orjson.loads(JsonFormatter().format(_record("degraded at %s", "rank")))
        assert entry["level"] == "WARNING"
        assert entry["logger"] == "biodex.test"
        assert entry["message"] == "degraded at rank"
        assert "timestamp" in entry

    def test_extra_fields_included(self) -> None:
        entry = orjson.loads(JsonFormatter().format(_record("hit", stage="hydrate")))
        assert entry["stage"] == "hydrate"

    def test_exception_rendered(self) -> None:
        try:
            raise RuntimeError("store down")
        except RuntimeError:
            record = logging.LogRecord(
                "biodex.test", logging.ERROR, __file__, 1, "failed", (), sys.exc_info()
            )
        entry = orjson.loads(JsonFormatter().format(record))
        assert "store down" in entry["exception"]


class TestConfigureLogging:
    @pytest.fixture(autouse=True)
    def _restore_root(self) -> Iterator[None]:
        root = logging.getLogger()
        handlers, level = root.handlers[:], root.level
        yield
        root.handlers[:] = handlers
        root.setLevel(level)

    def test_json_handler(self) -> None:
        settings = Settings(  # type: ignore[call-arg]
            database_url="sqlite+aiosqlite://", log_level="debug", _env_file=None
        )
        configure_logging(settings)
        root = logging.getLogger()
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, JsonFormatter)

    def test_text_handler(self) -> None:
        settings = Settings(  # type: ignore[call-arg]
            database_url="sqlite+aiosqlite://", log_format="text", _env_file=None
        )
        configure_logging(settings)
        formatter = logging.getLogger().handlers[0].formatter
        assert formatter is not None
        assert not isinstance(formatter, JsonFormatter)
