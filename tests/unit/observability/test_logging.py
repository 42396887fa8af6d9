"""Unit tests for observability logging helpers."""

from __future__ import annotations

import json
import logging

import pytest
import structlog
from structlog.testing import capture_logs

from mp_sluggable.observability.logging import JsonLoggerFactory, get_logger


@pytest.fixture()
def restore_logging():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    structlog.reset_defaults()
    root.handlers[:] = handlers
    root.setLevel(level)


class TestGetLogger:
    def test_returns_logger_with_methods(self) -> None:
        log = get_logger("mp_sluggable.test")
        for method in ("debug", "info", "warning", "error"):
            assert callable(getattr(log, method))

    def test_binds_initial_values(self) -> None:
        with capture_logs() as logs:
            get_logger("x", model="Article").info("slug.generated", slug="post")
        assert logs == [{"model": "Article", "slug": "post", "event": "slug.generated", "log_level": "info"}]


class TestJsonLoggerFactory:
    def test_configure_emits_json(self, restore_logging, capsys: pytest.CaptureFixture[str]) -> None:
        JsonLoggerFactory.configure(level=logging.DEBUG)
        get_logger("mp_sluggable.test").info("slug.generated", slug="hello-world")
        line = capsys.readouterr().err.strip().splitlines()[-1]
        payload = json.loads(line)
        assert payload["event"] == "slug.generated"
        assert payload["slug"] == "hello-world"
        assert payload["level"] == "info"

    def test_configure_sets_root_level(self, restore_logging) -> None:
        JsonLoggerFactory.configure(level=logging.WARNING)
        assert logging.getLogger().level == logging.WARNING
