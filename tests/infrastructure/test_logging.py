"""Tests for centralized logging."""

import json
import logging

import pytest

from cairn.infrastructure.logging import JSONFormatter, configure_logging, resolve_level


class TestConfigureLogging:
    def test_default_level(self):
        configure_logging(level=logging.INFO)
        logger = logging.getLogger("cairn")
        assert logger.level == logging.INFO

    def test_debug_level(self):
        configure_logging(level=logging.DEBUG)
        logger = logging.getLogger("cairn")
        assert logger.level == logging.DEBUG

    def test_level_by_name(self):
        configure_logging(level="warning")
        assert logging.getLogger("cairn").level == logging.WARNING

    def test_json_format(self):
        configure_logging(level=logging.INFO, json_format=True)
        logger = logging.getLogger("cairn")
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0].formatter, JSONFormatter)

    def test_human_format(self):
        configure_logging(level=logging.INFO, json_format=False)
        logger = logging.getLogger("cairn")
        assert len(logger.handlers) == 1
        assert not isinstance(logger.handlers[0].formatter, JSONFormatter)

    def test_replaces_handlers(self):
        configure_logging(level=logging.INFO)
        configure_logging(level=logging.DEBUG)
        assert len(logging.getLogger("cairn").handlers) == 1


class TestResolveLevel:
    def test_int_passthrough(self):
        assert resolve_level(logging.ERROR) == logging.ERROR

    def test_name(self):
        assert resolve_level("debug") == logging.DEBUG

    def test_unknown_name(self):
        with pytest.raises(ValueError, match="Unknown log level"):
            resolve_level("chatty")


class TestJSONFormatter:
    def test_format_basic(self):
        formatter = JSONFormatter()
        record = logging.LogRecord(
            name="cairn.test", level=logging.INFO, pathname="", lineno=0,
            msg="%s object storage credentials created and set", args=("civo",),
            exc_info=None,
        )
        data = json.loads(formatter.format(record))
        assert data["level"] == "INFO"
        assert data["logger"] == "cairn.test"
        assert data["message"] == "civo object storage credentials created and set"
        assert "timestamp" in data

    def test_format_with_exception(self):
        formatter = JSONFormatter()
        try:
            raise ValueError("bucket exploded")
        except ValueError:
            import sys
            record = logging.LogRecord(
                name="cairn.test", level=logging.ERROR, pathname="", lineno=0,
                msg="failed", args=(), exc_info=sys.exc_info(),
            )
        data = json.loads(formatter.format(record))
        assert "bucket exploded" in data["exception"]
