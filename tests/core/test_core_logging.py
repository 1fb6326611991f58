"""
Tests for the logging module.

Tests verify:
- Logs go to stderr, never stdout
- DEBUG logs are suppressed at WARNING level
- Bound context appears in log lines and LogContext unbinds it
"""

import json

import structlog

from tutor.core.logging import (
    LogContext,
    bind_context,
    clear_context,
    configure_logging,
    get_logger,
    unbind_context,
)


def _json_lines(text: str) -> list[dict]:
    return [json.loads(line) for line in text.splitlines() if line.strip()]


class TestConfigureLogging:
    def test_logs_go_to_stderr(self, capsys):
        configure_logging(level="INFO", json_format=True)
        get_logger("test").info("registry.built", lessons=3)
        captured = capsys.readouterr()

        assert captured.out == ""
        (record,) = _json_lines(captured.err)
        assert record["event"] == "registry.built"
        assert record["lessons"] == 3
        assert record["level"] == "info"
        assert record["service"] == "tutor"
        assert "timestamp" in record

    def test_debug_suppressed_at_warning(self, capsys):
        configure_logging(level="WARNING", json_format=True)
        get_logger("test").debug("noisy")
        get_logger("test").info("also.noisy")
        assert capsys.readouterr().err == ""

    def test_service_name(self, capsys):
        configure_logging(level="INFO", json_format=True, service="lessons")
        get_logger().info("hello")
        (record,) = _json_lines(capsys.readouterr().err)
        assert record["service"] == "lessons"

    def test_without_timestamp(self, capsys):
        configure_logging(level="INFO", json_format=True, add_timestamp=False)
        get_logger().info("hello")
        (record,) = _json_lines(capsys.readouterr().err)
        assert "timestamp" not in record

    def test_console_renderer(self, capsys):
        configure_logging(level="INFO", json_format=False)
        get_logger().info("lesson.started")
        assert "lesson.started" in capsys.readouterr().err


class TestContext:
    def setup_method(self):
        clear_context()

    def teardown_method(self):
        clear_context()

    def test_bound_context_in_logs(self, capsys):
        configure_logging(level="INFO", json_format=True)
        bind_context(lesson="borrowing")
        get_logger().info("lesson.started")
        (record,) = _json_lines(capsys.readouterr().err)
        assert record["lesson"] == "borrowing"

    def test_unbind(self):
        bind_context(lesson="borrowing", number=7)
        unbind_context("number")
        assert structlog.contextvars.get_contextvars() == {"lesson": "borrowing"}

    def test_log_context_scoped(self):
        with LogContext(lesson="slices", number=8):
            assert structlog.contextvars.get_contextvars() == {"lesson": "slices", "number": 8}
        assert structlog.contextvars.get_contextvars() == {}
