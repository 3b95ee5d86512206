"""
Tests for the logging module.

Tests verify:
- JSON lines carry the service name and event fields
- DEBUG logs are suppressed at INFO level
- Bound context shows up on every line until unbound
"""

import json
import sys

import pytest
import structlog
from structlog.testing import capture_logs

from stockroom.core.errors import ConfigError, ErrorKind
from stockroom.core.logging import (
    LogContext,
    bind_context,
    clear_context,
    configure_logging,
    get_logger,
    unbind_context,
)


@pytest.fixture(autouse=True)
def reset_structlog():
    yield
    structlog.reset_defaults()


def _json_lines(text: str) -> list[dict]:
    return [json.loads(line) for line in text.splitlines() if line.startswith("{")]


class TestConfigureLogging:
    def test_json_output_has_service(self, capsys):
        configure_logging(level="INFO", json_format=True, service="warehouse")
        get_logger("tests").info("stock_adjusted", item_id=1, quantity=15)

        [line] = _json_lines(capsys.readouterr().out)
        assert line["event"] == "stock_adjusted"
        assert line["service"] == "warehouse"
        assert line["item_id"] == 1
        assert line["level"] == "info"
        assert "timestamp" in line

    def test_debug_suppressed_at_info(self, capsys):
        configure_logging(level="INFO", json_format=True)
        get_logger("tests").debug("noisy")
        assert _json_lines(capsys.readouterr().out) == []

    def test_without_timestamp(self, capsys):
        configure_logging(level="INFO", json_format=True, add_timestamp=False)
        get_logger("tests").info("quiet")
        [line] = _json_lines(capsys.readouterr().out)
        assert "timestamp" not in line

    def test_level_is_case_insensitive(self, capsys):
        configure_logging(level="debug", json_format=True)
        get_logger("tests").debug("verbose_detail")
        [line] = _json_lines(capsys.readouterr().out)
        assert line["level"] == "debug"

    def test_unknown_level_raises_config_error(self):
        with pytest.raises(ConfigError) as exc_info:
            configure_logging(level="verbose")
        assert exc_info.value.kind == ErrorKind.CONFIG
        assert "INFO" in exc_info.value.context.metadata["levels"]

    def test_stream_redirects_lines(self, capsys):
        configure_logging(level="INFO", json_format=True, stream=sys.stderr)
        get_logger("tests").info("to_stderr")
        captured = capsys.readouterr()
        assert _json_lines(captured.out) == []
        [line] = _json_lines(captured.err)
        assert line["event"] == "to_stderr"


class TestGetLogger:
    def test_name_is_bound_as_logger_name(self, capsys):
        configure_logging(level="INFO", json_format=True)
        get_logger("tests").info("named")
        [line] = _json_lines(capsys.readouterr().out)
        assert line["logger_name"] == "tests"

    def test_module_logger_carries_module_name(self):
        from stockroom.core import manager

        with capture_logs() as logs:
            manager.logger.info("stock_checked")
        assert logs == [
            {"event": "stock_checked", "log_level": "info", "logger_name": "stockroom.core.manager"}
        ]

    def test_unnamed_logger_has_no_name_field(self):
        with capture_logs() as logs:
            get_logger().info("anonymous")
        assert "logger_name" not in logs[0]


class TestContext:
    def setup_method(self):
        clear_context()

    def teardown_method(self):
        clear_context()

    def test_bind_and_unbind(self, capsys):
        configure_logging(level="INFO", json_format=True)
        logger = get_logger("tests")

        bind_context(repository="groceries")
        logger.info("first")
        unbind_context("repository")
        logger.info("second")

        first, second = _json_lines(capsys.readouterr().out)
        assert first["repository"] == "groceries"
        assert "repository" not in second

    def test_log_context_scopes_fields(self, capsys):
        configure_logging(level="INFO", json_format=True)
        logger = get_logger("tests")

        with LogContext(batch="restock"):
            logger.info("inside")
        logger.info("outside")

        inside, outside = _json_lines(capsys.readouterr().out)
        assert inside["batch"] == "restock"
        assert "batch" not in outside
