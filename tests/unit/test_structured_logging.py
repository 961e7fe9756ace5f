"""Unit tests for structured logging module."""

import json
import logging

import pytest

from claude_messages.core.structured_logging import (
    bind_context,
    clear_context,
    configure_structured_logging,
    get_logger,
)


class TestConfigureStructuredLogging:
    """Test configure_structured_logging function."""

    def test_configures_without_crash(self) -> None:
        """Test configuration doesn't crash."""
        configure_structured_logging(log_level="INFO", json_format=True)

    def test_configures_console_format(self) -> None:
        """Test configuration with console format."""
        configure_structured_logging(log_level="DEBUG", json_format=False)

    def test_sets_root_level(self) -> None:
        """Test the root logger level follows the argument."""
        for level in ["DEBUG", "INFO", "WARNING", "ERROR"]:
            configure_structured_logging(log_level=level, json_format=True)
            assert logging.getLogger().level == getattr(logging, level)

    def test_unknown_level_falls_back_to_info(self) -> None:
        configure_structured_logging(log_level="verbose")
        assert logging.getLogger().level == logging.INFO


class TestJSONOutput:
    """Test rendered log lines."""

    def test_json_line_on_stderr(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_structured_logging(log_level="INFO", json_format=True)
        get_logger("test_json").info("chunk_decoded", index=3)

        line = capsys.readouterr().err.strip().splitlines()[-1]
        data = json.loads(line)
        assert data["event"] == "chunk_decoded"
        assert data["index"] == 3
        assert data["level"] == "info"
        assert data["logger"] == "test_json"
        assert "T" in data["timestamp"]

    def test_level_filtering(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_structured_logging(log_level="WARNING", json_format=True)
        get_logger("test_filter").info("hidden")
        assert "hidden" not in capsys.readouterr().err

    def test_bound_context_is_merged(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_structured_logging(log_level="INFO", json_format=True)
        bind_context(kind="stream")
        try:
            get_logger("test_context").info("decoded")
        finally:
            clear_context()

        data = json.loads(capsys.readouterr().err.strip().splitlines()[-1])
        assert data["kind"] == "stream"


class TestGetLogger:
    """Test get_logger function."""

    def test_logger_has_log_methods(self) -> None:
        """Test logger has standard log methods."""
        logger = get_logger("test_module")
        assert hasattr(logger, "info")
        assert hasattr(logger, "warning")
        assert hasattr(logger, "error")
        assert hasattr(logger, "debug")


class TestContext:
    """Test bind_context and clear_context."""

    def test_clear_after_bind(self) -> None:
        """Test clearing after binding."""
        bind_context(key="value")
        clear_context()
        # Should not crash even if called multiple times
        clear_context()
