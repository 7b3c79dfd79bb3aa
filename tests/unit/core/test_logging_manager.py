"""
Tests for logging_manager module.

Tests the InfothekLogger file output, the NullLogger/safe_logger pair
and handle_cli_error.
"""
from unittest.mock import MagicMock

import click
import pytest

from infothek.core.exceptions import DatabaseError
from infothek.core.logging_manager import (
    InfothekLogger,
    NullLogger,
    handle_cli_error,
    safe_logger,
)


class TestNullLogger:
    """Tests for NullLogger class."""

    def test_null_logger_methods_are_no_ops(self):
        """NullLogger logging methods should do nothing."""
        logger = NullLogger()
        logger.log_operation("op", {"key": "value"})
        logger.log_error(ValueError("test error"), {"context": "test"})
        logger.log_debug("debug message")
        logger.log_info("info message")
        logger.log_warning("warning message", {"key": "value"})

    def test_null_logger_log_cli_error_returns_formatted(self):
        """NullLogger.log_cli_error should return a formatted error string."""
        result = NullLogger().log_cli_error(ValueError("test error"))
        assert result == "Error - ValueError: test error"


class TestSafeLogger:
    """Tests for safe_logger function."""

    def test_returns_logger_when_provided(self):
        mock_logger = MagicMock(spec=InfothekLogger)
        assert safe_logger(mock_logger) is mock_logger

    def test_returns_shared_null_logger_when_none(self):
        result1 = safe_logger(None)
        result2 = safe_logger(None)
        assert isinstance(result1, NullLogger)
        assert result1 is result2


class TestInfothekLogger:
    """Tests for InfothekLogger file output."""

    def test_creates_log_directory(self, tmp_path):
        log_dir = tmp_path / "logs" / "nested"
        InfothekLogger(log_dir, "reader")
        assert log_dir.is_dir()

    def test_operation_written_to_component_log(self, tmp_path):
        logger = InfothekLogger(tmp_path, "export")
        logger.log_operation("page_written", {"id": "_xxx"})

        for handler in logger.main_logger.handlers:
            handler.flush()
        content = (tmp_path / "export.log").read_text(encoding="utf-8")
        assert "OPERATION - page_written" in content
        assert '"id": "_xxx"' in content

    def test_error_written_to_errors_log(self, tmp_path):
        logger = InfothekLogger(tmp_path, "export")
        logger.log_error(DatabaseError("no such table: Movie"), {"operation": "fetch"})

        for handler in logger.error_logger.handlers:
            handler.flush()
        content = (tmp_path / "errors.log").read_text(encoding="utf-8")
        assert "DatabaseError: no such table: Movie" in content
        assert "operation=fetch" in content

    def test_log_cli_error_message(self, tmp_path):
        logger = InfothekLogger(tmp_path, "cli")
        message = logger.log_cli_error(DatabaseError("boom"))
        assert message == "Error - DatabaseError: boom"


class TestHandleCliError:
    """Tests for handle_cli_error."""

    def test_exits_with_code_and_logs(self, capsys):
        logger = MagicMock(spec=InfothekLogger)
        logger.log_cli_error.return_value = "Error - ValueError: bad"
        ctx = click.Context(click.Command("test"), obj={"logger": logger, "verbose": False})

        with pytest.raises(SystemExit) as exc_info:
            handle_cli_error(ctx, ValueError("bad"), "export_movie", {"id": "_xxx"}, exit_code=2)

        assert exc_info.value.code == 2
        error, context = logger.log_cli_error.call_args[0]
        assert isinstance(error, ValueError)
        assert context == {"operation": "export_movie", "id": "_xxx"}
        assert "Error - ValueError: bad" in capsys.readouterr().err

    def test_works_without_logger(self, capsys):
        ctx = click.Context(click.Command("test"), obj={})
        with pytest.raises(SystemExit):
            handle_cli_error(ctx, ValueError("bad"), "list_movie")
        assert "ValueError: bad" in capsys.readouterr().err
