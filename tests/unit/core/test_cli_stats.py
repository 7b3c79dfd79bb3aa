"""
Tests for the CLI statistics dataclasses and setup_logger.
"""
import logging
from pathlib import Path

import pytest

from infothek.core.cli import ExportStats, OperationStats, setup_logger
from infothek.core.logging_manager import InfothekLogger


class TestOperationStats:
    def test_negative_errors_rejected(self):
        with pytest.raises(ValueError):
            OperationStats(errors=-1)

    def test_duration_is_cached(self):
        stats = OperationStats()
        assert stats.duration() == stats.duration()


class TestExportStats:
    """Tests for ExportStats."""

    def test_record_written(self):
        stats = ExportStats()
        stats.record_written(Path("a.txt"))
        stats.record_written(Path("b.txt"))
        assert stats.pages_written == 2
        assert stats.written_files == [Path("a.txt"), Path("b.txt")]

    def test_summary(self):
        stats = ExportStats(pages_written=3, pages_skipped=1, errors=2)
        summary = stats.summary()
        assert summary.startswith("3 pages written, 1 skipped, 2 errors, ")
        assert summary.endswith("s")

    def test_to_dict(self):
        stats = ExportStats(pages_skipped=1)
        stats.record_written(Path("out/alien_1979.txt"))
        data = stats.to_dict()
        assert data["pages_written"] == 1
        assert data["pages_skipped"] == 1
        assert data["errors"] == 0
        assert data["written_files"] == [str(Path("out/alien_1979.txt"))]
        assert "duration" in data

    def test_negative_counts_rejected(self):
        with pytest.raises(ValueError):
            ExportStats(pages_written=-1)
        with pytest.raises(ValueError):
            ExportStats(pages_skipped=-1)


def test_setup_logger_uses_operations_subdirectory(tmp_path):
    logger = setup_logger(tmp_path, "export")
    assert isinstance(logger, InfothekLogger)
    assert logger.log_dir == tmp_path / "operations"
    assert (tmp_path / "operations").is_dir()


class TestSetupLoggerVerbosity:
    """Console echo level follows the CLI's verbose flag."""

    @staticmethod
    def console_levels(logger):
        return [
            handler.level
            for handler in logger.main_logger.handlers
            if type(handler) is logging.StreamHandler
        ]

    def test_default_echoes_warnings(self, tmp_path):
        logger = setup_logger(tmp_path, "quiet")
        assert self.console_levels(logger) == [logging.WARNING]

    def test_verbose_echoes_debug(self, tmp_path):
        logger = setup_logger(tmp_path, "chatty", verbose=True)
        assert self.console_levels(logger) == [logging.DEBUG]
