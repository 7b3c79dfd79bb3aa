#!/usr/bin/env python3
"""
cli.py
------
Shared CLI utilities and statistics for Infothek commands.

Functions:
    setup_logger: Initialize InfothekLogger for CLI operations

Classes:
    OperationStats: Base class for all statistics
    ExportStats: For wiki page export runs

Usage:
    from infothek.core.cli import setup_logger, ExportStats

    logger = setup_logger(log_dir, "export")
    stats = ExportStats()
    stats.pages_written += 1
    print(stats.summary())
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import logging
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional

# --- Local imports ---
from infothek.core.logging_manager import InfothekLogger


# ═══════════════════════════════════════════════════════════════════════════
# LOGGER SETUP
# ═══════════════════════════════════════════════════════════════════════════

def setup_logger(
    log_dir: Path, component_name: str, verbose: bool = False
) -> InfothekLogger:
    """
    Setup logging for CLI operations.

    Creates the operations log directory if it doesn't exist and initializes
    an InfothekLogger instance for the specified component.

    Args:
        log_dir: Base log directory (typically from paths.LOG_DIR)
        component_name: Component identifier for logging (e.g. 'export')
        verbose: Echo debug messages to stderr as well

    Returns:
        Configured InfothekLogger instance
    """
    operations_log_dir = Path(log_dir) / "operations"
    operations_log_dir.mkdir(parents=True, exist_ok=True)
    return InfothekLogger(
        operations_log_dir,
        component_name=component_name,
        console_level=logging.DEBUG if verbose else logging.WARNING,
    )


# ═══════════════════════════════════════════════════════════════════════════
# STATISTICS CLASSES
# ═══════════════════════════════════════════════════════════════════════════

@dataclass
class OperationStats:
    """
    Base class for CLI operation statistics.

    Attributes:
        errors: Number of errors encountered
        start_time: Operation start timestamp
    """
    errors: int = 0
    start_time: datetime = field(default_factory=datetime.now)
    _duration_cached: Optional[float] = field(default=None, init=False, repr=False)

    def __post_init__(self) -> None:
        """Validate statistics on initialization."""
        if self.errors < 0:
            raise ValueError(f"errors must be non-negative, got {self.errors}")

    def duration(self) -> float:
        """Get elapsed time in seconds (cached after first call)."""
        if self._duration_cached is None:
            self._duration_cached = (datetime.now() - self.start_time).total_seconds()
        return self._duration_cached

    def summary(self) -> str:
        return f"{self.errors} errors, {self.duration():.2f}s"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "errors": self.errors,
            "duration": self.duration(),
        }


@dataclass
class ExportStats(OperationStats):
    """
    Statistics for wiki page export runs.

    Attributes:
        pages_written: Pages successfully written to disk
        pages_skipped: Ids whose article row was not found
        written_files: Paths of the written pages, in export order
    """
    pages_written: int = 0
    pages_skipped: int = 0
    written_files: List[Path] = field(default_factory=list)

    def __post_init__(self) -> None:
        """Validate statistics on initialization."""
        super().__post_init__()
        if self.pages_written < 0:
            raise ValueError(f"pages_written must be non-negative, got {self.pages_written}")
        if self.pages_skipped < 0:
            raise ValueError(f"pages_skipped must be non-negative, got {self.pages_skipped}")

    def record_written(self, path: Path) -> None:
        self.pages_written += 1
        self.written_files.append(path)

    def summary(self) -> str:
        """Get formatted summary with page metrics."""
        return (
            f"{self.pages_written} pages written, "
            f"{self.pages_skipped} skipped, "
            f"{self.errors} errors, "
            f"{self.duration():.2f}s"
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary with page metrics."""
        d = super().to_dict()
        d.update({
            "pages_written": self.pages_written,
            "pages_skipped": self.pages_skipped,
            "written_files": [str(p) for p in self.written_files],
        })
        return d
