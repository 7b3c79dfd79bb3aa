#!/usr/bin/env python3
"""
logging_manager.py
--------------------
Centralized logging for entity retrieval and wiki page export.

Every component (reader, creators, exporter, CLI) receives its logger
explicitly. Nothing here is global except the shared NullLogger used by
safe_logger().
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import json
import logging
import sys
import traceback
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Dict, Optional

# --- Third party imports ---
import click


class InfothekLogger:
    """
    Component logger with rotating log files.

    Writes everything from DEBUG upwards to ``<component>.log`` and errors
    to a shared ``errors.log``. Records from ``console_level`` upwards
    (WARNING unless set otherwise) are echoed to stderr.

    Attributes:
        log_dir: Directory for log files
        component_name: Name of the component using this logger
        main_logger: Logger for all operations
        error_logger: Dedicated logger for errors only
    """

    def __init__(
        self,
        log_dir: Path,
        component_name: str = "infothek",
        max_bytes: int = 5 * 1024 * 1024,
        backup_count: int = 3,
        console_level: int = logging.WARNING,
    ) -> None:
        """
        Initialize the component logger.

        Args:
            log_dir: Directory for log files
            component_name: Name for the component logger
                (e.g. 'reader', 'export')
            max_bytes: Maximum log file size before rotation (default: 5MB)
            backup_count: Number of rotated files to keep (default: 3)
            console_level: Lowest level echoed to stderr (default: WARNING)
        """
        self.log_dir = Path(log_dir)
        self.component_name = component_name
        self.max_bytes = max_bytes
        self.backup_count = backup_count
        self.console_level = console_level
        self._setup_loggers()

    def _setup_loggers(self) -> None:
        self.log_dir.mkdir(parents=True, exist_ok=True)

        self.main_logger = logging.getLogger(f"infothek.{self.component_name}")
        self.main_logger.setLevel(logging.DEBUG)
        self.main_logger.propagate = False
        self.main_logger.handlers = []

        self.error_logger = logging.getLogger(f"infothek.{self.component_name}.errors")
        self.error_logger.setLevel(logging.ERROR)
        self.error_logger.propagate = False
        self.error_logger.handlers = []

        self._add_file_handler(
            self.main_logger,
            self.log_dir / f"{self.component_name}.log",
            logging.DEBUG,
        )
        self._add_file_handler(
            self.error_logger,
            self.log_dir / "errors.log",
            logging.ERROR,
        )

        console_handler = logging.StreamHandler()
        console_handler.setLevel(self.console_level)
        console_handler.setFormatter(
            logging.Formatter("%(levelname)s - %(name)s - %(message)s")
        )
        self.main_logger.addHandler(console_handler)

    def _add_file_handler(
        self, logger: logging.Logger, file_path: Path, level: int
    ) -> None:
        handler = RotatingFileHandler(
            file_path,
            maxBytes=self.max_bytes,
            backupCount=self.backup_count,
            encoding="utf-8",
        )
        handler.setLevel(level)
        handler.setFormatter(
            logging.Formatter(
                "%(asctime)s - %(name)s - %(levelname)s - [%(funcName)s] - %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        logger.addHandler(handler)

    @staticmethod
    def _with_details(message: str, details: Optional[Dict[str, Any]]) -> str:
        if details:
            return f"{message}: {json.dumps(details, default=str, ensure_ascii=False)}"
        return message

    def log_operation(
        self, operation: str, details: Optional[Dict[str, Any]] = None
    ) -> None:
        """
        Log a completed operation (query, page write, export run).

        Args:
            operation: Name of the operation
            details: Optional operation details dictionary
        """
        self.main_logger.info(self._with_details(f"OPERATION - {operation}", details or {}))

    def log_error(
        self, error: Exception, context: Optional[Dict[str, Any]] = None
    ) -> None:
        """
        Log an error with context and traceback to errors.log.

        Args:
            error: Exception that occurred
            context: Optional context information dictionary
        """
        self.error_logger.error(f"ERROR - {type(error).__name__}: {error}")
        if context:
            context_str = ", ".join(f"{k}={v}" for k, v in context.items())
            self.error_logger.error(f"Context: {context_str}")
        self.error_logger.error(f"Traceback:\n{traceback.format_exc()}")

    def log_debug(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        """Log debug information."""
        self.main_logger.debug(self._with_details(f"DEBUG - {message}", details))

    def log_info(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        """Log general information."""
        self.main_logger.info(self._with_details(f"INFO - {message}", details))

    def log_warning(
        self, message: str, details: Optional[Dict[str, Any]] = None
    ) -> None:
        """Log a warning."""
        self.main_logger.warning(self._with_details(f"WARNING - {message}", details))

    def log_cli_error(
        self,
        error: Exception,
        context: Optional[Dict[str, Any]] = None,
        show_traceback: bool = False,
    ) -> str:
        """
        Log full error details to file and return a short CLI message.

        Args:
            error: Exception to log
            context: Optional context about where the error occurred
            show_traceback: If True, append the traceback to the message

        Returns:
            Formatted error message suitable for terminal output

        Examples:
            >>> logger.log_cli_error(DatabaseError("no such table: Movie"))
            'Error - DatabaseError: no such table: Movie'
        """
        self.log_error(error, context or {"source": "cli"})
        message = f"Error - {type(error).__name__}: {error}"
        if show_traceback:
            return f"{message}\n\n{traceback.format_exc()}"
        return message


def handle_cli_error(
    ctx: "click.Context",
    error: Exception,
    operation: str,
    additional_context: Optional[Dict[str, Any]] = None,
    exit_code: int = 1,
) -> None:
    """
    Standardized error handling for CLI commands.

    Logs the error through the logger stored on the click context, echoes a
    clean message to stderr and exits.

    Args:
        ctx: Click context object containing logger and verbose flag
        error: Exception that occurred
        operation: Name of the failing operation (e.g. 'export_movie')
        additional_context: Optional extra context (id, output dir, ...)
        exit_code: Exit code for sys.exit() (default: 1)
    """
    obj = ctx.obj or {}
    logger: Optional[InfothekLogger] = obj.get("logger")
    verbose: bool = obj.get("verbose", False)

    context: Dict[str, Any] = {"operation": operation}
    if additional_context:
        context.update(additional_context)

    click.echo(
        safe_logger(logger).log_cli_error(error, context, show_traceback=verbose),
        err=True,
    )
    sys.exit(exit_code)


class NullLogger:
    """
    Null Object logger implementing the InfothekLogger interface.

    Used wherever no logger was injected, so callers never need to check.
    """

    def log_operation(self, operation: str, details: Optional[Dict[str, Any]] = None) -> None:
        pass

    def log_error(self, error: Exception, context: Optional[Dict[str, Any]] = None) -> None:
        pass

    def log_debug(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        pass

    def log_info(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        pass

    def log_warning(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        pass

    def log_cli_error(
        self,
        error: Exception,
        context: Optional[Dict[str, Any]] = None,
        show_traceback: bool = False,
    ) -> str:
        return f"Error - {type(error).__name__}: {error}"


_null_logger = NullLogger()


def safe_logger(logger: Optional[InfothekLogger]) -> InfothekLogger:
    """
    Return the provided logger, or the shared NullLogger if None.

    Args:
        logger: InfothekLogger instance or None

    Returns:
        The provided logger or a NullLogger instance
    """
    return logger if logger is not None else _null_logger  # type: ignore[return-value]
