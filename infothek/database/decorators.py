#!/usr/bin/env python3
"""
decorators.py
--------------------
Shared error handling and logging for database reads.

Provides:
    DatabaseOperation: Context manager that logs a read and converts
        SQLAlchemy errors into DatabaseError
    handle_db_errors: Decorator doing the same conversion without logging
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from datetime import datetime
from functools import wraps
from typing import Any, Callable, Dict, Optional

# --- Third party imports ---
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

# --- Local imports ---
from infothek.core.exceptions import DatabaseError
from infothek.core.logging_manager import InfothekLogger, safe_logger


class DatabaseOperation:
    """
    Context manager wrapping a single database read.

    On success logs ``<name>_completed`` with the duration. On failure logs
    the error; SQLAlchemy errors are re-raised as DatabaseError, everything
    else propagates unchanged.

    Examples:
        >>> with DatabaseOperation(logger, "fetch_Movie", {"id": "_xxx"}):
        ...     rows = connection.execute(stmt).mappings().all()
    """

    def __init__(
        self,
        logger: Optional[InfothekLogger],
        operation_name: str,
        details: Optional[Dict[str, Any]] = None,
        log_start: bool = False,
    ) -> None:
        self.logger = safe_logger(logger)
        self.operation_name = operation_name
        self.details = details or {}
        self.log_start = log_start
        self.start_time: Optional[datetime] = None

    def _duration(self) -> float:
        if self.start_time is None:
            return 0.0
        return (datetime.now() - self.start_time).total_seconds()

    def __enter__(self) -> "DatabaseOperation":
        self.start_time = datetime.now()
        if self.log_start:
            self.logger.log_debug(f"Starting {self.operation_name}", self.details)
        return self

    def __exit__(self, exc_type, exc_value, tb) -> bool:
        duration = self._duration()

        if exc_value is None:
            self.logger.log_operation(
                f"{self.operation_name}_completed",
                {**self.details, "duration_seconds": duration, "success": True},
            )
            return False

        self.logger.log_error(
            exc_value,
            {**self.details, "operation": self.operation_name, "duration_seconds": duration},
        )

        if isinstance(exc_value, IntegrityError):
            raise DatabaseError(f"Data integrity violation: {exc_value}") from exc_value
        if isinstance(exc_value, SQLAlchemyError):
            raise DatabaseError(f"Database operation failed: {exc_value}") from exc_value
        return False


def handle_db_errors(function: Callable) -> Callable:
    """
    Decorator to handle common database errors.

    Args:
        function: Function to wrap

    Returns:
        Wrapped function with error handling
    """

    @wraps(function)
    def wrapper(*args, **kwargs):
        try:
            return function(*args, **kwargs)
        except IntegrityError as e:
            raise DatabaseError(f"Data integrity violation: {e}") from e
        except SQLAlchemyError as e:
            raise DatabaseError(f"Database operation failed: {e}") from e

    return wrapper
