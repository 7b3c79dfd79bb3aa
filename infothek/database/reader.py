#!/usr/bin/env python3
"""
reader.py
---------
Read-only access to the Entertainment Infothek database.

DBReader wraps a SQLAlchemy engine and runs the SELECT statements the
entity layer needs. Table and column names come from the models and are
checked against a plain identifier pattern; ids and other values are
always bound parameters, never interpolated into SQL text.

Usage:
    reader = DBReader(DB_PATH, logger=logger)
    rows = reader.fetch_by_id("Movie", ["ID", "OriginalTitle"], "_xxx")
    ids = reader.fetch_ids("Movie_Genre", "MovieID", "_xxx", order="ID")
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import re
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Union

# --- Third party imports ---
from sqlalchemy import column, create_engine, select, table
from sqlalchemy.engine import Engine
from sqlalchemy.sql import Executable

# --- Local imports ---
from infothek.core.exceptions import DatabaseError, QueryError
from infothek.core.logging_manager import InfothekLogger
from infothek.database.decorators import DatabaseOperation, handle_db_errors

IDENTIFIER_PATTERN = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


def validate_identifier(name: Optional[str]) -> str:
    """
    Check that a table, column or sort key is a plain SQL identifier.

    Raises:
        QueryError: If the name is empty or contains anything but
            letters, digits and underscores
    """
    if not name or not IDENTIFIER_PATTERN.match(name):
        raise QueryError(f"Invalid identifier: {name!r}")
    return name


class DBReader:
    """
    Executes read-only queries against the Infothek database.

    Attributes:
        engine: SQLAlchemy engine
        logger: Optional logger shared with every entity using this reader
    """

    def __init__(
        self,
        database: Union[str, Path],
        logger: Optional[InfothekLogger] = None,
        engine: Optional[Engine] = None,
    ) -> None:
        """
        Initialize the reader.

        Args:
            database: Path to a SQLite file, or a full SQLAlchemy URL
            logger: Optional logger for query logging
            engine: Existing engine to share (used by new())

        Raises:
            DatabaseError: If the SQLite file does not exist or the URL
                cannot be parsed
        """
        self.database = database
        self.logger = logger
        self.engine: Engine = engine if engine is not None else self._setup_engine(database)

    @staticmethod
    @handle_db_errors
    def _setup_engine(database: Union[str, Path]) -> Engine:
        url = str(database)
        if "://" not in url:
            path = Path(database)
            if not path.is_file():
                raise DatabaseError(f"Database file not found: {path}")
            url = f"sqlite:///{path}"
        return create_engine(url, echo=False, future=True)

    def new(self) -> "DBReader":
        """Return a fresh reader sharing this reader's engine and logger."""
        return DBReader(self.database, logger=self.logger, engine=self.engine)

    def dispose(self) -> None:
        """Release all pooled connections."""
        self.engine.dispose()

    # ---- Queries ----
    def fetch(
        self,
        statement: Executable,
        params: Optional[Dict[str, Any]] = None,
        operation: str = "fetch",
    ) -> List[Dict[str, Any]]:
        """
        Execute a SELECT and return its rows as dictionaries.

        Args:
            statement: Core select() or text() with bind parameters
            params: Values for text() bind parameters
            operation: Name used in the operation log

        Returns:
            List of rows keyed by column name (empty if nothing matched)

        Raises:
            DatabaseError: On any backend failure
        """
        with DatabaseOperation(self.logger, operation, {"params": params or {}}):
            with self.engine.connect() as connection:
                result = connection.execute(statement, params or {})
                return [dict(row) for row in result.mappings().all()]

    def fetch_by_id(
        self, table_name: str, columns: Iterable[str], entry_id: str
    ) -> List[Dict[str, Any]]:
        """
        Select the given columns of the row with ``ID = entry_id``.

        Returns a list so callers can tell "no row" from "exactly one".
        """
        validate_identifier(table_name)
        cols = [column(validate_identifier(name)) for name in columns]
        if not cols:
            raise QueryError(f"No columns requested from {table_name}")

        stmt = (
            select(*cols)
            .select_from(table(table_name))
            .where(column("ID") == entry_id)
        )
        return self.fetch(stmt, operation=f"fetch_{table_name}")

    def fetch_ids(
        self,
        table_name: str,
        where_column: str,
        value: str,
        order: str = "ID",
    ) -> List[str]:
        """
        Return the ids of all rows with ``where_column = value``.

        Args:
            table_name: Table to query
            where_column: Column compared to value
            value: Bound comparison value
            order: Sort column

        Returns:
            Ids as strings, in ``order`` order
        """
        validate_identifier(table_name)
        validate_identifier(where_column)
        validate_identifier(order)

        stmt = (
            select(column("ID"))
            .select_from(table(table_name))
            .where(column(where_column) == value)
            .order_by(column(order))
        )
        rows = self.fetch(stmt, operation=f"list_{table_name}")
        return [str(row["ID"]) for row in rows]
