#!/usr/bin/env python3
"""
Infothek Database Package
-------------------------
Read-only entity layer over the Entertainment Infothek SQLite database.

- reader: DBReader executing parameterized SELECT statements
- models: One class per table, items for ``{Base}_{Target}`` junctions
- schema: Table definitions for creating empty databases
- decorators: Error conversion and operation logging
"""

from .reader import DBReader
from .decorators import DatabaseOperation, handle_db_errors
from infothek.core.exceptions import DatabaseError, QueryError

__all__ = [
    "DBReader",
    "DatabaseOperation",
    "handle_db_errors",
    "DatabaseError",
    "QueryError",
]
