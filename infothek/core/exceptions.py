#!/usr/bin/env python3
"""
exceptions.py
--------------------
Custom exception classes for the Infothek project.

This module defines a hierarchy of exceptions used throughout the project
to handle specific error conditions in the entity layer and the wiki
page generator.

Exception Hierarchy:
    Exception (built-in)
    ├── DatabaseError - Base for all database-related errors
    │   └── QueryError - Query could not be built (bad identifier)
    ├── ValidationError - Argument and data validation failures
    │   ├── ArgumentNullError - Required argument missing or empty
    │   ├── ArgumentRangeError - Numeric argument zero or out of range
    │   └── MissingIdError - Entry retrieved without an id
    ├── UnsupportedOperationError - Formatter cannot express an operation
    ├── ExportError - Wiki page writing failures
    └── ConfigError - Configuration file errors

Usage:
    from infothek.core.exceptions import DatabaseError, ArgumentNullError

    try:
        movie.retrieve()
    except ArgumentNullError as e:
        logger.log_error(e)
    except DatabaseError as e:
        logger.log_error(e, {"operation": "retrieve_movie"})
"""


class DatabaseError(Exception):
    """
    Base exception for database-related errors.

    Raised when database operations fail due to connection issues,
    missing tables, malformed queries, or other backend problems.
    A row that does not exist is NOT an error: retrieval signals it
    with a 0 return value.

    Examples:
        >>> raise DatabaseError("Database operation failed: no such table: Movie")
    """

    pass


class QueryError(DatabaseError):
    """
    Exception for queries that cannot be built.

    Raised before anything reaches the database, when a table name,
    column name or sort key is not a plain SQL identifier.

    Examples:
        >>> raise QueryError("Invalid identifier: 'ID; DROP TABLE Movie'")
    """

    pass


class ValidationError(Exception):
    """
    Exception for data validation failures.

    Parent of the argument errors raised by constructors, formatters
    and list retrieval.
    """

    pass


class ArgumentNullError(ValidationError):
    """
    Exception for required arguments that are None or empty.

    Raised at construction time (entry without reader or id), by every
    formatter operation that takes text, and by list retrieval when
    base/target table names or the base id are missing.

    Examples:
        >>> raise ArgumentNullError("text")
        >>> raise ArgumentNullError("base_table_name")
    """

    def __init__(self, argument: str, message: str = "") -> None:
        self.argument = argument
        super().__init__(message or f"Argument '{argument}' must not be None or empty")


class ArgumentRangeError(ValidationError):
    """
    Exception for numeric arguments that are zero or out of range.

    Examples:
        >>> raise ArgumentRangeError("width", 0)
    """

    def __init__(self, argument: str, value: object) -> None:
        self.argument = argument
        self.value = value
        super().__init__(f"Argument '{argument}' out of range: {value!r}")


class MissingIdError(ValidationError):
    """
    Exception for retrieval of an entry whose id is None.

    The constructor refuses a None id, so this only happens when the
    id was cleared afterwards.
    """

    pass


class UnsupportedOperationError(Exception):
    """
    Exception for formatter operations a wiki target cannot express.

    Examples:
        >>> raise UnsupportedOperationError("align_image is not supported by Markdown")
    """

    pass


class ExportError(Exception):
    """
    Exception for wiki page export failures.

    Raised when writing a page to disk fails or when the exporter is
    asked for an unknown article kind.

    Examples:
        >>> raise ExportError("Cannot write output/de/cinema_and_television_movie/x.txt")
    """

    pass


class ConfigError(Exception):
    """
    Exception for configuration loading failures.

    Examples:
        >>> raise ConfigError("Unknown formatter 'mediawiki'")
    """

    pass
