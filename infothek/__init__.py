"""
Infothek Wiki Package
=====================

Read-only access to the Entertainment Infothek database and a wiki page
generator for its movie and series articles.

Main Components:
    - database: DBReader, entity classes and table definitions
    - wiki: Formatters (DokuWiki, Markdown, Obsidian), content creators,
      file writer and exporter
    - core: Logging, exceptions, paths and configuration
    - pipeline: Command line interface

Primary Interfaces:
    - infothek.pipeline.cli: The ``infothek`` command
    - infothek.database.reader.DBReader: Database access
    - infothek.wiki.exporter.WikiExporter: Page export

Example Usage:
    >>> from infothek.database import DBReader
    >>> from infothek.database.models import Movie
    >>> reader = DBReader("data/EntertainmentInfothek.db")
    >>> movie, found = Movie.fetch(reader, "_xxx")
"""

__version__ = "0.1.0"
