#!/usr/bin/env python3
"""
exporter.py
-----------
Export driver: retrieves articles and writes their wiki pages.

Pages land in ``{output_dir}/{language}/{folder}/{page name}`` where the
folder depends on the article kind (see infothek.core.paths).

Usage:
    exporter = WikiExporter(reader, get_formatter("dokuwiki"), output_dir, "de", logger)
    stats = exporter.export("movie", "*", status="ok")
    print(stats.summary())
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from pathlib import Path
from typing import List, Optional, Type

# --- Local imports ---
from infothek.core.cli import ExportStats
from infothek.core.exceptions import (
    ArgumentNullError,
    DatabaseError,
    ExportError,
    ValidationError,
)
from infothek.core.logging_manager import InfothekLogger, safe_logger
from infothek.core.paths import MOVIE_FOLDER, SERIES_FOLDER
from infothek.database.models import ARTICLE_KINDS, MovieAndTVArticle
from infothek.database.reader import DBReader
from infothek.wiki.creators import creator_for
from infothek.wiki.formatters import Formatter
from infothek.wiki.writer import write_to_file

ALL_ENTRIES = "*"

FOLDERS = {
    "movie": MOVIE_FOLDER,
    "series": SERIES_FOLDER,
}


class WikiExporter:
    """
    Writes movie and series pages for one formatter and language.

    Attributes:
        reader: Database reader used for retrieval
        formatter: Target markup
        output_dir: Root of the generated wiki
        language: Page language code
        logger: Optional logger
    """

    def __init__(
        self,
        reader: DBReader,
        formatter: Formatter,
        output_dir: Path,
        language: str,
        logger: Optional[InfothekLogger] = None,
    ) -> None:
        if reader is None:
            raise ArgumentNullError("reader")
        if formatter is None:
            raise ArgumentNullError("formatter")
        if not language:
            raise ArgumentNullError("language")

        self.reader = reader
        self.formatter = formatter
        self.output_dir = Path(output_dir)
        self.language = language
        self.logger = safe_logger(logger)

    @staticmethod
    def article_class(kind: str) -> Type[MovieAndTVArticle]:
        try:
            return ARTICLE_KINDS[kind]
        except KeyError:
            raise ExportError(
                f"Unknown article kind {kind!r}, expected one of: {', '.join(ARTICLE_KINDS)}"
            ) from None

    def target_directory(self, kind: str) -> Path:
        self.article_class(kind)
        return self.output_dir / self.language / FOLDERS[kind]

    def create_page(self, kind: str, entry_id: str) -> Optional[Path]:
        """
        Retrieve one article with all its lists and write its page.

        Returns:
            Path of the written page, or None if the article does not exist
        """
        article_class = self.article_class(kind)
        article, found = article_class.fetch(self.reader, entry_id, basic_only=False)
        if not found:
            self.logger.log_warning(f"{kind} {entry_id} not found, skipping")
            return None

        creator = creator_for(article, self.formatter, self.language, self.logger)
        path = write_to_file(
            self.target_directory(kind), creator.get_page_name(), creator.create_page()
        )
        self.logger.log_operation("page_written", {"kind": kind, "id": entry_id, "path": str(path)})
        return path

    def collect_ids(self, kind: str, status: str) -> List[str]:
        """Ids of every article of a kind with the given status."""
        article_class = self.article_class(kind)
        return self.reader.fetch_ids(article_class.TABLE, "StatusID", status)

    def export(self, kind: str, id_or_star: str, status: str = "ok") -> ExportStats:
        """
        Export a single article, or all articles with a status for '*'.

        Failures of individual pages are logged and counted; the run
        continues with the next id.
        """
        if not id_or_star:
            raise ArgumentNullError("id")
        self.article_class(kind)

        stats = ExportStats()
        ids = self.collect_ids(kind, status) if id_or_star == ALL_ENTRIES else [id_or_star]
        self.logger.log_info(f"Exporting {len(ids)} {kind} page(s)", {"status": status})

        for entry_id in ids:
            try:
                path = self.create_page(kind, entry_id)
            except (DatabaseError, ExportError, ValidationError) as e:
                stats.errors += 1
                self.logger.log_error(e, {"operation": "create_page", "kind": kind, "id": entry_id})
                continue
            if path is None:
                stats.pages_skipped += 1
            else:
                stats.record_written(path)

        self.logger.log_operation(f"export_{kind}_completed", stats.to_dict())
        return stats
