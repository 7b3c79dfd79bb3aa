#!/usr/bin/env python3
"""
base.py
-------
Page skeleton shared by all content creators.

A creator turns one retrieved entry into the lines of a wiki page. The
page is assembled from parts in a fixed order:

    header, title, info box begin, info box content, info box end,
    chapters, footer

Subclasses fill in the parts; this module provides the info box frame,
chapter and section headings and the two-column info box rows.

Lines may be None when the target has no markup for a part (Markdown
boxes, for instance); the file writer skips them.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from typing import Dict, List, Optional, Sequence, Tuple

# --- Local imports ---
from infothek.core.exceptions import ArgumentNullError
from infothek.core.logging_manager import InfothekLogger, safe_logger
from infothek.database.models import Entry
from infothek.wiki.formatters import Alignment, Formatter

Lines = List[Optional[str]]
Label = Dict[str, str]

INFO_BOX_SIZE = 475
INFO_BOX_TABLE_SIZE = 445
INFO_BOX_COLUMNS = (30, 70)


def label(en: str, de: str) -> Label:
    return {"en": en, "de": de}


def with_details(value: str, details: Optional[str]) -> str:
    """Append an entry's details to a rendered value."""
    if details:
        return f"{value} {details}"
    return value


class EntryContentCreator:
    """
    Base class for page creators.

    Attributes:
        entry: Retrieved entry the page is about
        formatter: Target markup
        language: Target language code; anything but 'en' renders German
        logger: Optional logger
    """

    def __init__(
        self,
        entry: Entry,
        formatter: Formatter,
        language: str,
        logger: Optional[InfothekLogger] = None,
    ) -> None:
        if entry is None:
            raise ArgumentNullError("entry")
        if formatter is None:
            raise ArgumentNullError("formatter")
        if not language:
            raise ArgumentNullError("language")

        self.entry = entry
        self.formatter = formatter
        self.language = language
        self.logger = safe_logger(logger)

    # ---- Language helpers ----
    @property
    def is_english(self) -> bool:
        return self.language == "en"

    def localize(self, text: Label) -> str:
        return text["en"] if self.is_english else text["de"]

    def localized_title(self, entity) -> Optional[str]:
        """English or German title of a lookup entity (genre, color, ...)."""
        if entity is None:
            return None
        return entity.english_title if self.is_english else entity.german_title

    def path(self, name: str) -> List[str]:
        return [self.language, name]

    # ---- Page ----
    def get_page_name(self) -> str:
        raise NotImplementedError

    def create_page(self) -> Lines:
        """Assemble the full page."""
        content: Lines = []
        content.extend(self.create_page_header())
        content.extend(self.create_page_title())
        content.extend(self.create_info_box_begin())
        content.extend(self.create_info_box_content())
        content.extend(self.create_info_box_end())
        content.extend(self.create_chapter_content())
        content.extend(self.create_page_footer())

        self.logger.log_debug(
            f"Created page content for {type(self.entry).__name__}",
            {"id": self.entry.id, "lines": len(content)},
        )
        return content

    def create_page_header(self) -> Lines:
        return []

    def create_page_title(self) -> Lines:
        return []

    def create_info_box_content(self) -> Lines:
        return []

    def create_chapter_content(self) -> Lines:
        return []

    def create_page_footer(self) -> Lines:
        return ["", ""]

    # ---- Info box ----
    def create_info_box_begin(self) -> Lines:
        return [
            self.formatter.begin_box(INFO_BOX_SIZE, Alignment.RIGHT),
            self.formatter.define_table(INFO_BOX_TABLE_SIZE, list(INFO_BOX_COLUMNS)),
            self.formatter.as_table_title([None, None]),
        ]

    def create_info_box_end(self) -> Lines:
        return [self.formatter.end_box(), "", ""]

    def info_box_rows(self, title: Label, values: Sequence[str]) -> Lines:
        """
        Two-column rows for one info box entry.

        The first row carries the label; each further value goes into a
        row whose label cell spans down from the one above.
        """
        rows: Lines = []
        for index, value in enumerate(values):
            first = self.localize(title) if index == 0 else self.formatter.cell_span_vertically()
            rows.append(self.formatter.as_table_row([first, value]))
        return rows

    # ---- Chapters and sections ----
    def create_chapter_heading(self, title: Label) -> Lines:
        if title is None:
            raise ArgumentNullError("title")
        return [self.formatter.as_heading2(self.localize(title)), ""]

    def create_section_heading(self, title: Label) -> Lines:
        if title is None:
            raise ArgumentNullError("title")
        return [self.formatter.as_heading3(self.localize(title)), ""]

    def table_block(self, rows: Sequence[str]) -> Lines:
        """Single-column table of pre-rendered cells, closed by two blank lines."""
        content: Lines = [self.formatter.as_table_title([None])]
        content.extend(self.formatter.as_table_row([row]) for row in rows)
        content.extend(["", ""])
        return content

    def chapters(self, parts: Sequence[Tuple[Label, Lines]]) -> Lines:
        """Emit each (title, body) chapter whose body is not empty."""
        content: Lines = []
        for title, body in parts:
            if body:
                content.extend(self.create_chapter_heading(title))
                content.extend(body)
        return content
