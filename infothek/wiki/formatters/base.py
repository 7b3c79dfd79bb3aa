#!/usr/bin/env python3
"""
base.py
-------
Formatter contract shared by every wiki target.

A formatter turns plain strings into the markup of one target (DokuWiki,
Markdown, Obsidian). Formatters are stateless: every method is a pure
string transform.

Argument rules common to all targets:
    - A required text argument that is None or "" raises ArgumentNullError.
    - A missing alignment raises ArgumentNullError.
    - Optional keyword arguments default to None, meaning "omitted".
    - Width, height, table and box sizes of 0 (or below) raise
      ArgumentRangeError, as does a height given without a width.
    - Path segments are joined with the target's separator; empty
      segments are skipped.

Classes:
    Alignment: Left, centered or right placement
    Formatter: Abstract base with the shared helpers
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from abc import ABC, abstractmethod
from enum import Enum
from typing import Optional, Sequence

# --- Local imports ---
from infothek.core.exceptions import ArgumentNullError, ArgumentRangeError

FILENAME_REPLACEMENTS = {
    **{char: "_" for char in " +/%'!&?=*#<>"},
    "ä": "a",
    "ö": "o",
    "ü": "u",
    "ß": "s",
    ",": "",
    ":": "",
    "(": "",
    ")": "",
}


class Alignment(Enum):
    LEFT = "Left"
    CENTERED = "Centered"
    RIGHT = "Right"


def require_text(name: str, value: Optional[str]) -> str:
    """Raise ArgumentNullError for None or empty text."""
    if value is None or value == "":
        raise ArgumentNullError(name)
    return value


def require_size(name: str, value: Optional[int]) -> int:
    """Raise for a missing size, ArgumentRangeError for zero or negative."""
    if value is None:
        raise ArgumentNullError(name)
    if value <= 0:
        raise ArgumentRangeError(name, value)
    return value


def require_alignment(alignment: Optional[Alignment]) -> Alignment:
    if alignment is None:
        raise ArgumentNullError("alignment")
    return alignment


def check_optional_text(name: str, value: Optional[str]) -> None:
    """Optional text may be omitted (None) but not explicitly empty."""
    if value is not None and value == "":
        raise ArgumentNullError(name)


class Formatter(ABC):
    """
    Base class for wiki formatters.

    Subclasses set PATH_SEPARATOR and FILE_EXTENSION and implement the
    target markup. Shared here: file names, path joining, image size
    validation and table rows.
    """

    NAME: str = ""
    PATH_SEPARATOR: str = "/"
    FILE_EXTENSION: str = ".md"

    # ---- Helpers ----
    def join_path(self, path: Optional[Sequence[Optional[str]]], name: str) -> str:
        """Prefix a page or file name with its namespace segments."""
        if path is None:
            return name
        segments = [segment for segment in path if segment]
        return self.PATH_SEPARATOR.join([*segments, name])

    @staticmethod
    def image_size(width: Optional[int], height: Optional[int]) -> str:
        """
        Validate image dimensions and render them as 'W' or 'WxH'.

        Returns "" when both are omitted.
        """
        if width is None:
            if height is not None:
                raise ArgumentRangeError("height", height)
            return ""
        require_size("width", width)
        if height is None:
            return str(width)
        require_size("height", height)
        return f"{width}x{height}"

    @staticmethod
    def validate_table(size: Optional[int], widths: Optional[Sequence[int]]) -> None:
        require_size("size", size)
        if widths is None:
            raise ArgumentNullError("widths")
        for width in widths:
            require_size("widths", width)

    # ---- Inline ----
    def as_filename(self, text: Optional[str]) -> str:
        """
        Turn arbitrary text into a safe lowercase page file name.

        Examples:
            >>> DokuWikiFormatter().as_filename("Alien (1979)")
            'alien_1979.txt'
        """
        filename = require_text("text", text).lower()
        for char, replacement in FILENAME_REPLACEMENTS.items():
            filename = filename.replace(char, replacement)
        return filename + self.FILE_EXTENSION

    @abstractmethod
    def as_bold(self, text: str) -> str: ...

    @abstractmethod
    def as_italic(self, text: str) -> str: ...

    @abstractmethod
    def as_underlined(self, text: str) -> str: ...

    @abstractmethod
    def as_subscript(self, text: str) -> str: ...

    @abstractmethod
    def as_superscript(self, text: str) -> str: ...

    @abstractmethod
    def as_deleted(self, text: str) -> str: ...

    # ---- Links ----
    @abstractmethod
    def as_internal_link(
        self,
        pagename: str,
        *,
        path: Optional[Sequence[Optional[str]]] = None,
        section: Optional[str] = None,
        text: Optional[str] = None,
    ) -> str: ...

    @abstractmethod
    def as_external_link(self, link: str, text: Optional[str] = None) -> str: ...

    def as_email(self, mail: str) -> str:
        return f"<{require_text('mail', mail)}>"

    # ---- Headings ----
    @abstractmethod
    def as_heading(self, level: int, text: str) -> str: ...

    def as_heading1(self, text: str) -> str:
        return self.as_heading(1, text)

    def as_heading2(self, text: str) -> str:
        return self.as_heading(2, text)

    def as_heading3(self, text: str) -> str:
        return self.as_heading(3, text)

    def as_heading4(self, text: str) -> str:
        return self.as_heading(4, text)

    def as_heading5(self, text: str) -> str:
        return self.as_heading(5, text)

    # ---- Images ----
    @abstractmethod
    def as_image(
        self,
        filename: str,
        *,
        path: Optional[Sequence[Optional[str]]] = None,
        width: Optional[int] = None,
        height: Optional[int] = None,
        text: Optional[str] = None,
    ) -> str: ...

    @abstractmethod
    def as_image_box(self, imagelink: str) -> str: ...

    @abstractmethod
    def align(self, text: str, alignment: Alignment) -> str: ...

    @abstractmethod
    def align_image(self, imagelink: str, alignment: Alignment) -> str: ...

    # ---- Lists and pages ----
    @abstractmethod
    def force_new_line(self) -> str: ...

    @abstractmethod
    def list_item_unsorted(self) -> str: ...

    @abstractmethod
    def list_item_sorted(self) -> str: ...

    @abstractmethod
    def list_item_indent(self) -> str: ...

    @abstractmethod
    def as_insert_page(
        self, pagename: str, *, path: Optional[Sequence[Optional[str]]] = None
    ) -> str: ...

    # ---- Directives ----
    @abstractmethod
    def disable_toc(self) -> Optional[str]: ...

    @abstractmethod
    def disable_cache(self) -> Optional[str]: ...

    @abstractmethod
    def begin_comment(self) -> str: ...

    @abstractmethod
    def end_comment(self) -> str: ...

    # ---- Tables ----
    @abstractmethod
    def define_table(self, size: int, widths: Sequence[int]) -> Optional[str]: ...

    @abstractmethod
    def as_table_title(self, data: Sequence[Optional[str]]) -> str: ...

    @abstractmethod
    def cell_span_vertically(self) -> str: ...

    def as_table_row(self, data: Optional[Sequence[Optional[str]]]) -> str:
        """
        Render one table row.

        An empty cell merges into its left neighbour: ['a', 'b', ''] gives
        '| a | b ||'.
        """
        return self._join_cells("|", data)

    @staticmethod
    def _join_cells(separator: str, data: Optional[Sequence[Optional[str]]]) -> str:
        if data is None:
            raise ArgumentNullError("data")
        formatted = f"{separator} "
        for item in data:
            if item:
                formatted = f"{formatted}{item} {separator} "
            else:
                formatted = f"{formatted[:-1]}{separator} "
        return formatted[:-1]

    # ---- Boxes and data entries ----
    @abstractmethod
    def begin_box(self, size: int, alignment: Alignment) -> Optional[str]: ...

    @abstractmethod
    def end_box(self) -> Optional[str]: ...

    @abstractmethod
    def begin_data_entry(self, name: str) -> str: ...

    @abstractmethod
    def end_data_entry(self) -> str: ...
