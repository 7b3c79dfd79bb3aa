#!/usr/bin/env python3
"""
markdown.py
-----------
Plain Markdown markup (with the common sub/superscript extensions).

Markdown has no page directives, column widths or boxes; those
operations validate their arguments and return None so callers can skip
the line.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from typing import Optional, Sequence

# --- Local imports ---
from infothek.core.exceptions import ArgumentNullError, UnsupportedOperationError

from .base import (
    Alignment,
    Formatter,
    check_optional_text,
    require_alignment,
    require_size,
    require_text,
)


class MarkdownFormatter(Formatter):
    NAME = "markdown"
    PATH_SEPARATOR = "/"
    FILE_EXTENSION = ".md"

    def as_bold(self, text: str) -> str:
        return f"**{require_text('text', text)}**"

    def as_italic(self, text: str) -> str:
        return f"_{require_text('text', text)}_"

    def as_underlined(self, text: str) -> str:
        return f"<u>{require_text('text', text)}</u>"

    def as_subscript(self, text: str) -> str:
        return f"~{require_text('text', text)}~"

    def as_superscript(self, text: str) -> str:
        return f"^{require_text('text', text)}^"

    def as_deleted(self, text: str) -> str:
        return f"~~{require_text('text', text)}~~"

    def as_internal_link(
        self,
        pagename: str,
        *,
        path: Optional[Sequence[Optional[str]]] = None,
        section: Optional[str] = None,
        text: Optional[str] = None,
    ) -> str:
        """
        Link to another page; the page name doubles as link text.

        Examples:
            >>> MarkdownFormatter().as_internal_link("page", path=["a", "b"])
            '[page](a/b/page)'
        """
        require_text("pagename", pagename)
        check_optional_text("section", section)
        check_optional_text("text", text)

        target = self.join_path(path, pagename)
        if section is not None:
            target = f"{target}#{section}"
        return f"[{text if text is not None else pagename}]({target})"

    def as_external_link(self, link: str, text: Optional[str] = None) -> str:
        require_text("link", link)
        check_optional_text("text", text)
        return f"[{text if text is not None else link}]({link})"

    def as_heading(self, level: int, text: str) -> str:
        return f"{'#' * level} {require_text('text', text)}"

    def as_image(
        self,
        filename: str,
        *,
        path: Optional[Sequence[Optional[str]]] = None,
        width: Optional[int] = None,
        height: Optional[int] = None,
        text: Optional[str] = None,
    ) -> str:
        """Embed an image; without text the alt text is the image path."""
        require_text("filename", filename)
        check_optional_text("text", text)
        size = self.image_size(width, height)

        link = self.join_path(path, filename)
        alt = text if text is not None else link
        if size:
            alt = f"{alt}|{size}"
        return f"![{alt}]({link})"

    def as_image_box(self, imagelink: str) -> str:
        return require_text("imagelink", imagelink)

    def align(self, text: str, alignment: Alignment) -> str:
        require_text("text", text)
        require_alignment(alignment)
        if alignment is Alignment.LEFT:
            return f":{text}"
        if alignment is Alignment.CENTERED:
            return f":{text}:"
        return f"{text}:"

    def align_image(self, imagelink: str, alignment: Alignment) -> str:
        require_text("imagelink", imagelink)
        raise UnsupportedOperationError(
            f"align_image is not supported by {type(self).__name__}"
        )

    def force_new_line(self) -> str:
        return "   "

    def list_item_unsorted(self) -> str:
        return "- "

    def list_item_sorted(self) -> str:
        return "1. "

    def list_item_indent(self) -> str:
        return "    "

    def as_insert_page(
        self, pagename: str, *, path: Optional[Sequence[Optional[str]]] = None
    ) -> str:
        return self.join_path(path, require_text("pagename", pagename))

    def disable_toc(self) -> Optional[str]:
        return None

    def disable_cache(self) -> Optional[str]:
        return None

    def begin_comment(self) -> str:
        return "["

    def end_comment(self) -> str:
        return "]: #"

    def define_table(self, size: int, widths: Sequence[int]) -> Optional[str]:
        self.validate_table(size, widths)
        return None

    def as_table_title(self, data: Sequence[Optional[str]]) -> str:
        """
        Header row plus separator line.

        Examples:
            >>> MarkdownFormatter().as_table_title(["title", None, "title"])
            '| title | | title |\\n| --- | --- | --- |'
        """
        if data is None:
            raise ArgumentNullError("data")
        header = "|" + "".join(f" {item} |" if item else " |" for item in data)
        separator = "|" + " --- |" * len(data)
        return f"{header}\n{separator}"

    def cell_span_vertically(self) -> str:
        return "    "

    def begin_box(self, size: int, alignment: Alignment) -> Optional[str]:
        require_size("size", size)
        require_alignment(alignment)
        return None

    def end_box(self) -> Optional[str]:
        return None

    def begin_data_entry(self, name: str) -> str:
        require_text("name", name)
        return "---"

    def end_data_entry(self) -> str:
        return "---"
