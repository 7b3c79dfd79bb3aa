#!/usr/bin/env python3
"""
dokuwiki.py
-----------
DokuWiki markup.

Namespaces are joined with ':' and pages are stored as '.txt' files.
Boxes use the WRAP plugin, data entries the data plugin.

Examples:
    >>> f = DokuWikiFormatter()
    >>> f.as_internal_link("page", path=["a", "b"], section="sect", text="text")
    '[[a:b:page#sect|text]]'
    >>> f.as_image("f.jpg", path=["p1", "p2"], width=50, height=100, text="cap")
    '{{p1:p2:f.jpg?50x100|cap}}'
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from typing import Optional, Sequence

# --- Local imports ---
from .base import (
    Alignment,
    Formatter,
    check_optional_text,
    require_alignment,
    require_size,
    require_text,
)


class DokuWikiFormatter(Formatter):
    NAME = "dokuwiki"
    PATH_SEPARATOR = ":"
    FILE_EXTENSION = ".txt"

    def as_bold(self, text: str) -> str:
        return f"**{require_text('text', text)}**"

    def as_italic(self, text: str) -> str:
        return f"//{require_text('text', text)}//"

    def as_underlined(self, text: str) -> str:
        return f"__{require_text('text', text)}__"

    def as_subscript(self, text: str) -> str:
        return f"<sub>{require_text('text', text)}</sub>"

    def as_superscript(self, text: str) -> str:
        return f"<sup>{require_text('text', text)}</sup>"

    def as_deleted(self, text: str) -> str:
        return f"<del>{require_text('text', text)}</del>"

    def as_internal_link(
        self,
        pagename: str,
        *,
        path: Optional[Sequence[Optional[str]]] = None,
        section: Optional[str] = None,
        text: Optional[str] = None,
    ) -> str:
        require_text("pagename", pagename)
        check_optional_text("section", section)
        check_optional_text("text", text)

        target = self.join_path(path, pagename)
        if section is not None:
            target = f"{target}#{section}"
        if text is not None:
            return f"[[{target}|{text}]]"
        return f"[[{target}]]"

    def as_external_link(self, link: str, text: Optional[str] = None) -> str:
        require_text("link", link)
        check_optional_text("text", text)
        return self.as_internal_link(link, text=text)

    def as_heading(self, level: int, text: str) -> str:
        require_text("text", text)
        marks = "=" * (7 - level)
        return f"{marks} {text} {marks}"

    def as_image(
        self,
        filename: str,
        *,
        path: Optional[Sequence[Optional[str]]] = None,
        width: Optional[int] = None,
        height: Optional[int] = None,
        text: Optional[str] = None,
    ) -> str:
        require_text("filename", filename)
        check_optional_text("text", text)
        size = self.image_size(width, height)

        link = self.join_path(path, filename)
        if size:
            link = f"{link}?{size}"
        if text is not None:
            link = f"{link}|{text}"
        return f"{{{{{link}}}}}"

    def as_image_box(self, imagelink: str) -> str:
        return f"[{require_text('imagelink', imagelink)}]"

    def align(self, text: str, alignment: Alignment) -> str:
        """Pad a table cell: DokuWiki aligns cells by their surrounding spaces."""
        require_text("text", text)
        require_alignment(alignment)
        if alignment is Alignment.LEFT:
            return f"{text}  "
        if alignment is Alignment.CENTERED:
            return f"  {text}  "
        return f"  {text}"

    def align_image(self, imagelink: str, alignment: Alignment) -> str:
        """
        Align an image or link by inserting spaces inside its brackets.

        Examples:
            >>> DokuWikiFormatter().align_image("[[link]]", Alignment.CENTERED)
            '[[ link ]]'
        """
        require_text("imagelink", imagelink)
        require_alignment(alignment)
        head, body, tail = imagelink[:2], imagelink[2:-2], imagelink[-2:]
        if alignment is Alignment.LEFT:
            return f"{head}{body} {tail}"
        if alignment is Alignment.CENTERED:
            return f"{head} {body} {tail}"
        return f"{head} {body}{tail}"

    def force_new_line(self) -> str:
        return "\\\\"

    def list_item_unsorted(self) -> str:
        return "* "

    def list_item_sorted(self) -> str:
        return "- "

    def list_item_indent(self) -> str:
        return "  "

    def as_insert_page(
        self, pagename: str, *, path: Optional[Sequence[Optional[str]]] = None
    ) -> str:
        require_text("pagename", pagename)
        return f"{{{{page>{self.join_path(path, pagename)}}}}}"

    def disable_toc(self) -> str:
        return "~~NOTOC~~"

    def disable_cache(self) -> str:
        return "~~NOCACHE~~"

    def begin_comment(self) -> str:
        return "/* "

    def end_comment(self) -> str:
        return " */"

    def define_table(self, size: int, widths: Sequence[int]) -> str:
        self.validate_table(size, widths)
        columns = "".join(f"{width}%   " for width in widths)
        return f"|<   {size}px   {columns}>|"

    def as_table_title(self, data: Sequence[Optional[str]]) -> str:
        return self._join_cells("^", data)

    def cell_span_vertically(self) -> str:
        return ":::"

    def begin_box(self, size: int, alignment: Alignment) -> str:
        require_size("size", size)
        return f"<WRAP box {size}px {require_alignment(alignment).value}>"

    def end_box(self) -> str:
        return "</WRAP>"

    def begin_data_entry(self, name: str) -> str:
        return f"---- dataentry {require_text('name', name)} ----"

    def end_data_entry(self) -> str:
        return "----"
