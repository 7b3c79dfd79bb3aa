#!/usr/bin/env python3
"""
obsidian.py
-----------
Obsidian flavoured Markdown.

Differs from plain Markdown in HTML sub/superscript, '%%' comments,
embedded pages ('![[page]]'), '<br>' line breaks and empty strings
instead of None for the directives Obsidian ignores.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from typing import Optional, Sequence

# --- Local imports ---
from .base import Alignment, require_alignment, require_size, require_text
from .markdown import MarkdownFormatter


class ObsidianFormatter(MarkdownFormatter):
    NAME = "obsidian"

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
        # Empty link text means "no text" here
        return super().as_internal_link(
            pagename, path=path, section=section, text=text or None
        )

    def force_new_line(self) -> str:
        return "<br>"

    def as_insert_page(
        self, pagename: str, *, path: Optional[Sequence[Optional[str]]] = None
    ) -> str:
        return f"![[{super().as_insert_page(pagename, path=path)}]]"

    def disable_toc(self) -> str:
        return ""

    def disable_cache(self) -> str:
        return ""

    def begin_comment(self) -> str:
        return "%%"

    def end_comment(self) -> str:
        return "%%"

    def define_table(self, size: int, widths: Sequence[int]) -> str:
        self.validate_table(size, widths)
        return "|" + " |" * len(widths)

    def begin_box(self, size: int, alignment: Alignment) -> str:
        require_size("size", size)
        require_alignment(alignment)
        return ""

    def end_box(self) -> str:
        return ""
