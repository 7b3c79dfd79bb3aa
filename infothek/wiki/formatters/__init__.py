"""
Wiki formatters.

Usage:
    from infothek.wiki.formatters import get_formatter

    formatter = get_formatter("dokuwiki")
    formatter.as_bold("text")  # '**text**'
"""
from typing import Dict, Type

from infothek.core.exceptions import ConfigError

from .base import Alignment, Formatter
from .dokuwiki import DokuWikiFormatter
from .markdown import MarkdownFormatter
from .obsidian import ObsidianFormatter

FORMATTERS: Dict[str, Type[Formatter]] = {
    DokuWikiFormatter.NAME: DokuWikiFormatter,
    MarkdownFormatter.NAME: MarkdownFormatter,
    ObsidianFormatter.NAME: ObsidianFormatter,
}


def get_formatter(name: str) -> Formatter:
    """
    Return a formatter instance by target name.

    Raises:
        ConfigError: If no formatter has that name
    """
    try:
        return FORMATTERS[name.lower()]()
    except (KeyError, AttributeError):
        raise ConfigError(
            f"Unknown formatter {name!r}, expected one of: {', '.join(FORMATTERS)}"
        ) from None


__all__ = [
    "Alignment",
    "DokuWikiFormatter",
    "FORMATTERS",
    "Formatter",
    "MarkdownFormatter",
    "ObsidianFormatter",
    "get_formatter",
]
