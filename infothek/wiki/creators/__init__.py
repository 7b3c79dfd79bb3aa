"""
Wiki page content creators.

Usage:
    from infothek.wiki.creators import creator_for

    creator = creator_for(movie, formatter, "de")
    lines = creator.create_page()
"""
from typing import Dict, Optional, Type

from infothek.core.exceptions import ExportError
from infothek.core.logging_manager import InfothekLogger
from infothek.database.models import Movie, MovieAndTVArticle, Series
from infothek.wiki.formatters import Formatter

from .article import ArticleContentCreator
from .base import EntryContentCreator
from .lists import ListContentCreator
from .movie import MovieContentCreator
from .series import SeriesContentCreator

CREATORS: Dict[type, Type[ArticleContentCreator]] = {
    Movie: MovieContentCreator,
    Series: SeriesContentCreator,
}


def creator_for(
    article: MovieAndTVArticle,
    formatter: Formatter,
    language: str,
    logger: Optional[InfothekLogger] = None,
) -> ArticleContentCreator:
    """Return the creator matching the article's class."""
    try:
        creator_class = CREATORS[type(article)]
    except KeyError:
        raise ExportError(f"No page creator for {type(article).__name__}") from None
    return creator_class(article, formatter, language, logger)


__all__ = [
    "ArticleContentCreator",
    "CREATORS",
    "EntryContentCreator",
    "ListContentCreator",
    "MovieContentCreator",
    "SeriesContentCreator",
    "creator_for",
]
