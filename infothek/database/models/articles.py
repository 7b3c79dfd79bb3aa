#!/usr/bin/env python3
"""
articles.py
-----------
Movie and Series, the two article kinds exported as wiki pages.

Both read their own row plus the lists declared on MovieAndTVArticle,
from junction tables named ``Movie_*`` and ``Series_*`` respectively.

Usage:
    movie, found = Movie.fetch(reader, "_xxx")
    ok_series = Series.retrieve_list(reader, "ok", order="OriginalTitle")
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from dataclasses import dataclass
from typing import ClassVar, Dict, Optional, Tuple

# --- Local imports ---
from infothek.database.models.base import MovieAndTVArticle
from infothek.database.models.entities import Image


@dataclass
class Movie(MovieAndTVArticle):
    """
    Cinema or television movie.

    Attributes:
        logo: Nested Image shown in the page title area
    """

    TABLE: ClassVar[str] = "Movie"
    REFERENCES: ClassVar[Dict[str, Tuple[str, str]]] = {
        "LogoID": ("logo", "Image"),
    }

    logo: Optional[Image] = None


@dataclass
class Series(MovieAndTVArticle):
    """
    Television series.

    ReleaseDateFirstEpisode is read into ``release_date`` so pages and
    file names treat both article kinds alike.
    """

    TABLE: ClassVar[str] = "Series"
    COLUMNS: ClassVar[Dict[str, str]] = {
        "ReleaseDateFirstEpisode": "release_date",
        "ReleaseDateLastEpisode": "release_date_last_episode",
        "NoOfSeasons": "number_of_seasons",
        "NoOfEpisodes": "number_of_episodes",
    }

    release_date_last_episode: Optional[str] = None
    number_of_seasons: Optional[str] = None
    number_of_episodes: Optional[str] = None

    @classmethod
    def column_map(cls):
        columns, references = super().column_map()
        columns.pop("ReleaseDate", None)
        return columns, references


ARTICLE_KINDS = {
    "movie": Movie,
    "series": Series,
}
