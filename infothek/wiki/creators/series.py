#!/usr/bin/env python3
"""
series.py
---------
Page creator for television series.

A series shows the dates of its first and last episode where a movie
shows its release date, and lists season and episode counts after the
languages.
"""
# --- Annotations ---
from __future__ import annotations

# --- Local imports ---
from infothek.database.models import Series

from .article import ArticleContentCreator
from .base import Lines, label

SERIES_LABELS = {
    "first_episode": label("Release Date (First Episode)", "Erstausstrahlung (Erste Folge)"),
    "last_episode": label("Release Date (Last Episode)", "Erstausstrahlung (Letzte Folge)"),
    "seasons": label("# Seasons", "# Staffeln"),
    "episodes": label("# Episodes", "# Folgen"),
}


class SeriesContentCreator(ArticleContentCreator):
    entry: Series

    def create_release_rows(self) -> Lines:
        content: Lines = []
        for key, value in (
            ("first_episode", self.entry.release_date),
            ("last_episode", self.entry.release_date_last_episode),
        ):
            link = self.lists.date_link(value)
            if link:
                content.extend(self.info_box_rows(SERIES_LABELS[key], [link]))
        return content

    def create_episode_rows(self) -> Lines:
        content: Lines = []
        for key, value in (
            ("seasons", self.entry.number_of_seasons),
            ("episodes", self.entry.number_of_episodes),
        ):
            if value:
                content.extend(self.info_box_rows(SERIES_LABELS[key], [value]))
        return content
