#!/usr/bin/env python3
"""
movie.py
--------
Page creator for movies.
"""
# --- Annotations ---
from __future__ import annotations

# --- Local imports ---
from infothek.database.models import Movie

from .article import ArticleContentCreator


class MovieContentCreator(ArticleContentCreator):
    """Movie page: the article layout with a single release date row."""

    entry: Movie
