#!/usr/bin/env python3
"""
paths.py
-------------------
Path constants for the Infothek project.

The project structure:
    ROOT/
    ├── infothek/      # Package code
    ├── data/          # EntertainmentInfothek.db
    ├── output/        # Generated wiki pages
    ├── logs/          # Application logs
    └── infothek.yaml  # Optional configuration file

All paths are resolved at import time relative to the project root.
They are defaults only: the config file and CLI options override them.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from pathlib import Path


def _get_project_root() -> Path:
    """
    Determine project root directory.

    Assumes this file is at ROOT/infothek/core/paths.py.

    Returns:
        Path object for project root
    """
    # paths.py -> core/ -> infothek/ -> ROOT/
    return Path(__file__).resolve().parent.parent.parent


# ----- Project directory -----
ROOT: Path = _get_project_root()
PACKAGE_DIR = ROOT / "infothek"

# --- Database ---
DATA_DIR = ROOT / "data"
DB_PATH = DATA_DIR / "EntertainmentInfothek.db"

# --- Output ---
OUTPUT_DIR = ROOT / "output"

# --- Logs ---
LOG_DIR = ROOT / "logs"

# --- Configuration ---
CONFIG_PATH = ROOT / "infothek.yaml"

# --- Wiki folders (relative to OUTPUT_DIR/<language>) ---
MOVIE_FOLDER = "cinema_and_television_movie"
SERIES_FOLDER = "cinema_and_television_series"
