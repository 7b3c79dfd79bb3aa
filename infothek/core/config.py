#!/usr/bin/env python3
"""
config.py
---------
YAML configuration for the wiki page export.

A config file is optional. Every key falls back to the defaults from
infothek.core.paths, and CLI options override whatever the file says.

Example infothek.yaml:

    database: data/EntertainmentInfothek.db
    output_dir: output
    language: de
    formatter: dokuwiki
    status: ok
    log_dir: logs

Relative paths are resolved against the directory holding the file.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional

# --- Third party imports ---
import yaml

# --- Local imports ---
from infothek.core.exceptions import ConfigError
from infothek.core.paths import DB_PATH, LOG_DIR, OUTPUT_DIR

FORMATTER_NAMES = ("dokuwiki", "markdown", "obsidian")
PATH_KEYS = ("database", "output_dir", "log_dir")


@dataclass
class InfothekConfig:
    """
    Settings shared by the CLI and the exporter.

    Attributes:
        database: SQLite database file
        output_dir: Root folder for generated pages
        language: Target language code ('en', 'de', ...)
        formatter: Wiki target ('dokuwiki', 'markdown', 'obsidian')
        status: StatusID selecting the entries exported by '*'
        log_dir: Directory for log files
    """

    database: Path = field(default_factory=lambda: DB_PATH)
    output_dir: Path = field(default_factory=lambda: OUTPUT_DIR)
    language: str = "de"
    formatter: str = "dokuwiki"
    status: str = "ok"
    log_dir: Path = field(default_factory=lambda: LOG_DIR)

    def __post_init__(self) -> None:
        if self.formatter not in FORMATTER_NAMES:
            raise ConfigError(
                f"Unknown formatter '{self.formatter}', "
                f"expected one of: {', '.join(FORMATTER_NAMES)}"
            )
        if not self.language:
            raise ConfigError("Language must not be empty")
        if not self.status:
            raise ConfigError("Status must not be empty")

    @classmethod
    def from_file(cls, path: Path) -> "InfothekConfig":
        """
        Load configuration from a YAML file.

        Args:
            path: Path to the YAML file

        Returns:
            InfothekConfig with file values over defaults

        Raises:
            ConfigError: If the file cannot be read or parsed, or holds
                unknown keys or invalid values
        """
        path = Path(path)
        try:
            data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
        except OSError as e:
            raise ConfigError(f"Cannot read config file {path}: {e}") from e
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigError(f"Config file {path} must contain a mapping")

        return cls.from_dict(data, base_dir=path.parent)

    @classmethod
    def from_dict(
        cls, data: Dict[str, Any], base_dir: Optional[Path] = None
    ) -> "InfothekConfig":
        """Build a config from a plain mapping, resolving relative paths."""
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigError(f"Unknown config keys: {', '.join(unknown)}")

        values: Dict[str, Any] = {}
        for key, value in data.items():
            if value is None:
                continue
            if key in PATH_KEYS:
                value = Path(value).expanduser()
                if base_dir is not None and not value.is_absolute():
                    value = base_dir / value
            else:
                value = str(value)
            values[key] = value
        return cls(**values)

    def override(self, **overrides: Any) -> "InfothekConfig":
        """Return a copy with every non-None override applied."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        for key in PATH_KEYS:
            if key in changes:
                changes[key] = Path(changes[key])
        return replace(self, **changes)


def load_config(path: Optional[Path] = None) -> InfothekConfig:
    """
    Load the config file if it exists, otherwise return the defaults.

    An explicitly given path must exist.
    """
    if path is not None:
        return InfothekConfig.from_file(Path(path))

    from infothek.core.paths import CONFIG_PATH

    if CONFIG_PATH.exists():
        return InfothekConfig.from_file(CONFIG_PATH)
    return InfothekConfig()
