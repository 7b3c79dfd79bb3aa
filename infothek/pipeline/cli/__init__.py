#!/usr/bin/env python3
"""
Infothek CLI
------------

Command-line interface for reading the Infothek database and exporting
wiki pages.

Commands:
    - export: Write movie or series pages
    - list: List the articles with a status
    - show: Retrieve one article and summarize what was loaded
    - init-db: Create an empty database with every table

Usage:
    # Export one movie as German DokuWiki page
    infothek export movie --id _xxx

    # Export every series with status 'ok' as English Markdown
    infothek export series --id '*' --lang en --format markdown

    # List movies, ordered by title
    infothek list movie --order OriginalTitle

    # Use another config file
    infothek --config ~/infothek.yaml show movie _xxx
"""
from __future__ import annotations

from pathlib import Path

import click

from infothek.core.cli import setup_logger
from infothek.core.config import load_config
from infothek.core.logging_manager import handle_cli_error


@click.group()
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="YAML config file (default: infothek.yaml in the project root when present)",
)
@click.option(
    "--database",
    type=click.Path(path_type=Path),
    default=None,
    help="Database file, overrides the config",
)
@click.option(
    "--log-dir",
    type=click.Path(path_type=Path),
    default=None,
    help="Directory for log files, overrides the config",
)
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    help="Enable verbose logging: debug messages on stderr, tracebacks on errors",
)
@click.pass_context
def cli(ctx: click.Context, config_path, database, log_dir, verbose: bool) -> None:
    """Entertainment Infothek wiki generator"""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    try:
        config = load_config(config_path).override(database=database, log_dir=log_dir)
    except Exception as e:
        handle_cli_error(ctx, e, "load_config", {"config": str(config_path)})

    ctx.obj["config"] = config
    ctx.obj["logger"] = setup_logger(config.log_dir, "infothek", verbose=verbose)


# Import and register commands from submodules
from .database import init_db, list_articles, show  # noqa: E402
from .export import export  # noqa: E402

cli.add_command(export)
cli.add_command(list_articles)
cli.add_command(show)
cli.add_command(init_db)


if __name__ == "__main__":
    cli(obj={})
