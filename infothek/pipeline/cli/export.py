#!/usr/bin/env python3
"""
export.py
---------
Wiki export command for the Infothek CLI.

Commands:
    - export: Write the page of one article, or of every article with
      the configured status when the id is '*'

Usage:
    # Prompt for the id
    infothek export movie

    # All series, English Obsidian pages into another directory
    infothek export series --id '*' --lang en --format obsidian --output /tmp/wiki
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from pathlib import Path

# --- Third-party imports ---
import click

# --- Local imports ---
from infothek.core.config import FORMATTER_NAMES
from infothek.core.logging_manager import handle_cli_error
from infothek.database import DBReader
from infothek.database.models import ARTICLE_KINDS
from infothek.wiki import WikiExporter
from infothek.wiki.formatters import get_formatter


@click.command()
@click.argument("kind", type=click.Choice(sorted(ARTICLE_KINDS)))
@click.option("--id", "entry_id", default=None, help="Article id, or '*' for all with the status")
@click.option("--output", type=click.Path(file_okay=False, path_type=Path), default=None,
              help="Output directory, overrides the config")
@click.option("--lang", default=None, help="Page language (en or de), overrides the config")
@click.option("--format", "format_name", type=click.Choice(FORMATTER_NAMES), default=None,
              help="Target markup, overrides the config")
@click.option("--status", default=None, help="Status id used with '*', overrides the config")
@click.pass_context
def export(ctx: click.Context, kind: str, entry_id, output, lang, format_name, status) -> None:
    """
    Export movie or series articles as wiki pages.

    Pages are written to OUTPUT/LANG/cinema_and_television_movie/ or
    OUTPUT/LANG/cinema_and_television_series/.

    Examples:
        infothek export movie --id _xxx
        infothek export series --id '*'
    """
    if entry_id is None:
        entry_id = click.prompt("Id ('*' for all)")

    reader = None
    try:
        logger = ctx.obj["logger"]
        config = ctx.obj["config"].override(
            output_dir=output, language=lang, formatter=format_name, status=status
        )

        reader = DBReader(config.database, logger=logger)
        exporter = WikiExporter(
            reader,
            get_formatter(config.formatter),
            config.output_dir,
            config.language,
            logger=logger,
        )

        click.echo(f"Exporting {kind} {entry_id} as {config.formatter} ({config.language})...")
        stats = exporter.export(kind, entry_id, config.status)

        for path in stats.written_files:
            click.echo(f"  {path}")
        click.echo(f"Export complete: {stats.summary()}")
        if stats.errors:
            ctx.exit(1)

    except click.exceptions.Exit:
        raise
    except Exception as e:
        handle_cli_error(ctx, e, f"export_{kind}", {"id": entry_id})
    finally:
        if reader is not None:
            reader.dispose()
