#!/usr/bin/env python3
"""
database.py
-----------
Database inspection commands for the Infothek CLI.

Commands:
    - list: Print id and original title of every article with a status
    - show: Retrieve one article with its lists and summarize the result
    - init-db: Create an empty database file with every table

Usage:
    infothek list movie --status ok --order OriginalTitle
    infothek show series _abc
    infothek init-db data/test.db
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from pathlib import Path

# --- Third-party imports ---
import click

# --- Local imports ---
from infothek.core.logging_manager import handle_cli_error
from infothek.database import DBReader
from infothek.database.models import ARTICLE_KINDS
from infothek.database.schema import create_database


@click.command("list")
@click.argument("kind", type=click.Choice(sorted(ARTICLE_KINDS)))
@click.option("--status", default=None, help="Status id (default: from config)")
@click.option("--order", default="ID", show_default=True, help="Column to sort by")
@click.pass_context
def list_articles(ctx: click.Context, kind: str, status, order: str) -> None:
    """List the articles of a kind with a status."""
    reader = None
    try:
        config = ctx.obj["config"]
        status = status or config.status
        reader = DBReader(config.database, logger=ctx.obj["logger"])

        articles = ARTICLE_KINDS[kind].retrieve_list(reader, status, order=order)
        for article in articles:
            click.echo(f"{article.id}\t{article.original_title or ''}")
        click.echo(f"{len(articles)} {kind} article(s) with status '{status}'")

    except Exception as e:
        handle_cli_error(ctx, e, f"list_{kind}", {"status": status, "order": order})
    finally:
        if reader is not None:
            reader.dispose()


@click.command()
@click.argument("kind", type=click.Choice(sorted(ARTICLE_KINDS)))
@click.argument("entry_id")
@click.pass_context
def show(ctx: click.Context, kind: str, entry_id: str) -> None:
    """Retrieve one article and print what was loaded."""
    reader = None
    try:
        config = ctx.obj["config"]
        reader = DBReader(config.database, logger=ctx.obj["logger"])

        article, found = ARTICLE_KINDS[kind].fetch(reader, entry_id, basic_only=False)
        if not found:
            click.echo(f"{kind} {entry_id}: not found")
            return

        click.echo(f"{kind} {entry_id}: found")
        click.echo(f"  Original title: {article.original_title or '-'}")
        click.echo(f"  English title:  {article.english_title or '-'}")
        click.echo(f"  German title:   {article.german_title or '-'}")
        click.echo(f"  Release date:   {article.release_date or '-'}")

        counts = {attr: len(getattr(article, attr)) for attr, _, _ in article.LISTS}
        loaded = {attr: count for attr, count in counts.items() if count}
        for attr, count in loaded.items():
            click.echo(f"  {attr}: {count}")
        click.echo(f"  {sum(loaded.values())} child rows loaded")

    except Exception as e:
        handle_cli_error(ctx, e, f"show_{kind}", {"id": entry_id})
    finally:
        if reader is not None:
            reader.dispose()


@click.command("init-db")
@click.argument("path", type=click.Path(dir_okay=False, path_type=Path))
@click.pass_context
def init_db(ctx: click.Context, path: Path) -> None:
    """Create an empty database with every entity and junction table."""
    try:
        created = create_database(path)
        ctx.obj["logger"].log_operation("init_db", {"path": str(created)})
        click.echo(f"Created database {created}")
    except Exception as e:
        handle_cli_error(ctx, e, "init_db", {"path": str(path)})
