#!/usr/bin/env python3
"""
schema.py
---------
SQLAlchemy table definitions for the tables the entity layer reads.

The tables are derived from the model declarations instead of being
written out by hand: one table per entity class, and one junction table
per ``(base, target)`` list reachable from Movie and Series (including
the nested Image, Text and Award lists).

Used to create empty databases (``infothek init-db``) and test fixtures:

    from infothek.database.schema import metadata
    metadata.create_all(engine)
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from pathlib import Path
from typing import Iterator, List, Set, Tuple, Type, Union

# --- Third party imports ---
from sqlalchemy import Column, Integer, MetaData, Table, Text, create_engine

# --- Local imports ---
from infothek.database.models import Entry, EntryItem, registered_classes, resolve

metadata = MetaData()

INTEGER_COLUMNS = {"Runtime"}


def _column(name: str) -> Column:
    if name in INTEGER_COLUMNS:
        return Column(name, Integer)
    return Column(name, Text)


def _entity_columns(cls: Type[Entry]) -> List[str]:
    columns, references = cls.column_map()
    return [*columns, *references]


def junction_tables() -> Iterator[Tuple[str, str, Type[EntryItem]]]:
    """
    Yield ``(base, target, item class)`` for every junction table.

    Walks the LISTS declarations starting at every entity table, and
    descends into item classes that declare lists of their own
    (AwardItem -> ``{Base}_Award_Person``).
    """
    seen: Set[Tuple[str, str]] = set()
    pending: List[Tuple[str, Type[Entry]]] = [
        (cls.TABLE, cls) for cls in registered_classes().values() if cls.TABLE
    ]

    while pending:
        base, owner = pending.pop(0)
        for _attr, item_name, target in owner.LISTS:
            if (base, target) in seen:
                continue
            seen.add((base, target))
            item_cls = resolve(item_name)
            yield base, target, item_cls
            if item_cls.LISTS:
                pending.append((f"{base}_{target}", item_cls))


def _build() -> None:
    for cls in registered_classes().values():
        if not cls.TABLE or cls.TABLE in metadata.tables:
            continue
        Table(
            cls.TABLE,
            metadata,
            Column("ID", Text, primary_key=True),
            *(_column(name) for name in _entity_columns(cls)),
        )

    for base, target, item_cls in junction_tables():
        name = f"{base}_{target}"
        if name in metadata.tables:
            continue
        Table(
            name,
            metadata,
            Column("ID", Text, primary_key=True),
            Column(f"{base}ID", Text, index=True),
            *(_column(col) for col in _entity_columns(item_cls)),
        )


_build()


def create_database(path: Union[str, Path]) -> Path:
    """
    Create an empty Infothek database with every table.

    Existing tables are left untouched.

    Returns:
        Path of the database file
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    engine = create_engine(f"sqlite:///{path}", future=True)
    try:
        metadata.create_all(engine)
    finally:
        engine.dispose()
    return path
