"""Executors for the two kinds of migration script.

SQL scripts are split into an Up and a Down section by annotation
comments::

    -- +migrate Up
    CREATE TABLE users (id INTEGER PRIMARY KEY);

    -- +migrate Down
    DROP TABLE users;

Python migrations are modules defining ``up(conn)`` and ``down(conn)``,
each taking the open ``sqlite3.Connection``. They must not commit.

Executors run on the cursor of a transaction opened by the caller and
return the number of statements (or units) they executed.
"""

from __future__ import annotations

import importlib.util
import sqlite3
from typing import Callable

from loguru import logger

from ..core.types import Direction, Migration, MigrationKind

ANNOTATION_PREFIX = "-- +migrate"

Executor = Callable[[sqlite3.Cursor, Migration, Direction], int]


def split_sql_statements(script: str, direction: Direction) -> list[str]:
    """Extract the statements belonging to one direction of a SQL script.

    A script without annotations is treated as entirely Up.

    Args:
        script: Full text of the migration file.
        direction: Section to extract.

    Returns:
        Statements in file order. A statement ends once the lines gathered
        so far form complete SQL, so trigger bodies stay whole.
    """
    section: Direction | None = Direction.UP
    statements: list[str] = []
    buffer: list[str] = []

    for line in script.splitlines():
        stripped = line.strip()

        if stripped.startswith(ANNOTATION_PREFIX):
            cmd = stripped[len(ANNOTATION_PREFIX):].strip().lower()
            if cmd == "up":
                section = Direction.UP
            elif cmd == "down":
                section = Direction.DOWN
            else:
                logger.warning(f"Unknown migration annotation: {stripped}")
            continue

        if section is not direction:
            continue

        if not buffer and (not stripped or stripped.startswith("--")):
            continue

        buffer.append(line)
        if sqlite3.complete_statement("\n".join(buffer)):
            statements.append("\n".join(buffer).strip())
            buffer = []

    if buffer and "".join(buffer).strip():
        statements.append("\n".join(buffer).strip())

    return statements


def run_sql_migration(
    cursor: sqlite3.Cursor, migration: Migration, direction: Direction
) -> int:
    """Execute one direction of a SQL migration script."""
    statements = split_sql_statements(migration.source.read_text(), direction)
    for statement in statements:
        cursor.execute(statement)
    return len(statements)


def run_python_migration(
    cursor: sqlite3.Cursor, migration: Migration, direction: Direction
) -> int:
    """Import a Python migration module and call its up/down function."""
    spec = importlib.util.spec_from_file_location(
        f"migrant_migration_{migration.version}", migration.source
    )
    if spec is None or spec.loader is None:
        raise ImportError(f"Cannot load migration module {migration.source}")

    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)

    func = getattr(module, direction.value, None)
    if not callable(func):
        raise AttributeError(
            f"{migration.source.name} does not define {direction.value}(conn)"
        )

    func(cursor.connection)
    return 1


EXECUTORS: dict[MigrationKind, Executor] = {
    MigrationKind.SQL: run_sql_migration,
    MigrationKind.PYTHON: run_python_migration,
}


def execute(cursor: sqlite3.Cursor, migration: Migration, direction: Direction) -> int:
    """Run ``migration`` through ``cursor`` with the executor for its kind."""
    return EXECUTORS[migration.kind](cursor, migration, direction)
