"""
SQLite database integration and simple migration system.

This module provides functions for obtaining a database connection
(``get_connection``), a cursor context manager that commits on
success (``get_cursor``) and the migration runner applied on
application start (``init_db``).

The migration mechanism stores applied migration versions in the
``migrations`` table and executes new migrations in order.
"""

import os
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from .errors import StorageError


MIGRATIONS: list[tuple[int, str]] = [
    # Migration 1: Initial schema
    (
        1,
        """
        -- Edge lists are stored as JSON arrays so that order and
        -- duplicates survive a round trip.
        CREATE TABLE IF NOT EXISTS concepts (
            concept_id TEXT PRIMARY KEY,
            display_name TEXT NOT NULL,
            description TEXT NOT NULL DEFAULT '',
            parent_ids TEXT NOT NULL DEFAULT '[]',
            child_ids TEXT NOT NULL DEFAULT '[]',
            alternate_names TEXT NOT NULL DEFAULT ''
        );
        """,
    ),
]


def get_database_path(database_url: str) -> str:
    """Compute the path to the SQLite database file.

    If ``database_url`` is an absolute path, use it directly.
    Otherwise resolve it relative to the project root.
    """
    if os.path.isabs(database_url):
        return database_url
    base_dir = Path(__file__).resolve().parent.parent.parent  # clinical_concepts_api/
    return str((base_dir / database_url).resolve())


def get_connection(db_path: str, timeout: float = 30.0) -> sqlite3.Connection:
    """Create and return a new SQLite connection.

    The connection uses a row factory to access columns by name.
    ``timeout`` bounds how long a writer waits for another writer's
    lock to be released.
    """
    try:
        conn = sqlite3.connect(db_path, timeout=timeout)
    except sqlite3.Error as exc:
        raise StorageError(f"cannot open database {db_path}: {exc}") from exc
    conn.row_factory = sqlite3.Row
    return conn


@contextmanager
def get_cursor(db_path: str, timeout: float = 30.0) -> Iterator[sqlite3.Cursor]:
    """Context manager that yields a cursor, commits and closes the connection on exit.

    Any ``sqlite3.Error`` raised inside the block rolls the transaction
    back and is re‑raised as ``StorageError``.
    """
    conn = get_connection(db_path, timeout)
    try:
        yield conn.cursor()
        conn.commit()
    except sqlite3.Error as exc:
        conn.rollback()
        raise StorageError(str(exc)) from exc
    finally:
        conn.close()


def init_db(db_path: str, timeout: float = 30.0) -> None:
    """Initialise the database and apply pending migrations.

    Creates the ``migrations`` table if it does not exist, checks the
    current schema version, and applies any new migrations defined in
    ``MIGRATIONS``.  If you add a new migration, append it with an
    incremented version number.
    """
    with get_cursor(db_path, timeout) as cursor:
        cursor.execute(
            "CREATE TABLE IF NOT EXISTS migrations (version INTEGER PRIMARY KEY)"
        )
        cursor.execute("SELECT MAX(version) as version FROM migrations")
        row = cursor.fetchone()
        current_version = row["version"] if row and row["version"] is not None else 0

        for version, sql in MIGRATIONS:
            if version > current_version:
                cursor.executescript(sql)
                cursor.execute(
                    "INSERT INTO migrations (version) VALUES (?)", (version,)
                )
                current_version = version
