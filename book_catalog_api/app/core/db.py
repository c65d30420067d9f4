"""
SQLite database integration and schema bootstrap.

This module provides functions for resolving the database location
(``get_database_path``), obtaining a connection (``get_connection``)
and creating the ``books`` table on application start (``init_db``).
It uses SQLite as a lightweight embedded database; to switch to
another DBMS you would provide a different repository implementation
and adapt the SQL accordingly.
"""

import logging
import os
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from .exceptions import StorageError

logger = logging.getLogger(__name__)

BOOKS_SCHEMA = """
CREATE TABLE IF NOT EXISTS books (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    title TEXT NOT NULL,
    author TEXT NOT NULL
)
"""


def get_database_path(database_url: str) -> str:
    """Compute the path to the SQLite database file.

    If ``database_url`` is an absolute path, use it directly.  Otherwise
    resolve it relative to the project root.
    """
    if os.path.isabs(database_url):
        return database_url
    base_dir = Path(__file__).resolve().parent.parent.parent.parent
    return str((base_dir / database_url).resolve())


def get_connection(database_path: str) -> sqlite3.Connection:
    """Create and return a new SQLite connection.

    The connection uses a row factory to access columns by name.
    """
    conn = sqlite3.connect(database_path)
    conn.row_factory = sqlite3.Row
    return conn


@contextmanager
def get_cursor(database_path: str) -> Iterator[sqlite3.Cursor]:
    """Context manager that yields a cursor and closes the connection on exit."""
    conn = get_connection(database_path)
    try:
        yield conn.cursor()
        conn.commit()
    finally:
        conn.close()


def init_db(database_path: str) -> None:
    """Create the ``books`` table if it does not exist yet."""
    try:
        with get_cursor(database_path) as cursor:
            cursor.execute(BOOKS_SCHEMA)
    except sqlite3.Error as e:
        logger.exception("Could not initialise database at %s", database_path)
        raise StorageError(f"Could not initialise database: {e}") from e
    logger.info("Database ready at %s", database_path)
