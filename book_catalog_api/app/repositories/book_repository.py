"""
Book persistence.

``BookRepository`` declares the operations a storage backend must
offer.  ``SQLiteBookRepository`` implements them on the ``books`` table
created by ``core.db.init_db``.

All queries use parameterized statements.  Each call opens its own
connection and closes it before returning, so the repository can be
shared between request threads without extra locking.  Any
``sqlite3.Error`` is re-raised as ``StorageError``; a write that
matches no row raises ``BookNotFoundError`` instead so callers can
tell the two apart.
"""

from __future__ import annotations

import logging
import sqlite3
from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import Iterator, List

from book_catalog_api.app.core.db import get_connection
from book_catalog_api.app.core.exceptions import BookNotFoundError, StorageError
from book_catalog_api.app.schemas.book import BookBase, BookRead

logger = logging.getLogger(__name__)


class BookRepository(ABC):
    """Storage operations for books."""

    @abstractmethod
    def list_all(self) -> List[BookRead]:
        """Return every stored book in insertion order."""

    @abstractmethod
    def get(self, book_id: int) -> BookRead:
        """Return the book with ``book_id`` or raise ``BookNotFoundError``."""

    @abstractmethod
    def create(self, draft: BookBase) -> BookRead:
        """Persist ``draft`` and return it with its assigned id."""

    @abstractmethod
    def update(self, book_id: int, draft: BookBase) -> BookRead:
        """Overwrite title and author of ``book_id``.

        Raises ``BookNotFoundError`` if no row was affected.
        """

    @abstractmethod
    def delete(self, book_id: int) -> None:
        """Remove ``book_id`` permanently.

        Raises ``BookNotFoundError`` if no row was affected.
        """


class SQLiteBookRepository(BookRepository):
    """``BookRepository`` backed by a SQLite database file."""

    def __init__(self, database_path: str):
        self.database_path = database_path

    @contextmanager
    def _cursor(self) -> Iterator[sqlite3.Cursor]:
        conn = None
        try:
            conn = get_connection(self.database_path)
            yield conn.cursor()
            conn.commit()
        except sqlite3.Error as e:
            logger.exception("Query against %s failed", self.database_path)
            raise StorageError(str(e)) from e
        finally:
            if conn is not None:
                conn.close()

    def list_all(self) -> List[BookRead]:
        with self._cursor() as cursor:
            rows = cursor.execute(
                "SELECT id, title, author FROM books ORDER BY id ASC"
            ).fetchall()
        return [self._row_to_book_read(row) for row in rows]

    def get(self, book_id: int) -> BookRead:
        with self._cursor() as cursor:
            row = cursor.execute(
                "SELECT id, title, author FROM books WHERE id = ?",
                (book_id,),
            ).fetchone()
        if row is None:
            raise BookNotFoundError(book_id)
        return self._row_to_book_read(row)

    def create(self, draft: BookBase) -> BookRead:
        with self._cursor() as cursor:
            cursor.execute(
                "INSERT INTO books (title, author) VALUES (?, ?)",
                (draft.title, draft.author),
            )
            book_id = cursor.lastrowid
        logger.info("Created book %s", book_id)
        return BookRead(id=book_id, title=draft.title, author=draft.author)

    def update(self, book_id: int, draft: BookBase) -> BookRead:
        with self._cursor() as cursor:
            cursor.execute(
                "UPDATE books SET title = ?, author = ? WHERE id = ?",
                (draft.title, draft.author, book_id),
            )
            if cursor.rowcount == 0:
                raise BookNotFoundError(book_id)
        logger.info("Updated book %s", book_id)
        return BookRead(id=book_id, title=draft.title, author=draft.author)

    def delete(self, book_id: int) -> None:
        with self._cursor() as cursor:
            cursor.execute("DELETE FROM books WHERE id = ?", (book_id,))
            if cursor.rowcount == 0:
                raise BookNotFoundError(book_id)
        logger.info("Deleted book %s", book_id)

    @staticmethod
    def _row_to_book_read(row: sqlite3.Row) -> BookRead:
        """Convert a database row to a BookRead schema instance."""
        return BookRead(id=row["id"], title=row["title"], author=row["author"])
