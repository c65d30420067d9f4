"""
Persistence layer.

A repository turns book operations into queries against a store.  The
service layer depends on the abstract ``BookRepository`` only, so a
different backend can be plugged in without touching services or
routes.
"""

from .book_repository import BookRepository, SQLiteBookRepository

__all__ = ["BookRepository", "SQLiteBookRepository"]
