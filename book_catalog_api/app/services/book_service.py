"""
Business logic for books.

``BookService`` validates drafts before handing them to the repository
and otherwise passes calls straight through.  It keeps no state between
calls.  ``BookNotFoundError`` and ``StorageError`` raised by the
repository propagate unchanged.
"""

import logging
from typing import List

from ..core.exceptions import BookValidationError
from ..repositories.book_repository import BookRepository
from ..schemas.book import BookBase, BookRead

logger = logging.getLogger(__name__)


class BookService:
    """Validation facade over a ``BookRepository``."""

    def __init__(self, repository: BookRepository):
        self.repository = repository

    def list_books(self) -> List[BookRead]:
        return self.repository.list_all()

    def get_book(self, book_id: int) -> BookRead:
        return self.repository.get(book_id)

    def create_book(self, draft: BookBase) -> BookRead:
        """Validate ``draft`` and persist it.

        Raises ``BookValidationError`` when the title is empty; nothing
        is written in that case.
        """
        self._validate(draft)
        return self.repository.create(draft)

    def update_book(self, book_id: int, draft: BookBase) -> BookRead:
        """Validate ``draft`` and overwrite book ``book_id`` with it."""
        self._validate(draft)
        return self.repository.update(book_id, draft)

    def delete_book(self, book_id: int) -> None:
        self.repository.delete(book_id)

    @staticmethod
    def _validate(draft: BookBase) -> None:
        # Whitespace-only titles count as empty.
        if not draft.title or not draft.title.strip():
            logger.warning("Rejected book draft without a title")
            raise BookValidationError("Title is required")
