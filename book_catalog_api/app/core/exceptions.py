"""
Error types shared by the repository, service and API layers.

Lower layers raise these and never deal with HTTP.  The API layer is
the only place where they are turned into status codes:

* ``BookNotFoundError``   -> 404
* ``BookValidationError`` -> 400
* ``StorageError``        -> 500
"""


class BookCatalogError(Exception):
    """Base class for all book catalog errors."""


class BookNotFoundError(BookCatalogError):
    """No book row matches the requested id."""

    def __init__(self, book_id: int):
        self.book_id = book_id
        super().__init__(f"Book {book_id} not found")


class BookValidationError(BookCatalogError):
    """A draft book violates a business rule (e.g. empty title)."""


class StorageError(BookCatalogError):
    """The database could not be reached or a query failed."""
