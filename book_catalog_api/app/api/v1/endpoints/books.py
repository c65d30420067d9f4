"""
Book endpoints for API v1.

These routes expose the CRUD API for the book catalog.  Handlers only
translate between HTTP and ``BookService``: a missing book becomes
404 and a rejected draft becomes 400, for reads and writes alike.
Storage failures are left to the application-level handler, which
answers them with 500.  Malformed bodies and non-integer ids are
rejected with 400 before a handler runs, as are ids outside
the 64-bit range SQLite can store.
"""

from typing import Annotated, List

from fastapi import APIRouter, Depends, HTTPException, Path, status

from book_catalog_api.app.api.deps import get_book_service
from book_catalog_api.app.core.exceptions import BookNotFoundError, BookValidationError
from book_catalog_api.app.schemas.book import BookCreate, BookRead, BookUpdate
from book_catalog_api.app.services.book_service import BookService

router = APIRouter()

# SQLite INTEGER is a signed 64-bit value; larger ids cannot be bound.
BookId = Annotated[int, Path(ge=-(2**63), le=2**63 - 1)]


@router.get("", response_model=List[BookRead])
def list_books(service: BookService = Depends(get_book_service)) -> List[BookRead]:
    """Return every book in the catalog."""
    return service.list_books()


@router.post("", response_model=BookRead, status_code=status.HTTP_201_CREATED)
def create_book(
    book_in: BookCreate,
    service: BookService = Depends(get_book_service),
) -> BookRead:
    """Create a new book.

    Returns HTTP 400 if the title is empty.
    """
    try:
        return service.create_book(book_in)
    except BookValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e


@router.get("/{book_id}", response_model=BookRead)
def get_book(book_id: BookId, service: BookService = Depends(get_book_service)) -> BookRead:
    """Retrieve a single book by its ID.

    Returns HTTP 404 if the book is not found.
    """
    try:
        return service.get_book(book_id)
    except BookNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e


@router.put("/{book_id}", response_model=BookRead)
def update_book(
    book_id: BookId,
    book_in: BookUpdate,
    service: BookService = Depends(get_book_service),
) -> BookRead:
    """Replace the title and author of an existing book."""
    try:
        return service.update_book(book_id, book_in)
    except BookValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    except BookNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e


@router.delete("/{book_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_book(book_id: BookId, service: BookService = Depends(get_book_service)) -> None:
    """Delete a book permanently."""
    try:
        service.delete_book(book_id)
    except BookNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    return None
