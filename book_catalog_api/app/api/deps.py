"""FastAPI dependency implementations."""

from fastapi import Request

from book_catalog_api.app.services.book_service import BookService


def get_book_service(request: Request) -> BookService:
    """Get the book service built by ``create_app``."""
    return request.app.state.book_service
