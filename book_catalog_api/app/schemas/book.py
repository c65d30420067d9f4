"""
Pydantic models for book data.

``BookBase`` holds the fields a client supplies.  ``BookCreate`` and
``BookUpdate`` are the drafts accepted on POST and PUT; ``BookRead``
adds the store-assigned ``id`` for responses.

Only the shape is checked here.  The rule that a title must not be
empty belongs to ``BookService`` so that every caller of the service
gets it, not just HTTP clients.
"""

from pydantic import BaseModel, Field


class BookBase(BaseModel):
    title: str = Field(..., examples=["Dune"])
    author: str = Field(..., examples=["Frank Herbert"])


class BookCreate(BookBase):
    """Schema for creating a book."""
    pass


class BookUpdate(BookBase):
    """Schema for replacing the title and author of an existing book."""
    pass


class BookRead(BaseModel):
    """Schema for reading a book from the API."""

    id: int
    title: str
    author: str

    model_config = {
        "from_attributes": True,
    }
