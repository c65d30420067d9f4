"""
Service layer abstraction.

Services encapsulate the business rules for a domain and delegate
storage to a repository passed in at construction time.  API handlers
talk to services only.
"""

from .book_service import BookService

__all__ = ["BookService"]
