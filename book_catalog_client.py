"""Book catalog API client.

This module defines a simple client wrapper around the REST API served
by ``book_catalog_api``.  The client uses the ``requests`` library
internally to make HTTP calls and exposes one method per operation:

* :meth:`list_books` – return every book in the catalog.
* :meth:`get_book` – fetch a single book by its identifier.
* :meth:`create_book` – add a new book.
* :meth:`update_book` – replace the title and author of a book.
* :meth:`delete_book` – remove a book.

Every method returns a ``(data, error)`` tuple.  On success ``error``
is ``None``; on failure ``data`` is empty and ``error`` is a dictionary
with the keys ``status_code`` and ``message``.  ``status_code`` is
``None`` when the server could not be reached at all.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

BOOKS_PATH = "/books"


class BookCatalogClient:
    """Client for interacting with the book catalog API."""

    def __init__(
        self,
        *,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL for the API, e.g. ``http://localhost:8080``.
                Include the route prefix if the server uses one.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Seconds to wait for each response.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Dict[str, Any]]]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PUT``, ``DELETE``).
            path: Path relative to :attr:`base_url` (e.g. ``/books``).
            json_body: JSON body to send with the request (for POST/PUT).
        Returns:
            A tuple ``(data, error)``. ``data`` contains the parsed JSON
            response on success (``None`` for empty bodies) and ``error``
            is ``None``. On failure, ``data`` is ``None`` and ``error``
            describes the issue.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                json=json_body,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    detail = err_json.get("detail") if isinstance(err_json, dict) else None
                    message = detail if isinstance(detail, str) else str(detail or err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    # ------------------------------------------------------------------
    # Book operations
    # ------------------------------------------------------------------
    def list_books(self) -> Tuple[List[Dict[str, Any]], Optional[Dict[str, Any]]]:
        """Retrieve all books.

        Returns:
            A tuple ``(books, error)``. ``books`` is empty on failure.
        """
        data, error = self._request("GET", BOOKS_PATH)
        if error:
            return [], error
        return data if isinstance(data, list) else [], None

    def get_book(self, book_id: int) -> Tuple[Optional[Dict[str, Any]], Optional[Dict[str, Any]]]:
        """Retrieve a single book by ID."""
        return self._request("GET", f"{BOOKS_PATH}/{book_id}")

    def create_book(
        self, title: str, author: str
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Dict[str, Any]]]:
        """Create a book and return it with its assigned ``id``."""
        return self._request(
            "POST", BOOKS_PATH, json_body={"title": title, "author": author}
        )

    def update_book(
        self, book_id: int, title: str, author: str
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Dict[str, Any]]]:
        """Replace the title and author of book ``book_id``."""
        return self._request(
            "PUT", f"{BOOKS_PATH}/{book_id}", json_body={"title": title, "author": author}
        )

    def delete_book(self, book_id: int) -> Tuple[bool, Optional[Dict[str, Any]]]:
        """Delete a book.

        Returns:
            A tuple ``(success, error)``.
        """
        _, error = self._request("DELETE", f"{BOOKS_PATH}/{book_id}")
        if error:
            return False, error
        return True, None
