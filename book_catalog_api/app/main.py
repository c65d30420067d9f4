"""
Main entrypoint for the Book Catalog API.

This module assembles the FastAPI application: it sets up logging,
builds the repository and service once, registers the error handlers
and includes the versioned routers.  ``create_app`` returns a fully
configured app; an instance built from the environment is created at
import time as ``app`` so it can be served directly, e.g.::

    uvicorn book_catalog_api.app.main:app --reload
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .api.v1.router import router as v1_router
from .core.config import Settings, settings as default_settings
from .core.db import get_database_path, init_db
from .core.exceptions import StorageError
from .core.logging_config import setup_logging
from .repositories.book_repository import SQLiteBookRepository
from .services.book_service import BookService

logger = logging.getLogger(__name__)

ENDPOINTS = [
    ("GET", "/books", "List all books"),
    ("POST", "/books", "Create a new book"),
    ("GET", "/books/{id}", "Get a single book"),
    ("PUT", "/books/{id}", "Update a book"),
    ("DELETE", "/books/{id}", "Delete a book"),
]


async def validation_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Answer unparseable bodies and path parameters with 400."""
    errors = exc.errors() if isinstance(exc, RequestValidationError) else []
    logger.warning(
        "Malformed request %s %s (%d errors)",
        request.method,
        request.url.path,
        len(errors),
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(errors)},
    )


async def storage_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Answer database failures with 500."""
    logger.error("Storage error on %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Database error"},
    )


def log_endpoints(prefix: str) -> None:
    """Log the route table served by the application.

    Parameters
    ----------
    prefix : str
        Route prefix the book endpoints are mounted under.
    """
    logger.info("Available endpoints:")
    for method, path, description in ENDPOINTS:
        logger.info("  %-7s %-20s %s", method, prefix + path, description)


def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    app_settings : Optional[Settings]
        Settings to build the app from.  Defaults to the module-level
        ``settings`` read from the environment.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    app_settings = app_settings or default_settings
    setup_logging(app_settings)

    database_path = get_database_path(app_settings.database_url)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        init_db(database_path)
        log_endpoints(app_settings.api_prefix)
        yield

    app = FastAPI(
        title=app_settings.project_name,
        version=app_settings.api_version,
        debug=app_settings.debug,
        lifespan=lifespan,
    )

    # The only process-wide resources; handlers reach them through
    # ``api.deps``.
    app.state.settings = app_settings
    app.state.book_service = BookService(SQLiteBookRepository(database_path))

    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StorageError, storage_exception_handler)

    app.include_router(v1_router, prefix=app_settings.api_prefix)

    @app.get("/health", tags=["health"])
    def health_check() -> dict:
        return {"status": "ok"}

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
