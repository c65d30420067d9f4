"""Pytest configuration and shared fixtures.

This module provides:
- A fresh SQLite database file per test
- Repository and service fixtures wired to that database
- A FastAPI test client for route tests
"""

from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient

from book_catalog_api.app.core.config import Settings
from book_catalog_api.app.core.db import init_db
from book_catalog_api.app.main import create_app
from book_catalog_api.app.repositories.book_repository import SQLiteBookRepository
from book_catalog_api.app.services.book_service import BookService


@pytest.fixture
def database_path(tmp_path) -> str:
    """Path to an initialised, empty database."""
    path = str(tmp_path / "books.db")
    init_db(path)
    return path


@pytest.fixture
def repository(database_path) -> SQLiteBookRepository:
    return SQLiteBookRepository(database_path)


@pytest.fixture
def service(repository) -> BookService:
    return BookService(repository)


@pytest.fixture
def test_settings(tmp_path) -> Settings:
    """Settings pointing at a database inside the test's tmp dir."""
    return Settings(database_url=str(tmp_path / "api.db"), api_prefix="")


@pytest.fixture
def client(test_settings) -> Iterator[TestClient]:
    """Test client; entering it runs the startup that creates the table."""
    app = create_app(test_settings)
    with TestClient(app) as test_client:
        yield test_client
