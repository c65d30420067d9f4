"""API tests for the /books endpoints.

Runs the full pipeline (route -> service -> repository -> SQLite) and
checks the status code mapping for every failure category.
"""

from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from book_catalog_api.app.core.config import Settings
from book_catalog_api.app.core.exceptions import StorageError
from book_catalog_api.app.main import create_app
from book_catalog_api.app.repositories.book_repository import BookRepository
from book_catalog_api.app.services.book_service import BookService


def _create(client, title="Dune", author="Herbert"):
    response = client.post("/books", json={"title": title, "author": author})
    assert response.status_code == 201
    return response.json()


class TestCollectionRoute:
    def test_list_empty(self, client):
        response = client.get("/books")

        assert response.status_code == 200
        assert response.json() == []

    def test_post_creates_book(self, client):
        response = client.post("/books", json={"title": "Dune", "author": "Herbert"})

        assert response.status_code == 201
        assert response.json() == {"id": 1, "title": "Dune", "author": "Herbert"}

    def test_list_returns_created_books(self, client):
        _create(client, "Dune", "Herbert")
        _create(client, "Emma", "Austen")

        response = client.get("/books")

        assert response.status_code == 200
        assert response.json() == [
            {"id": 1, "title": "Dune", "author": "Herbert"},
            {"id": 2, "title": "Emma", "author": "Austen"},
        ]

    def test_post_empty_title_returns_400(self, client):
        response = client.post("/books", json={"title": "", "author": "X"})

        assert response.status_code == 400
        assert response.json()["detail"] == "Title is required"
        assert client.get("/books").json() == []

    @pytest.mark.parametrize(
        "body",
        [
            {"author": "X"},
            {"title": "Dune"},
            {"title": 42, "author": "X"},
            ["Dune", "Herbert"],
        ],
    )
    def test_post_malformed_body_returns_400(self, client, body):
        response = client.post("/books", json=body)

        assert response.status_code == 400
        assert client.get("/books").json() == []

    def test_post_invalid_json_returns_400(self, client):
        response = client.post(
            "/books",
            content=b"{not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400

    @pytest.mark.parametrize("method", ["put", "delete", "patch"])
    def test_other_methods_return_405(self, client, method):
        response = client.request(method.upper(), "/books")

        assert response.status_code == 405


class TestItemRoute:
    def test_get_existing_book(self, client):
        created = _create(client)

        response = client.get(f"/books/{created['id']}")

        assert response.status_code == 200
        assert response.json() == created

    def test_get_missing_book_returns_404(self, client):
        response = client.get("/books/999")

        assert response.status_code == 404

    @pytest.mark.parametrize("book_id", ["abc", "1.5", "one"])
    def test_get_non_numeric_id_returns_400(self, client, book_id):
        response = client.get(f"/books/{book_id}")

        assert response.status_code == 400

    @pytest.mark.parametrize(
        "book_id", ["99999999999999999999", str(2**63), str(-(2**63) - 1)]
    )
    @pytest.mark.parametrize("method", ["GET", "PUT", "DELETE"])
    def test_id_outside_sqlite_range_returns_400(self, client, method, book_id):
        response = client.request(
            method, f"/books/{book_id}", json={"title": "T", "author": "A"}
        )

        assert response.status_code == 400

    def test_largest_sqlite_id_is_accepted_and_missing(self, client):
        response = client.get(f"/books/{2**63 - 1}")

        assert response.status_code == 404

    def test_put_updates_book(self, client):
        created = _create(client)

        response = client.put(
            f"/books/{created['id']}", json={"title": "Dune Messiah", "author": "Herbert"}
        )

        assert response.status_code == 200
        assert response.json() == {"id": created["id"], "title": "Dune Messiah", "author": "Herbert"}
        assert client.get(f"/books/{created['id']}").json()["title"] == "Dune Messiah"

    def test_put_empty_title_returns_400(self, client):
        created = _create(client)

        response = client.put(f"/books/{created['id']}", json={"title": "", "author": "X"})

        assert response.status_code == 400
        assert client.get(f"/books/{created['id']}").json() == created

    def test_put_malformed_body_returns_400(self, client):
        created = _create(client)

        response = client.put(f"/books/{created['id']}", json={"title": "Only title"})

        assert response.status_code == 400

    def test_put_invalid_id_returns_400(self, client):
        response = client.put("/books/abc", json={"title": "T", "author": "A"})

        assert response.status_code == 400

    def test_put_missing_book_returns_404(self, client):
        response = client.put("/books/999", json={"title": "T", "author": "A"})

        assert response.status_code == 404
        assert client.get("/books").json() == []

    def test_delete_then_get_returns_404(self, client):
        created = _create(client)

        response = client.delete(f"/books/{created['id']}")

        assert response.status_code == 204
        assert response.content == b""
        assert client.get(f"/books/{created['id']}").status_code == 404

    def test_delete_missing_book_returns_404(self, client):
        response = client.delete("/books/1")

        assert response.status_code == 404

    def test_delete_invalid_id_returns_400(self, client):
        response = client.delete("/books/abc")

        assert response.status_code == 400

    def test_patch_returns_405(self, client):
        created = _create(client)

        response = client.patch(f"/books/{created['id']}", json={"title": "T"})

        assert response.status_code == 405


class TestStorageFailures:
    @pytest.fixture
    def failing_client(self, test_settings):
        app = create_app(test_settings)
        repository = MagicMock(spec=BookRepository)
        for name in ["list_all", "get", "create", "update", "delete"]:
            getattr(repository, name).side_effect = StorageError("database is locked")
        app.state.book_service = BookService(repository)
        with TestClient(app) as test_client:
            yield test_client

    def test_list_storage_error_returns_500(self, failing_client):
        response = failing_client.get("/books")

        assert response.status_code == 500
        assert response.json() == {"detail": "Database error"}

    def test_create_storage_error_returns_500(self, failing_client):
        response = failing_client.post("/books", json={"title": "Dune", "author": "H"})

        assert response.status_code == 500

    def test_update_storage_error_returns_500(self, failing_client):
        response = failing_client.put("/books/1", json={"title": "Dune", "author": "H"})

        assert response.status_code == 500

    def test_delete_storage_error_returns_500(self, failing_client):
        response = failing_client.delete("/books/1")

        assert response.status_code == 500


class TestApiPrefix:
    def test_routes_mount_under_prefix(self, tmp_path):
        settings = Settings(database_url=str(tmp_path / "prefixed.db"), api_prefix="/api/v1")

        with TestClient(create_app(settings)) as client:
            created = client.post("/api/v1/books", json={"title": "Dune", "author": "H"})
            missing = client.get("/books")

        assert created.status_code == 201
        assert missing.status_code == 404


def test_health_check(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}
