"""
Tests for the FastAPI Application

Covers the HTTP plumbing around the GraphQL schema: root and health
endpoints, CORS, the GraphiQL IDE and the MongoDB lifespan.
"""

from unittest.mock import MagicMock, patch

import pytest
from fastapi.testclient import TestClient
from pymongo.errors import ServerSelectionTimeoutError

from bookshelf.config import Settings
from bookshelf.main import create_app
from bookshelf.repositories import InMemoryLibraryRepository, MongoLibraryRepository


def test_root(client: TestClient):
    response = client.get("/")

    assert response.status_code == 200
    data = response.json()
    assert data["graphql"] == "/graphql"
    assert data["health"] == "/health"


def test_health(client: TestClient):
    response = client.get("/health")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert data["database"] == {"connected": True, "name": "playlist"}


def test_health_degraded_when_mongo_unreachable(test_settings: Settings):
    """An unreachable server is reported as degraded rather than an error."""
    database = MagicMock(name="database")
    database.command.side_effect = ServerSelectionTimeoutError("no servers available")
    app = create_app(app_settings=test_settings, repository=MongoLibraryRepository(database))

    with TestClient(app) as client:
        response = client.get("/health")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "degraded"
    assert data["database"]["connected"] is False
    database.command.assert_called_once_with("ping")


def test_cors_allows_any_origin(client: TestClient):
    origin = "http://example.test"
    response = client.post(
        "/graphql",
        json={"query": "{ books { id } }"},
        headers={"Origin": origin},
    )

    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] in ("*", origin)


def test_graphiql_is_served(client: TestClient):
    response = client.get("/graphql", headers={"Accept": "text/html"})

    assert response.status_code == 200
    assert "graphiql" in response.text.lower()


def test_introspection(client: TestClient):
    response = client.post(
        "/graphql",
        json={"query": '{ __type(name: "Genre") { enumValues { name } } }'},
    )

    names = {v["name"] for v in response.json()["data"]["__type"]["enumValues"]}
    assert {"ACTION", "FANTASY", "BIOGRAPHY", "SCI_FI"} <= names


def test_lifespan_opens_and_closes_mongo(test_settings: Settings):
    """Without an injected repository the app connects to MongoDB."""
    mongo_client = MagicMock(name="mongo_client")
    repository = InMemoryLibraryRepository()

    with (
        patch("bookshelf.main.create_mongo_client", return_value=mongo_client) as create_client,
        patch("bookshelf.main.open_repository", return_value=repository) as open_repo,
        patch("bookshelf.main.close_mongo_client") as close_client,
    ):
        app = create_app(app_settings=test_settings)

        with TestClient(app) as client:
            assert app.state.repository is repository
            assert client.get("/health").json()["status"] == "healthy"

        create_client.assert_called_once_with(test_settings)
        open_repo.assert_called_once_with(mongo_client, test_settings)
        close_client.assert_called_once_with(mongo_client)

    assert app.state.repository is None


def test_lifespan_closes_client_when_startup_fails(test_settings: Settings):
    """A failure while opening the repository still closes the client."""
    mongo_client = MagicMock(name="mongo_client")

    with (
        patch("bookshelf.main.create_mongo_client", return_value=mongo_client),
        patch(
            "bookshelf.main.open_repository",
            side_effect=ServerSelectionTimeoutError("no servers available"),
        ),
        patch("bookshelf.main.close_mongo_client") as close_client,
    ):
        app = create_app(app_settings=test_settings)

        with pytest.raises(ServerSelectionTimeoutError):
            with TestClient(app):
                pass

        close_client.assert_called_once_with(mongo_client)

    assert app.state.repository is None
