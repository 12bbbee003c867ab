"""
pytest Fixtures for Bookshelf API Tests

This file contains shared fixtures used across all test files.

Every test gets a fresh InMemoryLibraryRepository, so no MongoDB server
is needed and tests cannot affect each other. The FastAPI app is built
with create_app(repository=...), which skips the Mongo connection in
the lifespan.
"""

from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient

from bookshelf.config import Settings
from bookshelf.main import create_app
from bookshelf.models import Author, Book
from bookshelf.repositories import InMemoryLibraryRepository

# =============================================================================
# APPLICATION FIXTURES
# =============================================================================


@pytest.fixture
def repository() -> InMemoryLibraryRepository:
    """Empty in-memory repository."""
    return InMemoryLibraryRepository()


@pytest.fixture
def test_settings() -> Settings:
    """Default settings, ignoring any local .env file."""
    return Settings(_env_file=None)


@pytest.fixture
def client(
    repository: InMemoryLibraryRepository,
    test_settings: Settings,
) -> Generator[TestClient, None, None]:
    """
    Create a test client bound to the in-memory repository.

    Using TestClient as a context manager runs the lifespan events.
    """
    app = create_app(app_settings=test_settings, repository=repository)

    with TestClient(app) as test_client:
        yield test_client


# =============================================================================
# SAMPLE DATA FIXTURES
# =============================================================================


@pytest.fixture
def sample_author(repository: InMemoryLibraryRepository) -> Author:
    """Create a sample author for testing."""
    return repository.create_author(name="Mg Mg", age=26)


@pytest.fixture
def sample_book(repository: InMemoryLibraryRepository, sample_author: Author) -> Book:
    """Create a sample book written by sample_author."""
    return repository.create_book(
        name="The river",
        genre="FANTASY",
        author_id=sample_author.id,
    )


@pytest.fixture
def multiple_authors(repository: InMemoryLibraryRepository) -> list[Author]:
    """Create more authors than fit on one page."""
    return [
        repository.create_author(name=f"Author {i + 1}", age=20 + i)
        for i in range(15)
    ]
