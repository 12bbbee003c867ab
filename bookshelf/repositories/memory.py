"""
In-Memory Repository

`LibraryRepository` implementation that keeps documents in dictionaries.

Used by the test suite and for running the API without a MongoDB server.
It mirrors the Mongo behaviour that matters to callers:
- identifiers are freshly generated ObjectIds
- book names are unique
- lists come back in insertion order
"""

import threading
from typing import Any

from bson import ObjectId

from bookshelf.models import Author, Book
from bookshelf.repositories.base import (
    DuplicateBookNameError,
    LibraryRepository,
    is_valid_id,
)


class InMemoryLibraryRepository(LibraryRepository):
    """
    Repository holding books and authors in process memory.

    Documents are stored keyed by their hex identifier, in the same shape
    MongoDB would store them, and converted to models on the way out.
    """

    def __init__(self):
        self._books: dict[str, dict[str, Any]] = {}
        self._authors: dict[str, dict[str, Any]] = {}
        self._lock = threading.RLock()

    def _check_unique_name(self, name: str, exclude_id: str | None = None) -> None:
        for book_id, document in self._books.items():
            if document["name"] == name and book_id != exclude_id:
                raise DuplicateBookNameError(name)

    # -------------------------------------------------------------------------
    # Books
    # -------------------------------------------------------------------------
    def get_book(self, book_id: str) -> Book | None:
        if not is_valid_id(book_id):
            return None

        document = self._books.get(book_id)
        return Book.from_document(document) if document else None

    def list_books(self, limit: int, offset: int = 0) -> list[Book]:
        documents = list(self._books.values())[offset:offset + limit]
        return [Book.from_document(document) for document in documents]

    def list_books_by_author(self, author_id: str) -> list[Book]:
        return [
            Book.from_document(document)
            for document in self._books.values()
            if document["authorId"] == author_id
        ]

    def create_book(self, name: str, genre: str, author_id: str) -> Book:
        with self._lock:
            self._check_unique_name(name)
            document = {
                "_id": ObjectId(),
                "name": name,
                "genre": genre,
                "authorId": author_id,
            }
            self._books[str(document["_id"])] = document

        return Book.from_document(document)

    def update_book(self, book_id: str, name: str, genre: str) -> Book | None:
        with self._lock:
            document = self._books.get(book_id) if is_valid_id(book_id) else None
            if document is None:
                return None

            self._check_unique_name(name, exclude_id=book_id)
            document.update(name=name, genre=genre)

        return Book.from_document(document)

    def delete_book(self, book_id: str) -> Book | None:
        with self._lock:
            document = self._books.pop(book_id, None)

        return Book.from_document(document) if document else None

    # -------------------------------------------------------------------------
    # Authors
    # -------------------------------------------------------------------------
    def get_author(self, author_id: str) -> Author | None:
        if not is_valid_id(author_id):
            return None

        document = self._authors.get(author_id)
        return Author.from_document(document) if document else None

    def list_authors(self, limit: int, offset: int = 0) -> list[Author]:
        documents = list(self._authors.values())[offset:offset + limit]
        return [Author.from_document(document) for document in documents]

    def create_author(self, name: str, age: int | None = None) -> Author:
        document = {"_id": ObjectId(), "name": name, "age": age}
        with self._lock:
            self._authors[str(document["_id"])] = document

        return Author.from_document(document)

    def update_author(self, author_id: str, name: str, age: int) -> Author | None:
        with self._lock:
            document = self._authors.get(author_id) if is_valid_id(author_id) else None
            if document is None:
                return None

            document.update(name=name, age=age)

        return Author.from_document(document)

    def delete_author(self, author_id: str) -> Author | None:
        with self._lock:
            document = self._authors.pop(author_id, None)

        return Author.from_document(document) if document else None

    # -------------------------------------------------------------------------
    # Health
    # -------------------------------------------------------------------------
    def ping(self) -> bool:
        return True
