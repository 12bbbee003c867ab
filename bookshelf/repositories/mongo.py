"""
MongoDB Repository

`LibraryRepository` implementation on top of pymongo collections.

Collections:
- books: unique index on `name`
- authors: no secondary indexes

Writes rely on single-document atomic operations
(`find_one_and_update`, `find_one_and_delete`), so the value returned to
the caller is the one the server actually changed.
"""

import logging

from pymongo import ASCENDING, ReturnDocument
from pymongo.collection import Collection
from pymongo.database import Database
from pymongo.errors import DuplicateKeyError, PyMongoError

from bookshelf.models import Author, Book
from bookshelf.repositories.base import (
    DuplicateBookNameError,
    LibraryRepository,
    to_object_id,
)

logger = logging.getLogger(__name__)

BOOKS_COLLECTION = "books"
AUTHORS_COLLECTION = "authors"


class MongoLibraryRepository(LibraryRepository):
    """
    Repository backed by a MongoDB database.

    Usage:
        client = create_mongo_client(settings)
        repository = MongoLibraryRepository(client[settings.mongodb_database])
        repository.ensure_indexes()
    """

    def __init__(self, database: Database):
        self.database = database
        self.books: Collection = database[BOOKS_COLLECTION]
        self.authors: Collection = database[AUTHORS_COLLECTION]

    def ensure_indexes(self) -> None:
        """Create the unique index on book names (no-op if it exists)."""
        index_name = self.books.create_index([("name", ASCENDING)], unique=True)
        logger.info(f"Ensured index {index_name} on {BOOKS_COLLECTION}")

    # -------------------------------------------------------------------------
    # Books
    # -------------------------------------------------------------------------
    def get_book(self, book_id: str) -> Book | None:
        object_id = to_object_id(book_id)
        if object_id is None:
            return None

        document = self.books.find_one({"_id": object_id})
        return Book.from_document(document) if document else None

    def list_books(self, limit: int, offset: int = 0) -> list[Book]:
        cursor = (
            self.books.find()
            .sort("_id", ASCENDING)
            .skip(offset)
            .limit(limit)
        )
        return [Book.from_document(document) for document in cursor]

    def list_books_by_author(self, author_id: str) -> list[Book]:
        cursor = self.books.find({"authorId": author_id}).sort("_id", ASCENDING)
        return [Book.from_document(document) for document in cursor]

    def create_book(self, name: str, genre: str, author_id: str) -> Book:
        document = {"name": name, "genre": genre, "authorId": author_id}

        try:
            result = self.books.insert_one(document)
        except DuplicateKeyError as exc:
            raise DuplicateBookNameError(name) from exc

        return Book.from_document({**document, "_id": result.inserted_id})

    def update_book(self, book_id: str, name: str, genre: str) -> Book | None:
        object_id = to_object_id(book_id)
        if object_id is None:
            return None

        try:
            document = self.books.find_one_and_update(
                {"_id": object_id},
                {"$set": {"name": name, "genre": genre}},
                return_document=ReturnDocument.AFTER,
            )
        except DuplicateKeyError as exc:
            raise DuplicateBookNameError(name) from exc

        return Book.from_document(document) if document else None

    def delete_book(self, book_id: str) -> Book | None:
        object_id = to_object_id(book_id)
        if object_id is None:
            return None

        document = self.books.find_one_and_delete({"_id": object_id})
        return Book.from_document(document) if document else None

    # -------------------------------------------------------------------------
    # Authors
    # -------------------------------------------------------------------------
    def get_author(self, author_id: str) -> Author | None:
        object_id = to_object_id(author_id)
        if object_id is None:
            return None

        document = self.authors.find_one({"_id": object_id})
        return Author.from_document(document) if document else None

    def list_authors(self, limit: int, offset: int = 0) -> list[Author]:
        cursor = (
            self.authors.find()
            .sort("_id", ASCENDING)
            .skip(offset)
            .limit(limit)
        )
        return [Author.from_document(document) for document in cursor]

    def create_author(self, name: str, age: int | None = None) -> Author:
        document = {"name": name, "age": age}
        result = self.authors.insert_one(document)
        return Author.from_document({**document, "_id": result.inserted_id})

    def update_author(self, author_id: str, name: str, age: int) -> Author | None:
        object_id = to_object_id(author_id)
        if object_id is None:
            return None

        document = self.authors.find_one_and_update(
            {"_id": object_id},
            {"$set": {"name": name, "age": age}},
            return_document=ReturnDocument.AFTER,
        )
        return Author.from_document(document) if document else None

    def delete_author(self, author_id: str) -> Author | None:
        object_id = to_object_id(author_id)
        if object_id is None:
            return None

        document = self.authors.find_one_and_delete({"_id": object_id})
        return Author.from_document(document) if document else None

    # -------------------------------------------------------------------------
    # Health
    # -------------------------------------------------------------------------
    def ping(self) -> bool:
        try:
            self.database.command("ping")
        except PyMongoError as exc:
            logger.warning(f"MongoDB ping failed: {exc}")
            return False
        return True
