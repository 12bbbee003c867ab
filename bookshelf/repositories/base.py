"""
Repository Interface

Defines the data-access operations the GraphQL resolvers rely on.

Resolvers never talk to the driver directly: they receive a
`LibraryRepository` through the request context. Two implementations exist:

- MongoLibraryRepository: backed by pymongo collections
- InMemoryLibraryRepository: dictionaries in process memory (tests, demos)

Identifier convention:
    Identifiers cross this boundary as 24-character hex strings
    (the textual form of a BSON ObjectId). Strings that are not valid
    ObjectIds never match anything: lookups return None, updates and
    deletes report nothing changed.
"""

from abc import ABC, abstractmethod

from bson import ObjectId

from bookshelf.models import Author, Book


# =============================================================================
# Errors
# =============================================================================


class RepositoryError(Exception):
    """Base class for errors raised by a repository."""

    pass


class DuplicateBookNameError(RepositoryError):
    """Raised when a book would share its name with an existing book."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"A book named '{name}' already exists")


# =============================================================================
# Identifier helpers
# =============================================================================


def is_valid_id(value: str | None) -> bool:
    """Return True if `value` is the hex form of a BSON ObjectId."""
    if not isinstance(value, str):
        return False
    return ObjectId.is_valid(value)


def to_object_id(value: str | None) -> ObjectId | None:
    """Convert a hex identifier to an ObjectId, or None if it is malformed."""
    if not is_valid_id(value):
        return None
    return ObjectId(value)


# =============================================================================
# Repository Interface
# =============================================================================


class LibraryRepository(ABC):
    """
    Data access for books and authors.

    Lists come back in storage order (ascending identifier, which for
    ObjectIds is insertion order). Update and delete methods return None
    when no record matched; callers decide how to report that.
    """

    # -------------------------------------------------------------------------
    # Books
    # -------------------------------------------------------------------------
    @abstractmethod
    def get_book(self, book_id: str) -> Book | None:
        """Fetch a single book by identifier."""

    @abstractmethod
    def list_books(self, limit: int, offset: int = 0) -> list[Book]:
        """Fetch up to `limit` books, skipping the first `offset`."""

    @abstractmethod
    def list_books_by_author(self, author_id: str) -> list[Book]:
        """Fetch every book whose author reference equals `author_id`."""

    @abstractmethod
    def create_book(self, name: str, genre: str, author_id: str) -> Book:
        """
        Insert a new book.

        Raises:
            DuplicateBookNameError: If another book already has this name
        """

    @abstractmethod
    def update_book(self, book_id: str, name: str, genre: str) -> Book | None:
        """
        Replace a book's name and genre.

        Raises:
            DuplicateBookNameError: If another book already has this name
        """

    @abstractmethod
    def delete_book(self, book_id: str) -> Book | None:
        """Remove a book and return it as it was before removal."""

    # -------------------------------------------------------------------------
    # Authors
    # -------------------------------------------------------------------------
    @abstractmethod
    def get_author(self, author_id: str) -> Author | None:
        """Fetch a single author by identifier."""

    @abstractmethod
    def list_authors(self, limit: int, offset: int = 0) -> list[Author]:
        """Fetch up to `limit` authors, skipping the first `offset`."""

    @abstractmethod
    def create_author(self, name: str, age: int | None = None) -> Author:
        """Insert a new author."""

    @abstractmethod
    def update_author(self, author_id: str, name: str, age: int) -> Author | None:
        """Replace an author's name and age."""

    @abstractmethod
    def delete_author(self, author_id: str) -> Author | None:
        """Remove an author. Books referencing the author are left alone."""

    # -------------------------------------------------------------------------
    # Health
    # -------------------------------------------------------------------------
    @abstractmethod
    def ping(self) -> bool:
        """Return True if the backing store is reachable."""
