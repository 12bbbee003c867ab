"""
GraphQL Mutation Resolvers

Defines all write operations (mutations) for the GraphQL API.

Every failure is raised as an exception, so it reaches the client in the
`errors` array of the response with an `extensions.code`:

    NOT_FOUND        the record to update or remove does not exist
    DUPLICATE_NAME   another book already has this name
    BAD_USER_INPUT   other invalid input
"""

import logging

import strawberry
from strawberry.types import Info

from bookshelf.graphql.context import GraphQLContext
from bookshelf.graphql.types.author import AuthorType, author_to_graphql
from bookshelf.graphql.types.book import BookType, book_to_graphql
from bookshelf.graphql.types.genre import GenreEnum
from bookshelf.repositories import DuplicateBookNameError

logger = logging.getLogger(__name__)


# =============================================================================
# Error classes for GraphQL
# =============================================================================


class BookshelfError(Exception):
    """
    Base class for errors reported to GraphQL clients.

    `extensions` is picked up by graphql-core and serialized next to the
    error message.
    """

    code = "INTERNAL_SERVER_ERROR"

    def __init__(self, message: str):
        super().__init__(message)
        self.extensions = {"code": self.code}


class NotFoundError(BookshelfError):
    """Raised when a requested resource is not found."""

    code = "NOT_FOUND"


class ValidationError(BookshelfError):
    """Raised when input validation fails."""

    code = "BAD_USER_INPUT"


class DuplicateNameError(ValidationError):
    """Raised when a book name is already taken."""

    code = "DUPLICATE_NAME"


# =============================================================================
# Mutation Type
# =============================================================================


@strawberry.type
class Mutation:
    """
    GraphQL Mutation type containing all write operations.

    Updates replace every editable field; there are no partial updates.
    """

    # =========================================================================
    # Book Mutations
    # =========================================================================

    @strawberry.mutation(description="Create a new book")
    def add_book(
        self,
        info: Info[GraphQLContext, None],
        name: str,
        genre: GenreEnum,
        author_id: strawberry.ID,
    ) -> BookType:
        """
        Create a new book.

        When `enforce_author_reference` is on, `author_id` must identify an
        existing author.
        """
        repository = info.context.repository

        if info.context.settings.enforce_author_reference:
            if repository.get_author(author_id) is None:
                raise NotFoundError(f"Author with ID {author_id} not found")

        try:
            book = repository.create_book(name=name, genre=genre.value, author_id=author_id)
        except DuplicateBookNameError as exc:
            raise DuplicateNameError(str(exc)) from exc

        logger.info(f"Created book {book.id} ({book.name!r})")
        return book_to_graphql(book)

    @strawberry.mutation(description="Replace the name and genre of a book")
    def update_book(
        self,
        info: Info[GraphQLContext, None],
        id: strawberry.ID,
        name: str,
        genre: GenreEnum,
    ) -> BookType:
        """Update an existing book."""
        try:
            book = info.context.repository.update_book(id, name=name, genre=genre.value)
        except DuplicateBookNameError as exc:
            raise DuplicateNameError(str(exc)) from exc

        if book is None:
            raise NotFoundError(f"Book with ID {id} not found")

        logger.info(f"Updated book {book.id}")
        return book_to_graphql(book)

    @strawberry.mutation(description="Delete a book")
    def delete_book(
        self,
        info: Info[GraphQLContext, None],
        id: strawberry.ID,
    ) -> BookType:
        """
        Delete a book.

        Returns the deleted book.
        """
        book = info.context.repository.delete_book(id)

        if book is None:
            raise NotFoundError(f"Book with ID {id} not found")

        logger.info(f"Deleted book {book.id}")
        return book_to_graphql(book)

    # =========================================================================
    # Author Mutations
    # =========================================================================

    @strawberry.mutation(description="Create a new author")
    def add_author(
        self,
        info: Info[GraphQLContext, None],
        name: str,
        age: int | None = None,
    ) -> AuthorType:
        """Create a new author."""
        author = info.context.repository.create_author(name=name, age=age)

        logger.info(f"Created author {author.id} ({author.name!r})")
        return author_to_graphql(author)

    @strawberry.mutation(description="Replace the name and age of an author")
    def update_author(
        self,
        info: Info[GraphQLContext, None],
        id: strawberry.ID,
        name: str,
        age: int,
    ) -> AuthorType:
        """Update an existing author."""
        author = info.context.repository.update_author(id, name=name, age=age)

        if author is None:
            raise NotFoundError(f"Author with ID {id} not found")

        logger.info(f"Updated author {author.id}")
        return author_to_graphql(author)

    @strawberry.mutation(description="Remove an author (their books are kept)")
    def remove_author(
        self,
        info: Info[GraphQLContext, None],
        id: strawberry.ID,
    ) -> AuthorType:
        """
        Remove an author.

        Books referencing the author keep their authorId; their `author`
        field resolves to null afterwards.
        """
        author = info.context.repository.delete_author(id)

        if author is None:
            raise NotFoundError(f"Author with ID {id} not found")

        logger.info(f"Removed author {author.id}")
        return author_to_graphql(author)
