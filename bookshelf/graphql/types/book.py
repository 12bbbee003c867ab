"""
GraphQL Book Type

Defines the Book type for GraphQL queries.
"""

from typing import TYPE_CHECKING, Annotated

import strawberry
from strawberry.types import Info

from bookshelf.graphql.context import GraphQLContext
from bookshelf.models import Book
from bookshelf.repositories import is_valid_id

if TYPE_CHECKING:
    from bookshelf.graphql.types.author import AuthorType


@strawberry.type(name="Book")
class BookType:
    """
    GraphQL type representing a book.

    Maps to the Book document. The author is resolved on demand from
    `author_id`.
    """

    id: strawberry.ID
    name: str
    genre: str | None = None
    author_id: strawberry.ID | None = None

    @strawberry.field(description="Author referenced by authorId, if one exists")
    def author(
        self,
        info: Info[GraphQLContext, None],
    ) -> Annotated["AuthorType", strawberry.lazy("bookshelf.graphql.types.author")] | None:
        """
        Look up the book's author.

        Malformed references yield null instead of an error, as do
        references to authors that have since been removed.
        """
        from bookshelf.graphql.types.author import author_to_graphql

        if not is_valid_id(self.author_id):
            return None

        author = info.context.repository.get_author(self.author_id)
        if author is None:
            return None

        return author_to_graphql(author)


def book_to_graphql(book: Book) -> BookType:
    """Convert a Book document model to GraphQL BookType."""
    return BookType(
        id=strawberry.ID(book.id),
        name=book.name,
        genre=book.genre,
        author_id=strawberry.ID(book.author_id) if book.author_id else None,
    )
