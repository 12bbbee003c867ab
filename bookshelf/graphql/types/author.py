"""
GraphQL Author Type

Defines the Author type and its paginated page type.
"""

import strawberry
from strawberry.types import Info

from bookshelf.graphql.context import GraphQLContext
from bookshelf.graphql.types.book import BookType, book_to_graphql
from bookshelf.models import Author


@strawberry.type(name="Author")
class AuthorType:
    """
    GraphQL type representing a book author.

    Maps to the Author document.
    """

    id: strawberry.ID
    name: str
    age: int | None = None

    @strawberry.field(description="Books whose authorId matches this author")
    def books(self, info: Info[GraphQLContext, None]) -> list[BookType]:
        """Get every book written by this author."""
        books = info.context.repository.list_books_by_author(self.id)
        return [book_to_graphql(b) for b in books]


@strawberry.type(name="AuthorPage")
class AuthorPage:
    """
    One page of authors.

    `has_more` tells clients whether requesting the next page would
    return anything.
    """

    items: list[AuthorType]
    page: int
    per_page: int
    has_more: bool


def author_to_graphql(author: Author) -> AuthorType:
    """Convert an Author document model to GraphQL AuthorType."""
    return AuthorType(
        id=strawberry.ID(author.id),
        name=author.name,
        age=author.age,
    )
