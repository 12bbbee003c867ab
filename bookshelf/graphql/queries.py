"""
GraphQL Query Resolvers

Defines all read operations (queries) for the GraphQL API.
Each resolver fetches data through the repository held in the context.

Missing records are reported as null, never as errors.
"""

import strawberry
from strawberry.types import Info

from bookshelf.graphql.context import GraphQLContext
from bookshelf.graphql.types.author import AuthorPage, AuthorType, author_to_graphql
from bookshelf.graphql.types.book import BookType, book_to_graphql


def normalize_page(page: int | None) -> int:
    """Absent or negative page numbers mean the first page (0)."""
    if page is None or page < 0:
        return 0
    return page


@strawberry.type
class Query:
    """
    GraphQL Query type containing all read operations.

    All resolvers receive an `info` parameter that contains the
    GraphQL context with the repository and settings.
    """

    @strawberry.field(description="Get a single book by ID")
    def book(self, info: Info[GraphQLContext, None], id: strawberry.ID) -> BookType | None:
        """Get a single book by its ID, or null if it does not exist."""
        book = info.context.repository.get_book(id)

        if book is None:
            return None

        return book_to_graphql(book)

    @strawberry.field(description="Get a single author by ID")
    def author(self, info: Info[GraphQLContext, None], id: strawberry.ID) -> AuthorType | None:
        """Get a single author by its ID, or null if it does not exist."""
        author = info.context.repository.get_author(id)

        if author is None:
            return None

        return author_to_graphql(author)

    @strawberry.field(description="Get every book written by an author")
    def get_books_by_author(
        self,
        info: Info[GraphQLContext, None],
        author_id: strawberry.ID,
    ) -> list[BookType]:
        """
        Get books by author reference.

        Matches `authorId` exactly; an unknown author yields an empty list.
        """
        books = info.context.repository.list_books_by_author(author_id)
        return [book_to_graphql(b) for b in books]

    @strawberry.field(description="Get the first page of books")
    def books(self, info: Info[GraphQLContext, None]) -> list[BookType]:
        """Get books in storage order, capped at the configured page size."""
        page_size = info.context.settings.page_size
        books = info.context.repository.list_books(limit=page_size)
        return [book_to_graphql(b) for b in books]

    @strawberry.field(description="Get a page of authors (page numbers start at 0)")
    def authors(
        self,
        info: Info[GraphQLContext, None],
        page: int | None = 0,
    ) -> list[AuthorType]:
        """
        Get authors with offset pagination.

        Args:
            page: Page number, 0-indexed. Negative or null means 0.

        Returns:
            Up to `page_size` authors starting at `page * page_size`
        """
        page_size = info.context.settings.page_size
        offset = normalize_page(page) * page_size

        authors = info.context.repository.list_authors(limit=page_size, offset=offset)
        return [author_to_graphql(a) for a in authors]

    @strawberry.field(description="Get a page of authors with a has-more flag")
    def author_page(
        self,
        info: Info[GraphQLContext, None],
        page: int | None = 0,
    ) -> AuthorPage:
        """
        Same slice as `authors`, wrapped with paging information.

        One extra record is requested to find out whether a next page exists.
        """
        page = normalize_page(page)
        page_size = info.context.settings.page_size

        authors = info.context.repository.list_authors(
            limit=page_size + 1,
            offset=page * page_size,
        )

        return AuthorPage(
            items=[author_to_graphql(a) for a in authors[:page_size]],
            page=page,
            per_page=page_size,
            has_more=len(authors) > page_size,
        )
