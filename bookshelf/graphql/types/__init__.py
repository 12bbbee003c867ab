"""
GraphQL Types Package

This package contains all GraphQL type definitions that map to the
document models. Types are defined using Strawberry's decorator syntax.

Types defined here:
- BookType: Book with its author resolved on demand
- AuthorType: Author with their books
- AuthorPage: One page of authors with a has-more flag
- GenreEnum: Closed set of genres accepted on input
"""

from bookshelf.graphql.types.author import AuthorPage, AuthorType, author_to_graphql
from bookshelf.graphql.types.book import BookType, book_to_graphql
from bookshelf.graphql.types.genre import GenreEnum

__all__ = [
    "BookType",
    "book_to_graphql",
    "AuthorType",
    "AuthorPage",
    "author_to_graphql",
    "GenreEnum",
]
