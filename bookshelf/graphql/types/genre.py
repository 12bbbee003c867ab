"""
GraphQL Genre Enum

Exposes the Genre enumeration used to constrain book input.
"""

import strawberry

from bookshelf.models import Genre

GenreEnum = strawberry.enum(
    Genre,
    name="Genre",
    description="Genres accepted when creating or updating a book",
)
