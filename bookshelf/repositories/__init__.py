"""
Repositories Package

Data access objects handed to the GraphQL resolvers.

Usage:
    from bookshelf.repositories import InMemoryLibraryRepository

    repository = InMemoryLibraryRepository()
    author = repository.create_author("Mg Mg", 26)
"""

from bookshelf.repositories.base import (
    DuplicateBookNameError,
    LibraryRepository,
    RepositoryError,
    is_valid_id,
    to_object_id,
)
from bookshelf.repositories.memory import InMemoryLibraryRepository
from bookshelf.repositories.mongo import MongoLibraryRepository

__all__ = [
    "LibraryRepository",
    "MongoLibraryRepository",
    "InMemoryLibraryRepository",
    "RepositoryError",
    "DuplicateBookNameError",
    "is_valid_id",
    "to_object_id",
]
