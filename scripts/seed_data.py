#!/usr/bin/env python3
"""
Database Seed Script

Populates MongoDB with sample authors and books for development.

USAGE:
    # From the project root with the virtualenv activated
    python scripts/seed_data.py

    # Keep existing documents instead of clearing them first
    python scripts/seed_data.py --keep

This script:
1. Connects to the database using app settings
2. Clears the books and authors collections (unless --keep)
3. Creates sample authors, then books referencing them
"""

import argparse
import logging

from bookshelf.config import get_settings
from bookshelf.database import close_mongo_client, create_mongo_client, open_repository
from bookshelf.models import Genre
from bookshelf.repositories import (
    DuplicateBookNameError,
    LibraryRepository,
    MongoLibraryRepository,
)

logger = logging.getLogger("seed_data")

AUTHORS = [
    {"name": "Mg Mg", "age": 26},
    {"name": "Su Su", "age": 27},
    {"name": "Hla Hla", "age": 30},
    {"name": "Mg Ba", "age": 50},
]

# (book name, genre, index of the author in AUTHORS)
BOOKS = [
    ("The river", Genre.FANTASY, 0),
    ("Monkey", Genre.SCI_FI, 0),
    ("Apple Inc", Genre.BIOGRAPHY, 1),
    ("Steve Jobs", Genre.BIOGRAPHY, 2),
]


def clear_data(repository: MongoLibraryRepository) -> None:
    """Remove every book and author document."""
    logger.info("Clearing existing data...")
    repository.books.delete_many({})
    repository.authors.delete_many({})


def seed(repository: LibraryRepository) -> tuple[int, int]:
    """
    Create the sample authors and books.

    Books whose name already exists are skipped.

    Returns:
        Number of authors and books created
    """
    authors = [repository.create_author(**data) for data in AUTHORS]
    logger.info(f"Created {len(authors)} authors")

    created_books = 0
    for name, genre, author_index in BOOKS:
        try:
            repository.create_book(
                name=name,
                genre=genre.value,
                author_id=authors[author_index].id,
            )
        except DuplicateBookNameError:
            logger.warning(f"Skipping '{name}': a book with that name exists")
            continue
        created_books += 1

    logger.info(f"Created {created_books} books")
    return len(authors), created_books


def main() -> None:
    parser = argparse.ArgumentParser(description="Seed the bookshelf database")
    parser.add_argument(
        "--keep",
        action="store_true",
        help="keep existing documents instead of clearing the collections",
    )
    args = parser.parse_args()

    settings = get_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    client = create_mongo_client(settings)
    try:
        repository = open_repository(client, settings)
        if not args.keep:
            clear_data(repository)
        seed(repository)
    finally:
        close_mongo_client(client)


if __name__ == "__main__":
    main()
