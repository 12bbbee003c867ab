"""
Database Configuration Module

This module sets up the pymongo client for the Bookshelf API.

Connection Lifecycle
====================
One MongoClient is created when the application starts (see the lifespan
in bookshelf.main) and closed when it stops. MongoClient is thread-safe and
keeps its own connection pool, so every request shares the same client
through the repository stored on `app.state`.

MongoClient connects lazily: constructing it never blocks. The first real
operation (index creation at startup) is what reaches the server, bounded
by `mongodb_timeout_ms`.
"""

import logging

from pymongo import MongoClient

from bookshelf.config import Settings
from bookshelf.repositories.mongo import MongoLibraryRepository

logger = logging.getLogger(__name__)


def create_mongo_client(settings: Settings) -> MongoClient:
    """
    Create a MongoClient from application settings.

    Args:
        settings: Application settings holding the connection URL

    Returns:
        A (not yet connected) MongoClient
    """
    return MongoClient(
        settings.mongodb_url,
        serverSelectionTimeoutMS=settings.mongodb_timeout_ms,
    )


def open_repository(client: MongoClient, settings: Settings) -> MongoLibraryRepository:
    """
    Build the Mongo repository and make sure its indexes exist.

    Raises:
        pymongo.errors.PyMongoError: If the server cannot be reached
    """
    repository = MongoLibraryRepository(client[settings.mongodb_database])
    repository.ensure_indexes()
    logger.info(f"Database '{settings.mongodb_database}' is connected")
    return repository


def close_mongo_client(client: MongoClient) -> None:
    """Close the client and its connection pool."""
    client.close()
    logger.info("Database connection closed")
