"""
Bookshelf GraphQL API Package

A GraphQL API for books and their authors, stored in MongoDB.

Package Structure:
- config.py: Application configuration using Pydantic Settings
- database.py: MongoDB client setup and teardown
- main.py: FastAPI application factory and configuration
- dependencies.py: Dependency injection functions
- models/: Document models (Book, Author) and the Genre enum
- repositories/: Data access (MongoDB and in-memory)
- graphql/: Strawberry schema, resolvers and context
"""

__version__ = "0.1.0"
