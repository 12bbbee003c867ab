"""
GraphQL Package

This package provides the GraphQL API using Strawberry GraphQL.

Features:
- Book and Author object types with relationship resolvers
- Genre enum constraining book input
- Query resolvers for single records, lists and pages
- Mutation resolvers for create/update/delete
- Repository injected through the request context

Usage:
    The GraphQL endpoint is available at /graphql with an
    interactive GraphiQL IDE for introspection.

Example Query:
    query {
        author(id: "65f1c2a9e4b0a1b2c3d4e5f6") {
            name
            books { name genre }
        }
    }
"""

import strawberry
from strawberry.fastapi import GraphQLRouter

from bookshelf.config import Settings, get_settings
from bookshelf.graphql.context import get_context
from bookshelf.graphql.mutations import Mutation
from bookshelf.graphql.queries import Query

# Create the GraphQL schema
schema = strawberry.Schema(
    query=Query,
    mutation=Mutation,
)


def create_graphql_router(settings: Settings | None = None) -> GraphQLRouter:
    """
    Create the GraphQL router for FastAPI.

    Returns:
        GraphQLRouter configured with schema and context
    """
    settings = settings or get_settings()
    return GraphQLRouter(
        schema,
        context_getter=get_context,
        graphql_ide=settings.graphql_ide_option,
    )


__all__ = ["schema", "create_graphql_router"]
