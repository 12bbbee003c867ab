"""
GraphQL Context

Provides request context to all GraphQL resolvers:
- The repository used for every read and write
- The application settings (page size, author reference policy)

The context is created fresh for each GraphQL request and passed
to all resolvers via the `info` parameter.
"""

from fastapi import Request
from strawberry.fastapi import BaseContext

from bookshelf.config import Settings, get_settings
from bookshelf.dependencies import Repository
from bookshelf.repositories import LibraryRepository


class GraphQLContext(BaseContext):
    """
    Context object available to all GraphQL resolvers.

    Inherits from Strawberry's BaseContext for proper integration.

    Attributes:
        repository: Data access for books and authors
        settings: Application settings
    """

    def __init__(self, repository: LibraryRepository, settings: Settings):
        super().__init__()
        self.repository = repository
        self.settings = settings


async def get_context(request: Request, repository: Repository) -> GraphQLContext:
    """
    Create GraphQL context for each request.

    Strawberry resolves this function as a FastAPI dependency, so the
    repository comes from `get_repository` (and honours dependency
    overrides).
    """
    settings = getattr(request.app.state, "settings", None) or get_settings()
    return GraphQLContext(repository=repository, settings=settings)
