"""
FastAPI Dependencies Module

Dependencies are reusable components injected into route handlers and the
GraphQL context getter. FastAPI's Depends() function manages their lifecycle.

The repository is created once per process (in the application lifespan,
or passed to create_app() directly) and stored on `app.state`. Tests swap
it by building the app with an in-memory repository or through
`app.dependency_overrides[get_repository]`.
"""

from typing import Annotated

from fastapi import Depends, Request

from bookshelf.repositories import LibraryRepository


def get_repository(request: Request) -> LibraryRepository:
    """
    Return the repository attached to the running application.

    Raises:
        RuntimeError: If the application has not finished starting up
    """
    repository = getattr(request.app.state, "repository", None)
    if repository is None:
        raise RuntimeError("Repository is not initialised")
    return repository


Repository = Annotated[LibraryRepository, Depends(get_repository)]
