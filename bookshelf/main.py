"""
FastAPI Application Entry Point

This module creates and configures the FastAPI application.

Key Concepts:
=============

1. Application Factory Pattern
   - create_app() returns a configured app
   - A repository can be passed in (tests use the in-memory one);
     otherwise the lifespan connects to MongoDB

2. Lifespan Events
   - startup: open the database connection and ensure indexes
   - shutdown: close the connection

3. Middleware Stack
   - CORS: all origins are allowed by default

4. Exception Handlers
   - Unhandled errors on HTTP routes become a generic 500 response
   - /health reports an unreachable database as "degraded"
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from bookshelf import __version__
from bookshelf.config import Settings, get_settings
from bookshelf.database import close_mongo_client, create_mongo_client, open_repository
from bookshelf.dependencies import Repository
from bookshelf.graphql import create_graphql_router
from bookshelf.repositories import LibraryRepository

# =============================================================================
# Logging Configuration
# =============================================================================
settings = get_settings()

logging.basicConfig(
    level=getattr(logging, settings.log_level),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


# =============================================================================
# Lifespan Events
# =============================================================================
@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan context manager.

    Code before yield runs on startup, code after yield on shutdown.
    The Mongo connection is only opened when no repository was supplied
    to create_app().
    """
    app_settings: Settings = app.state.settings

    # ----- STARTUP -----
    logger.info(f"Starting {app_settings.app_name}...")
    logger.info(f"Debug mode: {app_settings.debug}")

    client = None
    if app.state.repository is None:
        client = create_mongo_client(app_settings)
        try:
            app.state.repository = open_repository(client, app_settings)
        except Exception:
            logger.error("Could not open the MongoDB repository")
            close_mongo_client(client)
            raise
    else:
        logger.info(f"Using {type(app.state.repository).__name__}")

    yield  # Application runs here

    # ----- SHUTDOWN -----
    logger.info(f"Shutting down {app_settings.app_name}...")

    if client is not None:
        close_mongo_client(client)
        app.state.repository = None


# =============================================================================
# Application Factory
# =============================================================================
def create_app(
    app_settings: Settings | None = None,
    repository: LibraryRepository | None = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        app_settings: Settings to use (defaults to the cached settings)
        repository: Data access object; when omitted, MongoDB is used

    Returns:
        Configured FastAPI application instance
    """
    app_settings = app_settings or settings

    app = FastAPI(
        title=app_settings.app_name,
        description="GraphQL API for managing books and their authors.",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = app_settings
    app.state.repository = repository

    # -------------------------------------------------------------------------
    # CORS Middleware
    # -------------------------------------------------------------------------
    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.allowed_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # -------------------------------------------------------------------------
    # Exception Handlers
    # -------------------------------------------------------------------------
    @app.exception_handler(Exception)
    async def general_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """
        Catch-all exception handler.

        In debug mode the error message is returned to the caller.
        """
        logger.error(f"Unhandled error: {exc}", exc_info=True)

        if app_settings.debug:
            return JSONResponse(
                status_code=500,
                content={"detail": str(exc)},
            )

        return JSONResponse(
            status_code=500,
            content={"detail": "An internal error occurred."},
        )

    # -------------------------------------------------------------------------
    # GraphQL Endpoint
    # -------------------------------------------------------------------------
    graphql_router = create_graphql_router(app_settings)
    app.include_router(graphql_router, prefix="/graphql", tags=["GraphQL"])

    # -------------------------------------------------------------------------
    # Health Check Endpoint
    # -------------------------------------------------------------------------
    @app.get(
        "/health",
        tags=["Health"],
        summary="Health check",
        description="Check if the API and its database are reachable.",
    )
    async def health_check(repository: Repository) -> dict:
        """Health check endpoint reporting database connectivity."""
        database_ok = repository.ping()

        return {
            "status": "healthy" if database_ok else "degraded",
            "app": app_settings.app_name,
            "version": __version__,
            "database": {
                "connected": database_ok,
                "name": app_settings.mongodb_database,
            },
            "graphql": {
                "endpoint": "/graphql",
                "ide": app_settings.graphql_ide_option,
            },
        }

    @app.get(
        "/",
        tags=["Root"],
        summary="API root",
        description="Welcome message and API information.",
    )
    async def root() -> dict:
        """Root endpoint with API information."""
        return {
            "message": f"Welcome to {app_settings.app_name}",
            "version": __version__,
            "graphql": "/graphql",
            "health": "/health",
        }

    return app


# =============================================================================
# Application Instance
# =============================================================================
# This is what uvicorn imports: uvicorn bookshelf.main:app

app = create_app()


def run() -> None:
    """Run the development server on the configured host and port."""
    import uvicorn

    uvicorn.run(
        "bookshelf.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )


if __name__ == "__main__":
    run()
