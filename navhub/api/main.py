# navhub/api/main.py
"""FastAPI application entry point."""

import logging
import uuid
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware

from .. import __version__
from .dependencies import get_config_sync, cleanup_dependencies
from .routes import items, groups, tags, catalog

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan manager."""
    # Startup
    yield
    # Shutdown
    await cleanup_dependencies()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance with routes, middleware, and error handlers.
    """
    config = get_config_sync()

    app = FastAPI(
        title="NavHub API",
        description="Read-only JSON API over the navigation directory",
        version=__version__,
        lifespan=lifespan,
        debug=config.api.debug,
    )

    # Global Exception Handler
    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        error_id = str(uuid.uuid4())[:8]
        logger.exception("Unhandled exception [%s]: %s", error_id, exc)
        return JSONResponse(
            status_code=500,
            content={"error": "Internal Server Error", "error_id": error_id},
        )

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.api.cors_origins,
        allow_credentials=True,
        allow_methods=config.api.cors_methods,
        allow_headers=config.api.cors_headers,
    )

    # Include routers
    app.include_router(items.router, prefix="/api/items", tags=["items"])
    app.include_router(groups.router, prefix="/api/groups", tags=["groups"])
    app.include_router(tags.router, prefix="/api/tags", tags=["tags"])
    app.include_router(catalog.router, prefix="/api", tags=["catalog"])

    @app.get("/health", tags=["health"])
    async def health_check():
        """Health check endpoint."""
        return {
            "status": "healthy",
            "version": __version__,
        }

    @app.get("/api", tags=["root"])
    async def api_root():
        """API root endpoint."""
        return {
            "name": "NavHub API",
            "version": __version__,
            "endpoints": {
                "items": "/api/items",
                "groups": "/api/groups",
                "tags": "/api/tags",
                "site": "/api/site",
                "refresh": "/api/catalog/refresh",
                "health": "/health",
            },
        }

    return app


# Default app instance for uvicorn
app = create_app()
