# navhub/api/__init__.py
"""REST API for NavHub.

Read-only endpoints over the aggregated catalog:
- Items (search, detail with description body, recommendations)
- Groups (tree, lookup by id or name, declared metadata)
- Tags (distinct tags, usage summaries)
- Site metadata and catalog refresh

Usage:
    from navhub.api import create_app

    app = create_app()
    # Run with: uvicorn navhub.api:app --reload
"""

from .main import create_app, app
from .dependencies import (
    get_config,
    get_config_sync,
    ConfigDep,
    get_catalog,
    CatalogDep,
    cleanup_dependencies,
)
from .errors import APIError
from .schemas import (
    ErrorResponse,
    SuccessResponse,
    ItemResponse,
    ItemListResponse,
    ItemDetailResponse,
    RecommendationResponse,
    GroupRefResponse,
    GroupResponse,
    GroupMetadataResponse,
    TagSummaryResponse,
    RefreshResponse,
)

__all__ = [
    # App
    "create_app",
    "app",
    # Dependencies
    "get_config",
    "get_config_sync",
    "ConfigDep",
    "get_catalog",
    "CatalogDep",
    "cleanup_dependencies",
    # Errors
    "APIError",
    # Schemas
    "ErrorResponse",
    "SuccessResponse",
    "ItemResponse",
    "ItemListResponse",
    "ItemDetailResponse",
    "RecommendationResponse",
    "GroupRefResponse",
    "GroupResponse",
    "GroupMetadataResponse",
    "TagSummaryResponse",
    "RefreshResponse",
]
