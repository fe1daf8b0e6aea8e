# navhub/api/dependencies.py
"""FastAPI dependency injection."""

import logging
from functools import lru_cache
from typing import Annotated, Optional
import anyio

from fastapi import Depends

from ..config import Config, load_config
from ..library.catalog import NavigationCatalog
from .errors import APIError

logger = logging.getLogger(__name__)


# =============================================================================
# Configuration
# =============================================================================


@lru_cache()
def get_config_sync() -> Config:
    """Get configuration synchronously (cached).

    Note: uses async AnyIO filesystem operations under the hood.
    """
    return anyio.run(load_config)


_config: Optional[Config] = None
_config_lock: Optional[anyio.Lock] = None


def _get_config_lock() -> anyio.Lock:
    """Get or create the config lock (lazy initialization)."""
    global _config_lock
    if _config_lock is None:
        _config_lock = anyio.Lock()
    return _config_lock


async def get_config() -> Config:
    """Get configuration (async, cached)."""
    global _config

    if _config is None:
        async with _get_config_lock():
            if _config is None:
                _config = await load_config()

    return _config


ConfigDep = Annotated[Config, Depends(get_config)]


# =============================================================================
# Catalog
# =============================================================================


_catalog: Optional[NavigationCatalog] = None
_catalog_lock: Optional[anyio.Lock] = None


def _get_catalog_lock() -> anyio.Lock:
    """Get or create the catalog lock (lazy initialization)."""
    global _catalog_lock
    if _catalog_lock is None:
        _catalog_lock = anyio.Lock()
    return _catalog_lock


async def get_catalog(config: ConfigDep) -> NavigationCatalog:
    """Get or create the catalog singleton (scans the data directory once)."""
    global _catalog

    if _catalog is None:
        async with _get_catalog_lock():
            if _catalog is None:
                try:
                    catalog = await NavigationCatalog.from_config(config)
                except OSError as e:
                    logger.exception("Failed to scan data directory %s", config.data_path)
                    raise APIError.service_unavailable(
                        f"Catalog unavailable: {e}"
                    ) from e
                _catalog = catalog

    return _catalog


CatalogDep = Annotated[NavigationCatalog, Depends(get_catalog)]


# =============================================================================
# Cleanup on shutdown
# =============================================================================


async def cleanup_dependencies():
    """Reset singleton instances on shutdown."""
    global _config, _config_lock
    global _catalog, _catalog_lock

    _config = None
    _config_lock = None

    _catalog = None
    _catalog_lock = None
