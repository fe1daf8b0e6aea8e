# navhub/api/routes/catalog.py
"""Site metadata and catalog maintenance routes."""

import logging

from fastapi import APIRouter

from ..dependencies import CatalogDep
from ..schemas import RefreshResponse
from ...library.groups import flatten_group_tree
from ...models.site import SiteConfig

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/site", response_model=SiteConfig)
async def get_site(catalog: CatalogDep):
    """Get site display metadata."""
    return catalog.site


@router.post("/catalog/refresh", response_model=RefreshResponse)
async def refresh_catalog(catalog: CatalogDep):
    """Re-scan the data directory and rebuild every cache."""
    await catalog.rescan()
    logger.info("Catalog refresh requested via API")

    return RefreshResponse(
        total_items=len(catalog.load_all_items()),
        total_groups=len(flatten_group_tree(catalog.load_groups())),
        total_tags=len(catalog.get_all_tags()),
    )
