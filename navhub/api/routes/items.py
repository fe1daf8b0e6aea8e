# navhub/api/routes/items.py
"""Item search, detail and recommendation routes."""

from typing import Optional, List

from fastapi import APIRouter, Query

from ..dependencies import CatalogDep
from ..errors import APIError
from ..schemas import (
    GroupRefResponse,
    ItemDetailResponse,
    ItemListResponse,
    ItemResponse,
    RecommendationResponse,
)
from ...models.catalog import NavItem, SearchFilters
from ...library.catalog import NavigationCatalog


router = APIRouter()


def _require_item(catalog: NavigationCatalog, item_id: str, group: Optional[str]) -> NavItem:
    item = catalog.find_item(item_id, group=group)
    if item is None:
        raise APIError.not_found("Item", item_id)
    return item


# =============================================================================
# Search
# =============================================================================


@router.get("", response_model=ItemListResponse)
async def search_items(
    catalog: CatalogDep,
    query: str = "",
    group: Optional[str] = None,
    tags: List[str] = Query(default=[]),
):
    """Search items by free text, group and tags."""
    filters = SearchFilters(query=query, group=group, tags=tags)
    results = catalog.search(filters=filters)

    return ItemListResponse(
        items=[ItemResponse.from_item(item) for item in results],
        total=len(results),
    )


# =============================================================================
# Detail
# =============================================================================


@router.get("/{item_id}", response_model=ItemDetailResponse)
async def get_item(
    item_id: str,
    catalog: CatalogDep,
    group: Optional[str] = None,
):
    """Get an item with its description body and related items."""
    item = _require_item(catalog, item_id, group)

    owner = catalog.find_group_by_id(item.group)
    group_ref = GroupRefResponse(id=owner.id, name=owner.name) if owner else None

    return ItemDetailResponse(
        item=ItemResponse.from_item(item),
        markdown_content=catalog.load_markdown_content(item),
        group=group_ref,
        recommendations=[
            RecommendationResponse.from_recommendation(rec)
            for rec in catalog.recommend(item)
        ],
    )


@router.get("/{item_id}/recommendations", response_model=list[RecommendationResponse])
async def get_recommendations(
    item_id: str,
    catalog: CatalogDep,
    group: Optional[str] = None,
    limit: Optional[int] = Query(default=None, ge=0, le=100),
):
    """Get items related to an item, best first."""
    item = _require_item(catalog, item_id, group)
    return [
        RecommendationResponse.from_recommendation(rec)
        for rec in catalog.recommend(item, limit=limit)
    ]
