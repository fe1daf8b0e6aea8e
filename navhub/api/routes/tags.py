# navhub/api/routes/tags.py
"""Tag listing routes."""

from fastapi import APIRouter

from ..dependencies import CatalogDep
from ..schemas import TagSummaryResponse


router = APIRouter()


@router.get("", response_model=list[str])
async def list_tags(catalog: CatalogDep):
    """Get every distinct tag in locale order."""
    return catalog.get_all_tags()


@router.get("/summary", response_model=list[TagSummaryResponse])
async def tag_summaries(catalog: CatalogDep):
    """Get tag usage counts, most used first."""
    return [TagSummaryResponse.from_summary(s) for s in catalog.get_tag_summaries()]
