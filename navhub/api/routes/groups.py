# navhub/api/routes/groups.py
"""Group tree routes."""

from fastapi import APIRouter

from ..dependencies import CatalogDep
from ..errors import APIError
from ..schemas import GroupMetadataResponse, GroupResponse


router = APIRouter()


@router.get("", response_model=list[GroupResponse])
async def list_groups(catalog: CatalogDep):
    """Get the sorted group tree."""
    return [GroupResponse.from_group(group) for group in catalog.load_groups()]


@router.get("/{ref}", response_model=GroupResponse)
async def get_group(ref: str, catalog: CatalogDep):
    """Get one group subtree by id or display name."""
    group = catalog.find_group(ref)
    if group is None:
        raise APIError.not_found("Group", ref)
    return GroupResponse.from_group(group)


@router.get("/{group_id}/metadata", response_model=GroupMetadataResponse)
async def get_group_metadata(group_id: str, catalog: CatalogDep):
    """Get the declared metadata of a group."""
    definition = catalog.load_group_metadata(group_id)
    if definition is None:
        raise APIError.not_found("Group metadata", group_id)
    return GroupMetadataResponse.from_definition(definition)
