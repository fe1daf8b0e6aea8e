# navhub/api/schemas.py
"""API request and response schemas."""

from typing import Optional, List
from pydantic import BaseModel, Field

from ..models.catalog import (
    GroupDefinition,
    ItemRecommendation,
    NavGroup,
    NavItem,
    TagSummary,
)
from ..library.groups import count_group_items


# =============================================================================
# Generic Responses
# =============================================================================


class ErrorResponse(BaseModel):
    """Standard error response."""
    error: str
    detail: Optional[str] = None


class SuccessResponse(BaseModel):
    """Standard success response."""
    success: bool = True
    message: Optional[str] = None


# =============================================================================
# Item Schemas
# =============================================================================


class ItemResponse(BaseModel):
    """One directory entry."""
    id: str
    name: str
    url: str
    icon: Optional[str] = None
    info: Optional[str] = None
    description_ref: Optional[str] = None
    group: str
    tags: List[str] = Field(default_factory=list)

    @classmethod
    def from_item(cls, item: NavItem) -> "ItemResponse":
        return cls(**item.model_dump())


class ItemListResponse(BaseModel):
    """Search results over the aggregated items."""
    items: List[ItemResponse]
    total: int


class RecommendationResponse(BaseModel):
    """A related item and why it was picked."""
    item: ItemResponse
    common_tags: List[str] = Field(default_factory=list)
    is_same_group: bool = False

    @classmethod
    def from_recommendation(cls, rec: ItemRecommendation) -> "RecommendationResponse":
        return cls(
            item=ItemResponse.from_item(rec.item),
            common_tags=list(rec.common_tags),
            is_same_group=rec.is_same_group,
        )


class GroupRefResponse(BaseModel):
    """Id and display name of a group."""
    id: str
    name: str


class ItemDetailResponse(BaseModel):
    """Item with its description body, owning group and related items."""
    item: ItemResponse
    markdown_content: str = ""
    group: Optional[GroupRefResponse] = None
    recommendations: List[RecommendationResponse] = Field(default_factory=list)


# =============================================================================
# Group Schemas
# =============================================================================


class GroupResponse(BaseModel):
    """A group tree node."""
    id: str
    name: str
    description: Optional[str] = None
    icon: Optional[str] = None
    order: Optional[int] = None
    parent_id: Optional[str] = None
    item_count: int = 0
    items: List[ItemResponse] = Field(default_factory=list)
    children: List["GroupResponse"] = Field(default_factory=list)

    @classmethod
    def from_group(cls, group: NavGroup) -> "GroupResponse":
        return cls(
            id=group.id,
            name=group.name,
            description=group.description,
            icon=group.icon,
            order=group.order,
            parent_id=group.parent_id,
            item_count=count_group_items(group),
            items=[ItemResponse.from_item(item) for item in group.items],
            children=[cls.from_group(child) for child in group.children],
        )


class GroupMetadataResponse(BaseModel):
    """Declared group metadata, with the resolved parent."""
    id: str
    name: Optional[str] = None
    description: Optional[str] = None
    icon: Optional[str] = None
    order: Optional[int] = None
    parent_id: Optional[str] = None
    path: str = ""

    @classmethod
    def from_definition(cls, definition: GroupDefinition) -> "GroupMetadataResponse":
        return cls(
            id=definition.id,
            name=definition.name,
            description=definition.description,
            icon=definition.icon,
            order=definition.order,
            parent_id=definition.parent_id,
            path=definition.segment_key,
        )


# =============================================================================
# Tag Schemas
# =============================================================================


class TagSummaryResponse(BaseModel):
    """Tag usage across items."""
    name: str
    count: int
    group_ids: List[str] = Field(default_factory=list)

    @classmethod
    def from_summary(cls, summary: TagSummary) -> "TagSummaryResponse":
        return cls(**summary.model_dump())


# =============================================================================
# Catalog Schemas
# =============================================================================


class RefreshResponse(BaseModel):
    """Result of rebuilding the catalog."""
    success: bool = True
    total_items: int
    total_groups: int
    total_tags: int
