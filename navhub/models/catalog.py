# navhub/models/catalog.py

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


DEFAULT_GROUP_ORDER = 999


class NavItem(BaseModel):
    """
    One directory entry.

    Identity is the (group, id) pair; ids repeat across groups.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    url: str
    icon: Optional[str] = None
    info: Optional[str] = None
    description_ref: Optional[str] = None   # Markdown file holding the long description
    group: str                              # Resolved group id, not the raw path
    tags: list[str] = Field(default_factory=list)

    @property
    def key(self) -> tuple[str, str]:
        return (self.group, self.id)


class GroupDefinition(BaseModel):
    """
    Group metadata as declared in a group metadata file.

    parent_explicit records whether the file carried a parentId key at all;
    an explicit null or empty parent means "root" even when the path implies one.
    """

    id: str
    name: Optional[str] = None
    description: Optional[str] = None
    icon: Optional[str] = None
    order: Optional[int] = None
    parent_id: Optional[str] = None
    parent_explicit: bool = False
    segments: list[str] = Field(default_factory=list)
    source_path: str = ""

    @property
    def segment_key(self) -> str:
        return "/".join(self.segments)


class NavGroup(BaseModel):
    """
    A node in the group tree, carrying its items and child groups.
    """

    id: str
    name: str
    description: Optional[str] = None
    icon: Optional[str] = None
    order: Optional[int] = None
    parent_id: Optional[str] = None
    items: list[NavItem] = Field(default_factory=list)
    children: list["NavGroup"] = Field(default_factory=list)

    @property
    def display_order(self) -> int:
        return self.order if self.order is not None else DEFAULT_GROUP_ORDER


class TagSummary(BaseModel):
    name: str
    count: int
    group_ids: list[str] = Field(default_factory=list)


class SearchFilters(BaseModel):
    query: str = ""
    group: Optional[str] = None
    tags: list[str] = Field(default_factory=list)


class ItemRecommendation(BaseModel):
    item: NavItem
    common_tags: list[str] = Field(default_factory=list)
    is_same_group: bool = False
