"""Core data models for the navigation directory."""

from .catalog import (
    DEFAULT_GROUP_ORDER,
    GroupDefinition,
    ItemRecommendation,
    NavGroup,
    NavItem,
    SearchFilters,
    TagSummary,
)
from .site import SiteConfig

__all__ = [
    "DEFAULT_GROUP_ORDER",
    "GroupDefinition",
    "ItemRecommendation",
    "NavGroup",
    "NavItem",
    "SearchFilters",
    "TagSummary",
    "SiteConfig",
]
