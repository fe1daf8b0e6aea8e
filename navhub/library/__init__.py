"""Data aggregation: normalization, group hierarchy and the catalog service."""

from .aggregator import AggregationEngine, DescriptionContentAccessor
from .catalog import NavigationCatalog, load_site_config
from .groups import (
    GroupHierarchyResolver,
    GroupIndex,
    count_group_items,
    find_group_in_tree,
    flatten_group_tree,
)
from .normalizer import normalize_tags
from .writer import dumps_json_record, item_source_path, to_json_record, to_markdown_document

__all__ = [
    "AggregationEngine",
    "DescriptionContentAccessor",
    "NavigationCatalog",
    "load_site_config",
    "GroupHierarchyResolver",
    "GroupIndex",
    "count_group_items",
    "find_group_in_tree",
    "flatten_group_tree",
    "normalize_tags",
    # Source format serializers
    "dumps_json_record",
    "item_source_path",
    "to_json_record",
    "to_markdown_document",
]
