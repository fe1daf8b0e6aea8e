# navhub/library/aggregator.py
"""
Item aggregation.

Merges JSON item records and Markdown frontmatter records into one
collection keyed by (group, id):

1. JSON records are a fallback layer: the first record for a key wins.
2. Markdown records always overwrite JSON records for the same key.

Malformed records are skipped; nothing propagates to the caller.
"""

import logging
from pathlib import PurePosixPath
from typing import Callable, Dict, List, Optional, Tuple

from ..models.catalog import NavItem
from ..sources.frontmatter import FrontmatterError, split_document, strip_frontmatter
from ..sources.repository import SourceRecord, SourceRepository
from .groups import GroupIndex
from .normalizer import (
    explicit_group,
    normalize_json_item,
    normalize_markdown_item,
    parse_item_file,
)
from .paths import path_segments, split_source_path

logger = logging.getLogger(__name__)

ItemKey = Tuple[str, str]


class AggregationEngine:
    """Build the canonical item collection from a source repository."""

    def __init__(self, source: SourceRepository, groups: GroupIndex):
        self.source = source
        self.groups = groups

    def aggregate(self) -> List[NavItem]:
        """
        Load, normalize and deduplicate every item.

        Returns:
            Items in first-insertion order of their (group, id) key.
        """
        merged: Dict[ItemKey, NavItem] = {}

        json_count = self._merge_json_items(merged)
        markdown_count = self._merge_markdown_items(merged)

        logger.info(
            "Aggregated %d items (%d from JSON, %d from Markdown)",
            len(merged),
            json_count,
            markdown_count,
        )
        return list(merged.values())

    def _merge_json_items(self, merged: Dict[ItemKey, NavItem]) -> int:
        accepted = 0
        for record in self.source.list_item_records():
            segments = path_segments(record.path)
            for raw in parse_item_file(record):
                group = self.groups.resolve_item_group(explicit_group(raw), segments)
                item = normalize_json_item(raw, group)
                if item is None:
                    logger.debug("Dropping incomplete JSON record in %s", record.path)
                    continue
                if item.key in merged:
                    continue
                merged[item.key] = item
                accepted += 1
        return accepted

    def _merge_markdown_items(self, merged: Dict[ItemKey, NavItem]) -> int:
        accepted = 0
        for record in self.source.list_description_bodies():
            item = self._markdown_item(record)
            if item is None:
                continue
            merged[item.key] = item
            accepted += 1
        return accepted

    def _markdown_item(self, record: SourceRecord) -> Optional[NavItem]:
        try:
            metadata, _ = split_document(record.content)
        except FrontmatterError as e:
            logger.warning("Skipping %s: %s", record.path, e)
            return None

        segments, file_id = split_source_path(record.path)
        group = self.groups.resolve_item_group(explicit_group(metadata), segments)
        return normalize_markdown_item(
            metadata,
            file_id=file_id,
            file_name=PurePosixPath(record.path).name,
            group=group,
        )


class DescriptionContentAccessor:
    """Locate and return the long-form description body of an item."""

    def __init__(self, source: SourceRepository, groups: Optional[GroupIndex] = None):
        self.groups = groups or GroupIndex()
        self._bodies: Dict[str, str] = {
            record.path: record.content for record in source.list_description_bodies()
        }

    def load(self, item: NavItem) -> str:
        """
        Return the item's description body without frontmatter.

        Lookup order:
        1. "{group}/{description_ref}".
        2. "{directory}/{description_ref}" for every directory whose metadata
           declares the item's group id (groups renamed by metadata).
        3. Any Markdown path ending with, then containing, the first form.

        Returns:
            The trimmed body, or "" when the item has no description or no
            file matches.
        """
        if not item.description_ref:
            return ""

        ref = item.description_ref.lstrip("/")
        relative = f"{item.group}/{ref}"
        content = self._bodies.get(relative)

        if content is None:
            for key in self.groups.segment_keys_for(item.group):
                content = self._bodies.get(f"{key}/{ref}")
                if content is not None:
                    break
        if content is None:
            content = self._search(lambda path: path.endswith(f"/{relative}"))
        if content is None:
            content = self._search(lambda path: relative in path)

        if content is None:
            return ""
        return strip_frontmatter(content)

    def _search(self, matches: Callable[[str], bool]) -> Optional[str]:
        for path, body in self._bodies.items():
            if matches(path):
                return body
        return None
