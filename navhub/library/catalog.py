# navhub/library/catalog.py
"""
Navigation catalog.

The single context object consumers hold: it owns every derived cache
(items, group definitions, group tree, tags, tag summaries) and answers all
read queries. Caches are populated lazily on first access and are read-only
afterwards; refresh() rebuilds everything from the source and swaps the new
state in with one assignment.
"""

from __future__ import annotations

import json
import logging
import threading
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Sequence

import anyio

from ..config import Config
from ..models.catalog import (
    GroupDefinition,
    ItemRecommendation,
    NavGroup,
    NavItem,
    SearchFilters,
    TagSummary,
)
from ..models.site import SiteConfig
from ..ranking.recommend import RecommendationEngine, RecommendationWeights
from ..search.service import SearchService
from ..search.tags import build_tag_frequency, get_all_tags, get_tag_summaries
from ..sources.repository import FileSystemSource, SourceRepository
from .aggregator import AggregationEngine, DescriptionContentAccessor
from .groups import GroupHierarchyResolver, find_group_in_tree, flatten_group_tree

logger = logging.getLogger(__name__)


class _CatalogState:
    """Caches derived from one source snapshot; None means not built yet."""

    def __init__(self, source: SourceRepository):
        self.source = source
        self.group_index = None
        self.items = None
        self.groups = None
        self.tags = None
        self.tag_summaries = None
        self.tag_frequency = None
        self.descriptions = None


class NavigationCatalog:
    """Aggregated items, group tree, search and recommendations.

    Example:
        ```python
        catalog = await NavigationCatalog.from_directory("./data/groups")
        items = catalog.search(filters=SearchFilters(query="ai"))
        related = catalog.recommend(items[0])
        ```
    """

    def __init__(
        self,
        source: SourceRepository,
        config: Config | None = None,
        site: SiteConfig | None = None,
        origin: FileSystemSource | None = None,
    ):
        self.config = config or Config()
        self.site = site or SiteConfig()
        self.origin = origin
        self.resolver = GroupHierarchyResolver()
        self.search_service = SearchService(cache_size=self.config.search.cache_size)

        rec = self.config.recommendations
        self.recommender = RecommendationEngine(
            RecommendationWeights(
                rare_tag_weight=rec.rare_tag_weight,
                common_tag_weight=rec.common_tag_weight,
                coverage_weight=rec.coverage_weight,
                same_group_bonus=rec.same_group_bonus,
                diversity_penalty=rec.diversity_penalty,
            )
        )

        self._builders: Dict[str, Callable[[_CatalogState], Any]] = {
            "group_index": self._build_group_index,
            "items": self._build_items,
            "groups": self._build_groups,
            "tags": lambda state: get_all_tags(self._get("items", state)),
            "tag_summaries": lambda state: get_tag_summaries(self._get("items", state)),
            "tag_frequency": lambda state: build_tag_frequency(self._get("items", state)),
            "descriptions": lambda state: DescriptionContentAccessor(
                state.source, self._get("group_index", state)
            ),
        }
        self._lock = threading.RLock()
        self._state = _CatalogState(source)

    @classmethod
    async def from_directory(
        cls,
        groups_path: str | Path,
        config: Config | None = None,
        site_path: str | Path | None = None,
    ) -> NavigationCatalog:
        """Scan a data directory once and build a catalog over the snapshot.

        Args:
            groups_path: Root of the group directories.
            config: Settings (defaults if omitted).
            site_path: Optional site config.json.
        """
        config = config or Config()
        origin = FileSystemSource(groups_path, config.library.group_metadata_file)
        source = await origin.snapshot()
        site = await load_site_config(site_path) if site_path else None
        return cls(source, config=config, site=site, origin=origin)

    @classmethod
    async def from_config(cls, config: Config) -> NavigationCatalog:
        return await cls.from_directory(
            config.library.groups_path,
            config=config,
            site_path=config.library.site_path,
        )

    # =========================================================================
    # Cache plumbing
    # =========================================================================

    def _get(self, attr: str, state: _CatalogState | None = None) -> Any:
        if state is None:
            state = self._state

        value = getattr(state, attr)
        if value is not None:
            return value

        with self._lock:
            value = getattr(state, attr)
            if value is None:
                value = self._builders[attr](state)
                setattr(state, attr, value)
        return value

    def refresh(self, source: SourceRepository | None = None) -> None:
        """Rebuild every cache from the (possibly new) source and swap it in.

        Readers keep using the previous state until the swap.
        """
        state = _CatalogState(source or self._state.source)
        for attr in self._builders:
            self._get(attr, state)

        with self._lock:
            self._state = state
        self.search_service.cache.clear()
        logger.info("Catalog refreshed: %d items", len(state.items))

    async def rescan(self) -> None:
        """Re-read the data directory (if any) and refresh."""
        if self.origin is None:
            self.refresh()
            return
        self.refresh(await self.origin.snapshot())

    def _build_group_index(self, state: _CatalogState):
        return self.resolver.resolve(state.source.list_group_records())

    def _build_items(self, state: _CatalogState) -> List[NavItem]:
        return AggregationEngine(state.source, self._get("group_index", state)).aggregate()

    def _build_groups(self, state: _CatalogState) -> List[NavGroup]:
        return self.resolver.build_tree(
            self._get("group_index", state), self._get("items", state)
        )

    # =========================================================================
    # Items
    # =========================================================================

    def load_all_items(self) -> List[NavItem]:
        """All aggregated items (memoized)."""
        return self._get("items")

    def find_item(self, item_id: str, group: Optional[str] = None) -> Optional[NavItem]:
        """First item with this id, optionally restricted to one group."""
        for item in self.load_all_items():
            if item.id == item_id and (group is None or item.group == group):
                return item
        return None

    def item_entries(self) -> List[str]:
        """Ids of every item, for static page generation."""
        return [item.id for item in self.load_all_items()]

    def load_markdown_content(self, item: NavItem) -> str:
        """Description body of an item, "" if it has none."""
        return self._get("descriptions").load(item)

    # =========================================================================
    # Groups
    # =========================================================================

    def get_group_definitions(self) -> dict[str, GroupDefinition]:
        """Group id -> definition with resolved parent (memoized)."""
        return self._get("group_index").definitions

    def load_group_metadata(self, group_id: str) -> Optional[GroupDefinition]:
        return self._get("group_index").find_metadata(group_id)

    def load_groups(self) -> List[NavGroup]:
        """Root groups of the sorted group tree (memoized)."""
        return self._get("groups")

    def find_group_by_id(self, group_id: str) -> Optional[NavGroup]:
        return find_group_in_tree(self.load_groups(), lambda g: g.id == group_id)

    def find_group(self, ref: str) -> Optional[NavGroup]:
        """Group by id, falling back to its display name."""
        found = self.find_group_by_id(ref)
        if found is not None:
            return found
        return find_group_in_tree(self.load_groups(), lambda g: g.name == ref)

    def group_entries(self) -> List[str]:
        """Ids of every group in the tree, for static page generation."""
        return [group.id for group in flatten_group_tree(self.load_groups())]

    # =========================================================================
    # Tags, search and recommendations
    # =========================================================================

    def get_all_tags(self) -> List[str]:
        return self._get("tags")

    def get_tag_summaries(self) -> List[TagSummary]:
        return self._get("tag_summaries")

    def search(
        self,
        items: Sequence[NavItem] | None = None,
        filters: SearchFilters | None = None,
    ) -> Sequence[NavItem]:
        """Filter items (all items when none are given)."""
        if items is None:
            items = self.load_all_items()
        return self.search_service.search(items, filters)

    def recommend(
        self,
        target: NavItem,
        limit: Optional[int] = None,
        items: Sequence[NavItem] | None = None,
    ) -> List[ItemRecommendation]:
        """Items related to the target, best first."""
        if limit is None:
            limit = self.config.recommendations.default_limit

        if items is None:
            items = self.load_all_items()
            frequency = self._get("tag_frequency")
        else:
            frequency = build_tag_frequency(items)

        return self.recommender.recommend(items, target, limit, tag_frequency=frequency)


async def load_site_config(path: str | Path) -> SiteConfig:
    """Read the site config.json; missing or malformed files give defaults."""
    site_path = anyio.Path(path)
    if not await site_path.exists():
        return SiteConfig()

    try:
        data = json.loads(await site_path.read_text(encoding="utf-8"))
    except ValueError as e:
        logger.warning("Ignoring malformed site config %s: %s", path, e)
        return SiteConfig()

    return SiteConfig.from_raw(data)

