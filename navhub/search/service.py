"""
Search service.

Filters items by group, tags (any-of) and free-text query (all-of).
Per-item normalized views (lowercased search text and tag set) are cached
by a hash of the item's field values, so repeated searches over reloaded
but unchanged items reuse the same views.
"""

from __future__ import annotations

import hashlib
import logging
import re
import threading
from collections import OrderedDict
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence

from ..models.catalog import NavItem, SearchFilters

logger = logging.getLogger(__name__)

# Whitespace plus ASCII/full-width commas, ideographic full stop and semicolons
QUERY_SEPARATORS = re.compile(r"[\s,，。；;]+")

_SNAPSHOT_SEPARATOR = "¶"


@dataclass(frozen=True)
class NormalizedItem:
    """Lowercased, search-ready view of one item."""
    key: str
    group_id: str
    tag_set: frozenset[str]
    search_text: str


def tokenize(raw_query: Optional[str]) -> List[str]:
    """Split a query into lowercase tokens."""
    if not raw_query:
        return []
    return [token for token in QUERY_SEPARATORS.split(raw_query.lower()) if token.strip()]


def build_tag_set(tags: Iterable[str]) -> frozenset[str]:
    """Trimmed, lowercased, non-empty tags."""
    return frozenset(
        tag.strip().lower() for tag in tags if tag and tag.strip()
    )


def item_snapshot(item: NavItem) -> str:
    """Concatenation of every searchable field value."""
    return _SNAPSHOT_SEPARATOR.join([
        item.id,
        item.group,
        item.name,
        item.info or "",
        item.url,
        "|".join(item.tags),
    ])


class NormalizedViewCache:
    """Thread-safe, bounded cache of normalized views keyed by content hash."""

    def __init__(self, maxsize: int = 4096):
        self._cache: OrderedDict[str, NormalizedItem] = OrderedDict()
        self._maxsize = maxsize
        self._lock = threading.RLock()
        self.hits = 0
        self.misses = 0

    @staticmethod
    def content_key(item: NavItem) -> str:
        return hashlib.sha256(item_snapshot(item).encode("utf-8")).hexdigest()

    def get(self, item: NavItem) -> NormalizedItem:
        """Return the cached view for the item's current values, building it on a miss."""
        key = self.content_key(item)
        with self._lock:
            cached = self._cache.get(key)
            if cached is not None:
                self._cache.move_to_end(key)
                self.hits += 1
                return cached

            self.misses += 1
            normalized = self._normalize(item)
            self._cache[key] = normalized
            if len(self._cache) > self._maxsize:
                self._cache.popitem(last=False)
            return normalized

    @staticmethod
    def _normalize(item: NavItem) -> NormalizedItem:
        segments = [item.name, item.info, item.url, item.group]
        segments.extend(tag.strip() for tag in item.tags)

        return NormalizedItem(
            key=f"{item.group}::{item.id}",
            group_id=item.group,
            tag_set=build_tag_set(item.tags),
            search_text=" ".join(s.lower() for s in segments if s),
        )

    def clear(self) -> None:
        with self._lock:
            self._cache.clear()

    def __len__(self) -> int:
        return len(self._cache)


class SearchService:
    """Multi-criteria item filtering over cached normalized views."""

    def __init__(self, cache_size: int = 4096):
        self.cache = NormalizedViewCache(maxsize=cache_size)

    def search(
        self, items: Sequence[NavItem], filters: SearchFilters | None = None
    ) -> Sequence[NavItem]:
        """Filter items, preserving input order.

        All active filters must pass. Tags match if any requested tag is
        present; every query token must occur somewhere in the item's text.

        Args:
            items: Items to filter.
            filters: Query, group and tag filters.

        Returns:
            The input sequence itself when no filter is active, otherwise a
            new list with the matching items.
        """
        filters = filters or SearchFilters()

        target_group = (filters.group or "").strip()
        tag_filters = build_tag_set(filters.tags)
        query_tokens = tokenize(filters.query)

        if not target_group and not tag_filters and not query_tokens:
            return items

        results: List[NavItem] = []
        for item in items:
            normalized = self.cache.get(item)

            if target_group and normalized.group_id != target_group:
                continue
            if tag_filters and normalized.tag_set.isdisjoint(tag_filters):
                continue
            if query_tokens and not all(t in normalized.search_text for t in query_tokens):
                continue

            results.append(item)

        return results
