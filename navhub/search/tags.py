"""Tag listing and per-tag statistics."""

from typing import Dict, Iterable, List, Set

from ..models.catalog import NavItem, TagSummary
from ..utils.collation import sort_key, sorted_locale


def get_all_tags(items: Iterable[NavItem]) -> List[str]:
    """Distinct tags of all items in collation order."""
    tags: Set[str] = set()
    for item in items:
        tags.update(item.tags)
    return sorted_locale(tags)


def build_tag_frequency(items: Iterable[NavItem]) -> Dict[str, int]:
    """Number of items carrying each tag."""
    frequency: Dict[str, int] = {}
    for item in items:
        for tag in set(item.tags):
            frequency[tag] = frequency.get(tag, 0) + 1
    return frequency


def get_tag_summaries(items: Iterable[NavItem]) -> List[TagSummary]:
    """
    Per-tag item count and distinct groups.

    Sorted by count descending, then tag name in collation order.
    """
    counts: Dict[str, int] = {}
    groups: Dict[str, Set[str]] = {}

    for item in items:
        for tag in set(item.tags):
            counts[tag] = counts.get(tag, 0) + 1
            groups.setdefault(tag, set()).add(item.group)

    summaries = [
        TagSummary(name=tag, count=count, group_ids=sorted_locale(groups[tag]))
        for tag, count in counts.items()
    ]
    summaries.sort(key=lambda s: (-s.count, sort_key(s.name)))
    return summaries
