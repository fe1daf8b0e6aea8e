"""Group hierarchy resolution: metadata files + path structure -> group tree."""

from __future__ import annotations

import logging
from typing import Callable, Dict, Iterable, List, Optional

from ..models.catalog import GroupDefinition, NavGroup, NavItem
from ..sources.repository import SourceRecord
from ..utils.collation import sort_key
from .normalizer import parse_group_definition
from .paths import parent_segment_key, segment_key

logger = logging.getLogger(__name__)


class GroupIndex:
    """Resolved group definitions plus the segment-key lookup table.

    Attributes:
        definitions: group id -> definition, parent ids already resolved.
        segment_index: directory segment key -> group id.
    """

    def __init__(
        self,
        definitions: Dict[str, GroupDefinition] | None = None,
        segment_index: Dict[str, str] | None = None,
    ):
        self.definitions = definitions or {}
        self.segment_index = segment_index or {}

    def group_for_segments(self, segments: List[str]) -> Optional[str]:
        """Group id registered for a directory, else its last segment.

        Two directories sharing a final segment without metadata collapse
        into the same fallback id.
        """
        if not segments:
            return None
        registered = self.segment_index.get(segment_key(segments))
        if registered:
            return registered
        return segments[-1]

    def resolve_item_group(
        self, explicit: Optional[str], segments: List[str]
    ) -> Optional[str]:
        """Explicit group field first, then the path-based lookup."""
        if explicit:
            return explicit
        return self.group_for_segments(segments)

    def segment_keys_for(self, group_id: str) -> List[str]:
        """Directory segment keys registered under a group id."""
        return [key for key, value in self.segment_index.items() if value == group_id]

    def find_metadata(self, group_id: str) -> Optional[GroupDefinition]:
        """Definition by id, else by the name of the directory holding it."""
        definition = self.definitions.get(group_id)
        if definition is not None:
            return definition

        for definition in self.definitions.values():
            if definition.segments and definition.segments[-1] == group_id:
                return definition
        return None


class GroupHierarchyResolver:
    """Builds group definitions and the group tree.

    Parent precedence:
    1. An explicit parentId (null or empty means root).
    2. The group registered for the enclosing directory.
    3. Otherwise root.
    """

    def resolve(self, records: Iterable[SourceRecord]) -> GroupIndex:
        """Parse group metadata records and resolve every parent id.

        Args:
            records: Group metadata source records.

        Returns:
            GroupIndex with resolved definitions and the segment index.
        """
        definitions: Dict[str, GroupDefinition] = {}
        segment_index: Dict[str, str] = {}

        for record in records:
            definition = parse_group_definition(record)
            if definition is None:
                continue

            if definition.segments:
                segment_index.setdefault(definition.segment_key, definition.id)

            if definition.id in definitions:
                logger.warning(
                    "Duplicate group id %r in %s (first declared in %s)",
                    definition.id,
                    record.path,
                    definitions[definition.id].source_path,
                )
                continue
            definitions[definition.id] = definition

        resolved = {
            group_id: self._resolve_parent(definition, segment_index)
            for group_id, definition in definitions.items()
        }

        logger.debug(
            "Resolved %d group definitions (%d directory keys)",
            len(resolved),
            len(segment_index),
        )
        return GroupIndex(resolved, segment_index)

    @staticmethod
    def _resolve_parent(
        definition: GroupDefinition, segment_index: Dict[str, str]
    ) -> GroupDefinition:
        if definition.parent_explicit:
            return definition

        parent_key = parent_segment_key(definition.segments)
        parent_id = segment_index.get(parent_key) if parent_key else None
        if parent_id == definition.id:
            parent_id = None
        return definition.model_copy(update={"parent_id": parent_id})

    def build_tree(self, index: GroupIndex, items: Iterable[NavItem]) -> List[NavGroup]:
        """Build the sorted group tree.

        Every defined group and every group referenced by an item gets a node;
        groups without metadata use their id as name and the default order.
        Only the name falls back to the id; description and icon stay None
        when the metadata omits them.
        Parents that are not known groups promote the child to root.

        Args:
            index: Resolved group definitions.
            items: Aggregated items.

        Returns:
            Root groups, each level sorted by (order, name).
        """
        items_by_group: Dict[str, List[NavItem]] = {}
        for item in items:
            items_by_group.setdefault(item.group, []).append(item)

        nodes: Dict[str, NavGroup] = {}
        for group_id, definition in index.definitions.items():
            nodes[group_id] = NavGroup(
                id=group_id,
                name=definition.name or group_id,
                description=definition.description,
                icon=definition.icon,
                order=definition.order,
                parent_id=definition.parent_id or None,
            )

        for group_id in items_by_group:
            if group_id not in nodes:
                nodes[group_id] = NavGroup(id=group_id, name=group_id)

        for group_id, node in nodes.items():
            group_items = items_by_group.get(group_id, [])
            node.items = sorted(group_items, key=lambda i: (sort_key(i.name), i.id))

        parents = self._effective_parents(nodes)

        roots: List[NavGroup] = []
        for group_id in sorted(nodes):
            node = nodes[group_id]
            parent_id = parents.get(group_id)
            node.parent_id = parent_id
            if parent_id is None:
                roots.append(node)
            else:
                nodes[parent_id].children.append(node)

        return sort_group_tree(roots)

    @staticmethod
    def _effective_parents(nodes: Dict[str, NavGroup]) -> Dict[str, Optional[str]]:
        """Parent per group, limited to known groups and with cycles broken.

        Groups are visited in id order; a group whose parent chain leads back
        to itself becomes a root.
        """
        parents: Dict[str, Optional[str]] = {}
        for group_id, node in nodes.items():
            parent_id = node.parent_id
            if parent_id and parent_id in nodes and parent_id != group_id:
                parents[group_id] = parent_id
            else:
                if parent_id and parent_id != group_id:
                    logger.debug(
                        "Group %r declares unknown parent %r; treating as root",
                        group_id,
                        parent_id,
                    )
                parents[group_id] = None

        for group_id in sorted(parents):
            seen = {group_id}
            current = parents[group_id]
            while current is not None and current not in seen:
                seen.add(current)
                current = parents[current]
            if current == group_id:
                logger.warning(
                    "Group %r is part of a parent cycle; treating as root", group_id
                )
                parents[group_id] = None

        return parents


def group_sort_key(group: NavGroup):
    """Explicit order ascending, unordered groups last, then name."""
    return (group.order is None, group.order or 0, sort_key(group.name), group.id)


def sort_group_tree(groups: List[NavGroup]) -> List[NavGroup]:
    """Sort every level of a group tree in place and return the top level."""
    groups.sort(key=group_sort_key)
    for group in groups:
        if group.children:
            sort_group_tree(group.children)
    return groups


def count_group_items(group: NavGroup) -> int:
    """Items in a group including all nested groups."""
    return len(group.items) + sum(count_group_items(child) for child in group.children)


def flatten_group_tree(groups: List[NavGroup]) -> List[NavGroup]:
    """All groups of a tree, depth-first."""
    result: List[NavGroup] = []
    stack = list(reversed(groups))

    while stack:
        current = stack.pop()
        result.append(current)
        stack.extend(reversed(current.children))

    return result


def find_group_in_tree(
    groups: List[NavGroup], predicate: Callable[[NavGroup], bool]
) -> Optional[NavGroup]:
    """First group (depth-first, pre-order) matching the predicate."""
    for group in groups:
        if predicate(group):
            return group
        found = find_group_in_tree(group.children, predicate)
        if found is not None:
            return found
    return None
