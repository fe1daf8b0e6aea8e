# tests/test_groups.py
"""Tests for group hierarchy resolution and tree helpers."""

import json

from navhub.library.groups import (
    GroupHierarchyResolver,
    count_group_items,
    find_group_in_tree,
    flatten_group_tree,
)
from navhub.models.catalog import DEFAULT_GROUP_ORDER
from navhub.sources.repository import SourceRecord


def group_record(path, **data):
    return SourceRecord(path, json.dumps(data, ensure_ascii=False))


def ids(groups):
    return [group.id for group in groups]


class TestResolve:
    """Tests for parent resolution."""

    def test_parent_from_enclosing_directory(self):
        index = GroupHierarchyResolver().resolve([
            group_record("ai/_group.json", id="ai"),
            group_record("ai/tools/_group.json", id="ai-tools"),
        ])

        assert index.definitions["ai-tools"].parent_id == "ai"
        assert index.definitions["ai"].parent_id is None
        assert index.segment_index == {"ai": "ai", "ai/tools": "ai-tools"}

    def test_explicit_null_parent_stays_root(self):
        index = GroupHierarchyResolver().resolve([
            group_record("ai/_group.json", id="ai"),
            group_record("ai/tools/_group.json", id="tools", parentId=None),
        ])

        assert index.definitions["tools"].parent_id is None

    def test_explicit_parent_overrides_path(self):
        index = GroupHierarchyResolver().resolve([
            group_record("a/_group.json", id="a"),
            group_record("b/_group.json", id="b"),
            group_record("a/c/_group.json", id="c", parentId="b"),
        ])

        assert index.definitions["c"].parent_id == "b"

    def test_missing_intermediate_directory_is_root(self):
        index = GroupHierarchyResolver().resolve([
            group_record("a/b/c/_group.json", id="c"),
        ])

        assert index.definitions["c"].parent_id is None

    def test_duplicate_id_keeps_first(self):
        index = GroupHierarchyResolver().resolve([
            group_record("a/_group.json", id="dup", name="First"),
            group_record("b/_group.json", id="dup", name="Second"),
        ])

        assert index.definitions["dup"].name == "First"

    def test_item_group_lookup(self):
        index = GroupHierarchyResolver().resolve([
            group_record("ai/tools/_group.json", id="ai-tools"),
        ])

        assert index.resolve_item_group(None, ["ai", "tools"]) == "ai-tools"
        assert index.resolve_item_group("custom", ["ai", "tools"]) == "custom"
        assert index.resolve_item_group(None, ["x", "y"]) == "y"
        assert index.resolve_item_group(None, []) is None

    def test_find_metadata_by_directory_name(self):
        index = GroupHierarchyResolver().resolve([
            group_record("ai/tools/_group.json", id="ai-tools", name="AI Tools"),
        ])

        assert index.find_metadata("ai-tools").name == "AI Tools"
        assert index.find_metadata("tools").id == "ai-tools"
        assert index.find_metadata("missing") is None

    def test_segment_keys_for_renamed_group(self):
        index = GroupHierarchyResolver().resolve([
            group_record("ai/tools/_group.json", id="ai-tools"),
            group_record("dev/_group.json", id="dev"),
        ])

        assert index.segment_keys_for("ai-tools") == ["ai/tools"]
        assert index.segment_keys_for("tools") == []


class TestBuildTree:
    """Tests for tree construction and ordering."""

    def test_synthetic_group_for_item(self, item_factory):
        resolver = GroupHierarchyResolver()
        index = resolver.resolve([])

        roots = resolver.build_tree(index, [item_factory("a", group="misc")])

        assert ids(roots) == ["misc"]
        assert roots[0].name == "misc"
        assert roots[0].order is None
        assert roots[0].display_order == DEFAULT_GROUP_ORDER
        assert roots[0].description is None
        assert roots[0].icon is None

    def test_only_name_defaults_to_id(self):
        resolver = GroupHierarchyResolver()
        index = resolver.resolve([group_record("g/_group.json", id="g")])

        (root,) = resolver.build_tree(index, [])

        assert root.name == "g"
        assert root.description is None
        assert root.icon is None

    def test_unknown_parent_is_promoted_to_root(self):
        resolver = GroupHierarchyResolver()
        index = resolver.resolve([group_record("x/_group.json", id="x", parentId="nowhere")])

        roots = resolver.build_tree(index, [])

        assert ids(roots) == ["x"]
        assert roots[0].parent_id is None

    def test_parent_cycle_is_broken(self):
        resolver = GroupHierarchyResolver()
        index = resolver.resolve([
            group_record("a/_group.json", id="a", parentId="b"),
            group_record("b/_group.json", id="b", parentId="a"),
        ])

        roots = resolver.build_tree(index, [])

        assert ids(roots) == ["a"]
        assert ids(roots[0].children) == ["b"]

    def test_order_then_name(self):
        resolver = GroupHierarchyResolver()
        index = resolver.resolve([
            group_record("u1/_group.json", id="u1", name="beta"),
            group_record("u2/_group.json", id="u2", name="Alpha"),
            group_record("o2/_group.json", id="o2", name="Zed", order=2),
            group_record("o1/_group.json", id="o1", name="Yak", order=1),
            group_record("late/_group.json", id="late", name="Late", order=1000),
        ])

        roots = resolver.build_tree(index, [])

        # Unordered groups sort after every explicit order
        assert ids(roots) == ["o1", "o2", "late", "u2", "u1"]

    def test_items_sorted_by_name(self, item_factory):
        resolver = GroupHierarchyResolver()
        index = resolver.resolve([group_record("g/_group.json", id="g")])

        roots = resolver.build_tree(index, [
            item_factory("1", group="g", name="banana"),
            item_factory("2", group="g", name="Apple"),
            item_factory("3", group="g", name="cherry"),
        ])

        assert [i.name for i in roots[0].items] == ["Apple", "banana", "cherry"]


class TestTreeHelpers:
    """Tests for tree traversal helpers."""

    def test_flatten_count_and_find(self, catalog):
        roots = catalog.load_groups()

        assert ids(flatten_group_tree(roots)) == ["dev", "ai", "ai-tools", "legacy", "orphans"]

        ai = find_group_in_tree(roots, lambda g: g.id == "ai")
        assert count_group_items(ai) == 2
        assert find_group_in_tree(roots, lambda g: g.id == "missing") is None
