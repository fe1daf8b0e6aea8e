# tests/test_writer.py
"""Tests for writing items back to their source formats."""

import json

from navhub.library.aggregator import AggregationEngine
from navhub.library.groups import GroupIndex
from navhub.library.writer import (
    dumps_json_record,
    item_source_path,
    to_json_record,
    to_markdown_document,
)
from navhub.models.catalog import NavItem
from navhub.sources.frontmatter import split_document
from navhub.sources.repository import InMemorySource


ITEM = NavItem(
    id="claude",
    name="Claude 助手",
    url="https://claude.ai",
    icon="https://claude.ai/favicon.ico",
    info="Assistant: writing, code",
    description_ref="claude.md",
    group="ai",
    tags=["ai", "写作"],
)


def reload(source):
    (item,) = AggregationEngine(source, GroupIndex()).aggregate()
    return item


def test_json_record_fields():
    record = to_json_record(ITEM)

    assert record["desc_md"] == "claude.md"
    assert record["tags"] == ["ai", "写作"]
    assert "写作" in dumps_json_record(ITEM)


def test_json_record_omits_empty_fields():
    record = to_json_record(NavItem(id="x", name="X", url="https://x", group="g"))

    assert record == {"id": "x", "name": "X", "url": "https://x", "group": "g"}


def test_json_round_trip():
    source = InMemorySource(items={item_source_path(ITEM, "json"): dumps_json_record(ITEM)})

    assert reload(source) == ITEM


def test_markdown_round_trip():
    document = to_markdown_document(ITEM, body="Long description.")
    source = InMemorySource(descriptions={item_source_path(ITEM): document})

    assert reload(source) == ITEM


def test_markdown_keeps_body_and_omits_own_reference():
    metadata, body = split_document(to_markdown_document(ITEM, body="Body"))

    assert body == "Body"
    assert "desc_md" not in metadata
    assert metadata["name"] == "Claude 助手"


def test_markdown_keeps_foreign_reference():
    item = ITEM.model_copy(update={"description_ref": "shared/about.md"})

    metadata, _ = split_document(to_markdown_document(item))

    assert metadata["desc_md"] == "shared/about.md"


def test_item_source_path():
    assert item_source_path(ITEM) == "ai/claude.md"
    assert item_source_path(ITEM, "json") == "ai/claude.json"
    assert json.loads(dumps_json_record(ITEM))["id"] == "claude"
