"""Serialize items back into the JSON and Markdown source formats."""

import json
from typing import Any, Dict

import frontmatter

from ..models.catalog import NavItem


def item_source_path(item: NavItem, extension: str = "md") -> str:
    """Relative path an item is conventionally stored at."""
    return f"{item.group}/{item.id}.{extension}"


def _record_fields(item: NavItem) -> Dict[str, Any]:
    fields: Dict[str, Any] = {
        "id": item.id,
        "name": item.name,
        "url": item.url,
        "group": item.group,
    }
    if item.icon:
        fields["icon"] = item.icon
    if item.info:
        fields["info"] = item.info
    if item.tags:
        fields["tags"] = list(item.tags)
    return fields


def to_json_record(item: NavItem) -> Dict[str, Any]:
    """JSON item record, including the description reference if any."""
    record = _record_fields(item)
    if item.description_ref:
        record["desc_md"] = item.description_ref
    return record


def dumps_json_record(item: NavItem) -> str:
    return json.dumps(to_json_record(item), ensure_ascii=False, indent=2)


def to_markdown_document(item: NavItem, body: str = "") -> str:
    """
    Markdown document with the item's fields as frontmatter.

    A description reference pointing at the document itself is implied by
    the file name and left out.
    """
    metadata = _record_fields(item)
    own_file = f"{item.id}.md"
    if item.description_ref and item.description_ref != own_file:
        metadata["desc_md"] = item.description_ref

    post = frontmatter.Post(body, **metadata)
    return frontmatter.dumps(post) + "\n"
