# navhub/library/normalizer.py
"""
Record normalization.

Turns one raw source record (a JSON object or Markdown frontmatter) into a
canonical NavItem or GroupDefinition. Invalid records yield None; nothing
in this module raises for bad data.
"""

import json
import logging
from typing import Any, Dict, List, Mapping, Optional

from ..models.catalog import GroupDefinition, NavItem
from ..sources.repository import SourceRecord
from .paths import path_segments

logger = logging.getLogger(__name__)


def clean_text(value: Any) -> Optional[str]:
    """Coerce a scalar field to a trimmed string; None or blank becomes None."""
    if value is None or isinstance(value, (dict, list)):
        return None
    text = str(value).strip()
    return text or None


def normalize_tags(value: Any) -> List[str]:
    """
    Normalize a tags field.

    Accepts a list of strings or a single comma-separated string; entries are
    trimmed and empty ones dropped. Order is preserved.
    """
    if isinstance(value, str):
        raw_tags = value.split(",")
    elif isinstance(value, (list, tuple)):
        raw_tags = [tag for tag in value if tag is not None]
    else:
        return []

    tags = []
    for tag in raw_tags:
        text = str(tag).strip()
        if text:
            tags.append(text)
    return tags


def explicit_group(raw: Mapping[str, Any]) -> Optional[str]:
    """The record's own non-empty group field, trimmed."""
    return clean_text(raw.get("group"))


def parse_item_file(record: SourceRecord) -> List[Dict[str, Any]]:
    """
    Parse a JSON item file into a flat list of raw record objects.

    A file holds either one object or an array of objects. Unparsable files
    and non-object entries are skipped.
    """
    try:
        data = json.loads(record.content)
    except ValueError as e:
        logger.warning("Skipping unparsable item file %s: %s", record.path, e)
        return []

    if isinstance(data, list):
        return [entry for entry in data if isinstance(entry, dict)]
    if isinstance(data, dict):
        return [data]

    logger.debug("Ignoring item file %s: top-level value is not an object", record.path)
    return []


def build_item(raw: Mapping[str, Any], group: Optional[str], **defaults: Any) -> Optional[NavItem]:
    """
    Build a canonical item from raw fields plus defaults.

    Returns None when group, id, name or url cannot be resolved.
    """
    item_id = clean_text(raw.get("id")) or defaults.get("id")
    name = clean_text(raw.get("name")) or defaults.get("name")
    url = clean_text(raw.get("url")) or defaults.get("url")

    if not (group and item_id and name and url):
        return None

    return NavItem(
        id=item_id,
        name=name,
        url=url,
        icon=clean_text(raw.get("icon")),
        info=clean_text(raw.get("info")),
        description_ref=clean_text(raw.get("desc_md")) or defaults.get("description_ref"),
        group=group,
        tags=normalize_tags(raw.get("tags")),
    )


def normalize_json_item(raw: Mapping[str, Any], group: Optional[str]) -> Optional[NavItem]:
    """JSON records must carry their own id, name and url."""
    return build_item(raw, group)


def normalize_markdown_item(
    metadata: Mapping[str, Any],
    file_id: str,
    file_name: str,
    group: Optional[str],
) -> Optional[NavItem]:
    """
    Markdown records default id and name to the file id, and point their
    description at the document itself.
    """
    return build_item(
        metadata,
        group,
        id=file_id,
        name=file_id,
        description_ref=file_name,
    )


def _parse_order(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return None


def parse_group_definition(record: SourceRecord) -> Optional[GroupDefinition]:
    """
    Parse a group metadata file.

    The group id falls back to the directory name. The presence of a
    parentId key, even null or empty, makes the parent explicit.
    """
    try:
        data = json.loads(record.content)
    except ValueError as e:
        logger.warning("Skipping unparsable group file %s: %s", record.path, e)
        return None

    if not isinstance(data, dict):
        logger.debug("Ignoring group file %s: not an object", record.path)
        return None

    segments = path_segments(record.path)
    group_id = clean_text(data.get("id")) or (segments[-1] if segments else None)
    if not group_id:
        logger.debug("Ignoring group file %s: no id and no directory", record.path)
        return None

    parent_explicit = "parentId" in data
    return GroupDefinition(
        id=group_id,
        name=clean_text(data.get("name")),
        description=clean_text(data.get("description")),
        icon=clean_text(data.get("icon")),
        order=_parse_order(data.get("order")),
        parent_id=clean_text(data.get("parentId")) if parent_explicit else None,
        parent_explicit=parent_explicit,
        segments=segments,
        source_path=record.path,
    )
