"""
Frontmatter handling for Markdown source documents.

A document starts with a `---` delimited YAML block followed by free text.
Parsing is delegated to python-frontmatter; this module only narrows its
failure modes to a single exception type.
"""

import re
from typing import Any, Dict, Tuple

import frontmatter
import yaml


FRONTMATTER_START = re.compile(r"^\ufeff?---[ \t]*\r?$", re.MULTILINE)
FRONTMATTER_BLOCK = re.compile(r"^\ufeff?---[ \t]*\r?\n.*?\r?\n---[ \t]*(?:\r?\n|$)", re.DOTALL)


class FrontmatterError(ValueError):
    """Raised when a frontmatter block exists but cannot be parsed."""


def has_frontmatter(text: str) -> bool:
    """True when the document opens with a frontmatter delimiter line."""
    match = FRONTMATTER_START.match(text.lstrip("\r\n"))
    return match is not None


def split_document(text: str) -> Tuple[Dict[str, Any], str]:
    """
    Split a Markdown document into (metadata, body).

    Documents without frontmatter return empty metadata and the stripped text.

    Raises:
        FrontmatterError: If the frontmatter block is not valid YAML.
    """
    try:
        metadata, body = frontmatter.parse(text)
    except (yaml.YAMLError, UnicodeDecodeError) as e:
        raise FrontmatterError(f"Invalid frontmatter: {e}") from e

    if not isinstance(metadata, dict):
        metadata = {}
    return dict(metadata), body


def strip_frontmatter(text: str) -> str:
    """
    Return the body of a document without its frontmatter block, trimmed.

    Documents with no frontmatter delimiters are returned unchanged. When the
    block is present but unparsable, a raw regex strip is used instead.
    """
    if not has_frontmatter(text):
        return text

    try:
        _, body = split_document(text)
    except FrontmatterError:
        return FRONTMATTER_BLOCK.sub("", text.lstrip("\r\n"), count=1).strip()

    return body.strip()
