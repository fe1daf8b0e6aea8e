# tests/test_frontmatter.py
"""Tests for Markdown frontmatter handling."""

import pytest

from navhub.sources.frontmatter import (
    FrontmatterError,
    has_frontmatter,
    split_document,
    strip_frontmatter,
)


DOCUMENT = "---\nname: Example\ntags:\n  - a\n  - b\n---\n\nBody text.\n"


def test_split_document():
    metadata, body = split_document(DOCUMENT)

    assert metadata == {"name": "Example", "tags": ["a", "b"]}
    assert body.strip() == "Body text."


def test_split_document_without_frontmatter():
    metadata, body = split_document("Just text")

    assert metadata == {}
    assert body == "Just text"


def test_split_document_invalid_yaml():
    with pytest.raises(FrontmatterError):
        split_document("---\nname: [unclosed\n---\nbody")


def test_has_frontmatter():
    assert has_frontmatter(DOCUMENT)
    assert not has_frontmatter("no block here\n---\n")


def test_strip_frontmatter_returns_trimmed_body():
    assert strip_frontmatter(DOCUMENT) == "Body text."


def test_strip_frontmatter_without_delimiters_is_unchanged():
    text = "  plain description  \n"
    assert strip_frontmatter(text) == text


def test_strip_frontmatter_invalid_yaml_falls_back_to_regex():
    text = "---\nname: [unclosed\n---\n\nStill readable.\n"
    assert strip_frontmatter(text) == "Still readable."
