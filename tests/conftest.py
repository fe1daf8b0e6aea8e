# tests/conftest.py
"""Shared pytest fixtures and test helpers."""

import json

import pytest

from navhub.config import Config
from navhub.library.catalog import NavigationCatalog
from navhub.models.catalog import NavItem
from navhub.sources.repository import InMemorySource


def dump(data) -> str:
    """Serialize a fixture record the way data files are written."""
    return json.dumps(data, ensure_ascii=False)


SAMPLE_GROUPS = {
    "ai/_group.json": dump({"id": "ai", "name": "人工智能", "order": 1}),
    "ai/tools/_group.json": dump({"id": "ai-tools", "name": "AI Tools"}),
    "dev/_group.json": dump({"id": "dev", "name": "Development", "order": 0}),
    "dev/legacy/_group.json": dump({"id": "legacy", "name": "Legacy", "parentId": None}),
}

SAMPLE_ITEMS = {
    "ai/chatgpt.json": dump({
        "id": "chatgpt",
        "name": "ChatGPT",
        "url": "https://chat.openai.com",
        "tags": ["ai", "chat"],
        "desc_md": "chatgpt.md",
    }),
    "ai/tools/list.json": dump([
        {"id": "cursor", "name": "Cursor", "url": "https://cursor.sh", "tags": "ai, editor"},
        {"id": "broken", "name": "No URL"},
    ]),
    "dev/tools.json": dump([
        {"id": "github", "name": "GitHub", "url": "https://github.com", "tags": ["git", "code"]},
        {"id": "vscode", "name": "VS Code", "url": "https://code.visualstudio.com", "tags": ["editor"]},
    ]),
    "misc/links.json": dump({
        "id": "example",
        "name": "Example",
        "url": "https://example.com",
        "group": "orphans",
    }),
}

SAMPLE_DESCRIPTIONS = {
    "ai/chatgpt.md": (
        "---\n"
        "name: ChatGPT Plus\n"
        "url: https://chatgpt.com\n"
        "tags: [ai, chat, 写作]\n"
        "---\n"
        "\n"
        "ChatGPT long description.\n"
    ),
    "dev/vscode.md": (
        "---\n"
        "name: Visual Studio Code\n"
        "url: https://code.visualstudio.com\n"
        "tags: editor\n"
        "---\n"
        "Editor body\n"
    ),
    "dev/broken.md": "---\nname: [unclosed\n---\nbody\n",
}


@pytest.fixture
def sample_source():
    """In-memory source with nested groups, overrides and bad records."""
    return InMemorySource(
        items=SAMPLE_ITEMS,
        groups=SAMPLE_GROUPS,
        descriptions=SAMPLE_DESCRIPTIONS,
    )


@pytest.fixture
def catalog(sample_source):
    """Fresh catalog over the sample source."""
    return NavigationCatalog(sample_source, config=Config())


@pytest.fixture
def item_factory():
    """Fixture providing a factory function for creating NavItem instances.

    Usage:
        def test_example(item_factory):
            item = item_factory("a", group="g1", tags=["x"])
    """
    def _make_item(
        item_id: str,
        group: str = "g1",
        tags=None,
        name: str = "",
        url: str = "",
        **fields,
    ) -> NavItem:
        return NavItem(
            id=item_id,
            name=name or item_id,
            url=url or f"https://{item_id}.example.com",
            group=group,
            tags=list(tags or []),
            **fields,
        )
    return _make_item
