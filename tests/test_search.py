# tests/test_search.py
"""Tests for item search and the normalized view cache."""

import pytest

from navhub.models.catalog import SearchFilters
from navhub.search.service import (
    NormalizedViewCache,
    SearchService,
    item_snapshot,
    tokenize,
)


@pytest.fixture
def items(item_factory):
    return [
        item_factory("chatgpt", group="ai", name="ChatGPT", tags=["AI", "chat"], info="对话助手"),
        item_factory("cursor", group="ai-tools", name="Cursor", tags=["ai", "editor"]),
        item_factory("github", group="dev", name="GitHub", tags=["git", "code"]),
        item_factory("vscode", group="dev", name="VS Code", tags=["editor"]),
    ]


@pytest.fixture
def service():
    return SearchService(cache_size=16)


def ids(items):
    return [item.id for item in items]


class TestTokenize:
    """Tests for query tokenization."""

    def test_ascii_and_cjk_separators(self):
        assert tokenize("Chat  GPT，编辑器。AI;tools；x,y") == [
            "chat", "gpt", "编辑器", "ai", "tools", "x", "y",
        ]

    def test_blank_query(self):
        assert tokenize("   ") == []
        assert tokenize(None) == []


class TestSearchService:
    """Tests for filter semantics."""

    def test_no_filters_returns_same_reference(self, service, items):
        assert service.search(items, SearchFilters()) is items
        assert service.search(items, SearchFilters(query="  ", tags=[" "])) is items
        assert service.search(items) is items

    def test_empty_input_without_filters(self, service):
        empty = []
        assert service.search(empty, SearchFilters()) is empty

    def test_group_filter_is_exact(self, service, items):
        assert ids(service.search(items, SearchFilters(group="dev"))) == ["github", "vscode"]
        assert service.search(items, SearchFilters(group="de")) == []

    def test_tags_use_any_of(self, service, items):
        result = service.search(items, SearchFilters(tags=["chat", "git"]))

        assert ids(result) == ["chatgpt", "github"]

    def test_tags_are_case_insensitive_and_trimmed(self, service, items):
        result = service.search(items, SearchFilters(tags=[" ai "]))

        assert ids(result) == ["chatgpt", "cursor"]

    def test_query_requires_every_token(self, service, items):
        assert ids(service.search(items, SearchFilters(query="editor code"))) == ["vscode"]
        assert service.search(items, SearchFilters(query="chat git")) == []

    def test_query_matches_cjk_info(self, service, items):
        assert ids(service.search(items, SearchFilters(query="对话"))) == ["chatgpt"]

    def test_query_matches_url_and_group(self, service, items):
        assert ids(service.search(items, SearchFilters(query="github.example"))) == ["github"]
        assert ids(service.search(items, SearchFilters(query="ai-tools"))) == ["cursor"]

    def test_filters_combine_with_and(self, service, items):
        filters = SearchFilters(query="code", group="dev", tags=["editor"])

        assert ids(service.search(items, filters)) == ["vscode"]

    def test_result_preserves_input_order(self, service, items):
        reversed_items = list(reversed(items))
        result = service.search(reversed_items, SearchFilters(tags=["ai"]))

        assert ids(result) == ["cursor", "chatgpt"]


class TestNormalizedViewCache:
    """Tests for content-hash caching."""

    def test_equal_values_reuse_view(self, item_factory):
        cache = NormalizedViewCache(maxsize=8)
        original = item_factory("a", tags=["x"])
        reloaded = item_factory("a", tags=["x"])

        first = cache.get(original)
        second = cache.get(reloaded)

        assert first is second
        assert cache.hits == 1
        assert cache.misses == 1

    def test_changed_values_miss(self, item_factory):
        cache = NormalizedViewCache(maxsize=8)
        cache.get(item_factory("a", tags=["x"]))
        view = cache.get(item_factory("a", tags=["x", "y"]))

        assert view.tag_set == frozenset({"x", "y"})
        assert cache.misses == 2

    def test_bounded_size(self, item_factory):
        cache = NormalizedViewCache(maxsize=2)
        for name in ["a", "b", "c"]:
            cache.get(item_factory(name))

        assert len(cache) == 2

    def test_snapshot_covers_tags(self, item_factory):
        assert item_snapshot(item_factory("a", tags=["x"])) != item_snapshot(item_factory("a"))

    def test_repeated_search_hits_cache(self, service, items):
        service.search(items, SearchFilters(query="git"))
        service.search(items, SearchFilters(query="code"))

        assert service.cache.misses == len(items)
        assert service.cache.hits == len(items)
