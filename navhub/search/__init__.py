"""Search and tag indexing over aggregated items."""

from .service import NormalizedItem, NormalizedViewCache, SearchService, tokenize
from .tags import build_tag_frequency, get_all_tags, get_tag_summaries

__all__ = [
    "NormalizedItem",
    "NormalizedViewCache",
    "SearchService",
    "tokenize",
    "build_tag_frequency",
    "get_all_tags",
    "get_tag_summaries",
]
