"""Source file access: repositories and frontmatter parsing."""

from .frontmatter import FrontmatterError, has_frontmatter, split_document, strip_frontmatter
from .repository import (
    DEFAULT_GROUP_METADATA_FILE,
    FileSystemSource,
    InMemorySource,
    SourceRecord,
    SourceRepository,
)

__all__ = [
    "FrontmatterError",
    "has_frontmatter",
    "split_document",
    "strip_frontmatter",
    "DEFAULT_GROUP_METADATA_FILE",
    "FileSystemSource",
    "InMemorySource",
    "SourceRecord",
    "SourceRepository",
]
