# navhub/sources/repository.py
"""
Source repositories.

The aggregation layer never touches the filesystem directly: it reads
{path, content} records from a repository. FileSystemSource performs the
one-time scan of the data directory and hands back an in-memory snapshot.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path, PurePosixPath
from typing import Dict, List, Optional

import anyio

logger = logging.getLogger(__name__)

DEFAULT_GROUP_METADATA_FILE = "_group.json"


@dataclass(frozen=True)
class SourceRecord:
    """One source file: POSIX path relative to the data root, and its raw text."""
    path: str
    content: str


class SourceRepository(ABC):
    """Capability that lists the three kinds of source records."""

    @abstractmethod
    def list_item_records(self) -> List[SourceRecord]:
        """JSON item files (single object or array per file)."""

    @abstractmethod
    def list_group_records(self) -> List[SourceRecord]:
        """Group metadata files, one per directory."""

    @abstractmethod
    def list_description_bodies(self) -> List[SourceRecord]:
        """Markdown files (frontmatter + description body)."""


class InMemorySource(SourceRepository):
    """Repository backed by plain {path: content} dictionaries."""

    def __init__(
        self,
        items: Optional[Dict[str, str]] = None,
        groups: Optional[Dict[str, str]] = None,
        descriptions: Optional[Dict[str, str]] = None,
    ):
        self._items = self._to_records(items)
        self._groups = self._to_records(groups)
        self._descriptions = self._to_records(descriptions)

    @staticmethod
    def _to_records(mapping: Optional[Dict[str, str]]) -> List[SourceRecord]:
        if not mapping:
            return []
        return [
            SourceRecord(path=normalize_source_path(path), content=content)
            for path, content in sorted(mapping.items())
        ]

    def list_item_records(self) -> List[SourceRecord]:
        return list(self._items)

    def list_group_records(self) -> List[SourceRecord]:
        return list(self._groups)

    def list_description_bodies(self) -> List[SourceRecord]:
        return list(self._descriptions)


class FileSystemSource:
    """
    Scan a data directory once and produce an InMemorySource snapshot.

    Layout:
        {root}/{segments...}/{id}.json      item records
        {root}/{segments...}/_group.json    group metadata
        {root}/{segments...}/{id}.md        Markdown records / descriptions
    """

    def __init__(
        self,
        root: str | Path,
        group_metadata_file: str = DEFAULT_GROUP_METADATA_FILE,
    ):
        self.root = Path(root)
        self.group_metadata_file = group_metadata_file

    async def snapshot(self) -> InMemorySource:
        """
        Read every source file under the root.

        Returns:
            InMemorySource with item, group and description records.
            A missing root yields an empty source.
        """
        root = anyio.Path(self.root)
        if not await root.exists():
            logger.warning("Data directory not found: %s", self.root)
            return InMemorySource()

        items: Dict[str, str] = {}
        groups: Dict[str, str] = {}
        descriptions: Dict[str, str] = {}

        async for path in root.rglob("*"):
            if not await path.is_file():
                continue

            rel_path = self._relative(path)
            if rel_path is None:
                continue

            if path.name == self.group_metadata_file:
                target = groups
            elif path.suffix == ".json":
                target = items
            elif path.suffix == ".md":
                target = descriptions
            else:
                continue

            try:
                target[rel_path] = await path.read_text(encoding="utf-8")
            except (UnicodeDecodeError, OSError) as e:
                logger.warning("Skipping unreadable file %s: %s", rel_path, e)

        logger.info(
            "Scanned %s: %d item files, %d group files, %d markdown files",
            self.root,
            len(items),
            len(groups),
            len(descriptions),
        )
        return InMemorySource(items=items, groups=groups, descriptions=descriptions)

    def _relative(self, path: anyio.Path) -> Optional[str]:
        """Relative POSIX path, or None for files under hidden directories."""
        rel = PurePosixPath(Path(str(path)).relative_to(self.root).as_posix())
        if any(part.startswith(".") for part in rel.parts):
            return None
        return str(rel)


def normalize_source_path(path: str) -> str:
    """Normalize a source path to a relative POSIX path without leading slash."""
    return path.replace("\\", "/").lstrip("/")
