# navhub/library/paths.py

from pathlib import PurePosixPath
from typing import List, Optional, Tuple


def path_segments(path: str) -> List[str]:
    """Directory components of a source path (relative to the data root)."""
    parts = PurePosixPath(path.lstrip("/")).parts
    return [part for part in parts[:-1] if part]


def split_source_path(path: str) -> Tuple[List[str], str]:
    """
    Split a source path into (segments, id).

    "ai/tools/chatgpt.md" -> (["ai", "tools"], "chatgpt")
    """
    return path_segments(path), PurePosixPath(path).stem


def segment_key(segments: List[str]) -> str:
    return "/".join(segments)


def parent_segment_key(segments: List[str]) -> Optional[str]:
    """Segment key of the enclosing directory, or None at the top level."""
    if len(segments) <= 1:
        return None
    return segment_key(segments[:-1])
