"""Locale-aware string ordering.

Names and tags mix Latin and CJK text, so ordinal code-point sorting is not
acceptable ("Banana" would sort before "apple"). Ordering follows the Unicode
Collation Algorithm with the default table shipped by pyuca.
"""

from functools import lru_cache
from typing import Iterable, List, Tuple

from pyuca import Collator


@lru_cache(maxsize=1)
def _collator() -> Collator:
    # Loading the collation table is slow; share one instance per process.
    return Collator()


def sort_key(text: str) -> Tuple[Tuple[int, ...], str]:
    """Collation key with the raw string as a deterministic tie-break."""
    return (_collator().sort_key(text), text)


def sorted_locale(values: Iterable[str]) -> List[str]:
    """Sort strings in collation order."""
    return sorted(values, key=sort_key)

