"""Shared helpers."""

from .collation import sort_key, sorted_locale

__all__ = ["sort_key", "sorted_locale"]
