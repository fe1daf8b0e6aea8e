# navhub/api/routes/__init__.py
"""API route modules."""

from . import items, groups, tags, catalog

__all__ = ["items", "groups", "tags", "catalog"]
