"""Ports: protocols the search core depends on or exposes."""

from __future__ import annotations

from .search_service import ISearchService
from .store import IEntityStore

__all__ = [
    "IEntityStore",
    "ISearchService",
]
