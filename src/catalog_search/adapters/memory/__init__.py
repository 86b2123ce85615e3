"""In-memory adapters for testing."""

from __future__ import annotations

from .store import InMemoryEntityStore

__all__ = [
    "InMemoryEntityStore",
]
