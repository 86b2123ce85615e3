"""Generic search layer: criteria, DTO mapping and the search service."""

from .criteria import SearchCriteria
from .mapper import DtoMapper
from .service import SearchService

__all__ = ["SearchCriteria", "DtoMapper", "SearchService"]
