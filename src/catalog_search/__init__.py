"""catalog-search: specification-based search over activities and suppliers."""

from .activities import (
    ActivityDto,
    ActivityDtoMapper,
    ActivitySearchCriteria,
    ActivitySearchService,
)
from .exceptions import (
    CatalogSearchError,
    EntityNotFoundError,
    InfrastructureError,
    InvalidCriteriaError,
    NotFoundError,
    StoreError,
)
from .ports import IEntityStore, ISearchService
from .search import DtoMapper, SearchCriteria, SearchService
from .suppliers import (
    SupplierDto,
    SupplierDtoMapper,
    SupplierSearchCriteria,
    SupplierSearchService,
)
from .validation import ValidationResult

__all__: list[str] = [
    # Search core
    "SearchCriteria",
    "SearchService",
    "DtoMapper",
    "ValidationResult",
    # Ports
    "IEntityStore",
    "ISearchService",
    # Activities
    "ActivitySearchCriteria",
    "ActivityDto",
    "ActivityDtoMapper",
    "ActivitySearchService",
    # Suppliers
    "SupplierSearchCriteria",
    "SupplierDto",
    "SupplierDtoMapper",
    "SupplierSearchService",
    # Exceptions
    "CatalogSearchError",
    "NotFoundError",
    "EntityNotFoundError",
    "InvalidCriteriaError",
    "InfrastructureError",
    "StoreError",
]
