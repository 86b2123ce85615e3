from .criteria import SupplierSearchCriteria
from .dto import SupplierDto, SupplierDtoMapper
from .service import SupplierSearchService

__all__ = [
    "SupplierSearchCriteria",
    "SupplierDto",
    "SupplierDtoMapper",
    "SupplierSearchService",
]
