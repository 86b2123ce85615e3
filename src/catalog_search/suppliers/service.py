from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ..persistence.models import Supplier
from ..search.service import SearchService
from . import specifications
from .criteria import SupplierSearchCriteria
from .dto import SupplierDto, SupplierDtoMapper

if TYPE_CHECKING:
    from ..ports.store import IEntityStore


class SupplierSearchService(
    SearchService[Supplier, SupplierDto, SupplierSearchCriteria]
):
    def __init__(self, store: IEntityStore[Supplier, Any]) -> None:
        super().__init__(
            store,
            SupplierDtoMapper(),
            specifications.from_criteria,
            criteria_cls=SupplierSearchCriteria,
            entity_name="Supplier",
        )
