from __future__ import annotations

from ..search.criteria import SearchCriteria


class SupplierSearchCriteria(SearchCriteria):
    """Optional filters for supplier search. ``zip`` is matched exactly."""

    name: str | None = None
    address: str | None = None
    zip: str | None = None
    city: str | None = None
    country: str | None = None
