from __future__ import annotations

from pydantic import Field

from ..search.criteria import SearchCriteria
from ..validation import ValidationResult


class ActivitySearchCriteria(SearchCriteria):
    """Optional filters for activity search.

    ``min_price`` / ``max_price`` are two independent inclusive bounds.
    ``supplier_name`` reaches through the activity's supplier; activities
    without a supplier never match it.
    """

    title: str | None = None
    min_price: int | None = Field(default=None, ge=0)
    max_price: int | None = Field(default=None, ge=0)
    min_rating: float | None = Field(default=None, ge=0, le=5)
    currency: str | None = None
    special_offer: bool | None = None
    supplier_name: str | None = None

    def validate_constraints(self) -> ValidationResult:
        result = super().validate_constraints()
        if self.min_price is not None and self.max_price is not None:
            result.check(
                self.min_price <= self.max_price,
                "min_price",
                "must not be greater than max_price",
            )
        return result
