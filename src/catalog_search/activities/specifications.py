"""
Predicate builders for activities.

One ``has_*`` function per searchable field, each returning a fragment
or ``None``. :func:`from_criteria` composes them in a fixed order.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ..specifications.fragments import (
    Fragment,
    all_of,
    at_least,
    contains_ignore_case,
    equals,
    equals_ignore_case,
    in_range,
)

if TYPE_CHECKING:
    from ..specifications.base import AndSpecification
    from .criteria import ActivitySearchCriteria


def has_title(title: str | None) -> Fragment:
    return contains_ignore_case("title", title)


def has_price_range(min_price: int | None, max_price: int | None) -> Fragment:
    return in_range("price", min_price, max_price)


def has_min_rating(min_rating: float | None) -> Fragment:
    return at_least("rating", min_rating)


def has_currency(currency: str | None) -> Fragment:
    return equals_ignore_case("currency", currency)


def has_special_offer(special_offer: bool | None) -> Fragment:
    return equals("special_offer", special_offer)


def has_supplier_name(supplier_name: str | None) -> Fragment:
    return contains_ignore_case("supplier.name", supplier_name)


def from_criteria(criteria: ActivitySearchCriteria) -> AndSpecification[Any]:
    return all_of(
        has_title(criteria.title),
        has_price_range(criteria.min_price, criteria.max_price),
        has_min_rating(criteria.min_rating),
        has_currency(criteria.currency),
        has_special_offer(criteria.special_offer),
        has_supplier_name(criteria.supplier_name),
    )
