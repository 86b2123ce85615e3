"""Predicate builders for suppliers."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ..specifications.fragments import (
    Fragment,
    all_of,
    contains_ignore_case,
    equals_trimmed,
)

if TYPE_CHECKING:
    from ..specifications.base import AndSpecification
    from .criteria import SupplierSearchCriteria


def has_name(name: str | None) -> Fragment:
    return contains_ignore_case("name", name)


def has_address(address: str | None) -> Fragment:
    return contains_ignore_case("address", address)


def has_zip(zip_code: str | None) -> Fragment:
    # Postal codes are compared exactly; "101" must not match "10115".
    return equals_trimmed("zip", zip_code)


def has_city(city: str | None) -> Fragment:
    return contains_ignore_case("city", city)


def has_country(country: str | None) -> Fragment:
    return contains_ignore_case("country", country)


def from_criteria(criteria: SupplierSearchCriteria) -> AndSpecification[Any]:
    return all_of(
        has_name(criteria.name),
        has_address(criteria.address),
        has_zip(criteria.zip),
        has_city(criteria.city),
        has_country(criteria.country),
    )
