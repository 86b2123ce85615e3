"""
End-to-end search scenarios.

Every test runs twice: once against ``InMemoryEntityStore`` and once
against ``SQLAlchemyEntityStore`` on an in-memory SQLite database.
"""

from __future__ import annotations

import logging

import pytest

from catalog_search.activities import (
    ActivityDtoMapper,
    ActivitySearchCriteria,
    ActivitySearchService,
)
from catalog_search.activities import specifications as activity_specs
from catalog_search.adapters.memory import InMemoryEntityStore
from catalog_search.exceptions import EntityNotFoundError, InvalidCriteriaError
from catalog_search.persistence import Activity
from catalog_search.ports import ISearchService
from catalog_search.search import SearchService
from catalog_search.suppliers import SupplierSearchCriteria

# ---------------------------------------------------------------------------
# Scenarios
# ---------------------------------------------------------------------------


async def test_title_substring_matches_one_activity(activity_service) -> None:
    dtos = await activity_service.search(ActivitySearchCriteria(title="museum"))
    assert [dto.title for dto in dtos] == ["Museum Tour"]
    assert dtos[0].price == 75


async def test_inclusive_price_range(activity_service) -> None:
    dtos = await activity_service.search(
        ActivitySearchCriteria(min_price=40, max_price=60)
    )
    assert [dto.title for dto in dtos] == ["City Walk"]


async def test_empty_criteria_return_everything_in_natural_order(
    activity_service,
) -> None:
    dtos = await activity_service.search(ActivitySearchCriteria())
    assert [dto.id for dto in dtos] == [1, 2]


async def test_unknown_city_returns_empty_list(supplier_service) -> None:
    dtos = await supplier_service.search(SupplierSearchCriteria(city="nonexistentcity"))
    assert dtos == []


async def test_find_by_unknown_id_raises_not_found(activity_service) -> None:
    with pytest.raises(EntityNotFoundError) as exc_info:
        await activity_service.find_by_id(999)
    assert exc_info.value.entity_id == 999
    assert exc_info.value.entity_type == "Activity"


# ---------------------------------------------------------------------------
# Properties
# ---------------------------------------------------------------------------


async def test_search_with_empty_criteria_equals_find_all(activity_service) -> None:
    assert await activity_service.search(
        ActivitySearchCriteria()
    ) == await activity_service.find_all()


async def test_range_bounds_are_inclusive(activity_service) -> None:
    at_min = await activity_service.search(
        ActivitySearchCriteria(min_price=50, max_price=75)
    )
    assert [dto.price for dto in at_min] == [75, 50]


async def test_min_price_only(activity_service) -> None:
    dtos = await activity_service.search(ActivitySearchCriteria(min_price=60))
    assert [dto.title for dto in dtos] == ["Museum Tour"]


async def test_max_price_only(activity_service) -> None:
    dtos = await activity_service.search(ActivitySearchCriteria(max_price=60))
    assert [dto.title for dto in dtos] == ["City Walk"]


@pytest.mark.parametrize("city", ["BERLIN", "berlin", "Berlin", "erli"])
async def test_city_is_case_insensitive_substring(supplier_service, city) -> None:
    dtos = await supplier_service.search(SupplierSearchCriteria(city=city))
    assert [dto.name for dto in dtos] == ["Berlin Tours GmbH"]


async def test_zip_is_matched_exactly(supplier_service) -> None:
    assert await supplier_service.search(SupplierSearchCriteria(zip="101")) == []
    dtos = await supplier_service.search(SupplierSearchCriteria(zip=" 80331 "))
    assert [dto.city for dto in dtos] == ["Munich"]


async def test_blank_filter_has_no_effect(supplier_service) -> None:
    blank = await supplier_service.search(SupplierSearchCriteria(name="   "))
    assert len(blank) == 2


async def test_special_offer_false_is_a_filter(activity_service) -> None:
    dtos = await activity_service.search(ActivitySearchCriteria(special_offer=False))
    assert [dto.title for dto in dtos] == ["City Walk"]


async def test_min_rating(activity_service) -> None:
    dtos = await activity_service.search(ActivitySearchCriteria(min_rating=4.6))
    assert [dto.title for dto in dtos] == ["Museum Tour"]


async def test_currency_is_case_insensitive(activity_service) -> None:
    dtos = await activity_service.search(ActivitySearchCriteria(currency="eur"))
    assert len(dtos) == 2
    assert await activity_service.search(ActivitySearchCriteria(currency="usd")) == []


async def test_supplier_name_reaches_through_relation(activity_service) -> None:
    dtos = await activity_service.search(ActivitySearchCriteria(supplier_name="munich"))
    assert [dto.title for dto in dtos] == ["City Walk"]
    assert dtos[0].supplier_name == "Munich Adventures"


async def test_combining_filters_narrows_results(activity_service) -> None:
    by_title = await activity_service.search(ActivitySearchCriteria(title="tour"))
    by_price = await activity_service.search(ActivitySearchCriteria(max_price=60))
    both = await activity_service.search(
        ActivitySearchCriteria(title="tour", max_price=60)
    )
    assert len(both) <= min(len(by_title), len(by_price))
    assert both == []


async def test_wildcards_in_input_match_literally(activity_service) -> None:
    assert await activity_service.search(ActivitySearchCriteria(title="%")) == []
    assert await activity_service.search(ActivitySearchCriteria(title="_")) == []


async def test_find_by_id_maps_entity(supplier_service) -> None:
    dto = await supplier_service.find_by_id(2)
    assert dto.name == "Munich Adventures"
    assert dto.zip == "80331"


async def test_invalid_range_is_rejected_before_querying(activity_service) -> None:
    with pytest.raises(InvalidCriteriaError):
        await activity_service.search(
            ActivitySearchCriteria(min_price=70, max_price=60)
        )


async def test_not_found_is_logged(activity_service, caplog) -> None:
    with caplog.at_level(logging.INFO, logger="catalog_search.search.service"):
        with pytest.raises(EntityNotFoundError):
            await activity_service.find_by_id(999)
    assert "Activity with id=999 not found" in caplog.text


def test_services_satisfy_search_contract(activity_service, supplier_service) -> None:
    assert isinstance(activity_service, ISearchService)
    assert isinstance(supplier_service, ISearchService)


# ---------------------------------------------------------------------------
# In-memory only
# ---------------------------------------------------------------------------


async def test_activity_built_without_optional_fields_gets_defaults() -> None:
    service = ActivitySearchService(
        InMemoryEntityStore([Activity(id=9, title="Boat", price=10)])
    )
    (dto,) = await service.find_all()
    assert dto.currency == "EUR"
    assert dto.rating == 0.0
    assert dto.special_offer is False
    assert dto.supplier_name == ""


class _CountingSpecification:
    def __init__(self, inner) -> None:
        self.inner = inner
        self.rendered = 0

    def is_satisfied_by(self, candidate) -> bool:
        return self.inner.is_satisfied_by(candidate)

    def to_dict(self):
        self.rendered += 1
        return self.inner.to_dict()


def _counting_service(catalog):
    _, activities = catalog
    built: list[_CountingSpecification] = []

    def factory(criteria):
        spec = _CountingSpecification(activity_specs.from_criteria(criteria))
        built.append(spec)
        return spec

    service = SearchService(
        InMemoryEntityStore(activities),
        ActivityDtoMapper(),
        factory,
        criteria_cls=ActivitySearchCriteria,
        entity_name="Activity",
    )
    return service, built


@pytest.mark.parametrize(("level", "rendered"), [(logging.INFO, 0), (logging.DEBUG, 1)])
async def test_specification_is_rendered_only_for_debug_logging(
    catalog, caplog, level, rendered
) -> None:
    service, built = _counting_service(catalog)
    with caplog.at_level(level, logger="catalog_search.search.service"):
        await service.search(ActivitySearchCriteria(title="museum"))
    assert built[0].rendered == rendered
