"""HTTP routes for activities and suppliers.

``/search`` is declared before ``/{entity_id}`` so it is never captured
as an id.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, Request

from ...activities.criteria import ActivitySearchCriteria
from ...activities.service import ActivitySearchService
from ...suppliers.criteria import SupplierSearchCriteria
from ...suppliers.service import SupplierSearchService
from .dependencies import get_activity_service, get_supplier_service

activities_router = APIRouter(prefix="/activities", tags=["activities"])
suppliers_router = APIRouter(prefix="/suppliers", tags=["suppliers"])


def _dump(dtos: list[Any]) -> list[dict[str, Any]]:
    return [dto.model_dump(by_alias=True) for dto in dtos]


# -- activities --------------------------------------------------------------


@activities_router.get("")
async def list_activities(
    service: ActivitySearchService = Depends(get_activity_service),  # noqa: B008
) -> list[dict[str, Any]]:
    return _dump(await service.find_all())


@activities_router.get("/search")
async def search_activities(
    request: Request,
    service: ActivitySearchService = Depends(get_activity_service),  # noqa: B008
) -> list[dict[str, Any]]:
    """
    Query parameters: ``title``, ``minPrice``, ``maxPrice``, ``minRating``,
    ``currency``, ``specialOffer``, ``supplierName``. All optional.
    """
    criteria = ActivitySearchCriteria.from_params(request.query_params)
    return _dump(await service.search(criteria))


@activities_router.get("/{entity_id}")
async def get_activity(
    entity_id: int,
    service: ActivitySearchService = Depends(get_activity_service),  # noqa: B008
) -> dict[str, Any]:
    dto = await service.find_by_id(entity_id)
    return dto.model_dump(by_alias=True)


# -- suppliers ---------------------------------------------------------------


@suppliers_router.get("")
async def list_suppliers(
    service: SupplierSearchService = Depends(get_supplier_service),  # noqa: B008
) -> list[dict[str, Any]]:
    return _dump(await service.find_all())


@suppliers_router.get("/search")
async def search_suppliers(
    request: Request,
    service: SupplierSearchService = Depends(get_supplier_service),  # noqa: B008
) -> list[dict[str, Any]]:
    """Query parameters: ``name``, ``address``, ``zip``, ``city``, ``country``."""
    criteria = SupplierSearchCriteria.from_params(request.query_params)
    return _dump(await service.search(criteria))


@suppliers_router.get("/{entity_id}")
async def get_supplier(
    entity_id: int,
    service: SupplierSearchService = Depends(get_supplier_service),  # noqa: B008
) -> dict[str, Any]:
    dto = await service.find_by_id(entity_id)
    return dto.model_dump(by_alias=True)
