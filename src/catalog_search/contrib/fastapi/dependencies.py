"""FastAPI dependencies for the search services.

The services live on ``app.state`` (see :func:`create_app`); routes get
them through ``Depends``.
"""

from __future__ import annotations

from fastapi import Request

from ...activities.service import ActivitySearchService
from ...suppliers.service import SupplierSearchService


def get_activity_service(request: Request) -> ActivitySearchService:
    """Return the activity search service bound to the running app."""
    service: ActivitySearchService = request.app.state.activity_service
    return service


def get_supplier_service(request: Request) -> SupplierSearchService:
    """Return the supplier search service bound to the running app."""
    service: SupplierSearchService = request.app.state.supplier_service
    return service
