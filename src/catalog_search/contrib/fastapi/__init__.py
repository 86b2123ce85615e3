"""FastAPI integration for catalog-search."""

from .app import create_app
from .dependencies import get_activity_service, get_supplier_service
from .errors import register_exception_handlers, status_code_for
from .routers import activities_router, suppliers_router

__all__: list[str] = [
    "create_app",
    "activities_router",
    "suppliers_router",
    "get_activity_service",
    "get_supplier_service",
    "register_exception_handlers",
    "status_code_for",
]
