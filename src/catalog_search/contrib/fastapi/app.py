"""Application factory for the catalog-search HTTP API."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    async_sessionmaker,
    create_async_engine,
)

from ...activities.service import ActivitySearchService
from ...config import CatalogSearchSettings, configure_logging
from ...persistence.models import Activity, Supplier
from ...persistence.store import SQLAlchemyEntityStore
from ...suppliers.service import SupplierSearchService
from .errors import register_exception_handlers
from .routers import activities_router, suppliers_router

logger = logging.getLogger(__name__)


def create_app(
    settings: CatalogSearchSettings | None = None,
    *,
    activity_service: ActivitySearchService | None = None,
    supplier_service: SupplierSearchService | None = None,
) -> FastAPI:
    """
    Build the FastAPI application.

    Services passed in are used as is. Otherwise an async engine is
    created from ``settings.database_url`` and both services are backed
    by :class:`SQLAlchemyEntityStore`; the engine is disposed on
    shutdown. Schema management is left to the caller.

    Example:
        ```python
        app = create_app(CatalogSearchSettings(database_url="sqlite+aiosqlite://"))
        ```
    """
    settings = settings or CatalogSearchSettings()
    configure_logging(settings)

    engine: AsyncEngine | None = None
    if activity_service is None or supplier_service is None:
        engine = create_async_engine(settings.database_url, echo=settings.echo_sql)
        session_factory = async_sessionmaker(engine, expire_on_commit=False)
        if activity_service is None:
            activity_service = ActivitySearchService(
                SQLAlchemyEntityStore(
                    Activity, session_factory, eager_load=("supplier",)
                )
            )
        if supplier_service is None:
            supplier_service = SupplierSearchService(
                SQLAlchemyEntityStore(Supplier, session_factory)
            )

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        if engine is not None:
            logger.info("Disposing database engine")
            await engine.dispose()

    app = FastAPI(title="catalog-search", lifespan=lifespan)
    app.state.settings = settings
    app.state.activity_service = activity_service
    app.state.supplier_service = supplier_service

    register_exception_handlers(app)
    app.include_router(activities_router, prefix=settings.api_prefix)
    app.include_router(suppliers_router, prefix=settings.api_prefix)
    return app
