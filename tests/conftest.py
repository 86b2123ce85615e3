"""Shared fixtures: the sample catalog on both store backends."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from catalog_search.activities import ActivitySearchService
from catalog_search.adapters.memory import InMemoryEntityStore
from catalog_search.persistence import (
    Activity,
    Base,
    SQLAlchemyEntityStore,
    Supplier,
)
from catalog_search.specifications.evaluator import build_default_registry
from catalog_search.suppliers import SupplierSearchService

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

    from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession


def make_catalog() -> tuple[list[Supplier], list[Activity]]:
    """Two suppliers, each offering one activity. Fresh objects per call."""
    berlin = Supplier(
        id=1,
        name="Berlin Tours GmbH",
        address="123 Main St",
        zip="10115",
        city="Berlin",
        country="Germany",
    )
    munich = Supplier(
        id=2,
        name="Munich Adventures",
        address="456 Oak Ave",
        zip="80331",
        city="Munich",
        country="Germany",
    )
    museum_tour = Activity(
        id=1,
        title="Museum Tour",
        price=75,
        currency="EUR",
        rating=4.8,
        special_offer=True,
        supplier=berlin,
    )
    city_walk = Activity(
        id=2,
        title="City Walk",
        price=50,
        currency="EUR",
        rating=4.5,
        special_offer=False,
        supplier=munich,
    )
    return [berlin, munich], [museum_tour, city_walk]


@pytest.fixture
def registry():
    """Default in-memory operator registry for building specs."""
    return build_default_registry()


@pytest.fixture
def catalog() -> tuple[list[Supplier], list[Activity]]:
    return make_catalog()


# ---------------------------------------------------------------------------
# SQLAlchemy (aiosqlite, in-memory)
# ---------------------------------------------------------------------------


@pytest.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    # StaticPool keeps the single in-memory database alive across sessions.
    eng = create_async_engine("sqlite+aiosqlite:///:memory:", poolclass=StaticPool)
    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield eng
    await eng.dispose()


@pytest.fixture
async def session_factory(engine) -> async_sessionmaker[AsyncSession]:
    factory = async_sessionmaker(engine, expire_on_commit=False)
    suppliers, activities = make_catalog()
    async with factory() as session:
        session.add_all([*suppliers, *activities])
        await session.commit()
    return factory


@pytest.fixture
def sql_activity_store(session_factory) -> SQLAlchemyEntityStore[Activity]:
    return SQLAlchemyEntityStore(Activity, session_factory, eager_load=("supplier",))


@pytest.fixture
def sql_supplier_store(session_factory) -> SQLAlchemyEntityStore[Supplier]:
    return SQLAlchemyEntityStore(Supplier, session_factory)


# ---------------------------------------------------------------------------
# Services on both backends
# ---------------------------------------------------------------------------


@pytest.fixture(params=["memory", "sqlalchemy"])
def activity_service(request, catalog, sql_activity_store) -> ActivitySearchService:
    if request.param == "memory":
        _, activities = catalog
        return ActivitySearchService(InMemoryEntityStore(activities))
    return ActivitySearchService(sql_activity_store)


@pytest.fixture(params=["memory", "sqlalchemy"])
def supplier_service(request, catalog, sql_supplier_store) -> SupplierSearchService:
    if request.param == "memory":
        suppliers, _ = catalog
        return SupplierSearchService(InMemoryEntityStore(suppliers))
    return SupplierSearchService(sql_supplier_store)
