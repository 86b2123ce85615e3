from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from sqlalchemy import inspect, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import selectinload

from ..exceptions import StoreError
from .specifications.compiler import apply_sqla_filter

if TYPE_CHECKING:
    from collections.abc import Sequence

    from sqlalchemy import Select
    from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
    from sqlalchemy.orm.strategy_options import _AbstractLoad

    from ..specifications.base import ISpecification
    from .specifications.clauses import SQLAlchemyOperatorRegistry

T = TypeVar("T")

logger = logging.getLogger(__name__)


class SQLAlchemyEntityStore(Generic[T]):
    """
    Implementation of ``IEntityStore`` on an async SQLAlchemy session.

    The specification's ``to_dict()`` AST is compiled into a single
    ``SELECT`` (see :func:`apply_sqla_filter`); nothing is post-filtered
    in Python. Rows come back in primary-key order.

    Relationships listed in ``eager_load`` are loaded with
    ``selectinload`` so that mappers can read them after the session is
    closed::

        store = SQLAlchemyEntityStore(
            Activity, session_factory, eager_load=("supplier",)
        )
        activities = await store.query_all(spec)

    Every call opens its own session. Any ``SQLAlchemyError`` is raised
    again as :class:`StoreError`; there is no retry.
    """

    def __init__(
        self,
        model: type[T],
        session_factory: async_sessionmaker[AsyncSession],
        *,
        eager_load: Sequence[str] = (),
        registry: SQLAlchemyOperatorRegistry | None = None,
    ) -> None:
        self.model = model
        self._session_factory = session_factory
        self._eager_load = tuple(eager_load)
        self._registry = registry

    # -- statement building ---------------------------------------------------

    def _load_options(self) -> list[_AbstractLoad]:
        return [selectinload(getattr(self.model, name)) for name in self._eager_load]

    def build_statement(self, specification: ISpecification[Any]) -> Select[Any]:
        """Return the ``SELECT`` that ``query_all`` would execute."""
        primary_key = inspect(self.model).primary_key
        stmt = select(self.model).options(*self._load_options()).order_by(*primary_key)
        return apply_sqla_filter(
            stmt, self.model, specification.to_dict(), registry=self._registry
        )

    # -- IEntityStore -----------------------------------------------------------

    async def query_all(self, specification: ISpecification[Any]) -> list[T]:
        stmt = self.build_statement(specification)
        try:
            async with self._session_factory() as session:
                result = await session.execute(stmt)
                return list(result.scalars().all())
        except SQLAlchemyError as exc:
            logger.exception("Query on %s failed", self.model.__name__)
            raise StoreError(f"Failed to query {self.model.__name__}: {exc}") from exc

    async def get_by_id(self, entity_id: Any) -> T | None:
        try:
            async with self._session_factory() as session:
                return await session.get(
                    self.model, entity_id, options=self._load_options()
                )
        except SQLAlchemyError as exc:
            logger.exception(
                "Lookup of %s id=%r failed", self.model.__name__, entity_id
            )
            raise StoreError(
                f"Failed to load {self.model.__name__} id={entity_id!r}: {exc}"
            ) from exc
