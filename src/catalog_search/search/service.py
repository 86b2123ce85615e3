"""Generic search service: criteria in, DTOs out."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from ..exceptions import EntityNotFoundError
from .criteria import SearchCriteria

if TYPE_CHECKING:
    from ..ports.store import IEntityStore
    from ..specifications.base import ISpecification
    from .mapper import DtoMapper

EntityT = TypeVar("EntityT")
DtoT = TypeVar("DtoT")
CriteriaT = TypeVar("CriteriaT", bound=SearchCriteria)

logger = logging.getLogger(__name__)


class SearchService(Generic[EntityT, DtoT, CriteriaT]):
    """
    Search / find-by-id / find-all over one entity type.

    Written once and parameterized per entity by wiring in a store, a
    DTO mapper and a specification factory that turns criteria into a
    composed predicate. Each search issues exactly one store query.

    Usage::

        service = SearchService(
            store,
            ActivityDtoMapper(),
            activity_specs.from_criteria,
            criteria_cls=ActivitySearchCriteria,
            entity_name="Activity",
        )
        dtos = await service.search(ActivitySearchCriteria(title="museum"))
    """

    def __init__(
        self,
        store: IEntityStore[EntityT, Any],
        mapper: DtoMapper[EntityT, DtoT],
        specification_factory: Callable[[CriteriaT], ISpecification[EntityT]],
        *,
        criteria_cls: type[CriteriaT],
        entity_name: str,
    ) -> None:
        self._store = store
        self._mapper = mapper
        self._specification_factory = specification_factory
        self.criteria_cls = criteria_cls
        self.entity_name = entity_name

    async def search(self, criteria: CriteriaT) -> list[DtoT]:
        """Return DTOs for every entity matching *criteria*, in store order.

        Raises:
            InvalidCriteriaError: When *criteria* violates its constraints.
            StoreError: When the store cannot run the query.
        """
        criteria.ensure_valid()
        specification = self._specification_factory(criteria)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "Searching %s with specification %s",
                self.entity_name,
                specification.to_dict(),
            )

        entities = await self._store.query_all(specification)
        logger.debug("Found %d %s result(s)", len(entities), self.entity_name)
        return self._mapper.to_dto_list(entities)

    async def find_by_id(self, entity_id: Any) -> DtoT:
        """Return the DTO for *entity_id* or raise ``EntityNotFoundError``."""
        entity = await self._store.get_by_id(entity_id)
        if entity is None:
            logger.info("%s with id=%r not found", self.entity_name, entity_id)
            raise EntityNotFoundError(self.entity_name, entity_id)
        return self._mapper.to_dto(entity)

    async def find_all(self) -> list[DtoT]:
        return await self.search(self.criteria_cls())
