"""ISearchService: the contract exposed to the API layer."""

from __future__ import annotations

from typing import Any, Protocol, TypeVar, runtime_checkable

DtoT = TypeVar("DtoT", covariant=True)
CriteriaT = TypeVar("CriteriaT", contravariant=True)


@runtime_checkable
class ISearchService(Protocol[DtoT, CriteriaT]):
    """
    Search contract for one entity type.

    ``search`` and ``find_all`` return an empty list when nothing matches.
    ``find_by_id`` never returns a placeholder: a missing entity raises
    :class:`~catalog_search.exceptions.EntityNotFoundError`.
    """

    async def search(self, criteria: CriteriaT) -> list[DtoT]: ...

    async def find_by_id(self, entity_id: Any) -> DtoT: ...

    async def find_all(self) -> list[DtoT]: ...
