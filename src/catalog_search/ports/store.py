"""IEntityStore: the two queries the search core needs from a store."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, TypeVar, runtime_checkable

if TYPE_CHECKING:
    from ..specifications.base import ISpecification

T = TypeVar("T")
ID = TypeVar("ID", contravariant=True)


@runtime_checkable
class IEntityStore(Protocol[T, ID]):
    """
    Read-only store port consumed by the search services.

    Adapters must evaluate the specification AST faithfully:
    case-insensitive containment, exact match, inclusive ranges, boolean
    equality and relationship traversal where an absent relation never
    matches. Store failures surface as
    :class:`~catalog_search.exceptions.StoreError`.
    """

    async def query_all(self, specification: ISpecification[Any]) -> list[T]:
        """Return every entity satisfying *specification*, in natural order."""
        ...

    async def get_by_id(self, entity_id: ID) -> T | None:
        """Return the entity with primary key *entity_id*, or ``None``."""
        ...
