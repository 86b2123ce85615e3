"""InMemoryEntityStore: dict-backed store for unit tests."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Generic, TypeVar

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from ...specifications.base import ISpecification

T = TypeVar("T")


def _default_id(entity: Any) -> Any:
    return entity.id


class InMemoryEntityStore(Generic[T]):
    """In-memory implementation of ``IEntityStore[T, Any]``.

    Keeps entities in a dict keyed by their ``id`` so iteration follows
    insertion order, which stands in for a database's primary-key order.
    Filtering is done with ``specification.is_satisfied_by``.
    """

    def __init__(
        self,
        entities: Iterable[T] = (),
        *,
        id_getter: Callable[[T], Any] | None = None,
    ) -> None:
        self._id_getter: Callable[[T], Any] = id_getter or _default_id
        self._store: dict[Any, T] = {}
        for entity in entities:
            self.add(entity)

    def add(self, entity: T) -> None:
        self._store[self._id_getter(entity)] = entity

    async def query_all(self, specification: ISpecification[Any]) -> list[T]:
        return [
            entity
            for entity in self._store.values()
            if specification.is_satisfied_by(entity)
        ]

    async def get_by_id(self, entity_id: Any) -> T | None:
        return self._store.get(entity_id)
