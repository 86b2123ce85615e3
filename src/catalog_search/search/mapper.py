"""Entity-to-DTO mapping."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import Generic, TypeVar

EntityT = TypeVar("EntityT")
DtoT = TypeVar("DtoT")


class DtoMapper(ABC, Generic[EntityT, DtoT]):
    """
    Projects entities onto DTOs.

    Only :meth:`to_dto` is entity specific. List mapping keeps the input
    order and does not deduplicate.
    """

    @abstractmethod
    def to_dto(self, entity: EntityT) -> DtoT:
        """Map a single entity. Must not mutate it."""

    def to_dto_list(self, entities: Iterable[EntityT]) -> list[DtoT]:
        return [self.to_dto(entity) for entity in entities]
