from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from ..persistence.models import Supplier
from ..search.mapper import DtoMapper


class SupplierDto(BaseModel):
    model_config = ConfigDict(
        frozen=True, alias_generator=to_camel, populate_by_name=True
    )

    id: int
    name: str
    address: str | None = None
    zip: str | None = None
    city: str | None = None
    country: str | None = None


class SupplierDtoMapper(DtoMapper[Supplier, SupplierDto]):
    def to_dto(self, entity: Supplier) -> SupplierDto:
        return SupplierDto(
            id=entity.id,
            name=entity.name,
            address=entity.address,
            zip=entity.zip,
            city=entity.city,
            country=entity.country,
        )
