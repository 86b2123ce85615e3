from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from ..persistence.models import Activity
from ..search.mapper import DtoMapper


class ActivityDto(BaseModel):
    """Read model for an activity; the supplier is flattened to its name."""

    model_config = ConfigDict(
        frozen=True, alias_generator=to_camel, populate_by_name=True
    )

    id: int
    title: str
    price: int
    currency: str
    rating: float
    special_offer: bool
    supplier_name: str


class ActivityDtoMapper(DtoMapper[Activity, ActivityDto]):
    def to_dto(self, entity: Activity) -> ActivityDto:
        supplier = entity.supplier
        return ActivityDto(
            id=entity.id,
            title=entity.title,
            price=entity.price,
            currency=entity.currency,
            rating=entity.rating,
            special_offer=entity.special_offer,
            supplier_name=supplier.name if supplier is not None else "",
        )
