from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ..persistence.models import Activity
from ..search.service import SearchService
from . import specifications
from .criteria import ActivitySearchCriteria
from .dto import ActivityDto, ActivityDtoMapper

if TYPE_CHECKING:
    from ..ports.store import IEntityStore


class ActivitySearchService(
    SearchService[Activity, ActivityDto, ActivitySearchCriteria]
):
    """Search over activities. The store must resolve ``activity.supplier``."""

    def __init__(self, store: IEntityStore[Activity, Any]) -> None:
        super().__init__(
            store,
            ActivityDtoMapper(),
            specifications.from_criteria,
            criteria_cls=ActivitySearchCriteria,
            entity_name="Activity",
        )
