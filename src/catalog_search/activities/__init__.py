from .criteria import ActivitySearchCriteria
from .dto import ActivityDto, ActivityDtoMapper
from .service import ActivitySearchService

__all__ = [
    "ActivitySearchCriteria",
    "ActivityDto",
    "ActivityDtoMapper",
    "ActivitySearchService",
]
