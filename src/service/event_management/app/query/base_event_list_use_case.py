"""
Shared plumbing for event listing use cases

Paging arguments are validated here; an out-of-range page or limit is a
DomainError (INVALID_PAGINATION), never silently clamped.
"""

from typing import Optional

from src.platform.exception.exceptions import DomainError
from src.service.event_management.app.dto.event_list import (
    DEFAULT_PAGE_SIZE,
    MAX_PAGE_SIZE,
    EventSortField,
    PageRequest,
)
from src.service.event_management.app.interface.i_event_query_repo import IEventQueryRepo
from src.service.event_management.domain.event_error import EventErrorCode


def build_page_request(
    *,
    page: int = 1,
    limit: int = DEFAULT_PAGE_SIZE,
    sort_by: Optional[EventSortField] = None,
    descending: Optional[bool] = None,
    default_sort: EventSortField,
    default_descending: bool,
) -> PageRequest:
    if not isinstance(page, int) or page < 1:
        raise DomainError(
            'Page must be a positive integer',
            error_code=EventErrorCode.INVALID_PAGINATION.value,
        )
    if not isinstance(limit, int) or not 1 <= limit <= MAX_PAGE_SIZE:
        raise DomainError(
            f'Limit must be between 1 and {MAX_PAGE_SIZE}',
            error_code=EventErrorCode.INVALID_PAGINATION.value,
        )
    return PageRequest(
        page=page,
        limit=limit,
        sort_by=EventSortField(sort_by) if sort_by is not None else default_sort,
        descending=default_descending if descending is None else descending,
    )


class EventListUseCase:
    def __init__(self, *, event_query_repo: IEventQueryRepo) -> None:
        self.event_query_repo = event_query_repo
