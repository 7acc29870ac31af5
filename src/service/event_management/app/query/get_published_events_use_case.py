from typing import Optional

from src.platform.logging.loguru_io import Logger
from src.service.event_management.app.dto.event_list import (
    DEFAULT_PAGE_SIZE,
    EventFilters,
    EventListItem,
    EventSortField,
    Page,
)
from src.service.event_management.app.query.base_event_list_use_case import (
    EventListUseCase,
    build_page_request,
)


class GetPublishedEventsUseCase(EventListUseCase):
    """Public catalogue: PUBLISHED events matching the filters, soonest first by default."""

    @Logger.io
    async def execute(
        self,
        *,
        filters: Optional[EventFilters] = None,
        page: int = 1,
        limit: int = DEFAULT_PAGE_SIZE,
        sort_by: Optional[EventSortField] = None,
        descending: Optional[bool] = None,
    ) -> Page[EventListItem]:
        page_request = build_page_request(
            page=page,
            limit=limit,
            sort_by=sort_by,
            descending=descending,
            default_sort=EventSortField.START,
            default_descending=False,
        )
        result = await self.event_query_repo.find_published(
            filters=filters or EventFilters(), page=page_request
        )
        Logger.base.info(f'Found {result.total} published event(s)')
        return result
