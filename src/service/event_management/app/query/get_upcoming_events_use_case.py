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
from src.service.event_management.domain.clock import utc_now


class GetUpcomingEventsUseCase(EventListUseCase):
    """
    PUBLISHED events that have not started yet, soonest first

    With a city or country the location filters apply and the cut-off becomes
    inclusive (start >= now).
    """

    @Logger.io
    async def execute(
        self,
        *,
        city: Optional[str] = None,
        country: Optional[str] = None,
        page: int = 1,
        limit: int = DEFAULT_PAGE_SIZE,
    ) -> Page[EventListItem]:
        page_request = build_page_request(
            page=page,
            limit=limit,
            default_sort=EventSortField.START,
            default_descending=False,
        )
        now = utc_now()
        if city or country:
            filters = EventFilters(city=city, country=country, date_from=now)
            result = await self.event_query_repo.find_published(filters=filters, page=page_request)
        else:
            result = await self.event_query_repo.find_upcoming(now=now, page=page_request)
        Logger.base.info(f'Found {result.total} upcoming event(s)')
        return result
