from typing import Optional

from src.platform.exception.exceptions import DomainError
from src.platform.logging.loguru_io import Logger
from src.service.event_management.app.dto.event_list import (
    DEFAULT_PAGE_SIZE,
    EventListItem,
    EventSortField,
    Page,
)
from src.service.event_management.app.query.base_event_list_use_case import (
    EventListUseCase,
    build_page_request,
)
from src.service.event_management.domain.enum.event_status import EventStatus
from src.service.event_management.domain.event_error import EventErrorCode


class GetOrganizerEventsUseCase(EventListUseCase):
    """Organizer dashboard listing: every status, newest first by default."""

    @Logger.io
    async def execute(
        self,
        *,
        organizer_id: str,
        status: Optional[EventStatus] = None,
        page: int = 1,
        limit: int = DEFAULT_PAGE_SIZE,
        sort_by: Optional[EventSortField] = None,
        descending: Optional[bool] = None,
    ) -> Page[EventListItem]:
        if not organizer_id or not organizer_id.strip():
            raise DomainError(
                'Organizer ID is required', error_code=EventErrorCode.MISSING_ORGANIZER.value
            )
        page_request = build_page_request(
            page=page,
            limit=limit,
            sort_by=sort_by,
            descending=descending,
            default_sort=EventSortField.CREATED_AT,
            default_descending=True,
        )
        result = await self.event_query_repo.find_by_organizer(
            organizer_id=organizer_id, status=status, page=page_request
        )
        Logger.base.info(f'Found {result.total} event(s) for organizer {organizer_id}')
        return result
