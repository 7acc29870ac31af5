from typing import Optional, Union

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
from src.service.event_management.domain.enum.event_category import EventCategory
from src.service.event_management.domain.event_error import EventErrorCode


class GetEventsByCategoryUseCase(EventListUseCase):
    @Logger.io
    async def execute(
        self,
        *,
        category: Union[EventCategory, str],
        page: int = 1,
        limit: int = DEFAULT_PAGE_SIZE,
        sort_by: Optional[EventSortField] = None,
        descending: Optional[bool] = None,
    ) -> Page[EventListItem]:
        parsed = EventCategory.from_string(category)
        if parsed is None:
            raise DomainError(
                f'Invalid event category: {category}',
                error_code=EventErrorCode.INVALID_CATEGORY.value,
            )
        page_request = build_page_request(
            page=page,
            limit=limit,
            sort_by=sort_by,
            descending=descending,
            default_sort=EventSortField.START,
            default_descending=False,
        )
        result = await self.event_query_repo.find_by_category(category=parsed, page=page_request)
        Logger.base.info(f'Found {result.total} published {parsed.value} event(s)')
        return result
