"""
In-memory Event Query Repository

Reads the aggregates held by InMemoryEventCommandRepo and projects them into
EventListItem rows. Filtering, sorting and paging happen in Python.
"""

from datetime import datetime
from typing import Any, Callable, Dict, Iterable, List, Optional

from src.platform.logging.loguru_io import Logger
from src.service.event_management.app.dto.event_list import (
    EventFilters,
    EventListItem,
    EventSortField,
    Page,
    PageRequest,
)
from src.service.event_management.app.interface.i_event_query_repo import IEventQueryRepo
from src.service.event_management.domain.aggregate.event_aggregate import Event
from src.service.event_management.domain.clock import as_utc
from src.service.event_management.domain.enum.event_category import EventCategory
from src.service.event_management.domain.enum.event_status import EventStatus
from src.service.event_management.driven_adapter.repo.event_command_repo_memory_impl import (
    InMemoryEventCommandRepo,
)


_SORT_KEYS: Dict[EventSortField, Callable[[Event], Any]] = {
    EventSortField.CREATED_AT: lambda event: event.created_at,
    EventSortField.UPDATED_AT: lambda event: event.updated_at,
    EventSortField.START: lambda event: event.date_range.start,
    EventSortField.END: lambda event: event.date_range.end,
    EventSortField.TITLE: lambda event: event.title.lower(),
    EventSortField.TOTAL_CAPACITY: lambda event: event.total_capacity,
    EventSortField.SOLD_TICKETS: lambda event: event.sold_tickets,
    EventSortField.PUBLISHED_AT: lambda event: event.published_at,
}


def _contains(value: Optional[str], needle: str) -> bool:
    return value is not None and needle.casefold() in value.casefold()


def _matches(event: Event, filters: EventFilters) -> bool:
    if filters.category is not None and event.category is not filters.category:
        return False
    if filters.city and not _contains(event.location and event.location.city, filters.city):
        return False
    if filters.country and not _contains(
        event.location and event.location.country, filters.country
    ):
        return False
    if filters.date_from is not None and event.date_range.start < as_utc(filters.date_from):
        return False
    if filters.date_to is not None and event.date_range.start > as_utc(filters.date_to):
        return False
    if filters.min_price is not None or filters.max_price is not None:
        in_range = any(
            (filters.min_price is None or tt.price.amount >= filters.min_price)
            and (filters.max_price is None or tt.price.amount <= filters.max_price)
            for tt in event.ticket_types
        )
        if not in_range:
            return False
    if filters.has_available_tickets:
        if not any(tt.is_active and not tt.is_sold_out() for tt in event.ticket_types):
            return False
    return True


def _sorted(events: List[Event], page: PageRequest) -> List[Event]:
    key = _SORT_KEYS[page.sort_by]
    # Rows without a value (unpublished events on published_at) go last either way
    present = [event for event in events if key(event) is not None]
    missing = [event for event in events if key(event) is None]
    present.sort(key=key, reverse=page.descending)
    return present + missing


def _paginate(events: Iterable[Event], page: PageRequest) -> Page[EventListItem]:
    ordered = _sorted(list(events), page)
    window = ordered[page.offset : page.offset + page.limit]
    return Page(
        items=[EventListItem.from_event(event) for event in window],
        total=len(ordered),
        page=page.page,
        limit=page.limit,
    )


class InMemoryEventQueryRepo(IEventQueryRepo):
    def __init__(self, *, event_command_repo: InMemoryEventCommandRepo) -> None:
        self.event_command_repo = event_command_repo

    def _published(self) -> List[Event]:
        return [
            event
            for event in self.event_command_repo.snapshot()
            if event.status is EventStatus.PUBLISHED
        ]

    @Logger.io
    async def find_by_organizer(
        self, *, organizer_id: str, status: Optional[EventStatus] = None, page: PageRequest
    ) -> Page[EventListItem]:
        events = [
            event
            for event in self.event_command_repo.snapshot()
            if event.organizer_id == organizer_id and (status is None or event.status is status)
        ]
        return _paginate(events, page)

    @Logger.io
    async def find_published(
        self, *, filters: EventFilters, page: PageRequest
    ) -> Page[EventListItem]:
        return _paginate((event for event in self._published() if _matches(event, filters)), page)

    @Logger.io
    async def find_by_category(
        self, *, category: EventCategory, page: PageRequest
    ) -> Page[EventListItem]:
        return _paginate((event for event in self._published() if event.category is category), page)

    @Logger.io
    async def find_upcoming(self, *, now: datetime, page: PageRequest) -> Page[EventListItem]:
        cutoff = as_utc(now)
        return _paginate(
            (event for event in self._published() if event.date_range.start > cutoff), page
        )
