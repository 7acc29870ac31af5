"""
Read-side shapes for event listings

EventFilters / PageRequest go into the query repository,
Page[EventListItem] comes back out to the caller.
"""

from datetime import datetime
from decimal import Decimal
from enum import StrEnum
import math
from typing import Generic, List, Optional, TypeVar

import attrs

from src.service.event_management.domain.aggregate.event_aggregate import Event
from src.service.event_management.domain.enum.currency import Currency
from src.service.event_management.domain.enum.event_category import EventCategory
from src.service.event_management.domain.enum.event_status import EventStatus


T = TypeVar('T')

DEFAULT_PAGE_SIZE = 20
MAX_PAGE_SIZE = 100
DESCRIPTION_PREVIEW_LENGTH = 200


class EventSortField(StrEnum):
    CREATED_AT = 'created_at'
    UPDATED_AT = 'updated_at'
    START = 'start'
    END = 'end'
    TITLE = 'title'
    TOTAL_CAPACITY = 'total_capacity'
    SOLD_TICKETS = 'sold_tickets'
    PUBLISHED_AT = 'published_at'


@attrs.define(frozen=True)
class EventFilters:
    category: Optional[EventCategory] = None
    city: Optional[str] = None
    country: Optional[str] = None
    date_from: Optional[datetime] = None
    date_to: Optional[datetime] = None
    min_price: Optional[Decimal] = None
    max_price: Optional[Decimal] = None
    has_available_tickets: Optional[bool] = None


@attrs.define(frozen=True)
class PageRequest:
    page: int = 1
    limit: int = DEFAULT_PAGE_SIZE
    sort_by: EventSortField = EventSortField.CREATED_AT
    descending: bool = True

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


@attrs.define(frozen=True)
class Page(Generic[T]):
    items: List[T]
    total: int
    page: int
    limit: int

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total / self.limit) if self.limit > 0 else 0

    @property
    def has_next_page(self) -> bool:
        return self.page < self.total_pages

    @property
    def has_previous_page(self) -> bool:
        return self.page > 1


def _preview(description: Optional[str]) -> Optional[str]:
    if description is None or len(description) <= DESCRIPTION_PREVIEW_LENGTH:
        return description
    return description[:DESCRIPTION_PREVIEW_LENGTH] + '...'


@attrs.define(frozen=True)
class EventListItem:
    """
    One row of an event listing

    min_price / max_price / currency are None for events without ticket types.
    """

    id: str
    title: str
    description: Optional[str]
    category: EventCategory
    city: Optional[str]
    country: Optional[str]
    start: datetime
    end: datetime
    image_url: Optional[str]
    status: EventStatus
    organizer_id: str
    min_price: Optional[Decimal]
    max_price: Optional[Decimal]
    currency: Optional[Currency]
    ticket_type_count: int
    total_capacity: int
    available_capacity: int
    sales_progress: int
    is_sold_out: bool
    is_on_sale: bool
    created_at: datetime
    published_at: Optional[datetime]

    @classmethod
    def from_event(cls, event: Event) -> 'EventListItem':
        prices = [tt.price.amount for tt in event.ticket_types]
        return cls(
            id=event.id,
            title=event.title,
            description=_preview(event.description),
            category=event.category,
            city=event.location.city if event.location else None,
            country=event.location.country if event.location else None,
            start=event.date_range.start,
            end=event.date_range.end,
            image_url=event.image_url,
            status=event.status,
            organizer_id=event.organizer_id,
            min_price=min(prices) if prices else None,
            max_price=max(prices) if prices else None,
            currency=event.ticket_types[0].price.currency if event.ticket_types else None,
            ticket_type_count=event.ticket_type_count,
            total_capacity=event.total_capacity,
            available_capacity=event.available_capacity(),
            sales_progress=event.sales_progress(),
            is_sold_out=event.is_sold_out(),
            is_on_sale=bool(event.active_ticket_types()),
            created_at=event.created_at,
            published_at=event.published_at,
        )
