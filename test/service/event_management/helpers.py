"""Builders for event management tests: valid value objects, ticket types and events."""

from datetime import timedelta
from decimal import Decimal
from typing import Any, Optional

from src.service.event_management.domain.aggregate.event_aggregate import Event
from src.service.event_management.domain.clock import utc_now
from src.service.event_management.domain.entity.ticket_type_entity import TicketType
from src.service.event_management.domain.enum import Currency, EventCategory, EventStatus
from src.service.event_management.domain.value_object import (
    DateRange,
    Location,
    SalesPeriod,
    TicketPrice,
)
from test.event_test_constants import (
    DEFAULT_CITY,
    DEFAULT_COUNTRY,
    DEFAULT_EVENT_TITLE,
    ORGANIZER_ID,
)


def future_date_range(*, days_ahead: int = 30, hours: int = 4) -> DateRange:
    start = utc_now() + timedelta(days=days_ahead)
    return DateRange.create(start, start + timedelta(hours=hours)).unwrap()


def sales_period_for(date_range: DateRange, *, opens_in: timedelta = timedelta(0)) -> SalesPeriod:
    start = utc_now() + opens_in
    end = date_range.start - timedelta(hours=1)
    return SalesPeriod.create(start, end).unwrap()


def make_price(amount: str = '50', currency: Currency = Currency.TND) -> TicketPrice:
    return TicketPrice.create(Decimal(amount), currency).unwrap()


def make_location(city: str = DEFAULT_CITY, country: str = DEFAULT_COUNTRY) -> Location:
    return Location.create(city=city, country=country).unwrap()


def make_event(
    *,
    organizer_id: str = ORGANIZER_ID,
    title: str = DEFAULT_EVENT_TITLE,
    category: EventCategory = EventCategory.CONCERT,
    location: Optional[Location] = None,
    date_range: Optional[DateRange] = None,
    clear_events: bool = True,
) -> Event:
    event = Event.create(
        organizer_id=organizer_id,
        title=title,
        category=category,
        location=location if location is not None else make_location(),
        date_range=date_range or future_date_range(),
    ).unwrap()
    if clear_events:
        event.pull_domain_events()
    return event


def make_ticket_type(
    event: Event,
    *,
    name: str = 'General',
    amount: str = '50',
    currency: Currency = Currency.TND,
    quantity: int = 100,
    sales_period: Optional[SalesPeriod] = None,
) -> TicketType:
    return TicketType.create(
        event_id=event.id,
        name=name,
        price=make_price(amount, currency),
        quantity=quantity,
        sales_period=sales_period or sales_period_for(event.date_range),
    ).unwrap()


def make_event_with_ticket_type(*, quantity: int = 100, **kwargs: Any) -> Event:
    event = make_event(**kwargs)
    event.add_ticket_type(make_ticket_type(event, quantity=quantity)).unwrap()
    event.pull_domain_events()
    return event


def make_published_event(*, quantity: int = 100, **kwargs: Any) -> Event:
    event = make_event_with_ticket_type(quantity=quantity, **kwargs)
    event.publish().unwrap()
    event.pull_domain_events()
    return event


def make_ended_event(*, status: EventStatus = EventStatus.PUBLISHED, days_ago: int = 1) -> Event:
    """Events in the past cannot be created; rebuild one the way a repository would."""
    start = utc_now() - timedelta(days=days_ago, hours=4)
    end = utc_now() - timedelta(days=days_ago)
    return Event.reconstitute(
        id=f'ended-{days_ago}-{status.value}',
        organizer_id=ORGANIZER_ID,
        title=f'Past event {days_ago}',
        category=EventCategory.CONCERT,
        location=make_location(),
        date_range=DateRange.from_existing(start, end).unwrap(),
        status=status,
        published_at=start - timedelta(days=7) if status is not EventStatus.DRAFT else None,
    )
