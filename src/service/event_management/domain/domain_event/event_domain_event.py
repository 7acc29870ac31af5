"""
Event Domain Events

Facts emitted by the Event aggregate about its own lifecycle. They are
buffered on the aggregate and published by the caller after a successful save.
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional

import attrs

from src.service.event_management.domain.clock import utc_now
from src.service.event_management.domain.domain_event.field_change import Changes
from src.service.event_management.domain.enum.currency import Currency
from src.service.event_management.domain.enum.event_category import EventCategory


@attrs.define(frozen=True)
class EventCreated:
    event_id: str
    organizer_id: str
    title: str
    category: EventCategory
    occurred_at: datetime = attrs.field(factory=utc_now)

    @property
    def aggregate_id(self) -> str:
        return self.event_id


@attrs.define(frozen=True)
class EventPublished:
    event_id: str
    organizer_id: str
    title: str
    published_at: datetime
    ticket_type_count: int
    total_capacity: int
    occurred_at: datetime = attrs.field(factory=utc_now)

    @property
    def aggregate_id(self) -> str:
        return self.event_id


@attrs.define(frozen=True)
class EventCancelled:
    """Carries sold tickets and revenue so the refund side can decide what is owed."""

    event_id: str
    organizer_id: str
    title: str
    reason: str
    cancelled_at: datetime
    sold_tickets: int
    revenue_amount: Decimal
    revenue_currency: Currency
    occurred_at: datetime = attrs.field(factory=utc_now)

    @property
    def aggregate_id(self) -> str:
        return self.event_id

    def needs_refunds(self) -> bool:
        return self.sold_tickets > 0


@attrs.define(frozen=True)
class EventUpdated:
    event_id: str
    organizer_id: str
    changes: Changes
    updated_at: Optional[datetime] = None
    occurred_at: datetime = attrs.field(factory=utc_now)

    @property
    def aggregate_id(self) -> str:
        return self.event_id
