"""Ticket Type Domain Events - inventory facts, keyed by the owning event"""

from datetime import datetime
from typing import Optional

import attrs

from src.service.event_management.domain.clock import utc_now
from src.service.event_management.domain.domain_event.field_change import Changes
from src.service.event_management.domain.value_object.sales_period import SalesPeriod
from src.service.event_management.domain.value_object.ticket_price import TicketPrice


@attrs.define(frozen=True)
class TicketTypeAdded:
    event_id: str
    ticket_type_id: str
    name: str
    price: TicketPrice
    quantity: int
    sales_period: SalesPeriod
    occurred_at: datetime = attrs.field(factory=utc_now)

    @property
    def aggregate_id(self) -> str:
        return self.event_id


@attrs.define(frozen=True)
class TicketTypeUpdated:
    event_id: str
    ticket_type_id: str
    name: str
    changes: Changes
    updated_at: Optional[datetime] = None
    occurred_at: datetime = attrs.field(factory=utc_now)

    @property
    def aggregate_id(self) -> str:
        return self.event_id


@attrs.define(frozen=True)
class TicketTypeSoldOut:
    event_id: str
    ticket_type_id: str
    name: str
    total_quantity: int
    occurred_at: datetime = attrs.field(factory=utc_now)

    @property
    def aggregate_id(self) -> str:
        return self.event_id
