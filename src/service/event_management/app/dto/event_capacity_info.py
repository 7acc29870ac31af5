from decimal import Decimal
from typing import List

import attrs

from src.service.event_management.domain.enum.currency import Currency


@attrs.define(frozen=True)
class TicketTypeCapacityInfo:
    ticket_type_id: str
    name: str
    quantity: int
    sold_quantity: int
    available_quantity: int
    sales_progress: int
    is_sold_out: bool
    is_on_sale: bool
    is_active: bool


@attrs.define(frozen=True)
class EventCapacityInfo:
    """
    Capacity and revenue snapshot of one event

    potential_revenue: every seat sold at its current price
    realized_revenue: what has actually been sold so far
    """

    event_id: str
    total_capacity: int
    sold_tickets: int
    available_tickets: int
    sales_progress: int
    is_sold_out: bool
    potential_revenue: Decimal
    realized_revenue: Decimal
    currency: Currency
    ticket_types: List[TicketTypeCapacityInfo] = attrs.field(factory=list)
