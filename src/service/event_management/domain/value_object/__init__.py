"""Event Management Value Objects"""

from src.service.event_management.domain.value_object.date_range import (
    MIN_ADVANCE_HOURS,
    DateRange,
)
from src.service.event_management.domain.value_object.location import Location
from src.service.event_management.domain.value_object.sales_period import SalesPeriod
from src.service.event_management.domain.value_object.ticket_price import TicketPrice

__all__ = ['DateRange', 'Location', 'MIN_ADVANCE_HOURS', 'SalesPeriod', 'TicketPrice']
