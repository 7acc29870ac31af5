"""Event Management Domain Enums"""

from src.service.event_management.domain.enum.currency import Currency
from src.service.event_management.domain.enum.event_category import EventCategory
from src.service.event_management.domain.enum.event_status import (
    EVENT_STATUS_TRANSITIONS,
    EventStatus,
)
from src.service.event_management.domain.enum.sales_status import SalesStatus

__all__ = ['Currency', 'EVENT_STATUS_TRANSITIONS', 'EventCategory', 'EventStatus', 'SalesStatus']
