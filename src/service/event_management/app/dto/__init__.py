from src.service.event_management.app.dto.event_capacity_info import (
    EventCapacityInfo,
    TicketTypeCapacityInfo,
)
from src.service.event_management.app.dto.event_list import (
    EventFilters,
    EventListItem,
    EventSortField,
    Page,
    PageRequest,
)

__all__ = [
    'EventCapacityInfo',
    'EventFilters',
    'EventListItem',
    'EventSortField',
    'Page',
    'PageRequest',
    'TicketTypeCapacityInfo',
]
