from src.service.event_management.app.event_handler.event_cancelled_handler import (
    EventCancelledHandler,
)
from src.service.event_management.app.event_handler.event_published_handler import (
    EventPublishedHandler,
)
from src.service.event_management.app.event_handler.ticket_type_sold_out_handler import (
    TicketTypeSoldOutHandler,
)

__all__ = ['EventCancelledHandler', 'EventPublishedHandler', 'TicketTypeSoldOutHandler']
