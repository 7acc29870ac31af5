"""Domain Events"""

from src.service.event_management.domain.domain_event.domain_event import DomainEvent
from src.service.event_management.domain.domain_event.event_domain_event import (
    EventCancelled,
    EventCreated,
    EventPublished,
    EventUpdated,
)
from src.service.event_management.domain.domain_event.field_change import Changes, FieldChange
from src.service.event_management.domain.domain_event.ticket_type_domain_event import (
    TicketTypeAdded,
    TicketTypeSoldOut,
    TicketTypeUpdated,
)

__all__ = [
    'Changes',
    'DomainEvent',
    'EventCancelled',
    'EventCreated',
    'EventPublished',
    'EventUpdated',
    'FieldChange',
    'TicketTypeAdded',
    'TicketTypeSoldOut',
    'TicketTypeUpdated',
]
