"""
Event Status - lifecycle states of an event

    DRAFT ──publish──> PUBLISHED ──mark_as_completed──> COMPLETED
      │                    │
      └──────cancel────────┴──────> CANCELLED

CANCELLED and COMPLETED are terminal.
"""

from enum import StrEnum
from typing import Dict, FrozenSet


class EventStatus(StrEnum):
    DRAFT = 'DRAFT'
    PUBLISHED = 'PUBLISHED'
    CANCELLED = 'CANCELLED'
    COMPLETED = 'COMPLETED'

    def allowed_transitions(self) -> FrozenSet['EventStatus']:
        return EVENT_STATUS_TRANSITIONS[self]

    def can_transition_to(self, target: 'EventStatus') -> bool:
        return target in EVENT_STATUS_TRANSITIONS[self]

    def is_terminal(self) -> bool:
        return not EVENT_STATUS_TRANSITIONS[self]

    def is_cancellable(self) -> bool:
        return self.can_transition_to(EventStatus.CANCELLED)

    def is_modifiable(self) -> bool:
        return self is EventStatus.DRAFT

    def can_purchase_tickets(self) -> bool:
        return self is EventStatus.PUBLISHED


EVENT_STATUS_TRANSITIONS: Dict[EventStatus, FrozenSet[EventStatus]] = {
    EventStatus.DRAFT: frozenset({EventStatus.PUBLISHED, EventStatus.CANCELLED}),
    EventStatus.PUBLISHED: frozenset({EventStatus.CANCELLED, EventStatus.COMPLETED}),
    EventStatus.CANCELLED: frozenset(),
    EventStatus.COMPLETED: frozenset(),
}
