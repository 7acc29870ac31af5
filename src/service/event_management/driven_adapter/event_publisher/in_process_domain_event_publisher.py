"""
In-process Domain Event Publisher

Encodes every published event with the shared codec (so the wire format is
exercised even without a broker) and dispatches the event object to the
handlers registered for its type, in registration order.

A failing handler is logged with its traceback and does not stop the other
handlers: by the time events are published the aggregate is already saved.
"""

from typing import Any, Awaitable, Dict, List, Protocol, Sequence, Tuple, Type

from src.platform.logging.loguru_io import Logger
from src.service.event_management.app.interface.i_domain_event_publisher import (
    IDomainEventPublisher,
)
from src.service.event_management.domain.domain_event import DomainEvent
from src.service.event_management.driven_adapter.event_publisher.domain_event_codec import (
    encode_domain_event,
)


class DomainEventHandler(Protocol):
    def handle(self, event: Any) -> Awaitable[None]: ...


class InProcessDomainEventPublisher(IDomainEventPublisher):
    def __init__(self) -> None:
        self._handlers: Dict[Type[Any], List[DomainEventHandler]] = {}
        self.published: List[Tuple[str, bytes]] = []

    def register(self, event_type: Type[Any], handler: DomainEventHandler) -> None:
        self._handlers.setdefault(event_type, []).append(handler)

    def handlers_for(self, event_type: Type[Any]) -> List[DomainEventHandler]:
        return list(self._handlers.get(event_type, []))

    @Logger.io
    async def publish(self, *, events: Sequence[DomainEvent]) -> None:
        for event in events:
            event_name = type(event).__name__
            self.published.append((event_name, encode_domain_event(event)))

            handlers = self._handlers.get(type(event), [])
            if not handlers:
                Logger.base.debug(f'No handler registered for {event_name}')
                continue

            for handler in handlers:
                try:
                    await handler.handle(event)
                except Exception as e:
                    Logger.base.exception(
                        f'{type(handler).__name__} failed on {event_name} '
                        f'for aggregate {event.aggregate_id}: {e}'
                    )

    def clear(self) -> None:
        self.published.clear()
