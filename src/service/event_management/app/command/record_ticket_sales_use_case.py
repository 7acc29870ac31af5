"""
Record Ticket Sales Use Case

Entry point for the purchase and refund flows: moves a ticket type's sold
quantity together with the event's sold tickets and revenue. Not owner
guarded; the caller is another module, not the organizer.
"""

from src.platform.logging.loguru_io import Logger
from src.service.event_management.app.command.base_event_command_use_case import (
    EventCommandUseCase,
    raise_for_failure,
)
from src.service.event_management.domain.aggregate.event_aggregate import Event


class RecordTicketSalesUseCase(EventCommandUseCase):
    @Logger.io
    async def increment(self, *, event_id: str, ticket_type_id: str, quantity: int) -> Event:
        async with self.event_command_repo.lock(event_id=event_id):
            event = await self._load_event(event_id=event_id)
            raise_for_failure(event.increment_sold_tickets(ticket_type_id, quantity))
            saved = await self._commit(event=event)

        Logger.base.info(
            f'Sold {quantity} ticket(s) of {ticket_type_id} for event {event_id} '
            f'({saved.sold_tickets}/{saved.total_capacity})'
        )
        return saved

    @Logger.io
    async def decrement(self, *, event_id: str, ticket_type_id: str, quantity: int) -> Event:
        async with self.event_command_repo.lock(event_id=event_id):
            event = await self._load_event(event_id=event_id)
            raise_for_failure(event.decrement_sold_tickets(ticket_type_id, quantity))
            saved = await self._commit(event=event)

        Logger.base.info(
            f'Released {quantity} ticket(s) of {ticket_type_id} for event {event_id} '
            f'({saved.sold_tickets}/{saved.total_capacity})'
        )
        return saved
