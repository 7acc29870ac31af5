from src.platform.logging.loguru_io import Logger
from src.service.event_management.domain.domain_event import TicketTypeSoldOut


class TicketTypeSoldOutHandler:
    @Logger.io
    async def handle(self, event: TicketTypeSoldOut) -> None:
        Logger.base.info(
            f'Ticket type sold out: "{event.name}" ({event.ticket_type_id}) '
            f'for event {event.event_id}, {event.total_quantity} sold'
        )
