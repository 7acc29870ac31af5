from src.platform.logging.loguru_io import Logger
from src.service.event_management.domain.domain_event import EventCancelled


class EventCancelledHandler:
    @Logger.io
    async def handle(self, event: EventCancelled) -> None:
        Logger.base.info(f'Event cancelled: "{event.title}" ({event.event_id}), reason: {event.reason}')

        if event.needs_refunds():
            Logger.base.warning(
                f'Event {event.event_id} cancelled with {event.sold_tickets} ticket(s) sold, '
                f'{event.revenue_amount} {event.revenue_currency} to refund'
            )
        else:
            Logger.base.info(f'Event {event.event_id} had no sales, nothing to refund')
