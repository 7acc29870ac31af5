from src.platform.logging.loguru_io import Logger
from src.service.event_management.domain.domain_event import EventPublished


class EventPublishedHandler:
    """Search indexing and follower notifications subscribe here; this side only records the fact."""

    @Logger.io
    async def handle(self, event: EventPublished) -> None:
        Logger.base.info(
            f'Event published: "{event.title}" ({event.event_id}) by {event.organizer_id}, '
            f'{event.ticket_type_count} ticket types, capacity {event.total_capacity}'
        )
