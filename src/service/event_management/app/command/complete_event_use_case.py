from src.platform.exception.exceptions import DomainError
from src.platform.logging.loguru_io import Logger
from src.service.event_management.app.command.base_event_command_use_case import (
    EventCommandUseCase,
)
from src.service.event_management.domain.aggregate.event_aggregate import Event
from src.service.event_management.domain.enum.event_status import EventStatus
from src.service.event_management.domain.event_error import EventErrorCode


class CompleteEventUseCase(EventCommandUseCase):
    """
    Mark an ended PUBLISHED event as COMPLETED

    `Event.mark_as_completed()` is a silent no-op when its preconditions are
    unmet; an explicit request reports why instead.
    """

    @Logger.io
    async def execute(self, *, event_id: str) -> Event:
        async with self.event_command_repo.lock(event_id=event_id):
            event = await self._load_event(event_id=event_id)

            if event.status is not EventStatus.PUBLISHED:
                raise DomainError(
                    f'Event {event_id} is not published (current status: {event.status})',
                    error_code=EventErrorCode.WRONG_STATUS.value,
                )
            if not event.has_ended():
                raise DomainError(
                    f'Event {event_id} has not ended yet (ends {event.date_range.end.isoformat()})',
                    error_code=EventErrorCode.EVENT_NOT_ENDED.value,
                )

            event.mark_as_completed()
            saved = await self._commit(event=event)

        Logger.base.info(f'Event {event_id} marked as completed')
        return saved
