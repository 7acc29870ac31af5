from src.platform.exception.exceptions import DomainError
from src.platform.logging.loguru_io import Logger
from src.service.event_management.app.command.base_event_command_use_case import (
    OwnedEventCommandUseCase,
    raise_for_failure,
)
from src.service.event_management.domain.aggregate.event_aggregate import Event
from src.service.event_management.domain.event_error import EventErrorCode


class CancelEventUseCase(OwnedEventCommandUseCase):
    """
    Cancel an event on behalf of its organizer

    Unlike the aggregate (which defaults a blank reason), an explicit
    cancellation request must state why. The emitted EventCancelled tells the
    refund side whether anything was sold.
    """

    @Logger.io
    async def execute(self, *, event_id: str, user_id: str, reason: str) -> Event:
        if not reason or not reason.strip():
            raise DomainError(
                'Cancellation reason is required', error_code=EventErrorCode.MISSING_REASON.value
            )

        async with self.event_command_repo.lock(event_id=event_id):
            event = await self._load_owned_event(event_id=event_id, user_id=user_id)
            raise_for_failure(event.cancel(reason))
            saved = await self._commit(event=event)

        Logger.base.info(f'Cancelled event {event_id}: {saved.cancellation_reason}')
        return saved
