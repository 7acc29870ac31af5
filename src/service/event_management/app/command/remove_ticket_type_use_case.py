from src.platform.logging.loguru_io import Logger
from src.service.event_management.app.command.base_event_command_use_case import (
    OwnedEventCommandUseCase,
    raise_for_failure,
)
from src.service.event_management.domain.aggregate.event_aggregate import Event


class RemoveTicketTypeUseCase(OwnedEventCommandUseCase):
    @Logger.io
    async def execute(self, *, event_id: str, user_id: str, ticket_type_id: str) -> Event:
        async with self.event_command_repo.lock(event_id=event_id):
            event = await self._load_owned_event(event_id=event_id, user_id=user_id)
            raise_for_failure(event.remove_ticket_type(ticket_type_id))
            saved = await self._commit(event=event)

        Logger.base.info(f'Removed ticket type {ticket_type_id} from event {event_id}')
        return saved
