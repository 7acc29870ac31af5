from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.event_management.app.interface.i_event_command_repo import IEventCommandRepo
from src.service.event_management.domain.aggregate.event_aggregate import Event
from src.service.event_management.domain.event_error import EventErrorCode


class GetEventUseCase:
    def __init__(self, *, event_command_repo: IEventCommandRepo) -> None:
        self.event_command_repo = event_command_repo

    @Logger.io
    async def execute(self, *, event_id: str) -> Event:
        event = await self.event_command_repo.find_by_id(event_id=event_id)
        if event is None:
            raise NotFoundError(
                f'Event {event_id} not found', error_code=EventErrorCode.EVENT_NOT_FOUND.value
            )
        return event
