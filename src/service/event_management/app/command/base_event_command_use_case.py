"""
Shared plumbing for Event command use cases

Flow of every command:
1. Take the per-event lock from the repository
2. Load the aggregate (NotFoundError when missing)
3. Check ownership where required (ForbiddenError)
4. Call exactly one aggregate method; a failed Result becomes a platform exception
5. Save, then drain and publish the buffered domain events
"""

from typing import FrozenSet, Optional, TypeVar

from src.platform.exception.exceptions import (
    ConflictError,
    CustomBaseError,
    DomainError,
    ForbiddenError,
    NotFoundError,
)
from src.platform.logging.loguru_io import Logger
from src.service.event_management.app.interface.i_domain_event_publisher import (
    IDomainEventPublisher,
)
from src.service.event_management.app.interface.i_event_command_repo import IEventCommandRepo
from src.service.event_management.app.interface.i_ownership_checker import IOwnershipChecker
from src.service.event_management.domain.aggregate.event_aggregate import Event
from src.service.event_management.domain.event_error import EventError, EventErrorCode
from src.service.event_management.domain.result import Result


T = TypeVar('T')

_NOT_FOUND_CODES: FrozenSet[EventErrorCode] = frozenset(
    {EventErrorCode.EVENT_NOT_FOUND, EventErrorCode.TICKET_TYPE_NOT_FOUND}
)
_CONFLICT_CODES: FrozenSet[EventErrorCode] = frozenset(
    {
        EventErrorCode.ALREADY_CANCELLED,
        EventErrorCode.ALREADY_COMPLETED,
        EventErrorCode.DUPLICATE_TICKET_TYPE_NAME,
        EventErrorCode.INSUFFICIENT_AVAILABILITY,
        EventErrorCode.MAX_TICKET_TYPES_REACHED,
        EventErrorCode.TICKET_TYPE_HAS_SALES,
    }
)


def to_platform_error(error: EventError) -> CustomBaseError:
    if error.code in _NOT_FOUND_CODES:
        return NotFoundError(error.message, error_code=error.code.value)
    if error.code is EventErrorCode.NOT_OWNER:
        return ForbiddenError(error.message, error_code=error.code.value)
    if error.code in _CONFLICT_CODES:
        return ConflictError(error.message, error_code=error.code.value)
    return DomainError(error.message, error_code=error.code.value)


def raise_for_failure(result: Result[T]) -> Optional[T]:
    if result.error is not None:
        raise to_platform_error(result.error)
    return result.value


class EventCommandUseCase:
    def __init__(
        self,
        *,
        event_command_repo: IEventCommandRepo,
        domain_event_publisher: IDomainEventPublisher,
    ) -> None:
        self.event_command_repo = event_command_repo
        self.domain_event_publisher = domain_event_publisher

    async def _load_event(self, *, event_id: str) -> Event:
        event = await self.event_command_repo.find_by_id(event_id=event_id)
        if event is None:
            raise NotFoundError(
                f'Event {event_id} not found', error_code=EventErrorCode.EVENT_NOT_FOUND.value
            )
        return event

    async def _commit(self, *, event: Event) -> Event:
        saved = await self.event_command_repo.save(event=event)
        events = event.pull_domain_events()
        if events:
            await self.domain_event_publisher.publish(events=events)
            Logger.base.info(f'Published {len(events)} domain event(s) for event {event.id}')
        return saved


class OwnedEventCommandUseCase(EventCommandUseCase):
    """Command use case that only the event organizer may run."""

    def __init__(
        self,
        *,
        event_command_repo: IEventCommandRepo,
        domain_event_publisher: IDomainEventPublisher,
        ownership_checker: IOwnershipChecker,
    ) -> None:
        super().__init__(
            event_command_repo=event_command_repo, domain_event_publisher=domain_event_publisher
        )
        self.ownership_checker = ownership_checker

    async def _load_owned_event(self, *, event_id: str, user_id: str) -> Event:
        event = await self._load_event(event_id=event_id)
        if not self.ownership_checker.is_owner(user_id=user_id, organizer_id=event.organizer_id):
            raise ForbiddenError(
                'Only the event organizer can modify this event',
                error_code=EventErrorCode.NOT_OWNER.value,
            )
        return event
