from abc import ABC, abstractmethod
from typing import Sequence

from src.service.event_management.domain.domain_event import DomainEvent


class IDomainEventPublisher(ABC):
    """Dispatches drained aggregate events; only called after a successful save."""

    @abstractmethod
    async def publish(self, *, events: Sequence[DomainEvent]) -> None:
        pass
