"""
Event Command Repository Interface - CQRS Write Side

[Design Principles]
- Operate on the Event aggregate as the unit (ticket types cascade)
- One in-flight mutation per event id: command use cases run
  load -> mutate -> save -> publish inside `lock(event_id=...)`
"""

from abc import ABC, abstractmethod
from contextlib import AbstractAsyncContextManager
from datetime import datetime
from typing import List, Optional

from src.service.event_management.domain.aggregate.event_aggregate import Event


class IEventCommandRepo(ABC):
    @abstractmethod
    async def find_by_id(self, *, event_id: str) -> Optional[Event]:
        pass

    @abstractmethod
    async def save(self, *, event: Event) -> Event:
        """Upsert the aggregate with its ticket types."""
        pass

    @abstractmethod
    async def find_events_to_complete(self, *, before: datetime, limit: int) -> List[Event]:
        """PUBLISHED events whose end date is earlier than `before`, oldest first."""
        pass

    @abstractmethod
    def lock(self, *, event_id: str) -> AbstractAsyncContextManager[None]:
        pass
