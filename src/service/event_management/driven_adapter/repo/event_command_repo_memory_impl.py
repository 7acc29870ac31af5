"""
In-memory Event Command Repository

Process-local store for Event aggregates. Aggregates are deep-copied on the
way in and out so callers never share mutable state with the store, and the
copy kept in the store never carries buffered domain events.
"""

from contextlib import asynccontextmanager
import copy
from datetime import datetime
from typing import AsyncIterator, Dict, List, Optional

import anyio

from src.platform.logging.loguru_io import Logger
from src.service.event_management.app.interface.i_event_command_repo import IEventCommandRepo
from src.service.event_management.domain.aggregate.event_aggregate import Event
from src.service.event_management.domain.clock import as_utc
from src.service.event_management.domain.enum.event_status import EventStatus


class InMemoryEventCommandRepo(IEventCommandRepo):
    def __init__(self) -> None:
        self._events: Dict[str, Event] = {}
        self._locks: Dict[str, anyio.Lock] = {}
        self._lock_holders: Dict[str, int] = {}

    @Logger.io
    async def find_by_id(self, *, event_id: str) -> Optional[Event]:
        stored = self._events.get(event_id)
        return copy.deepcopy(stored) if stored is not None else None

    @Logger.io
    async def save(self, *, event: Event) -> Event:
        stored = copy.deepcopy(event)
        stored.pull_domain_events()
        self._events[event.id] = stored
        return copy.deepcopy(stored)

    @Logger.io
    async def find_events_to_complete(self, *, before: datetime, limit: int) -> List[Event]:
        cutoff = as_utc(before)
        ended = [
            event
            for event in self._events.values()
            if event.status is EventStatus.PUBLISHED and event.date_range.end < cutoff
        ]
        ended.sort(key=lambda event: event.date_range.end)
        return [copy.deepcopy(event) for event in ended[: max(limit, 0)]]

    @asynccontextmanager
    async def lock(self, *, event_id: str) -> AsyncIterator[None]:
        # Entries live only while a task holds or waits for them
        event_lock = self._locks.setdefault(event_id, anyio.Lock())
        self._lock_holders[event_id] = self._lock_holders.get(event_id, 0) + 1
        try:
            async with event_lock:
                yield
        finally:
            self._lock_holders[event_id] -= 1
            if not self._lock_holders[event_id]:
                del self._lock_holders[event_id]
                del self._locks[event_id]

    def snapshot(self) -> List[Event]:
        """Copies of every stored aggregate, in insertion order."""
        return [copy.deepcopy(event) for event in self._events.values()]

    @property
    def active_lock_count(self) -> int:
        return len(self._locks)

    def __len__(self) -> int:
        return len(self._events)
