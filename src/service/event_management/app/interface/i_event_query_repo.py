"""
Event Query Repository Interface - CQRS Read Side

Listings only; single-event reads stay on IEventCommandRepo.find_by_id.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional

from src.service.event_management.app.dto.event_list import (
    EventFilters,
    EventListItem,
    Page,
    PageRequest,
)
from src.service.event_management.domain.enum.event_category import EventCategory
from src.service.event_management.domain.enum.event_status import EventStatus


class IEventQueryRepo(ABC):
    @abstractmethod
    async def find_by_organizer(
        self, *, organizer_id: str, status: Optional[EventStatus] = None, page: PageRequest
    ) -> Page[EventListItem]:
        """Every event of one organizer, any status unless `status` is given."""
        pass

    @abstractmethod
    async def find_published(
        self, *, filters: EventFilters, page: PageRequest
    ) -> Page[EventListItem]:
        pass

    @abstractmethod
    async def find_by_category(
        self, *, category: EventCategory, page: PageRequest
    ) -> Page[EventListItem]:
        """PUBLISHED events of one category."""
        pass

    @abstractmethod
    async def find_upcoming(self, *, now: datetime, page: PageRequest) -> Page[EventListItem]:
        """PUBLISHED events starting after `now`."""
        pass
