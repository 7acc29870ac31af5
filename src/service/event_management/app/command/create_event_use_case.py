"""
Create Event Use Case

Builds the Location and DateRange value objects from primitives, creates a
DRAFT Event, persists it and publishes EventCreated.
"""

from datetime import datetime
from typing import Optional

from src.platform.logging.loguru_io import Logger
from src.service.event_management.app.command.base_event_command_use_case import (
    EventCommandUseCase,
    raise_for_failure,
)
from src.service.event_management.domain.aggregate.event_aggregate import Event
from src.service.event_management.domain.value_object.date_range import DateRange
from src.service.event_management.domain.value_object.location import Location


class CreateEventUseCase(EventCommandUseCase):
    @Logger.io
    async def execute(
        self,
        *,
        organizer_id: str,
        title: str,
        category: str,
        city: str,
        country: str,
        start: datetime,
        end: datetime,
        address: Optional[str] = None,
        postal_code: Optional[str] = None,
        latitude: Optional[float] = None,
        longitude: Optional[float] = None,
        description: Optional[str] = None,
        image_url: Optional[str] = None,
    ) -> Event:
        location = raise_for_failure(
            Location.create(
                city=city,
                country=country,
                address=address,
                postal_code=postal_code,
                latitude=latitude,
                longitude=longitude,
            )
        )
        date_range = raise_for_failure(DateRange.create(start, end, validate_future=True))

        event: Event = raise_for_failure(  # type: ignore[assignment]
            Event.create(
                organizer_id=organizer_id,
                title=title,
                category=category,
                location=location,
                date_range=date_range,  # type: ignore[arg-type]
                description=description,
                image_url=image_url,
            )
        )

        async with self.event_command_repo.lock(event_id=event.id):
            saved = await self._commit(event=event)

        Logger.base.info(f'Created event {saved.id} ({saved.title}) for organizer {organizer_id}')
        return saved
