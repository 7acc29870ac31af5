from datetime import datetime
from typing import Any, Optional

import attrs

from src.platform.logging.loguru_io import Logger
from src.service.event_management.app.command.base_event_command_use_case import (
    OwnedEventCommandUseCase,
    raise_for_failure,
)
from src.service.event_management.domain.aggregate.event_aggregate import UNSET, Event
from src.service.event_management.domain.result import Result
from src.service.event_management.domain.value_object.date_range import DateRange
from src.service.event_management.domain.value_object.location import Location


def _merge_location(current: Optional[Location], **fields: Any) -> Result[Location]:
    merged = attrs.asdict(current, recurse=False) if current else {}
    merged.update({name: value for name, value in fields.items() if value is not None})
    return Location.create(
        city=merged.get('city'),  # type: ignore[arg-type]
        country=merged.get('country'),  # type: ignore[arg-type]
        address=merged.get('address'),
        postal_code=merged.get('postal_code'),
        latitude=merged.get('latitude'),
        longitude=merged.get('longitude'),
    )


class UpdateEventUseCase(OwnedEventCommandUseCase):
    """
    Update event details

    Location fields are merged onto the current location and start/end onto
    the current date range, so callers only send what changed.
    """

    @Logger.io
    async def execute(
        self,
        *,
        event_id: str,
        user_id: str,
        title: Optional[str] = None,
        description: Any = UNSET,
        category: Optional[str] = None,
        city: Optional[str] = None,
        country: Optional[str] = None,
        address: Optional[str] = None,
        postal_code: Optional[str] = None,
        latitude: Optional[float] = None,
        longitude: Optional[float] = None,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
    ) -> Event:
        async with self.event_command_repo.lock(event_id=event_id):
            event = await self._load_owned_event(event_id=event_id, user_id=user_id)

            location_fields = {
                'city': city,
                'country': country,
                'address': address,
                'postal_code': postal_code,
                'latitude': latitude,
                'longitude': longitude,
            }
            location = None
            if any(value is not None for value in location_fields.values()):
                location = raise_for_failure(_merge_location(event.location, **location_fields))

            date_range = None
            if start is not None or end is not None:
                date_range = raise_for_failure(
                    DateRange.create(
                        start if start is not None else event.date_range.start,
                        end if end is not None else event.date_range.end,
                        validate_future=True,
                    )
                )

            raise_for_failure(
                event.update_details(
                    title=title,
                    description=description,
                    category=category,
                    location=location,
                    date_range=date_range,
                )
            )
            saved = await self._commit(event=event)

        Logger.base.info(f'Updated event {event_id}')
        return saved
