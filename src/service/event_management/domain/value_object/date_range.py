"""
Date Range - when an event takes place

[Validation]
- start and end must be datetimes, end strictly after start
- a new event must start at least MIN_ADVANCE_HOURS from now
  (skipped for ranges rebuilt from persistence)

All datetimes are normalized to UTC; naive input is read as UTC.
"""

from datetime import datetime, timedelta
import math
from typing import Dict

import attrs

from src.service.event_management.domain.clock import as_utc, utc_now
from src.service.event_management.domain.event_error import (
    EventError,
    EventErrorCode,
    InvalidValueError,
)
from src.service.event_management.domain.result import Result


MIN_ADVANCE_HOURS = 1


def _invalid(message: str) -> InvalidValueError:
    return InvalidValueError(EventError(code=EventErrorCode.INVALID_DATE_RANGE, message=message))


@attrs.define(frozen=True)
class DateRange:
    start: datetime = attrs.field(converter=as_utc)
    end: datetime = attrs.field(converter=as_utc)

    def __attrs_post_init__(self) -> None:
        if not isinstance(self.start, datetime):
            raise _invalid('Start date must be a valid date')
        if not isinstance(self.end, datetime):
            raise _invalid('End date must be a valid date')
        if self.end <= self.start:
            raise _invalid('End date must be after start date')

    @classmethod
    def create(
        cls, start: datetime, end: datetime, validate_future: bool = True
    ) -> Result['DateRange']:
        try:
            date_range = cls(start=start, end=end)
        except InvalidValueError as e:
            return Result.fail(e.error)

        if validate_future and date_range.start < utc_now() + timedelta(hours=MIN_ADVANCE_HOURS):
            return Result.failure(
                EventErrorCode.INVALID_DATE_RANGE,
                f'Event start date must be at least {MIN_ADVANCE_HOURS} hour(s) in the future',
            )
        return Result.ok(date_range)

    @classmethod
    def from_existing(cls, start: datetime, end: datetime) -> Result['DateRange']:
        return cls.create(start, end, validate_future=False)

    @property
    def duration(self) -> timedelta:
        return self.end - self.start

    @property
    def duration_in_minutes(self) -> int:
        return math.ceil(self.duration.total_seconds() / 60)

    @property
    def duration_in_hours(self) -> int:
        return math.ceil(self.duration.total_seconds() / 3600)

    @property
    def duration_in_days(self) -> int:
        return math.ceil(self.duration.total_seconds() / 86400)

    @property
    def is_multi_day(self) -> bool:
        return self.start.date() != self.end.date()

    @property
    def max_sales_end(self) -> datetime:
        return self.start

    def contains(self, moment: datetime) -> bool:
        return self.start <= as_utc(moment) <= self.end

    def overlaps(self, other: 'DateRange') -> bool:
        return self.start <= other.end and self.end >= other.start

    def is_in_future(self) -> bool:
        return self.start > utc_now()

    def is_in_past(self) -> bool:
        return self.end < utc_now()

    def is_ongoing(self) -> bool:
        return self.contains(utc_now())

    def has_started(self) -> bool:
        return self.start <= utc_now()

    def time_until_start(self) -> timedelta:
        """Negative once the event has started."""
        return self.start - utc_now()

    def time_until_end(self) -> timedelta:
        return self.end - utc_now()

    def is_valid_sales_period(self, sales_start: datetime, sales_end: datetime) -> bool:
        sales_start, sales_end = as_utc(sales_start), as_utc(sales_end)
        return sales_end < self.start and sales_start < sales_end

    def to_iso_strings(self) -> Dict[str, str]:
        return {'start': self.start.isoformat(), 'end': self.end.isoformat()}
