from datetime import datetime, timedelta
import math
from typing import Dict

import attrs

from src.service.event_management.domain.clock import as_utc, utc_now
from src.service.event_management.domain.enum.sales_status import SalesStatus
from src.service.event_management.domain.event_error import (
    EventError,
    EventErrorCode,
    InvalidValueError,
)
from src.service.event_management.domain.result import Result


def _invalid(message: str) -> InvalidValueError:
    return InvalidValueError(EventError(code=EventErrorCode.INVALID_SALES_PERIOD, message=message))


@attrs.define(frozen=True)
class SalesPeriod:
    """Window during which a ticket type can be purchased."""

    start: datetime = attrs.field(converter=as_utc)
    end: datetime = attrs.field(converter=as_utc)

    def __attrs_post_init__(self) -> None:
        if not isinstance(self.start, datetime):
            raise _invalid('Sales start date must be a valid date')
        if not isinstance(self.end, datetime):
            raise _invalid('Sales end date must be a valid date')
        if self.end <= self.start:
            raise _invalid('Sales end date must be after sales start date')

    @classmethod
    def create(cls, start: datetime, end: datetime) -> Result['SalesPeriod']:
        try:
            return Result.ok(cls(start=start, end=end))
        except InvalidValueError as e:
            return Result.fail(e.error)

    @classmethod
    def starting_now(cls, end: datetime) -> Result['SalesPeriod']:
        return cls.create(utc_now(), end)

    @classmethod
    def with_duration(cls, start: datetime, duration_days: int) -> Result['SalesPeriod']:
        if not isinstance(start, datetime):
            return cls.create(start, start)
        return cls.create(start, as_utc(start) + timedelta(days=duration_days))

    @property
    def duration_in_hours(self) -> int:
        return math.ceil((self.end - self.start).total_seconds() / 3600)

    @property
    def duration_in_days(self) -> int:
        return math.ceil((self.end - self.start).total_seconds() / 86400)

    def is_on_sale(self) -> bool:
        return self.contains(utc_now())

    def is_pending(self) -> bool:
        return utc_now() < self.start

    def has_ended(self) -> bool:
        return utc_now() > self.end

    def contains(self, moment: datetime) -> bool:
        return self.start <= as_utc(moment) <= self.end

    def overlaps(self, other: 'SalesPeriod') -> bool:
        return self.start <= other.end and self.end >= other.start

    def validate_for_event(self, event_start: datetime) -> bool:
        """Sales must close strictly before the event starts."""
        return self.end < as_utc(event_start)

    def status(self) -> SalesStatus:
        if self.is_pending():
            return SalesStatus.PENDING
        if self.has_ended():
            return SalesStatus.ENDED
        return SalesStatus.ACTIVE

    def to_iso_strings(self) -> Dict[str, str]:
        return {'start': self.start.isoformat(), 'end': self.end.isoformat()}
