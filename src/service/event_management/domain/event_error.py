"""
Event Error - closed set of failure kinds for the event management domain

Every domain operation that can fail returns a `Result` carrying one
`EventError`. The code is machine readable so callers can branch on it
without matching on message text.
"""

from enum import StrEnum
from typing import Any, Dict

import attrs


class EventErrorCode(StrEnum):
    # Value objects / event fields
    INVALID_DATE_RANGE = 'INVALID_DATE_RANGE'
    INVALID_SALES_PERIOD = 'INVALID_SALES_PERIOD'
    INVALID_PRICE = 'INVALID_PRICE'
    CURRENCY_MISMATCH = 'CURRENCY_MISMATCH'
    INVALID_LOCATION = 'INVALID_LOCATION'
    INVALID_CATEGORY = 'INVALID_CATEGORY'
    MISSING_ORGANIZER = 'MISSING_ORGANIZER'
    MISSING_TITLE = 'MISSING_TITLE'
    TITLE_TOO_LONG = 'TITLE_TOO_LONG'
    DESCRIPTION_TOO_LONG = 'DESCRIPTION_TOO_LONG'

    # Ticket type
    INVALID_TICKET_TYPE = 'INVALID_TICKET_TYPE'
    CANNOT_MODIFY_AFTER_SALES = 'CANNOT_MODIFY_AFTER_SALES'
    CANNOT_REDUCE_QUANTITY = 'CANNOT_REDUCE_QUANTITY'
    INSUFFICIENT_AVAILABILITY = 'INSUFFICIENT_AVAILABILITY'
    INVALID_SOLD_QUANTITY = 'INVALID_SOLD_QUANTITY'
    SALES_PERIOD_ELAPSED = 'SALES_PERIOD_ELAPSED'
    TICKET_TYPE_NOT_FOUND = 'TICKET_TYPE_NOT_FOUND'
    TICKET_TYPE_HAS_SALES = 'TICKET_TYPE_HAS_SALES'

    # Aggregate
    MAX_TICKET_TYPES_REACHED = 'MAX_TICKET_TYPES_REACHED'
    DUPLICATE_TICKET_TYPE_NAME = 'DUPLICATE_TICKET_TYPE_NAME'
    EVENT_CANNOT_BE_MODIFIED = 'EVENT_CANNOT_BE_MODIFIED'

    # publish()
    WRONG_STATUS = 'WRONG_STATUS'
    MISSING_LOCATION = 'MISSING_LOCATION'
    EVENT_DATE_IN_PAST = 'EVENT_DATE_IN_PAST'
    MISSING_TICKET_TYPES = 'MISSING_TICKET_TYPES'

    # cancel()
    ALREADY_CANCELLED = 'ALREADY_CANCELLED'
    ALREADY_COMPLETED = 'ALREADY_COMPLETED'
    EVENT_ALREADY_STARTED = 'EVENT_ALREADY_STARTED'

    # Application layer
    MISSING_REASON = 'MISSING_REASON'
    EVENT_NOT_FOUND = 'EVENT_NOT_FOUND'
    EVENT_NOT_ENDED = 'EVENT_NOT_ENDED'
    NOT_OWNER = 'NOT_OWNER'
    INVALID_PAGINATION = 'INVALID_PAGINATION'


@attrs.define(frozen=True)
class EventError:
    code: EventErrorCode
    message: str
    details: Dict[str, Any] = attrs.field(factory=dict, eq=False)

    def __str__(self) -> str:
        return f'{self.code}: {self.message}'


class InvalidValueError(ValueError):
    """Raised by value object constructors; `create()` factories turn it into a failed Result."""

    def __init__(self, error: EventError) -> None:
        self.error = error
        super().__init__(error.message)
