"""UTC helpers shared by the date based value objects and entities."""

from datetime import datetime, timezone
from decimal import ROUND_HALF_UP, Decimal
from typing import Any


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(value: Any) -> Any:
    """Naive datetimes are taken to be UTC; non-datetimes pass through for the validator to reject."""
    if not isinstance(value, datetime):
        return value
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def progress_percentage(part: int, whole: int) -> int:
    if whole <= 0:
        return 0
    ratio = Decimal(part) * 100 / Decimal(whole)
    return int(ratio.quantize(Decimal('1'), rounding=ROUND_HALF_UP))
