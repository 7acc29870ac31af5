"""
Ticket Type - one priced inventory line of an event (e.g. "VIP", "General")

[Business Invariants]
- 0 <= sold_quantity <= quantity
- price and sales period are frozen once any ticket has been sold
- quantity can never drop below sold_quantity

Owned by the Event aggregate; `event_id` is a plain back-reference.
Every mutator returns a Result and leaves the entity untouched on failure.
"""

from datetime import datetime
from typing import Any, Dict, Optional

import attrs
from uuid_utils import uuid7

from src.platform.logging.loguru_io import Logger
from src.service.event_management.domain.clock import progress_percentage, utc_now
from src.service.event_management.domain.event_error import EventErrorCode
from src.service.event_management.domain.result import Result
from src.service.event_management.domain.value_object.sales_period import SalesPeriod
from src.service.event_management.domain.value_object.ticket_price import TicketPrice


MAX_NAME_LENGTH = 100
MAX_DESCRIPTION_LENGTH = 500


def _validate_name(name: Any) -> Result[str]:
    if not isinstance(name, str) or not name.strip():
        return Result.failure(EventErrorCode.INVALID_TICKET_TYPE, 'Ticket type name is required')
    if len(name.strip()) > MAX_NAME_LENGTH:
        return Result.failure(
            EventErrorCode.INVALID_TICKET_TYPE,
            f'Ticket type name must be at most {MAX_NAME_LENGTH} characters',
        )
    return Result.ok(name.strip())


def _validate_description(description: Any) -> Result[Optional[str]]:
    if description is None:
        return Result.ok(None)
    if not isinstance(description, str):
        return Result.failure(
            EventErrorCode.INVALID_TICKET_TYPE, 'Ticket type description must be text'
        )
    if len(description) > MAX_DESCRIPTION_LENGTH:
        return Result.failure(
            EventErrorCode.INVALID_TICKET_TYPE,
            f'Ticket type description must be at most {MAX_DESCRIPTION_LENGTH} characters',
        )
    return Result.ok(description.strip() or None)


def _is_positive_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


@attrs.define
class TicketType:
    id: str
    event_id: str
    name: str
    price: TicketPrice
    quantity: int
    sales_period: SalesPeriod
    description: Optional[str] = None
    sold_quantity: int = 0
    is_active: bool = True
    created_at: datetime = attrs.field(factory=utc_now)
    updated_at: datetime = attrs.field(factory=utc_now)

    @classmethod
    @Logger.io
    def create(
        cls,
        *,
        event_id: str,
        name: str,
        price: TicketPrice,
        quantity: int,
        sales_period: SalesPeriod,
        description: Optional[str] = None,
        is_active: bool = True,
        id: Optional[str] = None,
    ) -> Result['TicketType']:
        name_result = _validate_name(name)
        if name_result.is_failure:
            return Result.fail(name_result.error)  # type: ignore[arg-type]

        description_result = _validate_description(description)
        if description_result.is_failure:
            return Result.fail(description_result.error)  # type: ignore[arg-type]

        if not isinstance(price, TicketPrice):
            return Result.failure(EventErrorCode.INVALID_PRICE, 'Ticket type price is required')
        if not isinstance(sales_period, SalesPeriod):
            return Result.failure(
                EventErrorCode.INVALID_SALES_PERIOD, 'Ticket type sales period is required'
            )
        if not _is_positive_int(quantity):
            return Result.failure(
                EventErrorCode.INVALID_TICKET_TYPE, 'Quantity must be a positive integer'
            )

        now = utc_now()
        return Result.ok(
            cls(
                id=id or str(uuid7()),
                event_id=event_id,
                name=name_result.unwrap(),
                description=description_result.value,
                price=price,
                quantity=quantity,
                sales_period=sales_period,
                sold_quantity=0,
                is_active=is_active,
                created_at=now,
                updated_at=now,
            )
        )

    # ------------------------------------------------------------------ queries

    @property
    def available_quantity(self) -> int:
        return max(0, self.quantity - self.sold_quantity)

    def is_sold_out(self) -> bool:
        return self.sold_quantity >= self.quantity

    def is_on_sale(self) -> bool:
        return self.is_active and self.sales_period.is_on_sale() and not self.is_sold_out()

    def sales_progress(self) -> int:
        return progress_percentage(self.sold_quantity, self.quantity)

    def has_sales(self) -> bool:
        return self.sold_quantity > 0

    # ----------------------------------------------------------------- commands

    def update_name(self, name: str) -> Result[None]:
        result = _validate_name(name)
        if result.is_failure:
            return Result.fail(result.error)  # type: ignore[arg-type]
        self.name = result.unwrap()
        self._touch()
        return Result.ok()

    def update_description(self, description: Optional[str]) -> Result[None]:
        result = _validate_description(description)
        if result.is_failure:
            return Result.fail(result.error)  # type: ignore[arg-type]
        self.description = result.value
        self._touch()
        return Result.ok()

    def update_price(self, price: TicketPrice) -> Result[None]:
        if self.has_sales():
            return Result.failure(
                EventErrorCode.CANNOT_MODIFY_AFTER_SALES,
                f'Cannot change the price of "{self.name}" after tickets have been sold',
                {'sold_quantity': self.sold_quantity},
            )
        if not isinstance(price, TicketPrice):
            return Result.failure(EventErrorCode.INVALID_PRICE, 'Ticket type price is required')
        self.price = price
        self._touch()
        return Result.ok()

    def update_quantity(self, quantity: int) -> Result[None]:
        if not _is_positive_int(quantity):
            return Result.failure(
                EventErrorCode.INVALID_TICKET_TYPE, 'Quantity must be a positive integer'
            )
        if quantity < self.sold_quantity:
            return Result.failure(
                EventErrorCode.CANNOT_REDUCE_QUANTITY,
                f'Cannot reduce quantity to {quantity}: {self.sold_quantity} already sold',
                {'requested': quantity, 'sold_quantity': self.sold_quantity},
            )
        self.quantity = quantity
        self._touch()
        return Result.ok()

    def update_sales_period(self, sales_period: SalesPeriod) -> Result[None]:
        if self.has_sales():
            return Result.failure(
                EventErrorCode.CANNOT_MODIFY_AFTER_SALES,
                f'Cannot change the sales period of "{self.name}" after tickets have been sold',
                {'sold_quantity': self.sold_quantity},
            )
        self.sales_period = sales_period
        self._touch()
        return Result.ok()

    def increment_sold(self, quantity: int) -> Result[None]:
        if not _is_positive_int(quantity):
            return Result.failure(
                EventErrorCode.INVALID_TICKET_TYPE, 'Sold quantity must be a positive integer'
            )
        if self.sold_quantity + quantity > self.quantity:
            return Result.failure(
                EventErrorCode.INSUFFICIENT_AVAILABILITY,
                f'Only {self.available_quantity} "{self.name}" tickets left, requested {quantity}',
                {'requested': quantity, 'available': self.available_quantity},
            )
        self.sold_quantity += quantity
        self._touch()
        return Result.ok()

    def decrement_sold(self, quantity: int) -> Result[None]:
        if not _is_positive_int(quantity):
            return Result.failure(
                EventErrorCode.INVALID_TICKET_TYPE, 'Sold quantity must be a positive integer'
            )
        if self.sold_quantity - quantity < 0:
            return Result.failure(
                EventErrorCode.INVALID_SOLD_QUANTITY,
                f'Cannot release {quantity} tickets: only {self.sold_quantity} sold',
                {'requested': quantity, 'sold_quantity': self.sold_quantity},
            )
        self.sold_quantity -= quantity
        self._touch()
        return Result.ok()

    def deactivate(self) -> Result[None]:
        self.is_active = False
        self._touch()
        return Result.ok()

    def reactivate(self) -> Result[None]:
        if self.sales_period.has_ended():
            return Result.failure(
                EventErrorCode.SALES_PERIOD_ELAPSED,
                f'Cannot reactivate "{self.name}": its sales period has ended',
            )
        self.is_active = True
        self._touch()
        return Result.ok()

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'event_id': self.event_id,
            'name': self.name,
            'description': self.description,
            'price': self.price.to_dict(),
            'quantity': self.quantity,
            'sold_quantity': self.sold_quantity,
            'available_quantity': self.available_quantity,
            'sales_period': self.sales_period.to_iso_strings(),
            'sales_status': self.sales_period.status().value,
            'sales_progress': self.sales_progress(),
            'is_active': self.is_active,
            'is_sold_out': self.is_sold_out(),
            'is_on_sale': self.is_on_sale(),
            'created_at': self.created_at.isoformat(),
            'updated_at': self.updated_at.isoformat(),
        }

    def _touch(self) -> None:
        self.updated_at = utc_now()
