"""
Ticket Price - positive amount in a supported currency

The amount is a Decimal rounded half-up to the currency precision
(TND 3 decimals, EUR/USD 2) on construction and after every arithmetic
operation. Arithmetic never mixes currencies.
"""

from decimal import Decimal, InvalidOperation
from typing import Any, Dict, Union

import attrs

from src.service.event_management.domain.enum.currency import Currency
from src.service.event_management.domain.event_error import (
    EventError,
    EventErrorCode,
    InvalidValueError,
)
from src.service.event_management.domain.result import Result


Number = Union[int, float, Decimal]


def _to_decimal(value: Any) -> Any:
    if isinstance(value, bool):
        return value
    if isinstance(value, Decimal):
        return value
    if isinstance(value, (int, float, str)):
        try:
            return Decimal(str(value))
        except InvalidOperation:
            return value
    return value


def _to_currency(value: Any) -> Any:
    if isinstance(value, Currency):
        return value
    return Currency.from_string(value) or value


def _invalid(message: str) -> InvalidValueError:
    return InvalidValueError(EventError(code=EventErrorCode.INVALID_PRICE, message=message))


@attrs.define(frozen=True)
class TicketPrice:
    amount: Decimal = attrs.field(converter=_to_decimal)
    currency: Currency = attrs.field(default=Currency.TND, converter=_to_currency)

    def __attrs_post_init__(self) -> None:
        if not isinstance(self.currency, Currency):
            supported = ', '.join(c.value for c in Currency)
            raise _invalid(f'Invalid currency: {self.currency}. Supported currencies: {supported}')
        if not isinstance(self.amount, Decimal) or not self.amount.is_finite():
            raise _invalid('Price amount must be a valid number')

        # Frozen instance: rounding is the one write allowed during construction
        try:
            rounded = self.currency.round_amount(self.amount)
        except InvalidOperation:
            raise _invalid('Price amount exceeds the supported precision') from None
        object.__setattr__(self, 'amount', rounded)

        if self.amount <= 0:
            raise _invalid('Ticket price must be greater than 0')

    @classmethod
    def create(cls, amount: Number, currency: Union[Currency, str] = Currency.TND) -> Result['TicketPrice']:
        try:
            return Result.ok(cls(amount=amount, currency=currency))
        except InvalidValueError as e:
            return Result.fail(e.error)

    @property
    def formatted(self) -> str:
        return self.currency.format_amount(self.amount)

    @property
    def symbol(self) -> str:
        return self.currency.symbol

    def add(self, other: 'TicketPrice') -> Result['TicketPrice']:
        if mismatch := self._currency_mismatch(other):
            return mismatch
        return TicketPrice.create(self.amount + other.amount, self.currency)

    def subtract(self, other: 'TicketPrice') -> Result['TicketPrice']:
        if mismatch := self._currency_mismatch(other):
            return mismatch
        difference = self.amount - other.amount
        if difference < 0:
            return Result.failure(
                EventErrorCode.INVALID_PRICE, 'Result of subtraction cannot be negative'
            )
        return TicketPrice.create(difference, self.currency)

    def multiply(self, factor: Number) -> Result['TicketPrice']:
        factor = _to_decimal(factor)
        if not isinstance(factor, Decimal) or not factor.is_finite() or factor < 0:
            return Result.failure(
                EventErrorCode.INVALID_PRICE, 'Multiplication factor cannot be negative'
            )
        return TicketPrice.create(self.amount * factor, self.currency)

    def percentage(self, percent: Number) -> Result['TicketPrice']:
        percent = _to_decimal(percent)
        if not isinstance(percent, Decimal) or not percent.is_finite() or not 0 <= percent <= 100:
            return Result.failure(EventErrorCode.INVALID_PRICE, 'Percentage must be between 0 and 100')
        return TicketPrice.create(self.amount * percent / 100, self.currency)

    def apply_discount(self, discount_percent: Number) -> Result['TicketPrice']:
        discount_percent = _to_decimal(discount_percent)
        if (
            not isinstance(discount_percent, Decimal)
            or not discount_percent.is_finite()
            or not 0 <= discount_percent <= 100
        ):
            return Result.failure(
                EventErrorCode.INVALID_PRICE, 'Discount percentage must be between 0 and 100'
            )
        return TicketPrice.create(self.amount - self.amount * discount_percent / 100, self.currency)

    def is_greater_than(self, other: 'TicketPrice') -> bool:
        self._assert_same_currency(other)
        return self.amount > other.amount

    def is_less_than(self, other: 'TicketPrice') -> bool:
        self._assert_same_currency(other)
        return self.amount < other.amount

    def to_dict(self) -> Dict[str, Any]:
        return {'amount': self.amount, 'currency': self.currency.value}

    def _currency_mismatch(self, other: 'TicketPrice') -> Union[Result['TicketPrice'], None]:
        if self.currency is other.currency:
            return None
        return Result.failure(
            EventErrorCode.CURRENCY_MISMATCH,
            f'Cannot operate on different currencies: {self.currency} vs {other.currency}',
            {'left': self.currency.value, 'right': other.currency.value},
        )

    def _assert_same_currency(self, other: 'TicketPrice') -> None:
        if mismatch := self._currency_mismatch(other):
            raise InvalidValueError(mismatch.error)  # type: ignore[arg-type]
