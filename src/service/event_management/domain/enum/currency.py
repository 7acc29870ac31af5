from decimal import ROUND_HALF_UP, Decimal
from enum import StrEnum
from typing import Dict, Optional

import attrs


@attrs.define(frozen=True)
class CurrencyMetadata:
    symbol: str
    name: str
    decimals: int


class Currency(StrEnum):
    """Supported currencies. TND is the platform default."""

    TND = 'TND'
    EUR = 'EUR'
    USD = 'USD'

    @property
    def metadata(self) -> CurrencyMetadata:
        return CURRENCY_METADATA[self]

    @property
    def symbol(self) -> str:
        return self.metadata.symbol

    @property
    def display_name(self) -> str:
        return self.metadata.name

    @property
    def decimals(self) -> int:
        return self.metadata.decimals

    def round_amount(self, amount: Decimal) -> Decimal:
        quantum = Decimal(1).scaleb(-self.decimals)
        return amount.quantize(quantum, rounding=ROUND_HALF_UP)

    def format_amount(self, amount: Decimal) -> str:
        return f'{self.round_amount(amount):,.{self.decimals}f} {self.symbol}'

    @classmethod
    def from_string(cls, value: str) -> Optional['Currency']:
        """Case-insensitive lookup; None for unsupported codes."""
        if not isinstance(value, str):
            return None
        try:
            return cls(value.strip().upper())
        except ValueError:
            return None


CURRENCY_METADATA: Dict[Currency, CurrencyMetadata] = {
    Currency.TND: CurrencyMetadata(symbol='DT', name='Tunisian Dinar', decimals=3),
    Currency.EUR: CurrencyMetadata(symbol='€', name='Euro', decimals=2),
    Currency.USD: CurrencyMetadata(symbol='$', name='US Dollar', decimals=2),
}
