"""
Money value object.
"""
from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP
from typing import Union

from .base_value_object import ValueObject

CENT = Decimal('0.01')

CURRENCY_SYMBOLS = {
    'USD': '$',
    'INR': '₹',
    'EUR': '€',
}

Numeric = Union[Decimal, int, str, float]


def to_decimal(value: Numeric) -> Decimal:
    """Convert a numeric value to Decimal without going through binary floats."""
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def quantize(value: Numeric) -> Decimal:
    """Round half-up to two decimal places."""
    return to_decimal(value).quantize(CENT, rounding=ROUND_HALF_UP)


@dataclass(frozen=True)
class Money(ValueObject):
    """Money value object with currency."""
    amount: Decimal
    currency: str = "USD"

    def __post_init__(self):
        object.__setattr__(self, 'amount', to_decimal(self.amount))
        object.__setattr__(self, 'currency', self.currency.upper())

    @classmethod
    def zero(cls, currency: str = "USD") -> 'Money':
        return cls(amount=Decimal('0'), currency=currency)

    def add(self, other: 'Money') -> 'Money':
        """Add two money values."""
        self._check_currency(other)
        return Money(amount=self.amount + other.amount, currency=self.currency)

    def subtract(self, other: 'Money') -> 'Money':
        self._check_currency(other)
        return Money(amount=self.amount - other.amount, currency=self.currency)

    def multiply(self, factor: Numeric) -> 'Money':
        """Scale by a quantity or rate; the result is not rounded."""
        return Money(amount=self.amount * to_decimal(factor), currency=self.currency)

    def rounded(self) -> 'Money':
        return Money(amount=quantize(self.amount), currency=self.currency)

    def _check_currency(self, other: 'Money') -> None:
        if self.currency != other.currency:
            raise ValueError(f"Currency mismatch: {self.currency} vs {other.currency}")

    @property
    def is_zero(self) -> bool:
        return self.amount == 0

    @property
    def formatted(self) -> str:
        """Get formatted money string."""
        symbol = CURRENCY_SYMBOLS.get(self.currency)
        if symbol:
            return f"{symbol}{quantize(self.amount):,.2f}"
        return f"{self.currency} {quantize(self.amount):,.2f}"
