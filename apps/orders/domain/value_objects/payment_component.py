"""
Payment component value object.
"""
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

from shared.domain import ValueObject, ValidationError, quantize


class PaymentComponentType(str, Enum):
    TAX = 'TAX'
    SHIPPING = 'SHIPPING'
    DISCOUNT = 'DISCOUNT'
    FEE = 'FEE'


@dataclass(frozen=True)
class PaymentComponent(ValueObject):
    """
    One labelled line of an order total.

    The amount is never negative; a subtraction (discount) is carried by
    ``is_negative`` instead.
    """
    type: PaymentComponentType
    amount: Decimal
    label: str
    description: str = ""
    is_negative: bool = False

    def __post_init__(self):
        amount = quantize(self.amount)
        if amount < 0:
            raise ValidationError("Payment component amount must not be negative", field="amount")
        object.__setattr__(self, 'amount', amount)
        object.__setattr__(self, 'type', PaymentComponentType(self.type))

    @property
    def effective_amount(self) -> Decimal:
        """Signed contribution to the total."""
        return -self.amount if self.is_negative else self.amount

    @property
    def is_zero(self) -> bool:
        return self.amount == 0
