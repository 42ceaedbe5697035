"""
Order totals value object.
"""
from dataclasses import dataclass, fields
from decimal import Decimal

from shared.domain import ValueObject, quantize


@dataclass(frozen=True)
class OrderTotals(ValueObject):
    """Monetary summary persisted with an order, all at two decimal places."""
    subtotal: Decimal
    tax_amount: Decimal
    shipping_amount: Decimal
    discount_amount: Decimal
    fee_amount: Decimal
    total_amount: Decimal

    def __post_init__(self):
        for f in fields(self):
            object.__setattr__(self, f.name, quantize(getattr(self, f.name)))

    @classmethod
    def zero(cls) -> 'OrderTotals':
        return cls(*([Decimal('0')] * 6))
