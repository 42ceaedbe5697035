"""
On-hand stock for a product.
"""
from dataclasses import dataclass

from shared.domain import ValueObject
from shared.domain.exceptions import ValidationError


@dataclass(frozen=True)
class Stock(ValueObject):
    quantity: int

    def __post_init__(self):
        if self.quantity < 0:
            raise ValidationError("Stock quantity cannot be negative", field="stock_quantity")

    def covers(self, requested: int) -> bool:
        """True when ``requested`` is a positive amount that is on hand."""
        return 0 < requested <= self.quantity

    def adjusted(self, delta: int) -> 'Stock':
        return Stock(quantity=self.quantity + delta)

    @property
    def is_available(self) -> bool:
        return self.quantity > 0

