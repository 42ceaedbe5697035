"""
Order item entity.
"""
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional
from uuid import UUID

from shared.domain import BaseEntity
from .cart_item import CartItem


@dataclass(eq=False)
class OrderItem(BaseEntity):
    """A line of a placed order with its prices captured."""
    order_id: UUID
    product_id: UUID
    product_name: str
    product_sku: str
    quantity: int
    unit_base_amount: Decimal
    unit_tax_amount: Decimal
    unit_price: Decimal
    custom_length: Optional[Decimal] = None
    currency: str = "USD"

    @classmethod
    def from_cart_item(cls, order_id: UUID, item: CartItem, currency: str = "USD") -> 'OrderItem':
        return cls(
            order_id=order_id,
            product_id=item.product_id,
            product_name=item.product.name,
            product_sku=item.product.sku,
            quantity=item.quantity,
            unit_base_amount=item.unit_base_amount,
            unit_tax_amount=item.unit_tax_amount,
            unit_price=item.unit_price,
            custom_length=item.custom_length,
            currency=currency,
        )

    @property
    def subtotal(self) -> Decimal:
        """Line amount before tax."""
        return self.unit_base_amount * self.quantity

    @property
    def total(self) -> Decimal:
        return self.unit_price * self.quantity
