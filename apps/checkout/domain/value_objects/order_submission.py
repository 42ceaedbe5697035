"""
Order gateway request and response.
"""
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional
from uuid import UUID

from apps.orders.domain.value_objects.order_totals import OrderTotals


@dataclass(frozen=True)
class OrderRequest:
    user_id: str
    billing_address_id: UUID
    shipping_address_id: UUID
    payment_method: str
    shipping_method: Optional[str] = None
    discount_code: Optional[str] = None
    customer_notes: str = ""
    payment_reference: Optional[str] = None
    expected_total: Optional[Decimal] = None


@dataclass(frozen=True)
class CreatedOrder:
    """The order as confirmed by the order service."""
    id: UUID
    order_number: str
    status: str
    totals: OrderTotals

    @property
    def total_amount(self) -> Decimal:
        return self.totals.total_amount
