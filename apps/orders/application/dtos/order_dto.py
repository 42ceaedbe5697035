"""
Order DTOs.
"""
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import List, Optional
from uuid import UUID

from ...domain.entities.order import Order
from ...domain.entities.order_item import OrderItem
from ...domain.value_objects.order_status import OrderStatus
from .cart_dto import PaymentComponentDTO


@dataclass
class CreateOrderDTO:
    """DTO for order creation from the user's cart."""
    user_id: str
    billing_address_id: UUID
    shipping_address_id: UUID
    payment_method: str
    shipping_method: Optional[str] = None
    discount_code: Optional[str] = None
    customer_notes: str = ""
    payment_reference: Optional[str] = None
    expected_total: Optional[Decimal] = None


@dataclass
class ListOrdersDTO:
    user_id: str
    status: Optional[OrderStatus] = None
    offset: int = 0
    limit: int = 20


@dataclass
class OrderRefDTO:
    user_id: str
    order_id: UUID


@dataclass
class CancelOrderDTO:
    user_id: str
    order_id: UUID
    reason: str


@dataclass
class OrderNumberRefDTO:
    user_id: str
    order_number: str


@dataclass
class RecordPaymentDTO:
    user_id: str
    order_id: UUID
    transaction_id: str


@dataclass
class OrderItemDTO:
    id: UUID
    product_id: UUID
    product_name: str
    product_sku: str
    quantity: int
    custom_length: Optional[Decimal]
    unit_base_amount: Decimal
    unit_tax_amount: Decimal
    unit_price: Decimal
    total: Decimal

    @classmethod
    def from_entity(cls, item: OrderItem) -> 'OrderItemDTO':
        return cls(
            id=item.id,
            product_id=item.product_id,
            product_name=item.product_name,
            product_sku=item.product_sku,
            quantity=item.quantity,
            custom_length=item.custom_length,
            unit_base_amount=item.unit_base_amount,
            unit_tax_amount=item.unit_tax_amount,
            unit_price=item.unit_price,
            total=item.total,
        )


@dataclass
class StatusHistoryDTO:
    status: str
    previous_status: Optional[str]
    note: str
    changed_at: datetime


@dataclass
class OrderDTO:
    """DTO for order output."""
    id: UUID
    order_number: str
    user_id: str
    status: str
    payment_method: str
    shipping_method: Optional[str]
    discount_code: Optional[str]
    payment_reference: Optional[str]
    currency: str
    subtotal: Decimal
    tax_amount: Decimal
    shipping_amount: Decimal
    discount_amount: Decimal
    fee_amount: Decimal
    total_amount: Decimal
    billing_address_id: UUID
    shipping_address_id: UUID
    shipping_address: str
    customer_notes: str
    cancellation_reason: Optional[str]
    is_cancellable: bool
    items: List[OrderItemDTO]
    payment_components: List[PaymentComponentDTO]
    status_history: List[StatusHistoryDTO]
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, order: Order) -> 'OrderDTO':
        """Create DTO from entity."""
        totals = order.totals
        return cls(
            id=order.id,
            order_number=order.order_number.value,
            user_id=order.user_id,
            status=order.status.value,
            payment_method=order.payment_method.value,
            shipping_method=order.shipping_method,
            discount_code=order.discount_code,
            payment_reference=order.payment_reference,
            currency=order.currency,
            subtotal=totals.subtotal,
            tax_amount=totals.tax_amount,
            shipping_amount=totals.shipping_amount,
            discount_amount=totals.discount_amount,
            fee_amount=totals.fee_amount,
            total_amount=totals.total_amount,
            billing_address_id=order.billing_address_id,
            shipping_address_id=order.shipping_address_id,
            shipping_address=order.shipping_info.full_address,
            customer_notes=order.customer_notes,
            cancellation_reason=order.cancellation_reason,
            is_cancellable=order.is_cancellable,
            items=[OrderItemDTO.from_entity(item) for item in order.items],
            payment_components=[PaymentComponentDTO.from_component(c) for c in order.payment_components],
            status_history=[
                StatusHistoryDTO(
                    status=entry.status.value,
                    previous_status=entry.previous_status.value if entry.previous_status else None,
                    note=entry.note,
                    changed_at=entry.changed_at,
                )
                for entry in order.status_history
            ],
            created_at=order.created_at,
            updated_at=order.updated_at,
        )
