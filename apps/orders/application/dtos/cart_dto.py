"""
Cart DTOs.
"""
from dataclasses import dataclass
from decimal import Decimal
from typing import List, Optional
from uuid import UUID

from ...domain.entities.cart import Cart
from ...domain.entities.cart_item import CartItem
from ...domain.services.cart_totals import CartTotals
from ...domain.value_objects.payment_component import PaymentComponent


@dataclass
class AddToCartDTO:
    user_id: str
    product_id: UUID
    quantity: int = 1
    custom_length: Optional[Decimal] = None


@dataclass
class UpdateCartItemDTO:
    user_id: str
    item_id: UUID
    quantity: Optional[int] = None
    custom_length: Optional[Decimal] = None


@dataclass
class RemoveCartItemDTO:
    user_id: str
    item_id: UUID


@dataclass
class CartTotalsRequestDTO:
    """Inputs of a totals preview."""
    user_id: str
    address_id: Optional[UUID] = None
    shipping_method: Optional[str] = None
    discount_code: Optional[str] = None
    payment_method: Optional[str] = None


@dataclass
class PaymentComponentDTO:
    type: str
    amount: Decimal
    label: str
    description: str
    is_negative: bool

    @classmethod
    def from_component(cls, component: PaymentComponent) -> 'PaymentComponentDTO':
        return cls(
            type=component.type.value,
            amount=component.amount,
            label=component.label,
            description=component.description,
            is_negative=component.is_negative,
        )


@dataclass
class CartTotalsDTO:
    subtotal: Decimal
    tax_amount: Decimal
    shipping_amount: Decimal
    discount_amount: Decimal
    fee_amount: Decimal
    total_amount: Decimal
    item_count: int
    currency: str
    components: List[PaymentComponentDTO]

    @classmethod
    def from_totals(cls, totals: CartTotals) -> 'CartTotalsDTO':
        return cls(
            subtotal=totals.subtotal,
            tax_amount=totals.tax_amount,
            shipping_amount=totals.shipping_amount,
            discount_amount=totals.discount_amount,
            fee_amount=totals.fee_amount,
            total_amount=totals.total_amount,
            item_count=totals.item_count,
            currency=totals.currency,
            components=[PaymentComponentDTO.from_component(c) for c in totals.components],
        )


@dataclass
class CartItemDTO:
    id: UUID
    product_id: UUID
    product_name: str
    product_sku: str
    pricing_mode: str
    quantity: int
    custom_length: Optional[Decimal]
    unit_base_amount: Decimal
    unit_tax_amount: Decimal
    unit_price: Decimal
    line_subtotal: Decimal
    line_total: Decimal

    @classmethod
    def from_entity(cls, item: CartItem) -> 'CartItemDTO':
        return cls(
            id=item.id,
            product_id=item.product_id,
            product_name=item.product.name,
            product_sku=item.product.sku,
            pricing_mode=item.pricing_mode.value,
            quantity=item.quantity,
            custom_length=item.custom_length,
            unit_base_amount=item.unit_base_amount,
            unit_tax_amount=item.unit_tax_amount,
            unit_price=item.unit_price,
            line_subtotal=item.line_subtotal,
            line_total=item.line_total,
        )


@dataclass
class CartDTO:
    """DTO for cart output with fresh totals."""
    id: UUID
    user_id: str
    items: List[CartItemDTO]
    totals: CartTotalsDTO

    @classmethod
    def from_entity(cls, cart: Cart, totals: CartTotals) -> 'CartDTO':
        return cls(
            id=cart.id,
            user_id=cart.user_id,
            items=[CartItemDTO.from_entity(item) for item in cart.items],
            totals=CartTotalsDTO.from_totals(totals),
        )
