"""
Cart totals aggregation.

The cart screen, the totals preview, the checkout flow and order
creation all get their numbers from ``calculate_cart_totals``.
"""
from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable, Optional, Tuple

from shared.domain import Money
from ..value_objects.order_totals import OrderTotals
from ..value_objects.payment_component import PaymentComponent
from .payment_component_calculator import PaymentComponentCalculator


@dataclass(frozen=True)
class CartTotals:
    subtotal: Decimal
    tax_amount: Decimal
    shipping_amount: Decimal
    discount_amount: Decimal
    fee_amount: Decimal
    total_amount: Decimal
    components: Tuple[PaymentComponent, ...]
    item_count: int = 0
    currency: str = "USD"

    def as_order_totals(self) -> OrderTotals:
        return OrderTotals(
            subtotal=self.subtotal,
            tax_amount=self.tax_amount,
            shipping_amount=self.shipping_amount,
            discount_amount=self.discount_amount,
            fee_amount=self.fee_amount,
            total_amount=self.total_amount,
        )


def calculate_cart_totals(
    lines: Iterable,
    address=None,
    shipping_method: Optional[str] = None,
    discount_code: Optional[str] = None,
    payment_method: Optional[str] = None,
    currency: str = "USD",
    calculator: Optional[PaymentComponentCalculator] = None,
) -> CartTotals:
    """Subtotal, components and grand total for the given lines and checkout codes."""
    lines = list(lines)
    calculator = calculator or PaymentComponentCalculator(currency=currency)

    subtotal = calculator.subtotal(lines)
    breakdown = calculator.calculate_all_components(
        lines,
        address=address,
        shipping_method=shipping_method,
        discount_code=discount_code,
        payment_method=payment_method,
    )

    tax = breakdown.tax.amount
    shipping = breakdown.shipping.amount
    discount = breakdown.discount_amount
    fee = breakdown.fee_amount
    grand_total = (
        Money(subtotal, currency)
        .add(Money(tax, currency))
        .add(Money(shipping, currency))
        .add(Money(fee, currency))
        .subtract(Money(discount, currency))
        .rounded()
    )
    return CartTotals(
        subtotal=subtotal,
        tax_amount=tax,
        shipping_amount=shipping,
        discount_amount=discount,
        fee_amount=fee,
        total_amount=grand_total.amount,
        components=tuple(breakdown.components),
        item_count=sum(line.quantity for line in lines),
        currency=currency,
    )
