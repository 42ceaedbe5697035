"""
Helpers shared by the cart use cases.
"""
from typing import Optional

from ...domain.entities.cart import Cart
from ...domain.services.cart_totals import calculate_cart_totals
from ...domain.services.payment_component_calculator import PaymentComponentCalculator
from ..dtos.cart_dto import CartDTO


def cart_dto_with_totals(
    cart: Cart,
    currency: str = "USD",
    calculator: Optional[PaymentComponentCalculator] = None,
) -> CartDTO:
    """Cart output with totals for the default shipping method and no codes."""
    totals = calculate_cart_totals(cart.items, currency=currency, calculator=calculator)
    return CartDTO.from_entity(cart, totals)
