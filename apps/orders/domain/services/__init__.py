# Domain services
from .payment_component_calculator import PaymentComponentCalculator, PaymentComponentBreakdown
from .cart_totals import CartTotals, calculate_cart_totals

__all__ = [
    'PaymentComponentCalculator',
    'PaymentComponentBreakdown',
    'CartTotals',
    'calculate_cart_totals',
]
