"""
Checkout state value object.
"""
from enum import Enum


class CheckoutState(str, Enum):
    """Where a checkout session currently stands."""
    ADDRESS_SELECTION = 'address_selection'
    PAYMENT_METHOD_SELECTION = 'payment_method_selection'
    READY = 'ready'
    PAYMENT_COLLECTION = 'payment_collection'
    ORDER_SUBMISSION = 'order_submission'
    CONFIRMED = 'confirmed'
    FAILED = 'failed'
    PAYMENT_CAPTURED_ORDER_FAILED = 'payment_captured_order_failed'
    ABANDONED = 'abandoned'

    @property
    def is_in_flight(self) -> bool:
        """Payment or order creation is underway."""
        return self in (CheckoutState.PAYMENT_COLLECTION, CheckoutState.ORDER_SUBMISSION)

    @property
    def is_terminal(self) -> bool:
        return self in (
            CheckoutState.CONFIRMED,
            CheckoutState.PAYMENT_CAPTURED_ORDER_FAILED,
            CheckoutState.ABANDONED,
        )

    @property
    def accepts_selection_changes(self) -> bool:
        """Shipping method and discount code can still change."""
        return self in (
            CheckoutState.ADDRESS_SELECTION,
            CheckoutState.PAYMENT_METHOD_SELECTION,
            CheckoutState.READY,
        )
