"""
Checkout failure value object.
"""
from dataclasses import dataclass
from typing import Optional

from .payment import FailureReason


@dataclass(frozen=True)
class CheckoutFailure:
    """
    A failed checkout attempt, as shown to the customer.

    ``message`` is written for the customer; collaborator error text goes
    to the log. When payment was already captured the gateway identifiers
    are kept so support can reconcile the charge.
    """
    message: str
    reason: FailureReason
    retryable: bool
    payment_captured: bool = False
    payment_id: Optional[str] = None
    gateway_order_id: Optional[str] = None
    signature: Optional[str] = None
