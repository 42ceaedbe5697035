"""
Payment gateway port.
"""
from abc import ABC, abstractmethod

from ..value_objects.payment import CaptureResult, PaymentRequest


class PaymentGateway(ABC):
    """Collects payment from the customer."""

    @abstractmethod
    def capture(self, request: PaymentRequest) -> CaptureResult:
        """
        Collect ``request.amount`` from the customer.

        Declines, cancellations and timeouts are reported through
        ``CaptureResult.failure_reason`` rather than raised.
        """
        pass
