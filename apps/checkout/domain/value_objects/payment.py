"""
Payment capture request and result.
"""
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Optional

from shared.domain import ValidationError, quantize


class FailureReason(str, Enum):
    """Why a collaborator call did not succeed."""
    DECLINED = 'declined'
    CANCELLED = 'cancelled'
    TIMEOUT = 'timeout'
    NETWORK = 'network'
    INVALID_RESPONSE = 'invalid_response'
    REJECTED = 'rejected'
    SERVER_ERROR = 'server_error'


@dataclass(frozen=True)
class PaymentRequest:
    """What the payment gateway is asked to collect."""
    amount: Decimal
    currency: str
    description: str
    payer_email: str
    receipt: str = ""

    def __post_init__(self):
        amount = quantize(self.amount)
        if amount <= 0:
            raise ValidationError("Payment amount must be positive", field="amount")
        object.__setattr__(self, 'amount', amount)


@dataclass(frozen=True)
class CaptureResult:
    """Outcome reported by the payment gateway."""
    success: bool
    payment_id: Optional[str] = None
    gateway_order_id: Optional[str] = None
    signature: Optional[str] = None
    error: Optional[str] = None
    failure_reason: Optional[FailureReason] = None

    @classmethod
    def captured(
        cls,
        payment_id: str,
        gateway_order_id: Optional[str] = None,
        signature: Optional[str] = None,
    ) -> 'CaptureResult':
        return cls(
            success=True,
            payment_id=payment_id,
            gateway_order_id=gateway_order_id,
            signature=signature,
        )

    @classmethod
    def failed(cls, error: str, reason: FailureReason = FailureReason.DECLINED) -> 'CaptureResult':
        return cls(success=False, error=error, failure_reason=reason)

    @property
    def is_complete(self) -> bool:
        """A successful capture carries a payment id."""
        return self.success and bool(self.payment_id)
