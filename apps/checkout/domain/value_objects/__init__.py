# Value objects
from .checkout_state import CheckoutState
from .payment import FailureReason, PaymentRequest, CaptureResult
from .order_submission import OrderRequest, CreatedOrder
from .checkout_failure import CheckoutFailure

__all__ = [
    'CheckoutState',
    'FailureReason',
    'PaymentRequest',
    'CaptureResult',
    'OrderRequest',
    'CreatedOrder',
    'CheckoutFailure',
]
