"""
Checkout domain exceptions.
"""
from shared.domain.exceptions import ExternalServiceError, InvalidOperationError
from .value_objects.payment import FailureReason


class CheckoutStateError(InvalidOperationError):
    """Raised when an operation is not allowed in the current checkout state."""

    def __init__(self, operation: str, state: str):
        super().__init__(
            message=f"Cannot {operation} while checkout is {state}",
            operation=operation,
            state=state,
        )
        self.code = "INVALID_CHECKOUT_STATE"


class CheckoutBusyError(InvalidOperationError):
    """Raised when a transition is requested while an order is being placed."""

    def __init__(self, operation: str):
        super().__init__(
            message="Your order is already being processed",
            operation=operation,
            state="busy",
        )
        self.code = "CHECKOUT_BUSY"


class NavigationBlockedError(InvalidOperationError):
    """Raised when the customer tries to leave while payment is in progress."""

    title = "Payment in Progress"

    def __init__(self, state: str):
        super().__init__(
            message="Please do not go back while we process your payment.",
            operation="go_back",
            state=state,
        )
        self.code = "NAVIGATION_BLOCKED"


class OrderGatewayError(ExternalServiceError):
    """Raised by an order gateway when an order could not be created."""

    reason = FailureReason.SERVER_ERROR

    def __init__(self, message: str, code: str = None, retryable: bool = True):
        super().__init__(
            message=message,
            service="order",
            code=code or "ORDER_GATEWAY_ERROR",
            retryable=retryable,
        )


class OrderRejectedError(OrderGatewayError):
    """The order service refused the request as invalid."""

    reason = FailureReason.REJECTED

    def __init__(self, message: str, code: str = None):
        super().__init__(message=message, code=code or "ORDER_REJECTED", retryable=False)


class OrderServerError(OrderGatewayError):
    """The order service failed while handling the request."""

    def __init__(self, message: str = "Order service error"):
        super().__init__(message=message, code="ORDER_SERVER_ERROR")


class OrderGatewayTimeoutError(OrderGatewayError):
    """The order service did not answer in time."""

    reason = FailureReason.TIMEOUT

    def __init__(self, message: str = "Order service timed out"):
        super().__init__(message=message, code="ORDER_TIMEOUT")


class OrderNetworkError(OrderGatewayError):
    """The order service could not be reached."""

    reason = FailureReason.NETWORK

    def __init__(self, message: str = "Order service unreachable"):
        super().__init__(message=message, code="ORDER_NETWORK_ERROR")
