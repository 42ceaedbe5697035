"""
Checkout flow.

Drives one customer's checkout from address selection to a confirmed
order. Payment is collected before the order is created, so an order
failure after a successful capture leaves the flow in
PAYMENT_CAPTURED_ORDER_FAILED with the gateway identifiers kept for
reconciliation. That state is never retried automatically.
"""
import logging
from dataclasses import dataclass
from typing import Optional, Sequence
from uuid import UUID

from apps.addresses.domain.entities.address import Address
from apps.addresses.domain.services.default_address_policy import select_checkout_address
from apps.orders.domain.services.cart_totals import CartTotals, calculate_cart_totals
from apps.orders.domain.services.payment_component_calculator import PaymentComponentCalculator
from apps.orders.domain.value_objects.checkout_codes import PaymentMethod
from shared.domain import ValidationError
from ..exceptions import (
    CheckoutBusyError,
    CheckoutStateError,
    NavigationBlockedError,
    OrderGatewayError,
)
from ..ports import CartStore, OrderGateway, PaymentGateway
from ..value_objects import (
    CaptureResult,
    CheckoutFailure,
    CheckoutState,
    CreatedOrder,
    FailureReason,
    OrderRequest,
    PaymentRequest,
)

logger = logging.getLogger(__name__)

PAYMENT_FAILED_MESSAGE = "Payment failed. Please try again."
PAYMENT_TIMEOUT_MESSAGE = "Payment timed out. Please try again."
ORDER_FAILED_MESSAGE = "Failed to create order. Please try again."
ORDER_TIMEOUT_MESSAGE = "The store took too long to respond. Please try again."
ORDER_REJECTED_MESSAGE = "Your order could not be placed. Please review your cart and try again."
CAPTURED_ORDER_FAILED_MESSAGE = (
    "Payment was successful but order creation failed. "
    "Please contact support with payment reference {payment_id}."
)

_BACK_TRANSITIONS = {
    CheckoutState.PAYMENT_METHOD_SELECTION: CheckoutState.ADDRESS_SELECTION,
    CheckoutState.READY: CheckoutState.PAYMENT_METHOD_SELECTION,
    CheckoutState.FAILED: CheckoutState.PAYMENT_METHOD_SELECTION,
}


@dataclass
class CheckoutContext:
    """Everything a checkout session needs from the outside world."""
    user_id: str
    payer_email: str
    cart_store: CartStore
    payment_gateway: PaymentGateway
    order_gateway: OrderGateway
    addresses: Sequence[Address] = ()
    currency: str = "USD"
    calculator: Optional[PaymentComponentCalculator] = None
    description: str = "Order payment"
    customer_notes: str = ""


class CheckoutFlow:
    """State machine for a single checkout session."""

    def __init__(self, context: CheckoutContext, selected_address_id: Optional[UUID] = None):
        self.context = context
        self.state = CheckoutState.ADDRESS_SELECTION
        self.shipping_address: Optional[Address] = select_checkout_address(
            list(context.addresses), selected_address_id
        )
        self.billing_address: Optional[Address] = None
        self.shipping_method: Optional[str] = None
        self.discount_code: Optional[str] = None
        self.payment_method: Optional[PaymentMethod] = None
        self.frozen_totals: Optional[CartTotals] = None
        self.capture_result: Optional[CaptureResult] = None
        self.order: Optional[CreatedOrder] = None
        self.failure: Optional[CheckoutFailure] = None
        self._busy = False

    # Selection

    def select_address(self, address_id: UUID) -> Address:
        self._ensure_idle('select_address')
        self._ensure_state('select_address', CheckoutState.ADDRESS_SELECTION)
        self.shipping_address = self._find_address(address_id)
        return self.shipping_address

    def select_billing_address(self, address_id: UUID) -> Address:
        """Bill to a different address than the one shipped to."""
        self._ensure_idle('select_billing_address')
        self._ensure_state('select_billing_address', CheckoutState.ADDRESS_SELECTION)
        self.billing_address = self._find_address(address_id)
        return self.billing_address

    def confirm_address(self) -> CheckoutState:
        self._ensure_idle('confirm_address')
        self._ensure_state('confirm_address', CheckoutState.ADDRESS_SELECTION)
        if self.shipping_address is None:
            raise ValidationError("Please select a delivery address", field="address")
        return self._move_to(CheckoutState.PAYMENT_METHOD_SELECTION)

    def select_shipping_method(self, code: Optional[str]) -> None:
        self._ensure_idle('select_shipping_method')
        if not self.state.accepts_selection_changes:
            raise CheckoutStateError('select_shipping_method', self.state.value)
        self.shipping_method = code or None

    def apply_discount_code(self, code: Optional[str]) -> None:
        self._ensure_idle('apply_discount_code')
        if not self.state.accepts_selection_changes:
            raise CheckoutStateError('apply_discount_code', self.state.value)
        self.discount_code = code or None

    def select_payment_method(self, code: str) -> CheckoutState:
        self._ensure_idle('select_payment_method')
        self._ensure_state(
            'select_payment_method',
            CheckoutState.PAYMENT_METHOD_SELECTION,
            CheckoutState.READY,
        )
        method = PaymentMethod.parse(code)
        if method is None:
            raise ValidationError(f"Unsupported payment method: '{code}'", field="payment_method")
        self.payment_method = method
        return self._move_to(CheckoutState.READY)

    # Pricing

    def quote(self) -> CartTotals:
        """Totals for the current cart and selections."""
        return calculate_cart_totals(
            self.context.cart_store.lines(),
            address=self.shipping_address,
            shipping_method=self.shipping_method,
            discount_code=self.discount_code,
            payment_method=self.payment_method.value if self.payment_method else None,
            currency=self.context.currency,
            calculator=self.context.calculator,
        )

    @property
    def totals(self) -> CartTotals:
        """Frozen totals while an order is being placed, a fresh quote otherwise."""
        return self.frozen_totals or self.quote()

    # Placing the order

    def place_order(self) -> CheckoutState:
        """
        Collect payment when the method needs it, then create the order.

        Returns the state the flow ends in: CONFIRMED, FAILED or
        PAYMENT_CAPTURED_ORDER_FAILED. Failures are described by
        ``self.failure``.
        """
        self._ensure_idle('place_order')
        self._ensure_state('place_order', CheckoutState.READY)
        if not self.context.cart_store.lines():
            raise ValidationError("Your cart is empty", field="cart")

        self._busy = True
        try:
            self.frozen_totals = self.quote()
            if self.payment_method.requires_capture:
                self._move_to(CheckoutState.PAYMENT_COLLECTION)
                if not self._collect_payment():
                    return self.state
            self._move_to(CheckoutState.ORDER_SUBMISSION)
            self._submit_order()
            return self.state
        finally:
            self._busy = False

    def _collect_payment(self) -> bool:
        context = self.context
        request = PaymentRequest(
            amount=self.frozen_totals.total_amount,
            currency=context.currency,
            description=context.description,
            payer_email=context.payer_email,
            receipt=context.user_id,
        )
        try:
            result = context.payment_gateway.capture(request)
        except Exception as e:
            logger.error(f"Payment gateway raised for user {context.user_id}: {e}", exc_info=True)
            result = CaptureResult.failed(str(e), FailureReason.NETWORK)

        if not result.success:
            reason = result.failure_reason or FailureReason.DECLINED
            logger.warning(
                f"Payment not captured for user {context.user_id}: reason={reason.value} error={result.error}"
            )
            if reason is FailureReason.TIMEOUT:
                message = PAYMENT_TIMEOUT_MESSAGE
            elif reason is FailureReason.NETWORK:
                message = PAYMENT_FAILED_MESSAGE
            else:
                message = result.error or PAYMENT_FAILED_MESSAGE
            self._fail(CheckoutFailure(message=message, reason=reason, retryable=True))
            return False

        if not result.is_complete:
            logger.error(f"Payment gateway reported success without a payment id for user {context.user_id}")
            self._fail(CheckoutFailure(
                message=PAYMENT_FAILED_MESSAGE,
                reason=FailureReason.INVALID_RESPONSE,
                retryable=True,
            ))
            return False

        self.capture_result = result
        logger.info(f"Payment captured for user {context.user_id}: payment_id={result.payment_id}")
        return True

    def _submit_order(self) -> None:
        context = self.context
        shipping = self.shipping_address
        billing = self.billing_address or shipping
        request = OrderRequest(
            user_id=context.user_id,
            billing_address_id=billing.id,
            shipping_address_id=shipping.id,
            payment_method=self.payment_method.value,
            shipping_method=self.shipping_method,
            discount_code=self.discount_code,
            customer_notes=context.customer_notes,
            payment_reference=self.capture_result.payment_id if self.capture_result else None,
            expected_total=self.frozen_totals.total_amount,
        )
        try:
            self.order = context.order_gateway.create_order(request)
        except OrderGatewayError as e:
            self._order_failed(e.reason, e)
            return
        except Exception as e:
            self._order_failed(FailureReason.SERVER_ERROR, e)
            return

        context.cart_store.clear()
        self._move_to(CheckoutState.CONFIRMED)
        logger.info(f"Checkout confirmed for user {context.user_id}: order {self.order.order_number}")

    def _order_failed(self, reason: FailureReason, error: Exception) -> None:
        capture = self.capture_result
        if capture is not None:
            logger.error(
                f"Order creation failed after payment capture for user {self.context.user_id}: "
                f"payment_id={capture.payment_id} gateway_order_id={capture.gateway_order_id} "
                f"reason={reason.value} error={error}",
                exc_info=True,
            )
            self.failure = CheckoutFailure(
                message=CAPTURED_ORDER_FAILED_MESSAGE.format(payment_id=capture.payment_id),
                reason=reason,
                retryable=False,
                payment_captured=True,
                payment_id=capture.payment_id,
                gateway_order_id=capture.gateway_order_id,
                signature=capture.signature,
            )
            self._move_to(CheckoutState.PAYMENT_CAPTURED_ORDER_FAILED)
            return

        logger.warning(f"Order creation failed for user {self.context.user_id}: reason={reason.value} error={error}")
        if reason is FailureReason.TIMEOUT:
            message = ORDER_TIMEOUT_MESSAGE
        elif reason is FailureReason.REJECTED:
            message = ORDER_REJECTED_MESSAGE
        else:
            message = ORDER_FAILED_MESSAGE
        self._fail(CheckoutFailure(message=message, reason=reason, retryable=True))

    def _fail(self, failure: CheckoutFailure) -> None:
        self.failure = failure
        self._move_to(CheckoutState.FAILED)

    # Recovery and navigation

    def retry(self) -> CheckoutState:
        """Return a failed, not-yet-charged checkout to READY."""
        self._ensure_idle('retry')
        self._ensure_state('retry', CheckoutState.FAILED)
        self.failure = None
        self.frozen_totals = None
        self.capture_result = None
        return self._move_to(CheckoutState.READY)

    def go_back(self) -> CheckoutState:
        if self.state.is_in_flight:
            raise NavigationBlockedError(self.state.value)
        self._ensure_idle('go_back')
        previous = _BACK_TRANSITIONS.get(self.state)
        if previous is None:
            raise CheckoutStateError('go_back', self.state.value)
        if self.state is CheckoutState.FAILED:
            self.failure = None
            self.frozen_totals = None
        return self._move_to(previous)

    def cancel(self) -> CheckoutState:
        """Abandon the checkout before any payment is collected."""
        if self.state.is_in_flight:
            raise NavigationBlockedError(self.state.value)
        self._ensure_idle('cancel')
        if self.state.is_terminal:
            raise CheckoutStateError('cancel', self.state.value)
        return self._move_to(CheckoutState.ABANDONED)

    @property
    def is_busy(self) -> bool:
        return self._busy

    @property
    def can_go_back(self) -> bool:
        return not self._busy and self.state in _BACK_TRANSITIONS

    # Helpers

    def _find_address(self, address_id: UUID) -> Address:
        for address in self.context.addresses:
            if address.id == address_id:
                return address
        raise ValidationError(f"Unknown address '{address_id}'", field="address")

    def _ensure_idle(self, operation: str) -> None:
        if self._busy:
            raise CheckoutBusyError(operation)

    def _ensure_state(self, operation: str, *allowed: CheckoutState) -> None:
        if self.state not in allowed:
            raise CheckoutStateError(operation, self.state.value)

    def _move_to(self, state: CheckoutState) -> CheckoutState:
        logger.debug(f"Checkout for user {self.context.user_id}: {self.state.value} -> {state.value}")
        self.state = state
        return state
