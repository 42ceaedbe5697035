"""
Tests for the checkout state machine and its adapters.
"""
import contextlib
import logging
from dataclasses import replace
from decimal import Decimal
from uuid import uuid4

import pytest

from apps.checkout.domain.exceptions import (
    CheckoutBusyError,
    CheckoutStateError,
    NavigationBlockedError,
    OrderGatewayTimeoutError,
    OrderRejectedError,
    OrderServerError,
)
from apps.checkout.domain.services import CheckoutContext, CheckoutFlow
from apps.checkout.domain.services.checkout_flow import (
    ORDER_REJECTED_MESSAGE,
    ORDER_TIMEOUT_MESSAGE,
    PAYMENT_TIMEOUT_MESSAGE,
)
from apps.checkout.domain.value_objects import (
    CaptureResult,
    CheckoutState,
    CreatedOrder,
    FailureReason,
    OrderRequest,
    PaymentRequest,
)
from apps.checkout.infrastructure import LocalOrderGateway, RepositoryCartStore
from apps.orders.application.use_cases import CreateOrderFromCartUseCase
from apps.orders.domain.entities.cart import Cart
from apps.orders.domain.value_objects import OrderStatus, OrderTotals
from shared.domain import ValidationError
from tests.builders import make_address, make_line, make_snapshot
from tests.fakes import (
    FailingOrderRepository,
    InMemoryAddressRepository,
    InMemoryCartRepository,
    InMemoryOrderRepository,
    ListCartStore,
    StubOrderGateway,
    StubPaymentGateway,
)

USER = 'user-1'


def created_order(total='31.59'):
    return CreatedOrder(
        id=uuid4(),
        order_number='ORD-20260101-ABC123',
        status=OrderStatus.PAYMENT_DONE.value,
        totals=replace(OrderTotals.zero(), total_amount=Decimal(total)),
    )


@pytest.fixture
def address():
    return make_address(user_id=USER, is_default=True)


@pytest.fixture
def cart_store():
    return ListCartStore([make_line('10.00', '0.80', quantity=2)])


@pytest.fixture
def payments():
    return StubPaymentGateway()


@pytest.fixture
def orders():
    return StubOrderGateway(created_order())


@pytest.fixture
def flow(address, cart_store, payments, orders):
    context = CheckoutContext(
        user_id=USER,
        payer_email='buyer@example.com',
        cart_store=cart_store,
        payment_gateway=payments,
        order_gateway=orders,
        addresses=[make_address(user_id=USER, street='9 Other St'), address],
    )
    return CheckoutFlow(context)


def ready(flow, method='razorpay_card'):
    flow.confirm_address()
    flow.select_payment_method(method)
    return flow


class TestSelection:

    def test_default_address_is_preselected(self, flow, address):
        assert flow.state is CheckoutState.ADDRESS_SELECTION
        assert flow.shipping_address.id == address.id

    def test_confirm_without_address_keeps_state(self, cart_store, payments, orders):
        flow = CheckoutFlow(CheckoutContext(
            user_id=USER,
            payer_email='buyer@example.com',
            cart_store=cart_store,
            payment_gateway=payments,
            order_gateway=orders,
        ))

        with pytest.raises(ValidationError):
            flow.confirm_address()
        assert flow.state is CheckoutState.ADDRESS_SELECTION

    def test_select_unknown_address(self, flow):
        with pytest.raises(ValidationError):
            flow.select_address(uuid4())

    def test_unknown_payment_method_keeps_state(self, flow):
        flow.confirm_address()

        with pytest.raises(ValidationError):
            flow.select_payment_method('bitcoin')
        assert flow.state is CheckoutState.PAYMENT_METHOD_SELECTION

    def test_payment_method_reaches_ready(self, flow):
        ready(flow, 'COD')

        assert flow.state is CheckoutState.READY
        assert flow.payment_method.value == 'cash_on_delivery'

    def test_quote_follows_selections(self, flow):
        ready(flow, 'cod')
        flow.select_shipping_method('express')
        flow.apply_discount_code('SAVE10')

        totals = flow.quote()

        assert totals.shipping_amount == Decimal('19.99')
        assert totals.discount_amount == Decimal('2.00')
        assert totals.fee_amount == Decimal('2.99')
        assert totals.total_amount == Decimal('42.58')


class TestPlaceOrder:

    def test_card_payment_then_order(self, flow, payments, orders, cart_store):
        ready(flow)
        expected = flow.quote().total_amount

        assert flow.place_order() is CheckoutState.CONFIRMED

        assert payments.requests[0].amount == expected
        assert payments.requests[0].payer_email == 'buyer@example.com'
        request = orders.requests[0]
        assert request.payment_reference == 'pay_123'
        assert request.expected_total == expected
        assert request.shipping_address_id == flow.shipping_address.id
        assert request.billing_address_id == flow.shipping_address.id
        assert flow.order.order_number == 'ORD-20260101-ABC123'
        assert cart_store.cleared
        assert not flow.is_busy

    def test_cash_on_delivery_skips_capture(self, flow, payments, orders):
        ready(flow, 'cod')

        assert flow.place_order() is CheckoutState.CONFIRMED
        assert payments.requests == []
        assert orders.requests[0].payment_reference is None

    def test_separate_billing_address(self, flow, address):
        billing = flow.context.addresses[0]
        flow.select_billing_address(billing.id)
        ready(flow)

        flow.place_order()

        request = flow.context.order_gateway.requests[0]
        assert request.billing_address_id == billing.id
        assert request.shipping_address_id == address.id

    def test_empty_cart(self, flow, cart_store):
        ready(flow)
        cart_store.clear()

        with pytest.raises(ValidationError):
            flow.place_order()
        assert flow.state is CheckoutState.READY

    def test_place_order_requires_ready(self, flow):
        with pytest.raises(CheckoutStateError):
            flow.place_order()


class TestFailures:

    def test_declined_payment(self, flow, payments, orders):
        payments.result = CaptureResult.failed("Card declined by issuer")
        ready(flow)

        assert flow.place_order() is CheckoutState.FAILED

        assert flow.failure.message == "Card declined by issuer"
        assert flow.failure.reason is FailureReason.DECLINED
        assert flow.failure.retryable
        assert not flow.failure.payment_captured
        assert orders.requests == []

    def test_payment_timeout(self, flow, payments):
        payments.result = CaptureResult.failed("gateway timeout after 30s", FailureReason.TIMEOUT)
        ready(flow)

        flow.place_order()

        assert flow.failure.reason is FailureReason.TIMEOUT
        assert flow.failure.message == PAYMENT_TIMEOUT_MESSAGE

    def test_success_without_payment_id(self, flow, payments, orders):
        payments.result = CaptureResult(success=True)
        ready(flow)

        assert flow.place_order() is CheckoutState.FAILED
        assert flow.failure.reason is FailureReason.INVALID_RESPONSE
        assert orders.requests == []

    def test_retry_after_failure(self, flow, payments):
        payments.result = CaptureResult.failed("Payment cancelled", FailureReason.CANCELLED)
        ready(flow)
        flow.place_order()

        assert flow.retry() is CheckoutState.READY
        assert flow.failure is None
        assert flow.frozen_totals is None

        payments.result = CaptureResult.captured('pay_456')
        assert flow.place_order() is CheckoutState.CONFIRMED

    def test_order_failure_after_capture_is_not_retried(self, flow, orders, cart_store, caplog, monkeypatch):
        monkeypatch.setattr(logging.getLogger('apps'), 'propagate', True)
        orders.outcome = OrderServerError()
        ready(flow)

        with caplog.at_level(logging.ERROR, logger='apps.checkout'):
            assert flow.place_order() is CheckoutState.PAYMENT_CAPTURED_ORDER_FAILED

        failure = flow.failure
        assert failure.payment_captured
        assert not failure.retryable
        assert failure.payment_id == 'pay_123'
        assert failure.gateway_order_id == 'order_abc'
        assert failure.signature == 'sig_xyz'
        assert 'pay_123' in failure.message
        assert any(record.levelno == logging.ERROR for record in caplog.records)
        assert not cart_store.cleared
        with pytest.raises(CheckoutStateError):
            flow.retry()

    def test_unexpected_order_error_after_capture(self, flow, orders):
        orders.outcome = KeyError('total')
        ready(flow)

        assert flow.place_order() is CheckoutState.PAYMENT_CAPTURED_ORDER_FAILED
        assert flow.failure.reason is FailureReason.SERVER_ERROR

    @pytest.mark.parametrize('error,reason,message', [
        (OrderGatewayTimeoutError(), FailureReason.TIMEOUT, ORDER_TIMEOUT_MESSAGE),
        (OrderRejectedError("Cannot checkout an empty cart"), FailureReason.REJECTED, ORDER_REJECTED_MESSAGE),
    ])
    def test_cash_on_delivery_order_failure(self, flow, orders, error, reason, message):
        orders.outcome = error
        ready(flow, 'cod')

        assert flow.place_order() is CheckoutState.FAILED
        assert flow.failure.reason is reason
        assert flow.failure.message == message
        assert flow.failure.retryable


class TestNavigation:

    def test_go_back_through_steps(self, flow):
        ready(flow)

        assert flow.go_back() is CheckoutState.PAYMENT_METHOD_SELECTION
        assert flow.go_back() is CheckoutState.ADDRESS_SELECTION
        with pytest.raises(CheckoutStateError):
            flow.go_back()

    def test_back_and_cancel_blocked_during_payment(self, flow, payments):
        blocked = []

        def capture(request: PaymentRequest):
            for action in (flow.go_back, flow.cancel):
                try:
                    action()
                except NavigationBlockedError as e:
                    blocked.append(e)
            return CaptureResult.captured('pay_789')

        payments.on_capture = capture
        ready(flow)

        assert flow.place_order() is CheckoutState.CONFIRMED
        assert len(blocked) == 2
        assert blocked[0].title == "Payment in Progress"
        assert blocked[0].message == "Please do not go back while we process your payment."

    def test_second_submission_is_rejected_while_busy(self, flow, payments):
        rejected = []

        def capture(request: PaymentRequest):
            assert flow.is_busy
            assert not flow.can_go_back
            try:
                flow.place_order()
            except CheckoutBusyError as e:
                rejected.append(e)
            return CaptureResult.captured('pay_789')

        payments.on_capture = capture
        ready(flow)

        flow.place_order()

        assert len(rejected) == 1
        assert len(payments.requests) == 1

    def test_selections_locked_after_confirmation(self, flow):
        ready(flow, 'cod')
        flow.place_order()

        with pytest.raises(CheckoutStateError):
            flow.select_shipping_method('express')
        with pytest.raises(CheckoutStateError):
            flow.apply_discount_code('SAVE10')
        with pytest.raises(CheckoutStateError):
            flow.cancel()

    def test_cancel_before_payment(self, flow):
        ready(flow)

        assert flow.cancel() is CheckoutState.ABANDONED
        with pytest.raises(CheckoutStateError):
            flow.place_order()


class TestAdapters:

    @pytest.fixture
    def repositories(self, address):
        carts = InMemoryCartRepository()
        cart = Cart.create(USER)
        cart.add_item(make_snapshot('10.00', '0.80'), 2)
        carts.save(cart)
        return carts, InMemoryAddressRepository([address])

    def gateway(self, carts, addresses, orders=None):
        return LocalOrderGateway(
            use_case=CreateOrderFromCartUseCase(
                cart_repository=carts,
                order_repository=orders or InMemoryOrderRepository(),
                address_repository=addresses,
            ),
            unit_of_work=contextlib.nullcontext,
        )

    def test_flow_with_local_order_gateway(self, repositories, address, payments):
        carts, addresses = repositories
        order_repository = InMemoryOrderRepository()
        flow = CheckoutFlow(CheckoutContext(
            user_id=USER,
            payer_email='buyer@example.com',
            cart_store=RepositoryCartStore(cart_repository=carts, user_id=USER),
            payment_gateway=payments,
            order_gateway=self.gateway(carts, addresses, order_repository),
            addresses=addresses.find_by_user_id(USER),
        ))
        ready(flow)
        flow.apply_discount_code('FLAT5')

        assert flow.place_order() is CheckoutState.CONFIRMED

        stored = order_repository.find_by_id(flow.order.id)
        assert stored.status is OrderStatus.PAYMENT_DONE
        assert stored.payment_reference == 'pay_123'
        assert stored.totals.total_amount == flow.frozen_totals.total_amount == Decimal('26.59')
        assert carts.find_by_user_id(USER).is_empty

    def test_domain_errors_become_rejections(self, repositories, address):
        carts, addresses = repositories
        gateway = self.gateway(carts, addresses)
        request = _order_request(address, expected_total=Decimal('1.00'))

        with pytest.raises(OrderRejectedError) as exc_info:
            gateway.create_order(request)
        assert exc_info.value.code == 'TOTALS_MISMATCH'
        assert not exc_info.value.retryable

    def test_unexpected_errors_become_server_errors(self, repositories, address):
        carts, addresses = repositories
        gateway = self.gateway(carts, addresses, FailingOrderRepository())

        with pytest.raises(OrderServerError):
            gateway.create_order(_order_request(address))

    def test_repository_cart_store_without_cart(self):
        store = RepositoryCartStore(cart_repository=InMemoryCartRepository(), user_id=USER)

        assert store.lines() == []
        store.clear()


def _order_request(address, **overrides):
    values = dict(
        user_id=USER,
        billing_address_id=address.id,
        shipping_address_id=address.id,
        payment_method='cod',
    )
    values.update(overrides)
    return OrderRequest(**values)
