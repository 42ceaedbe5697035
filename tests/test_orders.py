"""
Tests for order creation from a cart and the order lifecycle.
"""
import re
from decimal import Decimal
from uuid import uuid4

import pytest

from apps.addresses.domain.exceptions import AddressNotFoundError
from apps.orders.application.dtos import (
    CancelOrderDTO,
    CreateOrderDTO,
    ListOrdersDTO,
    OrderNumberRefDTO,
    OrderRefDTO,
    RecordPaymentDTO,
)
from apps.orders.application.use_cases import (
    CancelOrderUseCase,
    CreateOrderFromCartUseCase,
    DeliverOrderUseCase,
    GetOrderByNumberUseCase,
    GetOrderUseCase,
    ListOrdersUseCase,
    RecordPaymentUseCase,
)
from apps.orders.domain.entities.cart import Cart
from apps.orders.domain.exceptions import (
    EmptyCartError,
    InvalidOrderStateError,
    OrderNotFoundError,
    TotalsMismatchError,
)
from apps.orders.domain.value_objects import OrderStatus
from shared.domain import ValidationError
from tests.builders import make_address, make_snapshot
from tests.fakes import InMemoryAddressRepository, InMemoryCartRepository, InMemoryOrderRepository

USER = 'user-1'


@pytest.fixture
def address():
    return make_address(user_id=USER, state='CA', is_default=True)


@pytest.fixture
def repos(address):
    carts = InMemoryCartRepository()
    cart = Cart.create(USER)
    cart.add_item(make_snapshot('10.00', '0.80'), 2)
    carts.save(cart)
    return carts, InMemoryOrderRepository(), InMemoryAddressRepository([address])


@pytest.fixture
def create_order(repos):
    carts, orders, addresses = repos
    return CreateOrderFromCartUseCase(
        cart_repository=carts,
        order_repository=orders,
        address_repository=addresses,
    )


def order_dto(address, **overrides):
    values = dict(
        user_id=USER,
        billing_address_id=address.id,
        shipping_address_id=address.id,
        payment_method='cod',
    )
    values.update(overrides)
    return CreateOrderDTO(**values)


class TestCreateOrderFromCart:

    def test_snapshots_cart_and_totals(self, create_order, repos, address):
        carts, orders, _ = repos

        order = create_order.execute(order_dto(address, discount_code='save10')).data

        assert re.match(r'^ORD-\d{8}-[A-Z0-9]{6}$', order.order_number)
        assert order.status == OrderStatus.ORDER_RAISED.value
        assert order.payment_method == 'cash_on_delivery'
        assert order.discount_code == 'SAVE10'
        assert order.subtotal == Decimal('20.00')
        assert order.discount_amount == Decimal('2.00')
        assert order.fee_amount == Decimal('2.99')
        assert order.total_amount == Decimal('32.58')
        assert [c.type for c in order.payment_components] == ['TAX', 'SHIPPING', 'DISCOUNT', 'FEE']
        assert order.items[0].unit_price == Decimal('10.80')
        assert order.shipping_address == address.full_address
        assert len(orders.orders) == 1
        assert carts.find_by_user_id(USER).is_empty

    def test_payment_reference_marks_order_paid(self, create_order, address):
        result = create_order.execute(
            order_dto(address, payment_method='razorpay_card', payment_reference='pay_123')
        )
        order = result.data

        assert order.status == OrderStatus.PAYMENT_DONE.value
        assert order.payment_reference == 'pay_123'
        assert [h.status for h in order.status_history] == ['ORDER_RAISED', 'PAYMENT_DONE']
        placed, paid = result.events
        assert placed.event_type == 'OrderPlaced'
        assert placed.line_count == 1
        assert placed.total_amount == order.total_amount
        assert paid.to_status == 'PAYMENT_DONE'

    def test_expected_total_must_match(self, create_order, repos, address):
        carts, orders, _ = repos

        with pytest.raises(TotalsMismatchError):
            create_order.execute(order_dto(address, expected_total=Decimal('30.00')))

        assert orders.orders == {}
        assert not carts.find_by_user_id(USER).is_empty

    def test_matching_expected_total(self, create_order, address):
        order = create_order.execute(order_dto(address, expected_total=Decimal('34.58'))).data

        assert order.total_amount == Decimal('34.58')

    def test_unknown_payment_method(self, create_order, address):
        with pytest.raises(ValidationError):
            create_order.execute(order_dto(address, payment_method='bitcoin'))

    def test_empty_cart(self, create_order, repos, address):
        carts, _, _ = repos
        cart = carts.find_by_user_id(USER)
        cart.clear()
        carts.save(cart)

        with pytest.raises(EmptyCartError):
            create_order.execute(order_dto(address))

    def test_other_users_address(self, create_order, repos):
        _, _, addresses = repos
        foreign = addresses.save(make_address(user_id='user-2'))

        with pytest.raises(AddressNotFoundError):
            create_order.execute(order_dto(foreign))


class TestOrderLifecycle:

    @pytest.fixture
    def order(self, create_order, address):
        return create_order.execute(order_dto(address, payment_method='upi')).data

    def test_cancel(self, repos, order):
        _, orders, _ = repos
        use_case = CancelOrderUseCase(order_repository=orders)

        cancelled = use_case.execute(CancelOrderDTO(user_id=USER, order_id=order.id, reason='Changed my mind')).data

        assert cancelled.status == OrderStatus.CANCELLED.value
        assert cancelled.cancellation_reason == 'Changed my mind'
        assert not cancelled.is_cancellable

    def test_cancel_publishes_status_change(self, repos, order):
        _, orders, _ = repos

        result = CancelOrderUseCase(order_repository=orders).execute(
            CancelOrderDTO(user_id=USER, order_id=order.id, reason='Changed my mind')
        )

        (event,) = result.events
        assert event.event_type == 'OrderStatusChanged'
        assert (event.from_status, event.to_status) == ('ORDER_RAISED', 'CANCELLED')
        assert event.order_number == order.order_number
        assert event.note == 'Changed my mind'

    def test_cancel_needs_reason(self, repos, order):
        _, orders, _ = repos

        with pytest.raises(ValidationError):
            CancelOrderUseCase(order_repository=orders).execute(
                CancelOrderDTO(user_id=USER, order_id=order.id, reason='  ')
            )

    def test_delivered_order_cannot_be_cancelled(self, repos, order):
        _, orders, _ = repos
        entity = orders.find_by_id(order.id)
        entity.record_payment('pay_1')
        entity.mark_delivered()
        orders.save(entity)

        with pytest.raises(InvalidOrderStateError):
            CancelOrderUseCase(order_repository=orders).execute(
                CancelOrderDTO(user_id=USER, order_id=order.id, reason='Too late')
            )

    def test_payment_cannot_be_recorded_twice(self, repos, order):
        _, orders, _ = repos
        entity = orders.find_by_id(order.id)
        entity.record_payment('pay_1')

        with pytest.raises(InvalidOrderStateError):
            entity.record_payment('pay_2')

    def test_other_user_cannot_see_order(self, repos, order):
        _, orders, _ = repos

        with pytest.raises(OrderNotFoundError):
            GetOrderUseCase(order_repository=orders).execute(OrderRefDTO(user_id='user-2', order_id=order.id))
        with pytest.raises(OrderNotFoundError):
            GetOrderUseCase(order_repository=orders).execute(OrderRefDTO(user_id=USER, order_id=uuid4()))

    def test_list_filters_by_status(self, repos, order):
        _, orders, _ = repos
        use_case = ListOrdersUseCase(order_repository=orders)

        raised = use_case.execute(ListOrdersDTO(user_id=USER, status=OrderStatus.ORDER_RAISED)).data
        delivered = use_case.execute(ListOrdersDTO(user_id=USER, status=OrderStatus.DELIVERED)).data

        assert [o.id for o in raised] == [order.id]
        assert delivered == []

    def test_find_by_order_number(self, repos, order):
        _, orders, _ = repos
        use_case = GetOrderByNumberUseCase(order_repository=orders)

        found = use_case.execute(OrderNumberRefDTO(user_id=USER, order_number=order.order_number.lower())).data

        assert found.id == order.id
        with pytest.raises(OrderNotFoundError):
            use_case.execute(OrderNumberRefDTO(user_id='user-2', order_number=order.order_number))
        with pytest.raises(OrderNotFoundError):
            use_case.execute(OrderNumberRefDTO(user_id=USER, order_number='  '))

    def test_record_payment_then_deliver(self, repos, order):
        _, orders, _ = repos

        paid = RecordPaymentUseCase(order_repository=orders).execute(
            RecordPaymentDTO(user_id=USER, order_id=order.id, transaction_id=' pay_9 ')
        )
        delivered = DeliverOrderUseCase(order_repository=orders).execute(order.id)

        assert paid.data.status == OrderStatus.PAYMENT_DONE.value
        assert paid.data.payment_reference == 'pay_9'
        assert [e.to_status for e in paid.events] == ['PAYMENT_DONE']
        assert delivered.data.status == OrderStatus.DELIVERED.value
        assert [h.status for h in delivered.data.status_history] == ['ORDER_RAISED', 'PAYMENT_DONE', 'DELIVERED']

    def test_unpaid_order_cannot_be_delivered(self, repos, order):
        _, orders, _ = repos

        with pytest.raises(InvalidOrderStateError):
            DeliverOrderUseCase(order_repository=orders).execute(order.id)
        with pytest.raises(OrderNotFoundError):
            DeliverOrderUseCase(order_repository=orders).execute(uuid4())

    def test_record_payment_for_another_user(self, repos, order):
        _, orders, _ = repos

        with pytest.raises(OrderNotFoundError):
            RecordPaymentUseCase(order_repository=orders).execute(
                RecordPaymentDTO(user_id='user-2', order_id=order.id, transaction_id='pay_1')
            )
