"""
Create order from cart use case.
"""
import logging
from dataclasses import dataclass
from typing import Optional

from apps.addresses.domain.repositories.address_repository import AddressRepository
from apps.addresses.application.use_cases.base import get_owned_address
from shared.application import UseCase, UseCaseResult
from shared.domain import ValidationError, quantize
from ...domain.entities.order import Order
from ...domain.exceptions import EmptyCartError, TotalsMismatchError
from ...domain.repositories.cart_repository import CartRepository
from ...domain.repositories.order_repository import OrderRepository
from ...domain.services.cart_totals import calculate_cart_totals
from ...domain.services.payment_component_calculator import PaymentComponentCalculator
from ...domain.value_objects.checkout_codes import DiscountCode, PaymentMethod, ShippingMethod
from ...domain.value_objects.shipping_info import ShippingInfo
from ..dtos.order_dto import CreateOrderDTO, OrderDTO

logger = logging.getLogger(__name__)


@dataclass
class CreateOrderFromCartUseCase(UseCase[CreateOrderDTO, OrderDTO]):
    """
    Freeze the user's cart into an order.

    Totals come from ``calculate_cart_totals`` with the same inputs the
    customer saw; when ``expected_total`` is given and differs by even a
    cent, nothing is written. The cart is cleared only after the order
    is saved.
    """

    cart_repository: CartRepository
    order_repository: OrderRepository
    address_repository: AddressRepository
    currency: str = "USD"
    calculator: Optional[PaymentComponentCalculator] = None

    def execute(self, input_dto: CreateOrderDTO) -> UseCaseResult[OrderDTO]:
        payment_method = PaymentMethod.parse(input_dto.payment_method)
        if payment_method is None:
            raise ValidationError(
                f"Unsupported payment method: '{input_dto.payment_method}'",
                field="payment_method",
            )

        cart = self.cart_repository.find_by_user_id(input_dto.user_id)
        if cart is None or cart.is_empty:
            raise EmptyCartError()

        billing = get_owned_address(self.address_repository, input_dto.user_id, input_dto.billing_address_id)
        shipping = get_owned_address(self.address_repository, input_dto.user_id, input_dto.shipping_address_id)

        totals = calculate_cart_totals(
            cart.items,
            address=shipping,
            shipping_method=input_dto.shipping_method,
            discount_code=input_dto.discount_code,
            payment_method=payment_method.value,
            currency=self.currency,
            calculator=self.calculator,
        )
        if input_dto.expected_total is not None:
            expected = quantize(input_dto.expected_total)
            if expected != totals.total_amount:
                logger.warning(
                    f"Totals mismatch for user {input_dto.user_id}: "
                    f"expected {expected}, computed {totals.total_amount}"
                )
                raise TotalsMismatchError(expected=expected, actual=totals.total_amount)

        shipping_method = ShippingMethod.parse(input_dto.shipping_method)
        discount_code = DiscountCode.parse(input_dto.discount_code)
        order = Order.create(
            user_id=input_dto.user_id,
            cart_items=cart.items,
            totals=totals.as_order_totals(),
            payment_components=list(totals.components),
            payment_method=payment_method,
            billing_address_id=billing.id,
            shipping_address_id=shipping.id,
            shipping_info=ShippingInfo.from_address(shipping),
            shipping_method=shipping_method.value if shipping_method else None,
            discount_code=discount_code.name if discount_code else None,
            currency=self.currency,
            customer_notes=input_dto.customer_notes or "",
        )
        if input_dto.payment_reference:
            order.record_payment(input_dto.payment_reference)

        saved = self.order_repository.save(order)
        events = self.publish_events(order)

        cart.clear()
        self.cart_repository.save(cart)

        logger.info(
            f"Order {saved.order_number} created for user {saved.user_id}: "
            f"total={saved.totals.total_amount} method={payment_method.value}"
        )
        return UseCaseResult.ok(OrderDTO.from_entity(saved), events)
