"""
Order gateway backed by this service's own order use case.
"""
import logging
from dataclasses import dataclass, field
from typing import Callable, ContextManager

from django.db import transaction

from apps.addresses.infrastructure.repositories import DjangoAddressRepository
from apps.orders.application.dtos import CreateOrderDTO
from apps.orders.application.use_cases import CreateOrderFromCartUseCase
from apps.orders.domain.value_objects.order_totals import OrderTotals
from apps.orders.infrastructure.repositories import DjangoCartRepository, DjangoOrderRepository
from shared.domain import DomainException
from ..domain.exceptions import OrderRejectedError, OrderServerError
from ..domain.ports import OrderGateway
from ..domain.value_objects import CreatedOrder, OrderRequest

logger = logging.getLogger(__name__)


@dataclass
class LocalOrderGateway(OrderGateway):
    """Creates orders in-process, inside one database transaction."""

    use_case: CreateOrderFromCartUseCase
    unit_of_work: Callable[[], ContextManager] = field(default=transaction.atomic)

    @classmethod
    def with_django_repositories(cls, currency: str = "USD") -> 'LocalOrderGateway':
        return cls(
            use_case=CreateOrderFromCartUseCase(
                cart_repository=DjangoCartRepository(),
                order_repository=DjangoOrderRepository(),
                address_repository=DjangoAddressRepository(),
                currency=currency,
            )
        )

    def create_order(self, request: OrderRequest) -> CreatedOrder:
        dto = CreateOrderDTO(
            user_id=request.user_id,
            billing_address_id=request.billing_address_id,
            shipping_address_id=request.shipping_address_id,
            payment_method=request.payment_method,
            shipping_method=request.shipping_method,
            discount_code=request.discount_code,
            customer_notes=request.customer_notes,
            payment_reference=request.payment_reference,
            expected_total=request.expected_total,
        )
        try:
            with self.unit_of_work():
                result = self.use_case.execute(dto)
        except DomainException as e:
            raise OrderRejectedError(e.message, code=e.code) from e
        except Exception as e:
            logger.error(f"Order creation crashed for user {request.user_id}: {e}", exc_info=True)
            raise OrderServerError() from e

        order = result.data
        return CreatedOrder(
            id=order.id,
            order_number=order.order_number,
            status=order.status,
            totals=OrderTotals(
                subtotal=order.subtotal,
                tax_amount=order.tax_amount,
                shipping_amount=order.shipping_amount,
                discount_amount=order.discount_amount,
                fee_amount=order.fee_amount,
                total_amount=order.total_amount,
            ),
        )
