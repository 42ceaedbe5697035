"""
Status transitions after an order is placed: payment confirmation and delivery.
"""
import logging
from dataclasses import dataclass
from uuid import UUID

from shared.application import UseCase, UseCaseResult
from ...domain.exceptions import OrderNotFoundError
from ...domain.repositories.order_repository import OrderRepository
from ..dtos.order_dto import OrderDTO, RecordPaymentDTO
from .get_order import get_owned_order

logger = logging.getLogger(__name__)


@dataclass
class RecordPaymentUseCase(UseCase[RecordPaymentDTO, OrderDTO]):
    """Attach a gateway transaction to a raised order and mark it paid."""

    order_repository: OrderRepository

    def execute(self, input_dto: RecordPaymentDTO) -> UseCaseResult[OrderDTO]:
        order = get_owned_order(self.order_repository, input_dto.user_id, input_dto.order_id)
        order.record_payment(input_dto.transaction_id)
        saved = self.order_repository.save(order)
        events = self.publish_events(order)
        logger.info(f"Payment {saved.payment_reference} recorded for order {saved.order_number}")
        return UseCaseResult.ok(OrderDTO.from_entity(saved), events)


@dataclass
class DeliverOrderUseCase(UseCase[UUID, OrderDTO]):
    """Fulfilment side: any paid order can be marked delivered."""

    order_repository: OrderRepository

    def execute(self, input_dto: UUID) -> UseCaseResult[OrderDTO]:
        order = self.order_repository.find_by_id(input_dto)
        if order is None:
            raise OrderNotFoundError(str(input_dto))
        order.mark_delivered()
        saved = self.order_repository.save(order)
        events = self.publish_events(order)
        logger.info(f"Order {saved.order_number} delivered")
        return UseCaseResult.ok(OrderDTO.from_entity(saved), events)
