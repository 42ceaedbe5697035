"""
Cancel order use case.
"""
import logging
from dataclasses import dataclass

from shared.application import UseCase, UseCaseResult
from ...domain.repositories.order_repository import OrderRepository
from ..dtos.order_dto import CancelOrderDTO, OrderDTO
from .get_order import get_owned_order

logger = logging.getLogger(__name__)


@dataclass
class CancelOrderUseCase(UseCase[CancelOrderDTO, OrderDTO]):

    order_repository: OrderRepository

    def execute(self, input_dto: CancelOrderDTO) -> UseCaseResult[OrderDTO]:
        order = get_owned_order(self.order_repository, input_dto.user_id, input_dto.order_id)
        order.cancel(input_dto.reason)
        saved = self.order_repository.save(order)
        events = self.publish_events(order)
        logger.info(f"Order {saved.order_number} cancelled: {saved.cancellation_reason}")
        return UseCaseResult.ok(OrderDTO.from_entity(saved), events)
