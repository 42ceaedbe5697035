"""
Get order use case.
"""
from dataclasses import dataclass

from shared.application import UseCase, UseCaseResult
from ...domain.entities.order import Order
from ...domain.exceptions import OrderNotFoundError
from ...domain.repositories.order_repository import OrderRepository
from ..dtos.order_dto import OrderDTO, OrderNumberRefDTO, OrderRefDTO


def get_owned_order(repository: OrderRepository, user_id: str, order_id) -> Order:
    """Load an order, treating another user's order as missing."""
    order = repository.find_for_user(user_id, order_id)
    if order is None:
        raise OrderNotFoundError(str(order_id))
    return order


@dataclass
class GetOrderUseCase(UseCase[OrderRefDTO, OrderDTO]):

    order_repository: OrderRepository

    def execute(self, input_dto: OrderRefDTO) -> UseCaseResult[OrderDTO]:
        order = get_owned_order(self.order_repository, input_dto.user_id, input_dto.order_id)
        return UseCaseResult.ok(OrderDTO.from_entity(order))


@dataclass
class GetOrderByNumberUseCase(UseCase[OrderNumberRefDTO, OrderDTO]):
    """Look an order up by the number printed on the receipt."""

    order_repository: OrderRepository

    def execute(self, input_dto: OrderNumberRefDTO) -> UseCaseResult[OrderDTO]:
        number = (input_dto.order_number or '').strip().upper()
        order = self.order_repository.find_by_order_number(input_dto.user_id, number) if number else None
        if order is None:
            raise OrderNotFoundError(input_dto.order_number)
        return UseCaseResult.ok(OrderDTO.from_entity(order))
