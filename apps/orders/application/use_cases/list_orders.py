"""
List orders use case.
"""
from dataclasses import dataclass
from typing import List

from shared.application import UseCase, UseCaseResult
from ...domain.repositories.order_repository import OrderRepository
from ..dtos.order_dto import ListOrdersDTO, OrderDTO


@dataclass
class ListOrdersUseCase(UseCase[ListOrdersDTO, List[OrderDTO]]):

    order_repository: OrderRepository

    def execute(self, input_dto: ListOrdersDTO) -> UseCaseResult[List[OrderDTO]]:
        orders = self.order_repository.find_by_user_id(
            input_dto.user_id,
            status=input_dto.status,
            offset=input_dto.offset,
            limit=input_dto.limit,
        )
        return UseCaseResult.ok([OrderDTO.from_entity(o) for o in orders])
