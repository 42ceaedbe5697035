"""
Remove cart item use case.
"""
from dataclasses import dataclass

from shared.application import UseCase, UseCaseResult
from ...domain.exceptions import CartNotFoundError
from ...domain.repositories.cart_repository import CartRepository
from ..dtos.cart_dto import CartDTO, RemoveCartItemDTO
from .cart_support import cart_dto_with_totals


@dataclass
class RemoveCartItemUseCase(UseCase[RemoveCartItemDTO, CartDTO]):

    cart_repository: CartRepository
    currency: str = "USD"

    def execute(self, input_dto: RemoveCartItemDTO) -> UseCaseResult[CartDTO]:
        cart = self.cart_repository.find_by_user_id(input_dto.user_id)
        if cart is None:
            raise CartNotFoundError(input_dto.user_id)
        cart.remove_item(input_dto.item_id)
        saved = self.cart_repository.save(cart)
        return UseCaseResult.ok(cart_dto_with_totals(saved, self.currency))
