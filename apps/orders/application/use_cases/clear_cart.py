"""
Clear cart use case.
"""
from dataclasses import dataclass

from shared.application import UseCase, UseCaseResult
from ...domain.repositories.cart_repository import CartRepository
from ..dtos.cart_dto import CartDTO
from .cart_support import cart_dto_with_totals


@dataclass
class ClearCartUseCase(UseCase[str, CartDTO]):

    cart_repository: CartRepository
    currency: str = "USD"

    def execute(self, input_dto: str) -> UseCaseResult[CartDTO]:
        cart = self.cart_repository.get_or_create_for_user(input_dto)
        if not cart.is_empty:
            cart.clear()
            cart = self.cart_repository.save(cart)
        return UseCaseResult.ok(cart_dto_with_totals(cart, self.currency))
