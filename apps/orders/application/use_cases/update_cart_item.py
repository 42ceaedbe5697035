"""
Update cart item use case.
"""
from dataclasses import dataclass
from typing import Optional

from apps.products.domain.exceptions import InsufficientStockError
from apps.products.domain.repositories.product_repository import ProductRepository
from shared.application import UseCase, UseCaseResult
from ...domain.exceptions import CartNotFoundError
from ...domain.repositories.cart_repository import CartRepository
from ..dtos.cart_dto import CartDTO, UpdateCartItemDTO
from .cart_support import cart_dto_with_totals


@dataclass
class UpdateCartItemUseCase(UseCase[UpdateCartItemDTO, CartDTO]):
    """Change the quantity or custom length of a line; quantity 0 removes it."""

    cart_repository: CartRepository
    product_repository: Optional[ProductRepository] = None
    currency: str = "USD"

    def execute(self, input_dto: UpdateCartItemDTO) -> UseCaseResult[CartDTO]:
        cart = self.cart_repository.find_by_user_id(input_dto.user_id)
        if cart is None:
            raise CartNotFoundError(input_dto.user_id)

        item = cart.get_item(input_dto.item_id)
        if input_dto.custom_length is not None:
            item = cart.update_item_dimension(item.id, input_dto.custom_length)
        if input_dto.quantity is not None:
            if input_dto.quantity > item.quantity:
                self._check_stock(cart, item, input_dto.quantity)
            cart.update_item_quantity(item.id, input_dto.quantity)

        saved = self.cart_repository.save(cart)
        return UseCaseResult.ok(cart_dto_with_totals(saved, self.currency))

    def _check_stock(self, cart, item, quantity: int) -> None:
        if self.product_repository is None:
            return
        product = self.product_repository.find_by_id(item.product_id)
        if product is None:
            return
        others = sum(
            line.quantity for line in cart.items
            if line.product_id == item.product_id and line.id != item.id
        )
        if not product.stock.covers(others + quantity):
            raise InsufficientStockError(
                product_id=str(product.id),
                requested=others + quantity,
                available=product.stock.quantity,
            )
