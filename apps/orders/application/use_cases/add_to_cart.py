"""
Add to cart use case.
"""
import logging
from dataclasses import dataclass

from apps.products.domain.exceptions import (
    InsufficientStockError,
    ProductNotFoundError,
    ProductUnavailableError,
)
from apps.products.domain.repositories.product_repository import ProductRepository
from shared.application import UseCase, UseCaseResult
from shared.domain import ValidationError
from ...domain.repositories.cart_repository import CartRepository
from ...domain.value_objects.product_snapshot import ProductSnapshot
from ..dtos.cart_dto import AddToCartDTO, CartDTO
from .cart_support import cart_dto_with_totals

logger = logging.getLogger(__name__)


@dataclass
class AddToCartUseCase(UseCase[AddToCartDTO, CartDTO]):
    """Snapshot a product's prices into the user's cart."""

    cart_repository: CartRepository
    product_repository: ProductRepository
    currency: str = "USD"

    def execute(self, input_dto: AddToCartDTO) -> UseCaseResult[CartDTO]:
        if input_dto.quantity is None or input_dto.quantity < 1:
            raise ValidationError("Quantity must be at least 1", field="quantity")

        product = self.product_repository.find_by_id(input_dto.product_id)
        if product is None:
            raise ProductNotFoundError(str(input_dto.product_id))
        if not product.is_active:
            raise ProductUnavailableError(str(product.id))

        custom_length = input_dto.custom_length
        if product.is_variable_dimension:
            custom_length = product.validate_custom_length(custom_length)
        elif custom_length is not None:
            raise ValidationError(
                "Custom length is only allowed for variable-dimension products",
                field="custom_length",
            )

        cart = self.cart_repository.get_or_create_for_user(input_dto.user_id)
        in_cart = sum(item.quantity for item in cart.items if item.product_id == product.id)
        if not product.stock.covers(in_cart + input_dto.quantity):
            raise InsufficientStockError(
                product_id=str(product.id),
                requested=in_cart + input_dto.quantity,
                available=product.stock.quantity,
            )

        cart.add_item(ProductSnapshot.from_product(product), input_dto.quantity, custom_length)
        saved = self.cart_repository.save(cart)
        logger.info(f"Added {input_dto.quantity} x {product.sku} to cart of user {input_dto.user_id}")
        return UseCaseResult.ok(cart_dto_with_totals(saved, self.currency))
