"""
Cart totals preview use case.
"""
from dataclasses import dataclass
from typing import Optional

from apps.addresses.domain.repositories.address_repository import AddressRepository
from apps.addresses.application.use_cases.base import get_owned_address
from shared.application import UseCase, UseCaseResult
from ...domain.repositories.cart_repository import CartRepository
from ...domain.services.cart_totals import calculate_cart_totals
from ...domain.services.payment_component_calculator import PaymentComponentCalculator
from ..dtos.cart_dto import CartTotalsDTO, CartTotalsRequestDTO


@dataclass
class CalculateCartTotalsUseCase(UseCase[CartTotalsRequestDTO, CartTotalsDTO]):
    """Totals for the user's cart with the checkout selections applied."""

    cart_repository: CartRepository
    address_repository: AddressRepository
    currency: str = "USD"
    calculator: Optional[PaymentComponentCalculator] = None

    def execute(self, input_dto: CartTotalsRequestDTO) -> UseCaseResult[CartTotalsDTO]:
        cart = self.cart_repository.get_or_create_for_user(input_dto.user_id)
        address = None
        if input_dto.address_id is not None:
            address = get_owned_address(self.address_repository, input_dto.user_id, input_dto.address_id)

        totals = calculate_cart_totals(
            cart.items,
            address=address,
            shipping_method=input_dto.shipping_method,
            discount_code=input_dto.discount_code,
            payment_method=input_dto.payment_method,
            currency=self.currency,
            calculator=self.calculator,
        )
        return UseCaseResult.ok(CartTotalsDTO.from_totals(totals))
