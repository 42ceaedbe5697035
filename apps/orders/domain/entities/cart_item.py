"""
Cart item entity.
"""
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional, Tuple
from uuid import UUID

from shared.domain import BaseEntity, ValidationError, quantize, to_decimal
from ..value_objects.product_snapshot import PricingMode, ProductSnapshot


def is_whole_count(value) -> bool:
    """True for ints; bool is an int subclass and is not a count."""
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(eq=False)
class CartItem(BaseEntity):
    """
    A cart line.

    Fixed lines are priced from the snapshot's base amount and per-unit
    tax; variable-dimension lines from ``fixed_height x custom_length x
    rate`` where the rate already includes tax, so they carry no tax.
    """
    cart_id: UUID
    product: ProductSnapshot
    quantity: int = 1
    custom_length: Optional[Decimal] = None

    def __post_init__(self):
        if self.custom_length is not None:
            self.custom_length = to_decimal(self.custom_length)
        self._validate()

    def _validate(self) -> None:
        if not is_whole_count(self.quantity) or self.quantity < 1:
            raise ValidationError("Quantity must be at least 1", field="quantity")
        if self.pricing_mode is PricingMode.VARIABLE_DIMENSION:
            if self.custom_length is None or self.custom_length <= 0:
                raise ValidationError(
                    "Custom length is required for variable-dimension products",
                    field="custom_length",
                )
            max_length = self.product.max_length
            if max_length is not None and self.custom_length > max_length:
                raise ValidationError(
                    f"Custom length cannot exceed maximum length of {max_length}",
                    field="custom_length",
                )
        elif self.custom_length is not None:
            raise ValidationError(
                "Custom length is only allowed for variable-dimension products",
                field="custom_length",
            )

    @property
    def product_id(self) -> UUID:
        return self.product.product_id

    @property
    def pricing_mode(self) -> PricingMode:
        return self.product.pricing_mode

    @property
    def line_key(self) -> Tuple[UUID, Optional[Decimal]]:
        """Lines with the same product and length are merged."""
        return (self.product_id, self.custom_length)

    @property
    def unit_base_amount(self) -> Decimal:
        if self.pricing_mode is PricingMode.VARIABLE_DIMENSION:
            return quantize(
                self.product.fixed_height * self.custom_length * self.product.variable_dimension_rate
            )
        return self.product.base_amount

    @property
    def unit_tax_amount(self) -> Decimal:
        if self.pricing_mode is PricingMode.VARIABLE_DIMENSION:
            return Decimal('0')
        return self.product.tax_amount

    @property
    def unit_price(self) -> Decimal:
        """Price per unit as shown to the customer."""
        return self.unit_base_amount + self.unit_tax_amount

    @property
    def line_subtotal(self) -> Decimal:
        return self.unit_base_amount * self.quantity

    @property
    def line_tax(self) -> Decimal:
        return self.unit_tax_amount * self.quantity

    @property
    def line_total(self) -> Decimal:
        return self.line_subtotal + self.line_tax

    def change_quantity(self, quantity: int) -> None:
        if not is_whole_count(quantity) or quantity < 1:
            raise ValidationError("Quantity must be at least 1", field="quantity")
        self.quantity = quantity
        self.touch()

    def change_length(self, custom_length: Decimal) -> None:
        previous = self.custom_length
        self.custom_length = to_decimal(custom_length)
        try:
            self._validate()
        except ValidationError:
            self.custom_length = previous
            raise
        self.touch()
