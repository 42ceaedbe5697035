"""
Product snapshot value object.
"""
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Optional
from uuid import UUID

from shared.domain import ValueObject, ValidationError, to_decimal


class PricingMode(str, Enum):
    """How a cart line is priced."""
    FIXED = 'FIXED'
    VARIABLE_DIMENSION = 'VARIABLE_DIMENSION'


@dataclass(frozen=True)
class ProductSnapshot(ValueObject):
    """Price view of a product as it was when added to a cart."""
    product_id: UUID
    name: str
    sku: str
    base_amount: Decimal
    tax_rate: Decimal = Decimal('0')
    tax_amount: Decimal = Decimal('0')
    is_variable_dimension: bool = False
    fixed_height: Optional[Decimal] = None
    variable_dimension_rate: Optional[Decimal] = None
    max_length: Optional[Decimal] = None

    def __post_init__(self):
        for name in ('base_amount', 'tax_rate', 'tax_amount'):
            value = to_decimal(getattr(self, name))
            if value < 0:
                raise ValidationError(f"{name} must not be negative", field=name)
            object.__setattr__(self, name, value)
        for name in ('fixed_height', 'variable_dimension_rate', 'max_length'):
            value = getattr(self, name)
            if value is not None:
                object.__setattr__(self, name, to_decimal(value))
        if self.is_variable_dimension:
            if self.fixed_height is None or self.variable_dimension_rate is None:
                raise ValidationError(
                    "Variable-dimension snapshot needs a fixed height and a rate",
                    field="variable_dimension_rate",
                )
            if self.fixed_height <= 0 or self.variable_dimension_rate < 0:
                raise ValidationError("Invalid dimension pricing", field="variable_dimension_rate")

    @classmethod
    def from_product(cls, product) -> 'ProductSnapshot':
        """Capture the price components of a products-context Product."""
        return cls(
            product_id=product.id,
            name=product.name,
            sku=str(product.sku),
            base_amount=product.base_amount,
            tax_rate=product.tax_rate,
            tax_amount=product.tax_amount,
            is_variable_dimension=product.is_variable_dimension,
            fixed_height=product.fixed_height,
            variable_dimension_rate=product.variable_dimension_rate,
            max_length=product.max_length,
        )

    @property
    def pricing_mode(self) -> PricingMode:
        if self.is_variable_dimension:
            return PricingMode.VARIABLE_DIMENSION
        return PricingMode.FIXED
