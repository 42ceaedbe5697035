"""
Product DTOs.
"""
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import List, Optional
from uuid import UUID

from ...domain.entities.product import Product
from ...domain.services.recommendation_generator import Recommendation


@dataclass
class ProductDTO:
    """DTO for product output."""
    id: UUID
    name: str
    description: str
    brand: str
    sku: str
    base_amount: Decimal
    tax_rate: Decimal
    tax_amount: Decimal
    price: Decimal
    currency: str
    stock_quantity: int
    category_id: UUID
    is_active: bool
    is_in_stock: bool
    is_variable_dimension: bool
    fixed_height: Optional[Decimal]
    variable_dimension_rate: Optional[Decimal]
    max_length: Optional[Decimal]
    dimension_unit: Optional[str]
    images: List[str]
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, product: Product) -> 'ProductDTO':
        """Create DTO from entity."""
        return cls(
            id=product.id,
            name=product.name,
            description=product.description,
            brand=product.brand,
            sku=product.sku.value,
            base_amount=product.base_amount,
            tax_rate=product.tax_rate,
            tax_amount=product.tax_amount,
            price=product.price,
            currency=product.currency,
            stock_quantity=product.stock.quantity,
            category_id=product.category_id,
            is_active=product.is_active,
            is_in_stock=product.is_in_stock,
            is_variable_dimension=product.is_variable_dimension,
            fixed_height=product.fixed_height,
            variable_dimension_rate=product.variable_dimension_rate,
            max_length=product.max_length,
            dimension_unit=product.dimension_unit.value if product.dimension_unit else None,
            images=list(product.images),
            created_at=product.created_at,
            updated_at=product.updated_at,
        )


@dataclass
class RecommendationDTO:
    """DTO for a recommended product."""
    product: ProductDTO
    type: str
    score: Decimal
    reason: str

    @classmethod
    def from_recommendation(cls, recommendation: Recommendation) -> 'RecommendationDTO':
        return cls(
            product=ProductDTO.from_entity(recommendation.product),
            type=recommendation.type.value,
            score=recommendation.score,
            reason=recommendation.reason,
        )
