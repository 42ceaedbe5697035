"""
Create product use case.
"""
import logging
from dataclasses import dataclass, field
from decimal import Decimal
from typing import List, Optional
from uuid import UUID

from shared.application import UseCase, UseCaseResult
from ...domain.entities.product import Product
from ...domain.repositories.product_repository import ProductRepository
from ...domain.value_objects.dimension_unit import DimensionUnit
from ..dtos.product_dto import ProductDTO

logger = logging.getLogger(__name__)


@dataclass
class CreateProductDTO:
    name: str
    sku: str
    stock_quantity: int
    category_id: UUID
    description: str = ""
    brand: str = ""
    currency: str = "USD"
    base_amount: Optional[Decimal] = None
    tax_rate: Decimal = Decimal('0')
    is_variable_dimension: bool = False
    fixed_height: Optional[Decimal] = None
    variable_dimension_rate: Optional[Decimal] = None
    max_length: Optional[Decimal] = None
    dimension_unit: Optional[str] = None
    images: List[str] = field(default_factory=list)


@dataclass
class CreateProductUseCase(UseCase[CreateProductDTO, ProductDTO]):
    """List a fixed-price or a variable-dimension product."""

    product_repository: ProductRepository

    def execute(self, input_dto: CreateProductDTO) -> UseCaseResult[ProductDTO]:
        common = dict(
            name=input_dto.name,
            sku=input_dto.sku,
            stock_quantity=input_dto.stock_quantity,
            category_id=input_dto.category_id,
            description=input_dto.description,
            brand=input_dto.brand,
            currency=input_dto.currency,
        )
        if input_dto.is_variable_dimension:
            product = Product.create_variable_dimension(
                fixed_height=input_dto.fixed_height,
                variable_dimension_rate=input_dto.variable_dimension_rate,
                dimension_unit=DimensionUnit(input_dto.dimension_unit),
                max_length=input_dto.max_length,
                **common,
            )
        else:
            product = Product.create(
                base_amount=input_dto.base_amount,
                tax_rate=input_dto.tax_rate,
                images=input_dto.images,
                **common,
            )

        saved = self.product_repository.save(product)
        events = self.publish_events(product)
        logger.info(f"Product created: {saved.id} ({saved.sku})")
        return UseCaseResult.ok(ProductDTO.from_entity(saved), events)
