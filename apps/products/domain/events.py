"""
Catalog events recorded by the Product and Category aggregates.
"""
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional
from uuid import UUID

from shared.domain import DomainEvent


@dataclass(frozen=True)
class ProductCreated(DomainEvent):
    product_id: UUID
    sku: str
    price: Decimal
    is_variable_dimension: bool = False


@dataclass(frozen=True)
class ProductPriceUpdated(DomainEvent):
    """Base amount or tax rate changed; ``price`` is the recomputed tax-inclusive unit price."""
    product_id: UUID
    base_amount: Decimal
    tax_rate: Decimal
    price: Decimal


@dataclass(frozen=True)
class StockUpdated(DomainEvent):
    product_id: UUID
    delta: int
    on_hand: int


@dataclass(frozen=True)
class CategoryCreated(DomainEvent):
    category_id: UUID
    slug: str
    parent_id: Optional[UUID] = None
