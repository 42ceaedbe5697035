"""
Product repository interface.
"""
from abc import ABC, abstractmethod
from decimal import Decimal
from typing import List, Optional
from uuid import UUID

from ..entities.product import Product


class ProductRepository(ABC):
    """Persistence port for the catalog."""

    @abstractmethod
    def save(self, product: Product) -> Product:
        ...

    @abstractmethod
    def find_by_id(self, product_id: UUID) -> Optional[Product]:
        ...

    @abstractmethod
    def find_all(
        self,
        category_id: Optional[UUID] = None,
        is_active: bool = True,
        offset: int = 0,
        limit: int = 20,
    ) -> List[Product]:
        """A page of products, optionally limited to one category."""

    @abstractmethod
    def find_recommendation_candidates(
        self,
        category_id: UUID,
        brand: str,
        min_price: Decimal,
        max_price: Decimal,
    ) -> List[Product]:
        """Purchasable products sharing the category or brand, or priced inside the band."""
