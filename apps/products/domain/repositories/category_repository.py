"""
Category repository interface.
"""
from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from ..entities.category import Category


class CategoryRepository(ABC):
    """Persistence port for the category tree."""

    @abstractmethod
    def save(self, category: Category) -> Category:
        ...

    @abstractmethod
    def find_by_id(self, category_id: UUID) -> Optional[Category]:
        ...

    @abstractmethod
    def find_by_slug(self, slug: str) -> Optional[Category]:
        ...

    @abstractmethod
    def find_children(self, parent_id: Optional[UUID] = None, is_active: bool = True) -> List[Category]:
        """Direct children of ``parent_id``, or the roots when it is None, by sort order then name."""
