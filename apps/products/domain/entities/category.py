"""
Category entity.
"""
import re
from dataclasses import dataclass
from typing import Optional
from uuid import UUID

from shared.domain import AggregateRoot
from ..events import CategoryCreated
from ..exceptions import InvalidCategoryError

SLUG_PATTERN = re.compile(r'^[a-z0-9]+(?:-[a-z0-9]+)*$')


def slugify(name: str) -> str:
    """Lower-case ASCII words joined by single hyphens."""
    slug = re.sub(r'[^a-z0-9\s-]', '', (name or '').strip().lower())
    slug = re.sub(r'[\s-]+', '-', slug)
    return slug.strip('-')


@dataclass(eq=False)
class Category(AggregateRoot):
    """Category for organizing products; ``parent_id`` is None for a root."""
    name: str
    slug: str
    description: str = ""
    parent_id: Optional[UUID] = None
    sort_order: int = 0
    is_active: bool = True

    def __post_init__(self):
        if not self.name or len(self.name.strip()) < 2:
            raise InvalidCategoryError("Category name must be at least 2 characters", field="name")
        if not SLUG_PATTERN.match(self.slug or ''):
            raise InvalidCategoryError(f"Invalid category slug: '{self.slug}'", field="slug")

    @classmethod
    def create(
        cls,
        name: str,
        slug: Optional[str] = None,
        description: str = "",
        parent_id: Optional[UUID] = None,
        sort_order: int = 0,
    ) -> 'Category':
        """Factory method; the slug is derived from the name when not given."""
        category = cls(
            name=(name or '').strip(),
            slug=(slug or '').strip().lower() or slugify(name),
            description=description,
            parent_id=parent_id,
            sort_order=sort_order,
        )
        category.record_event(
            CategoryCreated(category_id=category.id, slug=category.slug, parent_id=parent_id)
        )
        return category

    @property
    def is_root(self) -> bool:
        return self.parent_id is None
