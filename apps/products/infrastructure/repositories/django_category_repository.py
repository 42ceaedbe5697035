"""
Category persistence on the Django ORM.
"""
from typing import List, Optional
from uuid import UUID

from ...domain.entities.category import Category
from ...domain.repositories.category_repository import CategoryRepository
from ..models.category_model import CategoryModel


def _hydrate(row: CategoryModel) -> Category:
    return Category(
        id=row.id,
        created_at=row.created_at,
        updated_at=row.updated_at,
        name=row.name,
        slug=row.slug,
        description=row.description,
        parent_id=row.parent_id,
        sort_order=row.sort_order,
        is_active=row.is_active,
    )


class DjangoCategoryRepository(CategoryRepository):

    def save(self, category: Category) -> Category:
        row, _ = CategoryModel.objects.update_or_create(
            id=category.id,
            defaults={
                'name': category.name,
                'slug': category.slug,
                'description': category.description,
                'parent_id': category.parent_id,
                'sort_order': category.sort_order,
                'is_active': category.is_active,
            },
        )
        return _hydrate(row)

    def find_by_id(self, category_id: UUID) -> Optional[Category]:
        row = CategoryModel.objects.filter(id=category_id).first()
        return _hydrate(row) if row else None

    def find_by_slug(self, slug: str) -> Optional[Category]:
        row = CategoryModel.objects.filter(slug=slug).first()
        return _hydrate(row) if row else None

    def find_children(self, parent_id: Optional[UUID] = None, is_active: bool = True) -> List[Category]:
        queryset = CategoryModel.objects.filter(is_active=is_active)
        if parent_id is None:
            queryset = queryset.filter(parent__isnull=True)
        else:
            queryset = queryset.filter(parent_id=parent_id)
        return [_hydrate(row) for row in queryset.order_by('sort_order', 'name')]
