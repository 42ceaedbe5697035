# Repository implementations
from .django_category_repository import DjangoCategoryRepository
from .django_product_repository import DjangoProductRepository

__all__ = ['DjangoCategoryRepository', 'DjangoProductRepository']
