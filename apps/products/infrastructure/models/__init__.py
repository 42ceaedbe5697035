# Django models
from .category_model import CategoryModel
from .product_model import ProductModel

__all__ = ['CategoryModel', 'ProductModel']
