# Use cases
from .browse_categories import GetCategoryPathUseCase, ListCategoriesUseCase
from .create_category import CreateCategoryDTO, CreateCategoryUseCase
from .create_product import CreateProductDTO, CreateProductUseCase
from .get_recommendations import GetRecommendationsDTO, GetRecommendationsUseCase

__all__ = [
    'CreateCategoryDTO',
    'CreateCategoryUseCase',
    'GetCategoryPathUseCase',
    'ListCategoriesUseCase',
    'CreateProductDTO',
    'CreateProductUseCase',
    'GetRecommendationsDTO',
    'GetRecommendationsUseCase',
]
