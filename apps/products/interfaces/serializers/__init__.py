from .category_serializer import (
    CategorySerializer,
    CategoryCreateSerializer,
    CategoryListQuerySerializer,
)
from .product_serializer import (
    ProductSerializer,
    ProductCreateSerializer,
    ProductListQuerySerializer,
    RecommendationQuerySerializer,
    RecommendationSerializer,
)

__all__ = [
    'CategorySerializer',
    'CategoryCreateSerializer',
    'CategoryListQuerySerializer',
    'ProductSerializer',
    'ProductCreateSerializer',
    'ProductListQuerySerializer',
    'RecommendationQuerySerializer',
    'RecommendationSerializer',
]
