"""
Products API v1 URLs.
"""
from django.urls import path

from .views import (
    CategoryBySlugView,
    CategoryDetailView,
    CategoryListCreateView,
    CategoryPathView,
    ProductListCreateView,
    ProductDetailView,
    ProductRecommendationsView,
)

urlpatterns = [
    path('', ProductListCreateView.as_view(), name='product-list-create'),
    path('categories/', CategoryListCreateView.as_view(), name='category-list-create'),
    path('categories/slug/<slug:slug>/', CategoryBySlugView.as_view(), name='category-by-slug'),
    path('categories/<uuid:category_id>/', CategoryDetailView.as_view(), name='category-detail'),
    path('categories/<uuid:category_id>/path/', CategoryPathView.as_view(), name='category-path'),
    path('<uuid:product_id>/', ProductDetailView.as_view(), name='product-detail'),
    path(
        '<uuid:product_id>/recommendations/',
        ProductRecommendationsView.as_view(),
        name='product-recommendations',
    ),
]
