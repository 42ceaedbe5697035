"""
Products admin configuration.
"""
from django.contrib import admin

from ..infrastructure.models.category_model import CategoryModel
from ..infrastructure.models.product_model import ProductModel


@admin.register(ProductModel)
class ProductAdmin(admin.ModelAdmin):
    """Admin configuration for Product model."""
    list_display = (
        'name', 'sku', 'brand', 'base_amount', 'tax_rate', 'price',
        'is_variable_dimension', 'stock_quantity', 'is_active', 'created_at',
    )
    list_filter = ('is_active', 'is_variable_dimension', 'currency', 'created_at')
    search_fields = ('name', 'sku', 'brand', 'description')
    ordering = ('-created_at',)
    readonly_fields = ('id', 'tax_amount', 'price', 'created_at', 'updated_at')


@admin.register(CategoryModel)
class CategoryAdmin(admin.ModelAdmin):
    list_display = ('name', 'slug', 'parent', 'sort_order', 'is_active')
    list_filter = ('is_active',)
    search_fields = ('name', 'slug')
    prepopulated_fields = {'slug': ('name',)}
