"""
Addresses admin configuration.
"""
from django.contrib import admin

from ..infrastructure.models.address_model import AddressModel


@admin.register(AddressModel)
class AddressAdmin(admin.ModelAdmin):
    """Admin configuration for Address model."""
    list_display = ('user_id', 'street', 'city', 'state', 'country', 'type', 'is_default', 'created_at')
    list_filter = ('type', 'is_default', 'country')
    search_fields = ('user_id', 'street', 'city', 'postal_code')
    ordering = ('user_id', 'created_at')
    readonly_fields = ('id', 'created_at', 'updated_at')
