"""
Cart Django ORM models.
"""
import uuid

from django.db import models


class CartModel(models.Model):
    """Cart model."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user_id = models.CharField(max_length=64, unique=True, db_index=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'carts'

    def __str__(self):
        return f"Cart for user {self.user_id}"


class CartItemModel(models.Model):
    """Cart line with the product price snapshot it was added with."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    cart = models.ForeignKey(CartModel, on_delete=models.CASCADE, related_name='items')
    position = models.PositiveSmallIntegerField(default=0)
    quantity = models.PositiveIntegerField(default=1)
    custom_length = models.DecimalField(max_digits=10, decimal_places=2, null=True, blank=True)

    # Product snapshot
    product_id = models.UUIDField(db_index=True)
    product_name = models.CharField(max_length=255)
    product_sku = models.CharField(max_length=100)
    base_amount = models.DecimalField(max_digits=12, decimal_places=2)
    tax_rate = models.DecimalField(max_digits=5, decimal_places=2, default=0)
    tax_amount = models.DecimalField(max_digits=12, decimal_places=2, default=0)
    is_variable_dimension = models.BooleanField(default=False)
    fixed_height = models.DecimalField(max_digits=10, decimal_places=2, null=True, blank=True)
    variable_dimension_rate = models.DecimalField(max_digits=12, decimal_places=4, null=True, blank=True)
    max_length = models.DecimalField(max_digits=10, decimal_places=2, null=True, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'cart_items'
        ordering = ['position', 'created_at']

    def __str__(self):
        return f"{self.product_name} x {self.quantity}"
