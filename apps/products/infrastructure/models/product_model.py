"""
Product Django ORM model.
"""
import uuid

from django.db import models


class ProductModel(models.Model):
    """Product model with price components and cut-to-size pricing fields."""

    DIMENSION_UNIT_CHOICES = [
        ('MILLIMETER', 'Millimeter'),
        ('CENTIMETER', 'Centimeter'),
        ('METER', 'Meter'),
        ('INCH', 'Inch'),
        ('FOOT', 'Foot'),
        ('YARD', 'Yard'),
    ]

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=255, db_index=True)
    description = models.TextField(blank=True)
    brand = models.CharField(max_length=100, blank=True, db_index=True)
    sku = models.CharField(max_length=100, unique=True, db_index=True)
    category_id = models.UUIDField(db_index=True)

    # Price components; tax_amount and price are derived and stored for filtering
    base_amount = models.DecimalField(max_digits=12, decimal_places=2)
    tax_rate = models.DecimalField(max_digits=5, decimal_places=2, default=0)
    tax_amount = models.DecimalField(max_digits=12, decimal_places=2, default=0)
    price = models.DecimalField(max_digits=12, decimal_places=2, db_index=True)
    currency = models.CharField(max_length=3, default='USD')

    stock_quantity = models.PositiveIntegerField(default=0)
    is_active = models.BooleanField(default=True, db_index=True)

    # Variable-dimension pricing
    is_variable_dimension = models.BooleanField(default=False)
    fixed_height = models.DecimalField(max_digits=10, decimal_places=2, null=True, blank=True)
    variable_dimension_rate = models.DecimalField(max_digits=12, decimal_places=4, null=True, blank=True)
    max_length = models.DecimalField(max_digits=10, decimal_places=2, null=True, blank=True)
    dimension_unit = models.CharField(max_length=20, choices=DIMENSION_UNIT_CHOICES, blank=True)

    images = models.JSONField(default=list, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'products'
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['category_id', 'is_active']),
            models.Index(fields=['brand', 'is_active']),
        ]

    def __str__(self):
        return f"{self.name} ({self.sku})"
