"""
Address Django ORM model.
"""
import uuid

from django.db import models


class AddressModel(models.Model):
    """Address model."""

    TYPE_CHOICES = [
        ('SHIPPING', 'Shipping'),
        ('BILLING', 'Billing'),
        ('OTHER', 'Other'),
    ]

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user_id = models.CharField(max_length=64, db_index=True)
    street = models.CharField(max_length=255)
    street2 = models.CharField(max_length=255, blank=True)
    city = models.CharField(max_length=100)
    state = models.CharField(max_length=100)
    postal_code = models.CharField(max_length=10)
    country = models.CharField(max_length=100)
    type = models.CharField(max_length=20, choices=TYPE_CHOICES, default='SHIPPING')
    is_default = models.BooleanField(default=False)

    created_at = models.DateTimeField()
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'addresses'
        ordering = ['created_at']
        indexes = [
            models.Index(fields=['user_id', 'is_default']),
        ]

    def __str__(self):
        return f"{self.street}, {self.city} ({self.user_id})"
