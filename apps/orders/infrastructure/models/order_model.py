"""
Order Django ORM models.
"""
import uuid

from django.db import models


class OrderModel(models.Model):
    """Order model."""

    STATUS_CHOICES = [
        ('ORDER_RAISED', 'Order raised'),
        ('PAYMENT_DONE', 'Payment done'),
        ('DELIVERED', 'Delivered'),
        ('CANCELLED', 'Cancelled'),
    ]

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    order_number = models.CharField(max_length=50, unique=True, db_index=True)
    user_id = models.CharField(max_length=64, db_index=True)
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default='ORDER_RAISED', db_index=True)

    payment_method = models.CharField(max_length=30)
    shipping_method = models.CharField(max_length=30, blank=True)
    discount_code = models.CharField(max_length=30, blank=True)
    payment_reference = models.CharField(max_length=100, blank=True)
    customer_notes = models.TextField(blank=True)
    cancellation_reason = models.TextField(blank=True)
    currency = models.CharField(max_length=3, default='USD')

    # Totals
    subtotal = models.DecimalField(max_digits=12, decimal_places=2)
    tax_amount = models.DecimalField(max_digits=12, decimal_places=2)
    shipping_amount = models.DecimalField(max_digits=12, decimal_places=2)
    discount_amount = models.DecimalField(max_digits=12, decimal_places=2)
    fee_amount = models.DecimalField(max_digits=12, decimal_places=2)
    total_amount = models.DecimalField(max_digits=12, decimal_places=2)

    # Addresses
    billing_address_id = models.UUIDField()
    shipping_address_id = models.UUIDField()
    shipping_street = models.CharField(max_length=255)
    shipping_street2 = models.CharField(max_length=255, blank=True)
    shipping_city = models.CharField(max_length=100)
    shipping_state = models.CharField(max_length=100, blank=True)
    shipping_postal_code = models.CharField(max_length=20, blank=True)
    shipping_country = models.CharField(max_length=100, blank=True)

    created_at = models.DateTimeField()
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'orders'
        ordering = ['-created_at']

    def __str__(self):
        return self.order_number


class OrderItemModel(models.Model):
    """Order item model."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    order = models.ForeignKey(OrderModel, on_delete=models.CASCADE, related_name='items')
    position = models.PositiveSmallIntegerField(default=0)
    product_id = models.UUIDField()
    product_name = models.CharField(max_length=255)
    product_sku = models.CharField(max_length=100)
    quantity = models.PositiveIntegerField(default=1)
    unit_base_amount = models.DecimalField(max_digits=12, decimal_places=2)
    unit_tax_amount = models.DecimalField(max_digits=12, decimal_places=2)
    unit_price = models.DecimalField(max_digits=12, decimal_places=2)
    custom_length = models.DecimalField(max_digits=10, decimal_places=2, null=True, blank=True)
    currency = models.CharField(max_length=3, default='USD')

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'order_items'
        ordering = ['position']

    def __str__(self):
        return f"{self.product_name} x {self.quantity}"


class OrderPaymentComponentModel(models.Model):
    """Payment component frozen into an order."""

    TYPE_CHOICES = [
        ('TAX', 'Tax'),
        ('SHIPPING', 'Shipping'),
        ('DISCOUNT', 'Discount'),
        ('FEE', 'Fee'),
    ]

    order = models.ForeignKey(OrderModel, on_delete=models.CASCADE, related_name='payment_components')
    position = models.PositiveSmallIntegerField()
    type = models.CharField(max_length=10, choices=TYPE_CHOICES)
    amount = models.DecimalField(max_digits=12, decimal_places=2)
    label = models.CharField(max_length=100)
    description = models.CharField(max_length=255, blank=True)
    is_negative = models.BooleanField(default=False)

    class Meta:
        db_table = 'order_payment_components'
        ordering = ['position']


class OrderStatusHistoryModel(models.Model):
    """Order status change record."""

    order = models.ForeignKey(OrderModel, on_delete=models.CASCADE, related_name='status_history')
    position = models.PositiveSmallIntegerField()
    status = models.CharField(max_length=20)
    previous_status = models.CharField(max_length=20, blank=True)
    note = models.CharField(max_length=255, blank=True)
    changed_at = models.DateTimeField()

    class Meta:
        db_table = 'order_status_history'
        ordering = ['position']
