"""
Sales & Revenue Models

Handles:
- Farm products (eggs, meat, chicks, manure) with stock levels
- Financial transactions (sales, purchases, expenses, investments)
- Customer orders and their line items
"""

from django.db import models
from django.core.validators import MinValueValidator
from django.utils import timezone
from decimal import Decimal
from farms.models import Farm
import uuid


# =============================================================================
# PRODUCT MODEL
# =============================================================================

class ProductType(models.TextChoices):
    EGGS = 'eggs', 'Eggs'
    MEAT = 'meat', 'Meat'
    CHICKS = 'chicks', 'Chicks'
    MANURE = 'manure', 'Manure'


class ProductQuality(models.TextChoices):
    PREMIUM = 'premium', 'Premium'
    STANDARD = 'standard', 'Standard'
    ECONOMY = 'economy', 'Economy'


class Product(models.Model):
    """
    A sellable product held in stock by a farm.

    ``available`` is derived: it is recomputed from quantity on every save
    and can never be set directly.
    """

    EDITABLE_FIELDS = ('name', 'type', 'quantity', 'unit', 'price', 'quality')
    CREATE_ONLY_FIELDS = ('farm',)

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    farm = models.ForeignKey(Farm, on_delete=models.CASCADE, related_name='products')

    name = models.CharField(max_length=200, blank=True)
    type = models.CharField(
        max_length=20,
        choices=ProductType.choices,
        db_index=True
    )
    quantity = models.PositiveIntegerField(default=0)
    unit = models.CharField(max_length=20, blank=True, help_text="e.g., crate, kg, piece")
    price = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        default=Decimal('0'),
        validators=[MinValueValidator(Decimal('0'))],
        help_text="Price per unit"
    )
    quality = models.CharField(
        max_length=20,
        choices=ProductQuality.choices,
        default=ProductQuality.STANDARD
    )
    available = models.BooleanField(
        default=False,
        editable=False,
        help_text="Auto-set: True when quantity > 0"
    )

    # Timestamps
    created_at = models.DateTimeField(default=timezone.now, editable=False)
    updated_at = models.DateTimeField(null=True, blank=True, editable=False)

    class Meta:
        db_table = 'products'
        ordering = ['created_at']
        indexes = [
            models.Index(fields=['farm', 'type'], name='products_farm_type_idx'),
            models.Index(fields=['farm', 'available'], name='products_farm_avail_idx'),
        ]

    def __str__(self):
        return f"{self.name or self.get_type_display()} ({self.quantity})"

    def save(self, *args, **kwargs):
        self.available = self.quantity > 0
        super().save(*args, **kwargs)


# =============================================================================
# TRANSACTION MODEL
# =============================================================================

class TransactionType(models.TextChoices):
    SALE = 'sale', 'Sale'
    PURCHASE = 'purchase', 'Purchase'
    EXPENSE = 'expense', 'Expense'
    INVESTMENT = 'investment', 'Investment'


class TransactionStatus(models.TextChoices):
    PENDING = 'pending', 'Pending'
    COMPLETED = 'completed', 'Completed'
    CANCELLED = 'cancelled', 'Cancelled'


class Transaction(models.Model):
    """A money movement recorded against a farm."""

    EDITABLE_FIELDS = ('type', 'category', 'amount', 'status', 'transaction_date', 'description')
    CREATE_ONLY_FIELDS = ('farm',)

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    farm = models.ForeignKey(Farm, on_delete=models.CASCADE, related_name='transactions')

    type = models.CharField(
        max_length=20,
        choices=TransactionType.choices,
        db_index=True
    )
    category = models.CharField(max_length=100, db_index=True)
    amount = models.DecimalField(
        max_digits=14,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0.01'))]
    )
    status = models.CharField(
        max_length=20,
        choices=TransactionStatus.choices,
        default=TransactionStatus.COMPLETED,
        db_index=True
    )
    transaction_date = models.DateTimeField(default=timezone.now, db_index=True)
    description = models.TextField(blank=True)

    # Timestamps
    created_at = models.DateTimeField(default=timezone.now, editable=False)
    updated_at = models.DateTimeField(null=True, blank=True, editable=False)

    class Meta:
        db_table = 'transactions'
        ordering = ['transaction_date', 'created_at']
        indexes = [
            models.Index(fields=['farm', 'type', 'status'], name='txn_farm_type_status_idx'),
        ]

    def __str__(self):
        return f"{self.get_type_display()} {self.amount} ({self.category})"


# =============================================================================
# ORDER MODELS
# =============================================================================

class OrderStatus(models.TextChoices):
    PENDING = 'pending', 'Pending'
    CONFIRMED = 'confirmed', 'Confirmed'
    SHIPPED = 'shipped', 'Shipped'
    DELIVERED = 'delivered', 'Delivered'
    CANCELLED = 'cancelled', 'Cancelled'


class PaymentStatus(models.TextChoices):
    PENDING = 'pending', 'Pending'
    PAID = 'paid', 'Paid'
    REFUNDED = 'refunded', 'Refunded'


class Order(models.Model):
    """
    A customer order for one or more farm products.

    Orders are only ever created through the order fulfillment service,
    which reserves stock and computes total_amount in one transaction.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    farm = models.ForeignKey(Farm, on_delete=models.CASCADE, related_name='orders')

    customer_id = models.CharField(max_length=128, db_index=True)
    total_amount = models.DecimalField(max_digits=14, decimal_places=2, default=Decimal('0'))
    status = models.CharField(
        max_length=20,
        choices=OrderStatus.choices,
        default=OrderStatus.PENDING,
        db_index=True
    )
    payment_status = models.CharField(
        max_length=20,
        choices=PaymentStatus.choices,
        default=PaymentStatus.PENDING
    )

    # Delivery
    delivery_address = models.TextField(blank=True)
    delivery_date = models.DateTimeField(blank=True, null=True)
    delivery_notes = models.TextField(blank=True)

    # Timestamps
    created_at = models.DateTimeField(default=timezone.now, editable=False)
    updated_at = models.DateTimeField(null=True, blank=True, editable=False)

    class Meta:
        db_table = 'orders'
        ordering = ['created_at']
        indexes = [
            models.Index(fields=['farm', 'status'], name='orders_farm_status_idx'),
        ]

    def __str__(self):
        return f"Order {self.id} - {self.total_amount} ({self.status})"


class OrderItem(models.Model):
    """A (product, quantity, price) line within an order."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    order = models.ForeignKey(Order, on_delete=models.CASCADE, related_name='items')
    # Line items keep the product id even after the product is removed
    product = models.ForeignKey(
        Product,
        on_delete=models.DO_NOTHING,
        db_constraint=False,
        related_name='order_items'
    )

    quantity = models.PositiveIntegerField(validators=[MinValueValidator(1)])
    price = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0'))]
    )
    line_total = models.DecimalField(max_digits=14, decimal_places=2)

    class Meta:
        db_table = 'order_items'
        ordering = ['order', 'id']

    def __str__(self):
        return f"{self.quantity} x {self.product_id} @ {self.price}"

    def save(self, *args, **kwargs):
        self.line_total = self.price * self.quantity
        super().save(*args, **kwargs)
