"""
Feed & Supplies Inventory Models

Handles:
- Farm inventory (feed, medicine, equipment, supplies) with low-stock flags
- Feed stock entries (legacy stock list with purchase and expiry dates)
"""

from django.db import models
from django.core.validators import MinValueValidator
from django.utils import timezone
from decimal import Decimal
from farms.models import Farm
import uuid


# =============================================================================
# INVENTORY MODEL
# =============================================================================

class InventoryType(models.TextChoices):
    FEED = 'feed', 'Feed'
    MEDICINE = 'medicine', 'Medicine'
    EQUIPMENT = 'equipment', 'Equipment'
    SUPPLIES = 'supplies', 'Supplies'


class Inventory(models.Model):
    """
    A stocked item on a farm.

    An item is low on stock when its quantity is at or below its
    minimum threshold.
    """

    EDITABLE_FIELDS = ('name', 'type', 'quantity', 'unit', 'minimum_threshold', 'cost')
    CREATE_ONLY_FIELDS = ('farm',)

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    farm = models.ForeignKey(Farm, on_delete=models.CASCADE, related_name='inventory')

    name = models.CharField(max_length=200)
    type = models.CharField(
        max_length=20,
        choices=InventoryType.choices,
        db_index=True
    )
    quantity = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        default=Decimal('0'),
        validators=[MinValueValidator(Decimal('0'))]
    )
    unit = models.CharField(max_length=20, help_text="e.g., kg, bags, doses, pieces")
    minimum_threshold = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        default=Decimal('0'),
        validators=[MinValueValidator(Decimal('0'))],
        help_text="Alert when quantity falls to this level"
    )
    cost = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        default=Decimal('0'),
        validators=[MinValueValidator(Decimal('0'))]
    )
    low_stock_alert = models.BooleanField(
        default=False,
        editable=False,
        help_text="Auto-set when quantity is at or below the minimum threshold"
    )

    # Timestamps
    created_at = models.DateTimeField(default=timezone.now, editable=False)
    updated_at = models.DateTimeField(null=True, blank=True, editable=False)

    class Meta:
        db_table = 'inventory'
        ordering = ['created_at']
        verbose_name_plural = 'Inventory'
        indexes = [
            models.Index(fields=['farm', 'type'], name='inventory_farm_type_idx'),
            models.Index(fields=['low_stock_alert'], name='inventory_low_stock_idx'),
        ]

    def __str__(self):
        return f"{self.name} ({self.quantity} {self.unit})"

    def save(self, *args, **kwargs):
        self.low_stock_alert = self.quantity <= self.minimum_threshold
        super().save(*args, **kwargs)


# =============================================================================
# FEED MODEL - Stock entries tracked across all farms
# =============================================================================

class Feed(models.Model):
    """A feed stock entry with purchase and expiry dates."""

    EDITABLE_FIELDS = ('name', 'quantity', 'expiry_date')

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    name = models.CharField(max_length=200)
    quantity = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        default=Decimal('0'),
        validators=[MinValueValidator(Decimal('0'))]
    )
    purchase_date = models.DateTimeField(default=timezone.now, editable=False)
    expiry_date = models.DateTimeField(blank=True, null=True)

    # Timestamps
    created_at = models.DateTimeField(default=timezone.now, editable=False)
    updated_at = models.DateTimeField(null=True, blank=True, editable=False)

    class Meta:
        db_table = 'feeds'
        ordering = ['created_at']

    def __str__(self):
        return f"{self.name} ({self.quantity})"

    @property
    def is_expired(self):
        return bool(self.expiry_date and self.expiry_date <= timezone.now())
