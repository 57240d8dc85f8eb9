"""
Farm Models

A farm is the unit every other record hangs off: birds, inventory, products,
transactions, health records, orders and analytics snapshots all carry a
farm reference.
"""

from django.db import models
from django.utils import timezone
import uuid


class Farm(models.Model):
    """
    A poultry farm.

    Ownership is recorded as an opaque identifier supplied by the identity
    provider; the farm itself does not authenticate anyone.
    """

    EDITABLE_FIELDS = ('name', 'location', 'capacity', 'current_stock', 'employee_count')
    CREATE_ONLY_FIELDS = ('owner_id',)

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    owner_id = models.CharField(
        max_length=128,
        db_index=True,
        help_text="Identifier of the owning principal"
    )
    name = models.CharField(max_length=200)
    location = models.CharField(max_length=255, blank=True)

    capacity = models.PositiveIntegerField(
        default=0,
        help_text="Maximum number of birds the farm can hold"
    )
    current_stock = models.PositiveIntegerField(
        default=0,
        help_text="Number of birds currently on the farm"
    )
    employee_count = models.PositiveIntegerField(default=0)

    # Timestamps
    created_at = models.DateTimeField(default=timezone.now, editable=False)
    updated_at = models.DateTimeField(null=True, blank=True, editable=False)

    class Meta:
        db_table = 'farms'
        ordering = ['created_at']
        indexes = [
            models.Index(fields=['owner_id'], name='farms_owner_idx'),
        ]

    def __str__(self):
        return f"{self.name} ({self.location})" if self.location else self.name

    def clean(self):
        from django.core.exceptions import ValidationError

        if self.current_stock is not None and self.capacity is not None:
            if self.current_stock > self.capacity:
                raise ValidationError({
                    'current_stock': (
                        f'Current stock ({self.current_stock}) cannot exceed '
                        f'capacity ({self.capacity})'
                    )
                })

    @property
    def available_capacity(self):
        return max(self.capacity - self.current_stock, 0)
