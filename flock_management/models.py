"""
Flock Management & Health Tracking Models

Handles:
- Bird batches (birds grouped by batch number, tracked as cohorts)
- Health records (vaccinations, medication, inspections, disease cases)
- Individual chickens (legacy per-bird tracking with egg production)
"""

from django.db import models
from django.core.validators import MinValueValidator
from django.utils import timezone
from decimal import Decimal
from farms.models import Farm
import uuid


# =============================================================================
# BIRD BATCH MODEL
# =============================================================================

class BirdStatus(models.TextChoices):
    HEALTHY = 'healthy', 'Healthy'
    SICK = 'sick', 'Sick'
    SOLD = 'sold', 'Sold'
    DECEASED = 'deceased', 'Deceased'


class Bird(models.Model):
    """
    A batch of birds managed together.

    Mortality and feed conversion are computed over the quantity, weight and
    feed_consumption of every batch on a farm.
    """

    EDITABLE_FIELDS = (
        'batch_number', 'breed', 'quantity', 'age', 'status',
        'weight', 'feed_consumption',
    )
    CREATE_ONLY_FIELDS = ('farm',)

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    farm = models.ForeignKey(Farm, on_delete=models.CASCADE, related_name='birds')

    batch_number = models.CharField(
        max_length=50,
        help_text="Batch identifier (e.g., BATCH-2025-001)"
    )
    breed = models.CharField(max_length=100)
    quantity = models.PositiveIntegerField(default=0)
    age = models.PositiveIntegerField(default=0, help_text="Age in weeks")
    status = models.CharField(
        max_length=20,
        choices=BirdStatus.choices,
        default=BirdStatus.HEALTHY,
        db_index=True
    )
    weight = models.DecimalField(
        max_digits=10,
        decimal_places=3,
        default=Decimal('0'),
        validators=[MinValueValidator(Decimal('0'))],
        help_text="Average weight per bird (kg)"
    )
    feed_consumption = models.DecimalField(
        max_digits=12,
        decimal_places=3,
        default=Decimal('0'),
        validators=[MinValueValidator(Decimal('0'))],
        help_text="Total feed consumed by the batch (kg)"
    )

    # Timestamps
    created_at = models.DateTimeField(default=timezone.now, editable=False)
    updated_at = models.DateTimeField(null=True, blank=True, editable=False)

    class Meta:
        db_table = 'birds'
        ordering = ['created_at']
        indexes = [
            models.Index(fields=['farm', 'status'], name='birds_farm_status_idx'),
        ]

    def __str__(self):
        return f"{self.batch_number} - {self.breed} ({self.quantity})"


# =============================================================================
# HEALTH RECORD MODEL
# =============================================================================

class HealthRecordType(models.TextChoices):
    VACCINATION = 'vaccination', 'Vaccination'
    MEDICATION = 'medication', 'Medication'
    INSPECTION = 'inspection', 'Inspection'
    DISEASE = 'disease', 'Disease'


class HealthRecord(models.Model):
    """
    A health event for a batch.

    A disease record without a treatment counts as an active disease case.
    """

    EDITABLE_FIELDS = (
        'batch_number', 'type', 'description', 'affected_count',
        'treatment', 'next_follow_up',
    )
    CREATE_ONLY_FIELDS = ('farm',)

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    farm = models.ForeignKey(Farm, on_delete=models.CASCADE, related_name='health_records')

    batch_number = models.CharField(max_length=50)
    type = models.CharField(
        max_length=20,
        choices=HealthRecordType.choices,
        db_index=True
    )
    description = models.TextField(blank=True)
    affected_count = models.PositiveIntegerField(default=0)
    treatment = models.CharField(max_length=255, blank=True, null=True)
    next_follow_up = models.DateTimeField(blank=True, null=True)

    # Timestamps
    created_at = models.DateTimeField(default=timezone.now, editable=False)
    updated_at = models.DateTimeField(null=True, blank=True, editable=False)

    class Meta:
        db_table = 'health_records'
        ordering = ['created_at']
        indexes = [
            models.Index(fields=['farm', 'type'], name='health_farm_type_idx'),
            models.Index(fields=['next_follow_up'], name='health_follow_up_idx'),
        ]

    def __str__(self):
        return f"{self.get_type_display()} - {self.batch_number}"

    @property
    def is_active_disease(self):
        return self.type == HealthRecordType.DISEASE and not self.treatment


# =============================================================================
# CHICKEN MODEL - Individual bird tracking
# =============================================================================

class Chicken(models.Model):
    """An individually tracked chicken."""

    EDITABLE_FIELDS = (
        'breed', 'age', 'weight', 'egg_production',
        'vaccination_status', 'last_health_check',
    )

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    breed = models.CharField(max_length=100, db_index=True)
    age = models.PositiveIntegerField(default=0, help_text="Age in weeks")
    weight = models.DecimalField(
        max_digits=8,
        decimal_places=3,
        default=Decimal('0'),
        validators=[MinValueValidator(Decimal('0'))]
    )
    egg_production = models.PositiveIntegerField(default=0)
    vaccination_status = models.BooleanField(default=False)
    last_health_check = models.DateTimeField(blank=True, null=True)

    # Timestamps
    created_at = models.DateTimeField(default=timezone.now, editable=False)
    updated_at = models.DateTimeField(null=True, blank=True, editable=False)

    class Meta:
        db_table = 'chickens'
        ordering = ['created_at']

    def __str__(self):
        return f"{self.breed} ({self.id})"
