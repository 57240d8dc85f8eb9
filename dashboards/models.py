"""
Dashboard Models

Analytics snapshots: derived metrics for a farm over a reporting period.
Snapshots are append-only; every generation creates a new record.
"""

from django.db import models
from django.utils import timezone
from farms.models import Farm
import uuid


class AnalyticsPeriod(models.TextChoices):
    DAILY = 'daily', 'Daily'
    WEEKLY = 'weekly', 'Weekly'
    MONTHLY = 'monthly', 'Monthly'


# Keys every metrics payload carries
METRIC_KEYS = (
    'mortality_rate',
    'feed_conversion_ratio',
    'production_rate',
    'revenue',
    'expenses',
    'profit_margin',
)


class Analytics(models.Model):
    """
    A derived metrics snapshot.

    Never edited by hand: produced only by FarmMetricsAggregator.generate_analytics().
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    farm = models.ForeignKey(Farm, on_delete=models.CASCADE, related_name='analytics')

    period = models.CharField(
        max_length=10,
        choices=AnalyticsPeriod.choices,
        db_index=True
    )
    metrics = models.JSONField(default=dict)
    generated_at = models.DateTimeField(default=timezone.now, db_index=True)

    # Timestamps
    created_at = models.DateTimeField(default=timezone.now, editable=False)
    updated_at = models.DateTimeField(null=True, blank=True, editable=False)

    class Meta:
        db_table = 'analytics'
        ordering = ['generated_at', 'created_at']
        verbose_name_plural = 'Analytics'
        indexes = [
            models.Index(fields=['farm', 'period', 'generated_at'], name='analytics_farm_period_idx'),
        ]

    def __str__(self):
        return f"{self.farm_id} {self.period} @ {self.generated_at:%Y-%m-%d %H:%M}"
