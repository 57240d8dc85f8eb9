"""
Dashboard Celery tasks.

Background generation of analytics snapshots. Scheduled via Celery Beat
(see core/celery.py) once per period.
"""
from celery import shared_task
from django.utils import timezone
import logging

from core.exceptions import FarmOpsError

logger = logging.getLogger(__name__)


@shared_task
def generate_periodic_analytics(period='daily', farm_ids=None):
    """
    Append an analytics snapshot for every farm (or only ``farm_ids``).

    A farm that fails is logged and reported; the remaining farms still run.
    """
    from farms.models import Farm
    from dashboards.services.aggregators import FarmMetricsAggregator

    logger.info(f"Starting {period} analytics generation...")

    farms = Farm.objects.all().order_by('created_at')
    if farm_ids:
        farms = farms.filter(id__in=farm_ids)

    generated_at = timezone.now()
    generated = []
    failed = []
    for farm in farms:
        try:
            snapshot = FarmMetricsAggregator(farm.id).generate_analytics(
                period, generated_at=generated_at
            )
            generated.append(str(snapshot.id))
        except FarmOpsError as exc:
            logger.error(f"Analytics generation failed for farm {farm.id}: {exc}")
            failed.append({'farm_id': str(farm.id), 'error': str(exc)})

    logger.info(
        f"{period.capitalize()} analytics generation completed: "
        f"{len(generated)} generated, {len(failed)} failed"
    )
    return {
        'status': 'success' if not failed else 'partial',
        'period': period,
        'timestamp': generated_at.isoformat(),
        'generated': generated,
        'failed': failed,
    }
