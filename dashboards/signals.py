"""
Dashboard Signals

Invalidate a farm's cached reports whenever one of its records changes.
"""

import logging

from django.db import transaction
from django.db.models.signals import post_delete, post_save

from dashboards.services.report_cache import invalidate_farm_reports

logger = logging.getLogger(__name__)

# Farm-scoped models that feed reports
REPORT_SOURCE_MODELS = (
    'flock_management.Bird',
    'flock_management.HealthRecord',
    'feed_inventory.Inventory',
    'sales_revenue.Product',
    'sales_revenue.Transaction',
    'sales_revenue.Order',
    'dashboards.Analytics',
)


def invalidate_reports_on_change(sender, instance, **kwargs):
    """
    Bump the report version of the record's farm.

    Inside a transaction the version is bumped again once it commits, so a
    report built from pre-commit data and cached in between is dropped.
    """
    farm_id = getattr(instance, 'farm_id', None)
    if not farm_id:
        return
    invalidate_farm_reports(farm_id)
    if transaction.get_connection().in_atomic_block:
        transaction.on_commit(lambda: invalidate_farm_reports(farm_id))


for _model in REPORT_SOURCE_MODELS:
    post_save.connect(
        invalidate_reports_on_change,
        sender=_model,
        dispatch_uid=f'report_cache_save_{_model}',
    )
    post_delete.connect(
        invalidate_reports_on_change,
        sender=_model,
        dispatch_uid=f'report_cache_delete_{_model}',
    )
