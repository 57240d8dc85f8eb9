"""
Farm Alerting Queries

- Low-stock inventory per farm (quantity at or below the item's threshold)
- Low-stock feed entries across all farms (quantity below a caller threshold)
- Upcoming health follow-ups per farm
"""

import logging

from django.db.models import F

from core.repository import EntityRepository
from dashboards.services.aggregators import FarmMetricsAggregator
from farms.models import Farm
from feed_inventory.models import Inventory
from feed_inventory.services import FeedStockService

logger = logging.getLogger(__name__)


class FarmAlertService:
    """
    Alert queries.

    Usage:
        from dashboards.services.alerts import FarmAlertService

        alerts = FarmAlertService()
        items = alerts.low_stock_inventory(farm_id)
        feeds = alerts.low_stock_feeds(threshold=50)
    """

    def low_stock_inventory(self, farm_id):
        """Inventory items of ``farm_id`` whose quantity <= minimum_threshold."""
        farm = EntityRepository(Farm).require(farm_id)
        items = list(
            EntityRepository(Inventory).for_farm(farm.id).filter(
                quantity__lte=F('minimum_threshold')
            )
        )
        if items:
            logger.info(f"Farm {farm.id}: {len(items)} inventory item(s) low on stock")
        return items

    def low_stock_feeds(self, threshold):
        """Feed entries (any farm) whose quantity is strictly below ``threshold``."""
        return FeedStockService().low_stock_feeds(threshold)

    def upcoming_follow_ups(self, farm_id, now=None):
        return FarmMetricsAggregator(farm_id).upcoming_follow_ups(now)


def low_stock_inventory(farm_id):
    return FarmAlertService().low_stock_inventory(farm_id)


def low_stock_feeds(threshold):
    return FarmAlertService().low_stock_feeds(threshold)
