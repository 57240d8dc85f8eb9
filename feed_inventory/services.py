"""
Feed Stock Services

Usage:
    from feed_inventory.services import FeedStockService

    feeds = FeedStockService().low_stock_feeds(threshold=50)
"""

import logging
from decimal import Decimal, InvalidOperation

from core.exceptions import InvalidInput
from core.repository import EntityRepository
from .models import Feed

logger = logging.getLogger(__name__)


class FeedStockService:

    def __init__(self):
        self.feeds = EntityRepository(Feed)

    def low_stock_feeds(self, threshold):
        """Feed entries whose quantity is strictly below ``threshold``."""
        try:
            threshold = Decimal(str(threshold))
        except (InvalidOperation, ValueError):
            raise InvalidInput('threshold', 'must be a number')
        if not threshold.is_finite() or threshold < 0:
            raise InvalidInput('threshold', 'must be zero or greater')

        feeds = list(self.feeds.values().filter(quantity__lt=threshold))
        if feeds:
            logger.info(f"{len(feeds)} feed entr(ies) below {threshold}")
        return feeds


def low_stock_feeds(threshold):
    return FeedStockService().low_stock_feeds(threshold)
