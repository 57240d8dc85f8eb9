"""
Entity repository over a Django model manager.

Each entity kind is an ordered map from id to record. Services talk to the
store through this small surface so the reporting and fulfillment code never
builds ad-hoc queries against records it has not looked up by id or farm.

Usage:
    from core.repository import EntityRepository
    from sales_revenue.models import Product

    products = EntityRepository(Product)
    product = products.get(product_id)       # None when absent
    product = products.require(product_id)   # raises NotFound
    farm_products = products.for_farm(farm_id)
"""

import logging

from django.core.exceptions import ValidationError

from core.exceptions import NotFound

logger = logging.getLogger(__name__)


class EntityRepository:
    """get / insert / remove / values over one model, keyed by UUID id."""

    def __init__(self, model, kind=None):
        self.model = model
        self.kind = kind or model.__name__

    def get(self, entity_id):
        """Return the record stored under ``entity_id`` or None."""
        if entity_id is None:
            return None
        try:
            return self.model.objects.get(pk=entity_id)
        except (self.model.DoesNotExist, ValidationError, ValueError):
            # Malformed ids cannot name a stored record
            return None

    def require(self, entity_id):
        entity = self.get(entity_id)
        if entity is None:
            raise NotFound(self.kind, entity_id)
        return entity

    def insert(self, entity):
        """Store ``entity`` under its id, replacing any previous record."""
        entity.save()
        return entity

    def remove(self, entity_id):
        """Delete and return the record, or None when nothing was stored."""
        entity = self.get(entity_id)
        if entity is None:
            return None
        entity.delete()
        logger.info(f"Removed {self.kind} {entity_id}")
        return entity

    def values(self):
        return self.model.objects.all().order_by('created_at', 'id')

    def for_farm(self, farm_id):
        return self.values().filter(farm_id=farm_id)
