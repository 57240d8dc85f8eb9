"""
Flock Services

Queries and updates over individually tracked chickens.

Usage:
    from flock_management.services import ChickenService

    service = ChickenService()
    layers = service.chickens_by_breed('Isa Brown')
    eggs = service.total_egg_production()
    chicken = service.record_vaccination(chicken_id)
"""

import logging

from django.db.models import Sum
from django.db.models.functions import Coalesce
from django.utils import timezone

from core.repository import EntityRepository
from .models import Chicken

logger = logging.getLogger(__name__)


class ChickenService:

    def __init__(self):
        self.chickens = EntityRepository(Chicken)

    def chickens_by_breed(self, breed):
        """Chickens whose breed matches ``breed`` exactly."""
        return list(self.chickens.values().filter(breed=breed))

    def total_egg_production(self):
        return Chicken.objects.aggregate(total=Coalesce(Sum('egg_production'), 0))['total']

    def record_vaccination(self, chicken_id, checked_at=None):
        """Mark the chicken vaccinated and stamp its last health check."""
        chicken = self.chickens.require(chicken_id)
        chicken.vaccination_status = True
        chicken.last_health_check = checked_at or timezone.now()
        chicken.updated_at = timezone.now()
        self.chickens.insert(chicken)
        logger.info(f"Chicken {chicken.id} vaccinated")
        return chicken


def chickens_by_breed(breed):
    return ChickenService().chickens_by_breed(breed)


def total_egg_production():
    return ChickenService().total_egg_production()


def record_vaccination(chicken_id):
    return ChickenService().record_vaccination(chicken_id)
