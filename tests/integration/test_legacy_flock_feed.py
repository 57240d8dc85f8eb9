"""
Integration Tests for Chicken and Feed Tracking

Individually tracked chickens (breed lookup, egg production, vaccination)
and feed stock entries.
"""

import uuid
from datetime import timedelta
from decimal import Decimal

import pytest
from django.utils import timezone

from core.entities import construct
from core.exceptions import InvalidInput, NotFound
from feed_inventory.models import Feed
from feed_inventory.services import FeedStockService
from flock_management.models import Chicken
from flock_management.services import (
    ChickenService,
    chickens_by_breed,
    record_vaccination,
    total_egg_production,
)


@pytest.fixture
def chickens(db):
    return [
        Chicken.objects.create(breed='Isa Brown', age=30, weight=Decimal('1.9'), egg_production=250),
        Chicken.objects.create(breed='Isa Brown', age=28, weight=Decimal('1.8'), egg_production=240),
        Chicken.objects.create(breed='Rhode Island Red', age=40, weight=Decimal('2.4'), egg_production=180),
    ]


@pytest.mark.django_db
class TestChickens:

    def test_chickens_by_breed(self, chickens):
        found = chickens_by_breed('Isa Brown')
        assert [c.id for c in found] == [chickens[0].id, chickens[1].id]

    def test_unknown_breed_returns_empty(self, chickens):
        assert chickens_by_breed('Sussex') == []

    def test_total_egg_production(self, chickens):
        assert total_egg_production() == 670

    def test_total_egg_production_with_no_chickens(self, db):
        assert total_egg_production() == 0

    def test_record_vaccination(self, chickens):
        before = timezone.now()
        chicken = record_vaccination(chickens[2].id)

        chicken.refresh_from_db()
        assert chicken.vaccination_status is True
        assert chicken.last_health_check >= before
        assert chicken.updated_at is not None

    def test_record_vaccination_with_fixed_check_time(self, chickens):
        checked_at = timezone.now() - timedelta(hours=2)
        chicken = ChickenService().record_vaccination(chickens[0].id, checked_at=checked_at)
        assert chicken.last_health_check == checked_at

    def test_record_vaccination_unknown_chicken(self, db):
        with pytest.raises(NotFound):
            record_vaccination(uuid.uuid4())

    def test_negative_egg_production_is_rejected(self, db):
        with pytest.raises(InvalidInput):
            construct(Chicken, {'breed': 'Isa Brown', 'egg_production': -1})


@pytest.mark.django_db
class TestFeeds:

    def test_purchase_date_is_stamped_on_creation(self, db):
        before = timezone.now()
        feed = construct(Feed, {'name': 'Layer Mash', 'quantity': '40'})

        assert feed.purchase_date >= before
        assert feed.is_expired is False

    def test_purchase_date_is_read_only(self, db):
        with pytest.raises(InvalidInput):
            construct(Feed, {'name': 'Layer Mash', 'purchase_date': timezone.now()})

    def test_expired_feed(self, db):
        feed = Feed.objects.create(
            name='Old Stock', quantity=Decimal('5'),
            expiry_date=timezone.now() - timedelta(days=1),
        )
        assert feed.is_expired is True

    def test_low_stock_feeds_service(self, db):
        Feed.objects.create(name='Starter', quantity=Decimal('10'))
        Feed.objects.create(name='Finisher', quantity=Decimal('90'))

        names = [f.name for f in FeedStockService().low_stock_feeds('25')]
        assert names == ['Starter']
