"""
Integration Tests for Alerting Queries

Low-stock inventory per farm and low-stock feed entries across farms.
"""

import uuid
from decimal import Decimal

import pytest

from core.exceptions import InvalidInput, NotFound
from dashboards.services.alerts import low_stock_feeds, low_stock_inventory
from dashboards.services.reports import FarmReportService
from feed_inventory.models import Feed, Inventory


def _item(farm, name, quantity, threshold, **kwargs):
    return Inventory.objects.create(
        farm=farm,
        name=name,
        type=kwargs.pop('type', 'feed'),
        unit=kwargs.pop('unit', 'bags'),
        quantity=Decimal(quantity),
        minimum_threshold=Decimal(threshold),
        **kwargs
    )


@pytest.mark.django_db
class TestLowStockInventory:

    def test_at_or_below_threshold_is_low(self, farm):
        below = _item(farm, 'Layer Mash', '5', '10')
        equal = _item(farm, 'Grower Pellets', '10', '10')
        _item(farm, 'Starter Crumbs', '11', '10')

        items = low_stock_inventory(farm.id)
        assert {i.id for i in items} == {below.id, equal.id}

    def test_low_stock_alert_flag_tracks_quantity(self, farm):
        item = _item(farm, 'Vitamins', '20', '5', type='medicine', unit='doses')
        assert item.low_stock_alert is False

        item.quantity = Decimal('5')
        item.save()
        assert item.low_stock_alert is True

    def test_other_farms_are_excluded(self, farm, other_farm):
        _item(other_farm, 'Layer Mash', '0', '10')
        assert low_stock_inventory(farm.id) == []

    def test_unknown_farm_raises_not_found(self, db):
        with pytest.raises(NotFound):
            low_stock_inventory(uuid.uuid4())

    def test_low_stock_report(self, farm):
        item = _item(farm, 'Layer Mash', '2.50', '10')

        report = FarmReportService(farm.id).build_low_stock_report()
        assert report['count'] == 1
        assert report['items'][0]['id'] == str(item.id)
        assert report['items'][0]['quantity'] == 2.5


@pytest.mark.django_db
class TestLowStockFeeds:

    @pytest.fixture
    def feeds(self, db):
        return [
            Feed.objects.create(name='Broiler Starter', quantity=Decimal('20')),
            Feed.objects.create(name='Layer Mash', quantity=Decimal('50')),
            Feed.objects.create(name='Grower', quantity=Decimal('75')),
        ]

    def test_strictly_below_threshold(self, feeds):
        names = [f.name for f in low_stock_feeds(50)]
        assert names == ['Broiler Starter']

    def test_threshold_accepts_strings_and_decimals(self, feeds):
        assert len(low_stock_feeds('75.01')) == 3
        assert len(low_stock_feeds(Decimal('0'))) == 0

    @pytest.mark.parametrize('threshold', ['abc', -1, float('inf')])
    def test_invalid_threshold(self, feeds, threshold):
        with pytest.raises(InvalidInput):
            low_stock_feeds(threshold)
