"""
Integration Tests for Entity Construction, Update and Removal

Explicit constructors reject unknown and read-only fields, derived flags
are recomputed on every write, and removal reports what was stored.
"""

import uuid
from decimal import Decimal

import pytest

from core.entities import construct, update
from core.exceptions import InvalidInput, NotFound
from core.repository import EntityRepository
from farms.models import Farm
from flock_management.models import Bird
from sales_revenue.models import Product, Transaction


@pytest.mark.django_db
class TestConstruct:

    def test_creates_with_defaults(self, farm):
        bird = construct(Bird, {'batch_number': 'BATCH-1', 'breed': 'Cobb 500', 'quantity': 200}, farm=farm)

        assert bird.farm_id == farm.id
        assert bird.status == 'healthy'
        assert bird.created_at is not None
        assert bird.updated_at is None
        assert Bird.objects.filter(pk=bird.pk).exists()

    def test_accepts_farm_id_value(self, farm):
        product = construct(Product, {'type': 'eggs', 'quantity': 3}, farm=farm.id)
        assert product.farm_id == farm.id

    def test_unknown_field_is_rejected(self, farm):
        with pytest.raises(InvalidInput) as exc_info:
            construct(Bird, {'batch_number': 'B', 'breed': 'X', 'colour': 'brown'}, farm=farm)
        assert exc_info.value.field == 'colour'
        assert Bird.objects.count() == 0

    @pytest.mark.parametrize('field', ['id', 'created_at', 'available'])
    def test_read_only_fields_are_rejected(self, farm, field):
        with pytest.raises(InvalidInput) as exc_info:
            construct(Product, {'type': 'eggs', field: 'x'}, farm=farm)
        assert 'read-only' in exc_info.value.reason

    def test_unknown_enum_value_is_rejected(self, farm):
        with pytest.raises(InvalidInput) as exc_info:
            construct(Product, {'type': 'feathers'}, farm=farm)
        assert exc_info.value.field == 'type'

    def test_non_positive_transaction_amount_is_rejected(self, farm):
        with pytest.raises(InvalidInput):
            construct(Transaction, {'type': 'sale', 'category': 'eggs', 'amount': '0'}, farm=farm)

    def test_negative_bird_weight_is_rejected(self, farm):
        with pytest.raises(InvalidInput):
            construct(Bird, {'batch_number': 'B', 'breed': 'X', 'weight': '-1'}, farm=farm)

    def test_available_is_derived_from_quantity(self, farm):
        stocked = construct(Product, {'type': 'eggs', 'quantity': 4}, farm=farm)
        empty = construct(Product, {'type': 'meat', 'quantity': 0}, farm=farm)

        assert stocked.available is True
        assert empty.available is False

    def test_farm_stock_cannot_exceed_capacity(self):
        with pytest.raises(InvalidInput) as exc_info:
            construct(Farm, {'owner_id': 'owner-1', 'name': 'Tiny', 'capacity': 10, 'current_stock': 11})
        assert exc_info.value.field == 'current_stock'


@pytest.mark.django_db
class TestUpdate:

    def test_partial_update_sets_updated_at(self, egg_product):
        product = update(egg_product, {'price': '40.00'})

        product.refresh_from_db()
        assert product.price == Decimal('40.00')
        assert product.name == 'Fresh Eggs (Crate)'
        assert product.updated_at is not None

    def test_quantity_change_recomputes_available(self, egg_product):
        product = update(egg_product, {'quantity': 0})
        assert product.available is False

        product = update(product, {'quantity': 3})
        assert product.available is True

    def test_farm_cannot_be_changed(self, egg_product, other_farm):
        with pytest.raises(InvalidInput):
            update(egg_product, {'farm': other_farm.id})

    def test_owner_cannot_be_changed(self, farm):
        with pytest.raises(InvalidInput):
            update(farm, {'owner_id': 'someone-else'})

    def test_invalid_value_leaves_record_unchanged(self, egg_product):
        with pytest.raises(InvalidInput):
            update(egg_product, {'quality': 'legendary'})

        egg_product.refresh_from_db()
        assert egg_product.quality == 'standard'


@pytest.mark.django_db
class TestRepository:

    def test_get_missing_and_malformed_ids(self):
        products = EntityRepository(Product)
        assert products.get(uuid.uuid4()) is None
        assert products.get('not-a-uuid') is None
        assert products.get(None) is None

    def test_require_raises_not_found_with_kind(self):
        with pytest.raises(NotFound) as exc_info:
            EntityRepository(Product).require(uuid.uuid4())
        assert exc_info.value.kind == 'Product'

    def test_remove_returns_removed_record(self, egg_product):
        removed = EntityRepository(Product).remove(egg_product.id)

        assert removed.id == egg_product.id
        assert not Product.objects.filter(pk=egg_product.id).exists()
        assert EntityRepository(Product).remove(egg_product.id) is None

    def test_values_and_for_farm_are_ordered(self, farm, other_farm):
        first = Product.objects.create(farm=farm, type='eggs', quantity=1)
        second = Product.objects.create(farm=farm, type='meat', quantity=1)
        Product.objects.create(farm=other_farm, type='eggs', quantity=1)

        assert [p.id for p in EntityRepository(Product).for_farm(farm.id)] == [first.id, second.id]
        assert EntityRepository(Product).values().count() == 3

    def test_removing_farm_removes_its_records(self, farm, egg_product):
        EntityRepository(Farm).remove(farm.id)
        assert not Product.objects.filter(pk=egg_product.id).exists()
