"""
API Tests for the Farm Operations Endpoints

Tests cover:
1. Authentication and farm ownership scoping
2. Entity CRUD through the REST layer (unknown/read-only fields rejected)
3. Order placement and lifecycle actions
4. Chicken and feed actions
5. Dashboard report endpoints

Run with: pytest tests/integration/test_api_endpoints.py -v
"""

import uuid
from decimal import Decimal

import pytest
from rest_framework import status

from dashboards.models import Analytics
from feed_inventory.models import Feed, Inventory
from flock_management.models import Chicken, HealthRecord
from sales_revenue.models import Order, Product, Transaction


# =============================================================================
# AUTHENTICATION & SCOPING
# =============================================================================

@pytest.mark.django_db
class TestAuthentication:

    def test_unauthenticated_requests_are_rejected(self, api_client, farm):
        response = api_client.get('/api/farms/')
        assert response.status_code == status.HTTP_401_UNAUTHORIZED

        response = api_client.get(f'/api/dashboards/farms/{farm.id}/financial/')
        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_jwt_token_obtain(self, api_client, farmer_user):
        response = api_client.post('/api/auth/token/', {
            'username': 'test_farmer',
            'password': 'testpass123',
        }, format='json')

        assert response.status_code == status.HTTP_200_OK
        assert 'access' in response.data

        api_client.credentials(HTTP_AUTHORIZATION=f"Bearer {response.data['access']}")
        assert api_client.get('/api/farms/').status_code == status.HTTP_200_OK


@pytest.mark.django_db
class TestFarmEndpoints:

    def test_create_farm_sets_owner(self, farmer_client, farmer_user):
        response = farmer_client.post('/api/farms/', {
            'name': 'Sunrise Farm',
            'location': 'Accra',
            'capacity': 1000,
            'current_stock': 100,
        }, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['owner_id'] == str(farmer_user.pk)
        assert response.data['available_capacity'] == 900

    def test_farmer_cannot_create_farm_for_someone_else(self, farmer_client, farmer_user):
        response = farmer_client.post('/api/farms/', {
            'name': 'Sunrise Farm',
            'owner_id': 'someone-else',
        }, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['owner_id'] == str(farmer_user.pk)

    def test_stock_over_capacity_is_rejected(self, farmer_client):
        response = farmer_client.post('/api/farms/', {
            'name': 'Overfull', 'capacity': 10, 'current_stock': 50,
        }, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['code'] == 'invalid_input'
        assert response.data['detail']['field'] == 'current_stock'

    def test_list_only_shows_own_farms(self, farmer_client, farm, other_farm):
        response = farmer_client.get('/api/farms/')

        ids = [f['id'] for f in response.data['results']]
        assert ids == [str(farm.id)]

    def test_staff_sees_all_farms(self, staff_client, farm, other_farm):
        response = staff_client.get('/api/farms/')
        assert response.data['count'] == 2

    def test_other_owners_farm_is_not_found(self, farmer_client, other_farm):
        response = farmer_client.get(f'/api/farms/{other_farm.id}/')
        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_partial_update(self, farmer_client, farm):
        response = farmer_client.patch(f'/api/farms/{farm.id}/', {'employee_count': 9}, format='json')

        assert response.status_code == status.HTTP_200_OK
        assert response.data['employee_count'] == 9
        assert response.data['updated_at'] is not None

    def test_delete_farm(self, farmer_client, farm, egg_product):
        response = farmer_client.delete(f'/api/farms/{farm.id}/')

        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert not Product.objects.filter(pk=egg_product.id).exists()


# =============================================================================
# FARM-SCOPED ENTITIES
# =============================================================================

@pytest.mark.django_db
class TestFarmScopedEntities:

    def test_create_product(self, farmer_client, farm):
        response = farmer_client.post('/api/sales/products/', {
            'farm': str(farm.id),
            'name': 'Tray of Eggs',
            'type': 'eggs',
            'quantity': 12,
            'unit': 'tray',
            'price': '15.00',
        }, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['available'] is True
        assert response.data['farm'] == farm.id

    def test_writing_derived_field_is_rejected(self, farmer_client, farm):
        response = farmer_client.post('/api/sales/products/', {
            'farm': str(farm.id), 'type': 'eggs', 'quantity': 0, 'available': True,
        }, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['detail']['field'] == 'available'
        assert Product.objects.count() == 0

    def test_create_on_another_owners_farm_is_not_found(self, farmer_client, other_farm):
        response = farmer_client.post('/api/flocks/birds/', {
            'farm': str(other_farm.id), 'batch_number': 'B-1', 'breed': 'Cobb 500',
        }, format='json')

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_create_without_farm_is_rejected(self, farmer_client):
        response = farmer_client.post('/api/flocks/birds/', {
            'batch_number': 'B-1', 'breed': 'Cobb 500',
        }, format='json')
        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_filter_by_farm(self, staff_client, farm, other_farm):
        Transaction.objects.create(farm=farm, type='sale', category='eggs', amount=Decimal('5.00'))
        Transaction.objects.create(farm=other_farm, type='sale', category='eggs', amount=Decimal('7.00'))

        response = staff_client.get(f'/api/sales/transactions/?farm={farm.id}')
        assert response.data['count'] == 1

        response = staff_client.get('/api/sales/transactions/?farm=not-a-uuid')
        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_update_health_record(self, farmer_client, farm):
        record = HealthRecord.objects.create(farm=farm, batch_number='B-1', type='disease')

        response = farmer_client.patch(
            f'/api/flocks/health-records/{record.id}/', {'treatment': 'Amprolium'}, format='json'
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.data['is_active_disease'] is False

    def test_inventory_low_stock_filter(self, farmer_client, farm):
        Inventory.objects.create(
            farm=farm, name='Layer Mash', type='feed', unit='bags',
            quantity=Decimal('1'), minimum_threshold=Decimal('5'),
        )
        Inventory.objects.create(
            farm=farm, name='Vaccine', type='medicine', unit='doses',
            quantity=Decimal('50'), minimum_threshold=Decimal('5'),
        )

        response = farmer_client.get('/api/feed/inventory/?low_stock_alert=true')
        assert [i['name'] for i in response.data['results']] == ['Layer Mash']

    def test_transaction_type_filter(self, farmer_client, farm):
        Transaction.objects.create(farm=farm, type='sale', category='eggs', amount=Decimal('10'))
        Transaction.objects.create(farm=farm, type='expense', category='feed', amount=Decimal('4'))

        response = farmer_client.get('/api/sales/transactions/?type=expense')
        assert [t['category'] for t in response.data['results']] == ['feed']

    def test_product_available_filter(self, farmer_client, farm, egg_product):
        Product.objects.create(farm=farm, name='Sold out', type='eggs', quantity=0, price=Decimal('1.00'))

        response = farmer_client.get('/api/sales/products/?available=true')
        assert [p['id'] for p in response.data['results']] == [str(egg_product.id)]

    def test_health_record_type_filter(self, farmer_client, farm):
        HealthRecord.objects.create(farm=farm, batch_number='B-1', type='vaccination')
        HealthRecord.objects.create(farm=farm, batch_number='B-2', type='disease')

        response = farmer_client.get('/api/flocks/health-records/?type=disease')
        assert [r['batch_number'] for r in response.data['results']] == ['B-2']

    def test_unknown_choice_filter_is_rejected(self, farmer_client, farm):
        response = farmer_client.get('/api/sales/transactions/?type=gift')
        assert response.status_code == status.HTTP_400_BAD_REQUEST


# =============================================================================
# ORDERS
# =============================================================================

@pytest.mark.django_db
class TestOrderEndpoints:

    def _place(self, client, farm, product, quantity):
        return client.post('/api/sales/orders/', {
            'farm': str(farm.id),
            'customer_id': 'cust-42',
            'items': [{'product_id': str(product.id), 'quantity': quantity, 'price': '35.00'}],
            'delivery_info': {'address': 'Plot 7, Kumasi'},
        }, format='json')

    def test_place_order(self, farmer_client, farm, egg_product):
        response = self._place(farmer_client, farm, egg_product, 3)

        assert response.status_code == status.HTTP_201_CREATED
        assert Decimal(response.data['total_amount']) == Decimal('105.00')
        assert len(response.data['items']) == 1
        assert response.data['delivery_address'] == 'Plot 7, Kumasi'
        egg_product.refresh_from_db()
        assert egg_product.quantity == 7

    def test_insufficient_stock_is_a_conflict(self, farmer_client, farm, egg_product):
        response = self._place(farmer_client, farm, egg_product, 50)

        assert response.status_code == status.HTTP_409_CONFLICT
        assert response.data['code'] == 'insufficient_stock'
        assert response.data['detail']['available'] == 10
        assert Order.objects.count() == 0

    def test_unknown_body_field_is_rejected(self, farmer_client, farm, egg_product):
        response = farmer_client.post('/api/sales/orders/', {
            'farm': str(farm.id),
            'customer_id': 'cust-42',
            'items': [{'product_id': str(egg_product.id), 'quantity': 1, 'price': '35.00'}],
            'coupon': 'FREE',
        }, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_order_on_another_owners_farm_is_not_found(self, farmer_client, other_farm, egg_product):
        response = self._place(farmer_client, other_farm, egg_product, 1)
        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_cancel_via_status_action_restocks(self, farmer_client, farm, egg_product):
        order_id = self._place(farmer_client, farm, egg_product, 4).data['id']

        response = farmer_client.post(
            f'/api/sales/orders/{order_id}/status/', {'status': 'cancelled'}, format='json'
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.data['status'] == 'cancelled'
        egg_product.refresh_from_db()
        assert egg_product.quantity == 10

    def test_invalid_transition_is_rejected(self, farmer_client, farm, egg_product):
        order_id = self._place(farmer_client, farm, egg_product, 1).data['id']

        response = farmer_client.post(
            f'/api/sales/orders/{order_id}/status/', {'status': 'delivered'}, format='json'
        )
        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_payment_action(self, farmer_client, farm, egg_product):
        order_id = self._place(farmer_client, farm, egg_product, 1).data['id']

        response = farmer_client.post(
            f'/api/sales/orders/{order_id}/payment/', {'payment_status': 'paid'}, format='json'
        )
        assert response.data['payment_status'] == 'paid'

    def test_orders_are_not_editable(self, farmer_client, farm, egg_product):
        order_id = self._place(farmer_client, farm, egg_product, 1).data['id']

        response = farmer_client.patch(
            f'/api/sales/orders/{order_id}/', {'total_amount': '0.00'}, format='json'
        )
        assert response.status_code == status.HTTP_405_METHOD_NOT_ALLOWED


# =============================================================================
# CHICKENS & FEEDS
# =============================================================================

@pytest.mark.django_db
class TestChickenAndFeedEndpoints:

    def test_chicken_actions(self, farmer_client):
        chicken = Chicken.objects.create(breed='Isa Brown', egg_production=200)
        Chicken.objects.create(breed='Sussex', egg_production=100)

        response = farmer_client.get('/api/flocks/chickens/by-breed/', {'breed': 'Isa Brown'})
        assert [c['id'] for c in response.data] == [str(chicken.id)]

        response = farmer_client.get('/api/flocks/chickens/egg-production/')
        assert response.data == {'total_egg_production': 300}

        response = farmer_client.post(f'/api/flocks/chickens/{chicken.id}/vaccinate/')
        assert response.status_code == status.HTTP_200_OK
        assert response.data['vaccination_status'] is True

    def test_by_breed_requires_breed(self, farmer_client):
        response = farmer_client.get('/api/flocks/chickens/by-breed/')
        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_vaccinate_unknown_chicken(self, farmer_client):
        response = farmer_client.post(f'/api/flocks/chickens/{uuid.uuid4()}/vaccinate/')
        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_feed_low_stock(self, farmer_client):
        Feed.objects.create(name='Starter', quantity=Decimal('10'))
        Feed.objects.create(name='Finisher', quantity=Decimal('90'))

        response = farmer_client.get('/api/feed/feeds/low-stock/', {'threshold': '30'})
        assert [f['name'] for f in response.data] == ['Starter']

        response = farmer_client.get('/api/feed/feeds/low-stock/', {'threshold': 'lots'})
        assert response.status_code == status.HTTP_400_BAD_REQUEST


# =============================================================================
# DASHBOARD REPORTS
# =============================================================================

@pytest.mark.django_db
class TestDashboardEndpoints:

    def test_financial_report(self, farmer_client, farm):
        Transaction.objects.create(farm=farm, type='sale', category='eggs', amount=Decimal('120.00'))
        Transaction.objects.create(farm=farm, type='expense', category='feed', amount=Decimal('20.00'))

        response = farmer_client.get(f'/api/dashboards/farms/{farm.id}/financial/')

        assert response.status_code == status.HTTP_200_OK
        assert response.data['net_profit'] == 100.0
        assert response.data['transactions_by_category'] == {'eggs': 120.0, 'feed': 20.0}
        assert 'cached_at' in response.data

    def test_financial_report_detailed_with_range(self, farmer_client, farm):
        Transaction.objects.create(farm=farm, type='sale', category='eggs', amount=Decimal('120.00'))

        response = farmer_client.get(
            f'/api/dashboards/farms/{farm.id}/financial/',
            {'mode': 'detailed', 'start_date': '2000-01-01'},
        )

        assert response.data['mode'] == 'detailed'
        assert response.data['transactions_by_category']['eggs'][0]['amount'] == 120.0

    def test_financial_report_bad_range(self, farmer_client, farm):
        response = farmer_client.get(
            f'/api/dashboards/farms/{farm.id}/financial/',
            {'start_date': '2025-03-01', 'end_date': '2025-01-01'},
        )
        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_other_owners_report_is_not_found(self, farmer_client, other_farm):
        response = farmer_client.get(f'/api/dashboards/farms/{other_farm.id}/health/')
        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_unknown_farm_is_not_found(self, farmer_client):
        response = farmer_client.get(f'/api/dashboards/farms/{uuid.uuid4()}/low-stock/')
        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_generate_and_list_analytics(self, farmer_client, farm):
        response = farmer_client.post(
            f'/api/dashboards/farms/{farm.id}/analytics/', {'period': 'monthly'}, format='json'
        )

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['period'] == 'monthly'
        assert Analytics.objects.filter(farm=farm).count() == 1

        response = farmer_client.get(f'/api/dashboards/farms/{farm.id}/analytics/')
        assert response.data['count'] == 1
        assert response.data['latest']['metrics']['mortality_rate'] == 0

    def test_generate_analytics_unknown_period(self, farmer_client, farm):
        response = farmer_client.post(
            f'/api/dashboards/farms/{farm.id}/analytics/', {'period': 'yearly'}, format='json'
        )
        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_health_report_reflects_new_records(self, farmer_client, farm):
        url = f'/api/dashboards/farms/{farm.id}/health/'
        assert farmer_client.get(url).data['total_vaccinations'] == 0

        HealthRecord.objects.create(farm=farm, batch_number='B-1', type='vaccination')

        assert farmer_client.get(url).data['total_vaccinations'] == 1

    def test_low_stock_report(self, farmer_client, farm):
        Inventory.objects.create(
            farm=farm, name='Layer Mash', type='feed', unit='bags',
            quantity=Decimal('1'), minimum_threshold=Decimal('5'),
        )

        response = farmer_client.get(f'/api/dashboards/farms/{farm.id}/low-stock/')
        assert response.data['count'] == 1
