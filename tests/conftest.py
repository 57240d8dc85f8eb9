"""
Shared pytest fixtures for farm operations tests.
"""
import pytest
from decimal import Decimal
from django.contrib.auth import get_user_model
from django.core.cache import cache
from rest_framework.test import APIClient

User = get_user_model()


@pytest.fixture(autouse=True)
def clear_cache():
    """Clear cache before and after each test to prevent pollution."""
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def api_client():
    """API client for making requests."""
    return APIClient()


@pytest.fixture
def farmer_user(db):
    """Create a farmer user."""
    return User.objects.create_user(
        username='test_farmer',
        email='farmer@example.com',
        password='testpass123',
    )


@pytest.fixture
def other_farmer_user(db):
    """Create a second farmer user who owns nothing of farmer_user's."""
    return User.objects.create_user(
        username='test_farmer_2',
        email='farmer2@example.com',
        password='testpass123',
    )


@pytest.fixture
def staff_user(db):
    return User.objects.create_user(
        username='test_staff',
        email='staff@example.com',
        password='testpass123',
        is_staff=True,
    )


@pytest.fixture
def farm(db, farmer_user):
    """Create a test farm owned by farmer_user."""
    from farms.models import Farm

    return Farm.objects.create(
        owner_id=str(farmer_user.pk),
        name='Green Valley Poultry',
        location='Kumasi',
        capacity=5000,
        current_stock=2000,
        employee_count=4,
    )


@pytest.fixture
def other_farm(db, other_farmer_user):
    from farms.models import Farm

    return Farm.objects.create(
        owner_id=str(other_farmer_user.pk),
        name='Hilltop Layers',
        location='Tamale',
        capacity=1000,
        current_stock=300,
    )


@pytest.fixture
def egg_product(db, farm):
    """Create an egg product with 10 crates in stock."""
    from sales_revenue.models import Product

    return Product.objects.create(
        farm=farm,
        name='Fresh Eggs (Crate)',
        type='eggs',
        quantity=10,
        unit='crate',
        price=Decimal('35.00'),
    )


@pytest.fixture
def meat_product(db, farm):
    from sales_revenue.models import Product

    return Product.objects.create(
        farm=farm,
        name='Dressed Chicken',
        type='meat',
        quantity=5,
        unit='kg',
        price=Decimal('60.00'),
        quality='premium',
    )


@pytest.fixture
def farmer_client(api_client, farmer_user):
    """API client authenticated as farmer_user."""
    api_client.force_authenticate(user=farmer_user)
    return api_client


@pytest.fixture
def staff_client(staff_user):
    client = APIClient()
    client.force_authenticate(user=staff_user)
    return client
