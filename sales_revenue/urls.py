"""
URL configuration for Sales & Revenue.

Endpoints:
- /api/sales/products/ - Product CRUD
- /api/sales/transactions/ - Transaction CRUD
- /api/sales/orders/ - Orders (create reserves stock)
"""

from django.urls import path, include
from rest_framework.routers import DefaultRouter

from .views import OrderViewSet, ProductViewSet, TransactionViewSet

# Create router for viewsets
router = DefaultRouter()
router.register(r'products', ProductViewSet, basename='product')
router.register(r'transactions', TransactionViewSet, basename='transaction')
router.register(r'orders', OrderViewSet, basename='order')

app_name = 'sales_revenue'

urlpatterns = [
    path('', include(router.urls)),
]
