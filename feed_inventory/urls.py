"""
Feed Inventory URL Configuration
"""

from django.urls import include, path
from rest_framework.routers import DefaultRouter

from .views import FeedViewSet, InventoryViewSet

router = DefaultRouter()
router.register(r'inventory', InventoryViewSet, basename='inventory')
router.register(r'feeds', FeedViewSet, basename='feed')

app_name = 'feed_inventory'

urlpatterns = [
    path('', include(router.urls)),
]
