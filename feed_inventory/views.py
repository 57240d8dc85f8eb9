"""
Feed Inventory API Views

API Endpoints:
- /api/feed/inventory/ - Farm inventory CRUD (farm-scoped)
- /api/feed/feeds/ - Feed stock entries CRUD
- /api/feed/feeds/low-stock/?threshold=... - Feed entries below a threshold
"""

from rest_framework.decorators import action
from rest_framework.response import Response

from core.api import EntityViewSet, FarmScopedViewSet
from core.exceptions import InvalidInput
from .models import Feed, Inventory
from .serializers import FeedSerializer, InventorySerializer
from .services import FeedStockService


class InventoryViewSet(FarmScopedViewSet):
    """
    ViewSet for farm inventory.

    ``low_stock_alert`` is derived on save. Filter with ``?type=`` or
    ``?low_stock_alert=true``.
    """
    model = Inventory
    serializer_class = InventorySerializer
    filterset_fields = ['type', 'low_stock_alert']
    search_fields = ['name']


class FeedViewSet(EntityViewSet):
    """ViewSet for feed stock entries."""
    model = Feed
    serializer_class = FeedSerializer
    search_fields = ['name']

    @action(detail=False, methods=['get'], url_path='low-stock')
    def low_stock(self, request):
        threshold = request.query_params.get('threshold')
        if threshold is None:
            raise InvalidInput('threshold', 'is required')

        feeds = FeedStockService().low_stock_feeds(threshold)
        return Response(self.get_serializer(feeds, many=True).data)
