"""
Views for Sales & Revenue.

API Endpoints:
- /api/sales/products/ - Product CRUD (farm-scoped)
- /api/sales/transactions/ - Transaction CRUD (farm-scoped)
- /api/sales/orders/ - List orders / place an order (reserves stock)
- /api/sales/orders/{id}/status/ - Move an order through its lifecycle
- /api/sales/orders/{id}/payment/ - Update payment status
"""

import logging

from rest_framework import mixins, status, viewsets
from rest_framework.decorators import action
from rest_framework.response import Response

from core.api import FarmScopedViewSet, IsFarmOwnerOrAdmin, owner_key, resolve_owned_farm
from .models import Order, Product, Transaction
from .serializers import (
    OrderCreateSerializer,
    OrderSerializer,
    OrderStatusSerializer,
    PaymentStatusSerializer,
    ProductSerializer,
    TransactionSerializer,
)
from .services.order_fulfillment import OrderFulfillmentService

logger = logging.getLogger(__name__)


class ProductViewSet(FarmScopedViewSet):
    """
    ViewSet for farm products.

    ``available`` is derived from quantity and cannot be written.
    """
    model = Product
    serializer_class = ProductSerializer
    filterset_fields = ['type', 'available']
    search_fields = ['name']


class TransactionViewSet(FarmScopedViewSet):
    """ViewSet for financial transactions."""
    model = Transaction
    serializer_class = TransactionSerializer
    filterset_fields = ['type', 'category', 'status']


class OrderViewSet(mixins.ListModelMixin,
                   mixins.RetrieveModelMixin,
                   viewsets.GenericViewSet):
    """
    ViewSet for customer orders.

    Orders are created only through the fulfillment service and are never
    edited directly; status changes use the dedicated actions.

    Endpoints:
    - GET /api/sales/orders/ - List orders
    - POST /api/sales/orders/ - Place an order
    - GET /api/sales/orders/{id}/ - Order detail
    - POST /api/sales/orders/{id}/status/ - Change order status
    - POST /api/sales/orders/{id}/payment/ - Change payment status
    """
    serializer_class = OrderSerializer
    permission_classes = [IsFarmOwnerOrAdmin]
    lookup_field = 'id'
    filterset_fields = ['status', 'payment_status']

    def get_queryset(self):
        queryset = Order.objects.prefetch_related('items')
        user = self.request.user
        if not user.is_staff:
            queryset = queryset.filter(farm__owner_id=owner_key(user))
        return queryset.order_by('created_at')

    def create(self, request, *args, **kwargs):
        serializer = OrderCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        farm = resolve_owned_farm(request, data['farm'])

        line_items = [
            {
                'product_id': item['product_id'],
                'quantity': item['quantity'],
                'price': item['price'],
            }
            for item in data['items']
        ]
        order = OrderFulfillmentService().create_order(
            farm.id,
            data['customer_id'],
            line_items,
            delivery_info=data.get('delivery_info'),
        )
        order = Order.objects.prefetch_related('items').get(pk=order.pk)
        return Response(OrderSerializer(order).data, status=status.HTTP_201_CREATED)

    @action(detail=True, methods=['post'], url_path='status')
    def change_status(self, request, id=None):
        order = self.get_object()
        serializer = OrderStatusSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        order = OrderFulfillmentService().update_order_status(
            order.id, serializer.validated_data['status']
        )
        return Response(OrderSerializer(order).data)

    @action(detail=True, methods=['post'], url_path='payment')
    def change_payment_status(self, request, id=None):
        order = self.get_object()
        serializer = PaymentStatusSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        order = OrderFulfillmentService().update_payment_status(
            order.id, serializer.validated_data['payment_status']
        )
        return Response(OrderSerializer(order).data)
