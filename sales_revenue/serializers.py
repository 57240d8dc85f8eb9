"""
Sales & Revenue Serializers

Render products, transactions and orders. Writes for products and
transactions go through core.entities; orders are created by the
order fulfillment service from OrderCreateSerializer input.
"""

from rest_framework import serializers

from .models import Order, OrderItem, OrderStatus, PaymentStatus, Product, Transaction


class ProductSerializer(serializers.ModelSerializer):
    type_display = serializers.CharField(source='get_type_display', read_only=True)

    class Meta:
        model = Product
        fields = [
            'id', 'farm', 'name', 'type', 'type_display', 'quantity', 'unit',
            'price', 'available', 'quality', 'created_at', 'updated_at'
        ]
        read_only_fields = fields


class TransactionSerializer(serializers.ModelSerializer):

    class Meta:
        model = Transaction
        fields = [
            'id', 'farm', 'type', 'category', 'amount', 'status',
            'transaction_date', 'description', 'created_at', 'updated_at'
        ]
        read_only_fields = fields


class OrderItemSerializer(serializers.ModelSerializer):

    class Meta:
        model = OrderItem
        fields = ['product', 'quantity', 'price', 'line_total']
        read_only_fields = fields


class OrderSerializer(serializers.ModelSerializer):
    items = OrderItemSerializer(many=True, read_only=True)

    class Meta:
        model = Order
        fields = [
            'id', 'farm', 'customer_id', 'items', 'total_amount', 'status',
            'payment_status', 'delivery_address', 'delivery_date', 'delivery_notes',
            'created_at', 'updated_at'
        ]
        read_only_fields = fields


class StrictSerializer(serializers.Serializer):
    """Rejects keys that are not declared fields."""

    def to_internal_value(self, data):
        if isinstance(data, dict):
            unknown = set(data) - set(self.fields)
            if unknown:
                raise serializers.ValidationError(
                    {field: ['Unknown field.'] for field in sorted(unknown)}
                )
        return super().to_internal_value(data)


class LineItemSerializer(StrictSerializer):
    product_id = serializers.UUIDField()
    quantity = serializers.IntegerField(min_value=1)
    price = serializers.DecimalField(max_digits=12, decimal_places=2, min_value=0)


class DeliveryInfoSerializer(StrictSerializer):
    address = serializers.CharField(required=False, allow_blank=True)
    date = serializers.DateTimeField(required=False)
    notes = serializers.CharField(required=False, allow_blank=True)


class OrderCreateSerializer(StrictSerializer):
    """Input for POST /api/sales/orders/."""
    farm = serializers.UUIDField()
    customer_id = serializers.CharField(max_length=128)
    items = LineItemSerializer(many=True, allow_empty=False)
    delivery_info = DeliveryInfoSerializer(required=False)


class OrderStatusSerializer(StrictSerializer):
    status = serializers.ChoiceField(choices=OrderStatus.choices)


class PaymentStatusSerializer(StrictSerializer):
    payment_status = serializers.ChoiceField(choices=PaymentStatus.choices)
