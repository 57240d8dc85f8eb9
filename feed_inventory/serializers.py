"""
Feed Inventory Serializers
"""

from rest_framework import serializers

from .models import Feed, Inventory


class InventorySerializer(serializers.ModelSerializer):
    type_display = serializers.CharField(source='get_type_display', read_only=True)

    class Meta:
        model = Inventory
        fields = [
            'id', 'farm', 'name', 'type', 'type_display', 'quantity', 'unit',
            'minimum_threshold', 'cost', 'low_stock_alert', 'created_at', 'updated_at'
        ]
        read_only_fields = fields


class FeedSerializer(serializers.ModelSerializer):
    is_expired = serializers.BooleanField(read_only=True)

    class Meta:
        model = Feed
        fields = [
            'id', 'name', 'quantity', 'purchase_date', 'expiry_date',
            'is_expired', 'created_at', 'updated_at'
        ]
        read_only_fields = fields
