"""
Farm Serializers
"""

from rest_framework import serializers

from .models import Farm


class FarmSerializer(serializers.ModelSerializer):
    available_capacity = serializers.IntegerField(read_only=True)

    class Meta:
        model = Farm
        fields = [
            'id', 'owner_id', 'name', 'location', 'capacity', 'current_stock',
            'available_capacity', 'employee_count', 'created_at', 'updated_at'
        ]
        read_only_fields = fields
