"""
Flock Management Serializers
"""

from rest_framework import serializers

from .models import Bird, Chicken, HealthRecord


class BirdSerializer(serializers.ModelSerializer):
    status_display = serializers.CharField(source='get_status_display', read_only=True)

    class Meta:
        model = Bird
        fields = [
            'id', 'farm', 'batch_number', 'breed', 'quantity', 'age', 'status',
            'status_display', 'weight', 'feed_consumption', 'created_at', 'updated_at'
        ]
        read_only_fields = fields


class HealthRecordSerializer(serializers.ModelSerializer):
    is_active_disease = serializers.BooleanField(read_only=True)

    class Meta:
        model = HealthRecord
        fields = [
            'id', 'farm', 'batch_number', 'type', 'description', 'affected_count',
            'treatment', 'next_follow_up', 'is_active_disease', 'created_at', 'updated_at'
        ]
        read_only_fields = fields


class ChickenSerializer(serializers.ModelSerializer):

    class Meta:
        model = Chicken
        fields = [
            'id', 'breed', 'age', 'weight', 'egg_production', 'vaccination_status',
            'last_health_check', 'created_at', 'updated_at'
        ]
        read_only_fields = fields
