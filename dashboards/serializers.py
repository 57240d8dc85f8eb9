"""
Serializers for dashboard report query parameters.
"""

from rest_framework import serializers

from .models import AnalyticsPeriod


class FinancialReportQuerySerializer(serializers.Serializer):
    """Query parameters for the financial report"""
    start_date = serializers.DateField(required=False)
    end_date = serializers.DateField(required=False)
    mode = serializers.ChoiceField(choices=['summary', 'detailed'], default='summary')
    refresh = serializers.BooleanField(required=False, default=False)

    def validate(self, attrs):
        start_date = attrs.get('start_date')
        end_date = attrs.get('end_date')
        if start_date and end_date and start_date > end_date:
            raise serializers.ValidationError({
                'start_date': 'start_date must not be later than end_date'
            })
        return attrs


class AnalyticsQuerySerializer(serializers.Serializer):
    """Query parameters for listing analytics snapshots"""
    period = serializers.ChoiceField(choices=AnalyticsPeriod.choices, required=False)
    refresh = serializers.BooleanField(required=False, default=False)


class AnalyticsGenerateSerializer(serializers.Serializer):
    """Body for generating an analytics snapshot"""
    period = serializers.ChoiceField(choices=AnalyticsPeriod.choices)


class RefreshQuerySerializer(serializers.Serializer):
    refresh = serializers.BooleanField(required=False, default=False)
