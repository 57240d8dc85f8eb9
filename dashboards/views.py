"""
Farm Report Views

Endpoints:
- GET  /api/dashboards/farms/{farm_id}/financial/ - Financial report
- GET  /api/dashboards/farms/{farm_id}/health/ - Health report
- GET  /api/dashboards/farms/{farm_id}/analytics/ - Stored analytics snapshots
- POST /api/dashboards/farms/{farm_id}/analytics/ - Generate a new snapshot
- GET  /api/dashboards/farms/{farm_id}/low-stock/ - Low-stock inventory

Report responses carry ``cached_at``; pass ``?refresh=true`` to rebuild.
"""

import logging

from rest_framework import status
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from core.api import resolve_owned_farm
from .serializers import (
    AnalyticsGenerateSerializer,
    AnalyticsQuerySerializer,
    FinancialReportQuerySerializer,
    RefreshQuerySerializer,
)
from .services.aggregators import FarmMetricsAggregator
from .services.reports import (
    get_analytics_report,
    get_financial_report,
    get_health_report,
    get_low_stock_report,
    serialize_analytics,
)

logger = logging.getLogger(__name__)


class BaseFarmReportView(APIView):
    """Base class for farm report views"""
    permission_classes = [IsAuthenticated]

    def get_farm(self, request, farm_id):
        return resolve_owned_farm(request, farm_id)

    def respond(self, entry):
        return Response({**entry['report'], 'cached_at': entry['cached_at']})


class FinancialReportView(BaseFarmReportView):
    """
    GET /api/dashboards/farms/{farm_id}/financial/

    Query Parameters:
        start_date (date): inclusive lower bound on transaction_date
        end_date (date): inclusive upper bound on transaction_date
        mode (str): "summary" (default) or "detailed"
    """

    def get(self, request, farm_id):
        farm = self.get_farm(request, farm_id)
        params = FinancialReportQuerySerializer(data=request.query_params)
        params.is_valid(raise_exception=True)
        data = params.validated_data

        entry = get_financial_report(
            farm.id,
            start_date=data.get('start_date'),
            end_date=data.get('end_date'),
            mode=data['mode'],
            use_cache=not data['refresh'],
        )
        return self.respond(entry)


class HealthReportView(BaseFarmReportView):
    """GET /api/dashboards/farms/{farm_id}/health/"""

    def get(self, request, farm_id):
        farm = self.get_farm(request, farm_id)
        params = RefreshQuerySerializer(data=request.query_params)
        params.is_valid(raise_exception=True)

        entry = get_health_report(farm.id, use_cache=not params.validated_data['refresh'])
        return self.respond(entry)


class AnalyticsReportView(BaseFarmReportView):
    """
    GET  /api/dashboards/farms/{farm_id}/analytics/?period=monthly
    POST /api/dashboards/farms/{farm_id}/analytics/  {"period": "monthly"}
    """

    def get(self, request, farm_id):
        farm = self.get_farm(request, farm_id)
        params = AnalyticsQuerySerializer(data=request.query_params)
        params.is_valid(raise_exception=True)

        entry = get_analytics_report(
            farm.id,
            period=params.validated_data.get('period'),
            use_cache=not params.validated_data['refresh'],
        )
        return self.respond(entry)

    def post(self, request, farm_id):
        farm = self.get_farm(request, farm_id)
        body = AnalyticsGenerateSerializer(data=request.data)
        body.is_valid(raise_exception=True)

        snapshot = FarmMetricsAggregator(farm.id).generate_analytics(
            body.validated_data['period']
        )
        return Response(serialize_analytics(snapshot), status=status.HTTP_201_CREATED)


class LowStockReportView(BaseFarmReportView):
    """GET /api/dashboards/farms/{farm_id}/low-stock/"""

    def get(self, request, farm_id):
        farm = self.get_farm(request, farm_id)
        params = RefreshQuerySerializer(data=request.query_params)
        params.is_valid(raise_exception=True)

        entry = get_low_stock_report(farm.id, use_cache=not params.validated_data['refresh'])
        return self.respond(entry)
