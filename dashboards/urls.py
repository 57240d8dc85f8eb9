"""
Dashboard URL Configuration
"""

from django.urls import path
from .views import (
    AnalyticsReportView,
    FinancialReportView,
    HealthReportView,
    LowStockReportView,
)

app_name = 'dashboards'

urlpatterns = [
    # Farm report endpoints
    path('farms/<uuid:farm_id>/financial/', FinancialReportView.as_view(), name='financial-report'),
    path('farms/<uuid:farm_id>/health/', HealthReportView.as_view(), name='health-report'),
    path('farms/<uuid:farm_id>/analytics/', AnalyticsReportView.as_view(), name='analytics-report'),
    path('farms/<uuid:farm_id>/low-stock/', LowStockReportView.as_view(), name='low-stock-report'),
]
