"""
Dashboard services module
"""

from .aggregators import FarmMetricsAggregator
from .alerts import FarmAlertService
from .reports import FarmReportService

__all__ = [
    'FarmMetricsAggregator',
    'FarmAlertService',
    'FarmReportService',
]
