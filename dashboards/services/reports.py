"""
Farm Report Assembly

Turns aggregator output into plain JSON-ready dicts:
- ids as strings, money and ratios as floats, datetimes as ISO-8601
- no timestamps of its own, so two builds over unchanged records are equal

The ``get_*`` functions wrap the builders with the report cache and return
{'report': ..., 'cached_at': ...}.
"""

import logging
from typing import Any, Dict, Optional

from core.exceptions import InvalidInput
from dashboards.models import Analytics, AnalyticsPeriod
from dashboards.services.aggregators import FarmMetricsAggregator
from dashboards.services.alerts import FarmAlertService
from dashboards.services.report_cache import cached_report

logger = logging.getLogger(__name__)


def _iso(value) -> Optional[str]:
    return value.isoformat() if value else None


def serialize_transaction(txn) -> Dict[str, Any]:
    return {
        'id': str(txn.id),
        'type': txn.type,
        'category': txn.category,
        'amount': float(txn.amount),
        'status': txn.status,
        'transaction_date': _iso(txn.transaction_date),
        'description': txn.description,
    }


def serialize_health_record(record) -> Dict[str, Any]:
    return {
        'id': str(record.id),
        'batch_number': record.batch_number,
        'type': record.type,
        'description': record.description,
        'affected_count': record.affected_count,
        'treatment': record.treatment,
        'next_follow_up': _iso(record.next_follow_up),
        'created_at': _iso(record.created_at),
    }


def serialize_inventory_item(item) -> Dict[str, Any]:
    return {
        'id': str(item.id),
        'name': item.name,
        'type': item.type,
        'quantity': float(item.quantity),
        'unit': item.unit,
        'minimum_threshold': float(item.minimum_threshold),
        'cost': float(item.cost),
    }


def serialize_analytics(snapshot) -> Dict[str, Any]:
    return {
        'id': str(snapshot.id),
        'period': snapshot.period,
        'metrics': snapshot.metrics,
        'generated_at': _iso(snapshot.generated_at),
    }


class FarmReportService:
    """
    Assembles the exposed report shapes for one farm.

    Usage:
        from dashboards.services.reports import FarmReportService

        reports = FarmReportService(farm_id)
        financial = reports.build_financial_report(start_date=date(2025, 1, 1))
        health = reports.build_health_report()
    """

    def __init__(self, farm_id):
        self.aggregator = FarmMetricsAggregator(farm_id)
        self.farm = self.aggregator.farm

    def build_financial_report(self, start_date=None, end_date=None, mode='summary') -> Dict[str, Any]:
        financial = self.aggregator.financial_report(start_date, end_date, mode)

        by_category = financial['transactions_by_category']
        if mode == 'detailed':
            by_category = {
                category: [serialize_transaction(txn) for txn in transactions]
                for category, transactions in by_category.items()
            }

        return {
            'farm_id': str(self.farm.id),
            'start_date': _iso(start_date),
            'end_date': _iso(end_date),
            'mode': mode,
            'total_sales': financial['total_sales'],
            'total_expenses': financial['total_expenses'],
            'total_investments': financial['total_investments'],
            'net_profit': financial['net_profit'],
            'transactions_by_category': by_category,
        }

    def build_health_report(self, now=None) -> Dict[str, Any]:
        health = self.aggregator.health_report(now)
        return {
            'farm_id': str(self.farm.id),
            'total_vaccinations': health['total_vaccinations'],
            'active_diseases': [serialize_health_record(r) for r in health['active_diseases']],
            'upcoming_follow_ups': [serialize_health_record(r) for r in health['upcoming_follow_ups']],
        }

    def build_analytics_report(self, period=None) -> Dict[str, Any]:
        """Stored analytics snapshots, oldest first, with the latest one split out."""
        if period and period not in AnalyticsPeriod.values:
            raise InvalidInput('period', f"must be one of {AnalyticsPeriod.values}")

        snapshots = Analytics.objects.filter(farm=self.farm)
        if period:
            snapshots = snapshots.filter(period=period)
        snapshots = [serialize_analytics(s) for s in snapshots.order_by('generated_at', 'created_at')]

        return {
            'farm_id': str(self.farm.id),
            'period': period,
            'count': len(snapshots),
            'latest': snapshots[-1] if snapshots else None,
            'snapshots': snapshots,
        }

    def build_low_stock_report(self) -> Dict[str, Any]:
        items = FarmAlertService().low_stock_inventory(self.farm.id)
        return {
            'farm_id': str(self.farm.id),
            'count': len(items),
            'items': [serialize_inventory_item(item) for item in items],
        }


# =============================================================================
# Module-level builders and their cached variants
# =============================================================================

def build_financial_report(farm_id, start_date=None, end_date=None, mode='summary'):
    return FarmReportService(farm_id).build_financial_report(start_date, end_date, mode)


def build_health_report(farm_id, now=None):
    return FarmReportService(farm_id).build_health_report(now)


def build_analytics_report(farm_id, period=None):
    return FarmReportService(farm_id).build_analytics_report(period)


def build_low_stock_report(farm_id):
    return FarmReportService(farm_id).build_low_stock_report()


get_financial_report = cached_report('financial')(build_financial_report)
get_health_report = cached_report('health')(build_health_report)
get_analytics_report = cached_report('analytics')(build_analytics_report)
get_low_stock_report = cached_report('low_stock')(build_low_stock_report)
