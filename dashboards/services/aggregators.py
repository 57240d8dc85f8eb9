"""
Farm Metrics Aggregators

Derives operational figures from the stored entity collections of one farm:
1. Financial totals - sales, expenses, investments, net profit, per-category breakdown
2. Health summary - vaccinations, active disease cases, upcoming follow-ups
3. Analytics metrics - mortality rate, feed conversion, production rate, profit margin

Every ratio guards its denominator: an empty farm reports 0, never NaN or
Infinity. Ratios are rounded to 2 decimal places.
"""

import logging
from datetime import date, datetime
from decimal import Decimal
from typing import Any, Dict, List

from django.conf import settings
from django.db.models import Q, Sum
from django.db.models.functions import Coalesce
from django.utils import timezone
from django.utils.module_loading import import_string

from core.exceptions import InvalidInput
from core.repository import EntityRepository
from dashboards.models import Analytics, AnalyticsPeriod
from farms.models import Farm
from flock_management.models import Bird, BirdStatus, HealthRecord, HealthRecordType
from sales_revenue.models import Transaction, TransactionStatus, TransactionType

logger = logging.getLogger(__name__)

REPORT_MODES = ('summary', 'detailed')


def _farm_ops_setting(name, default=None):
    return getattr(settings, 'FARM_OPS', {}).get(name, default)


def _ratio(numerator, denominator, scale=1) -> float:
    """numerator / denominator * scale, or 0 when the denominator is 0."""
    if not denominator:
        return 0.0
    return round(float(numerator) / float(denominator) * scale, 2)


class FarmMetricsAggregator:
    """
    Metric aggregation for a single farm.

    Usage:
        from dashboards.services.aggregators import FarmMetricsAggregator

        aggregator = FarmMetricsAggregator(farm_id)

        financial = aggregator.financial_report(start_date=date(2025, 1, 1))
        health = aggregator.health_report()
        metrics = aggregator.analytics_metrics('monthly')
        snapshot = aggregator.generate_analytics('monthly')
    """

    def __init__(self, farm_id):
        self.farm = EntityRepository(Farm).require(farm_id)

    # =========================================================================
    # 1. FINANCIAL
    # =========================================================================

    def _transactions(self, start_date=None, end_date=None):
        queryset = EntityRepository(Transaction).for_farm(self.farm.id)

        if _farm_ops_setting('FINANCIAL_COMPLETED_ONLY', True):
            queryset = queryset.filter(status=TransactionStatus.COMPLETED)

        if start_date and end_date and _as_comparable(start_date) > _as_comparable(end_date):
            raise InvalidInput('start_date', 'must not be later than end_date')

        if start_date:
            if isinstance(start_date, datetime):
                queryset = queryset.filter(transaction_date__gte=start_date)
            else:
                queryset = queryset.filter(transaction_date__date__gte=start_date)
        if end_date:
            if isinstance(end_date, datetime):
                queryset = queryset.filter(transaction_date__lte=end_date)
            else:
                queryset = queryset.filter(transaction_date__date__lte=end_date)
        return queryset

    def financial_report(self, start_date=None, end_date=None, mode='summary') -> Dict[str, Any]:
        """
        Financial totals for the farm, optionally within [start_date, end_date].

        Both bounds are inclusive and may be dates or datetimes.

        Returns:
            total_sales, total_expenses, total_investments, net_profit
            (= total_sales - total_expenses) and transactions_by_category:
            category -> summed amount ("summary") or category -> list of
            transactions ("detailed").
        """
        if mode not in REPORT_MODES:
            raise InvalidInput('mode', f"must be one of {list(REPORT_MODES)}")

        transactions = self._transactions(start_date, end_date)

        totals = transactions.aggregate(
            total_sales=Coalesce(
                Sum('amount', filter=Q(type=TransactionType.SALE)), Decimal('0')
            ),
            total_expenses=Coalesce(
                Sum('amount', filter=Q(type=TransactionType.EXPENSE)), Decimal('0')
            ),
            total_investments=Coalesce(
                Sum('amount', filter=Q(type=TransactionType.INVESTMENT)), Decimal('0')
            ),
        )

        if mode == 'summary':
            by_category = {
                row['category']: float(row['total'])
                for row in transactions.values('category').annotate(
                    total=Sum('amount')
                ).order_by('category')
            }
        else:
            by_category = {}
            for txn in transactions.order_by('category', 'transaction_date', 'id'):
                by_category.setdefault(txn.category, []).append(txn)

        return {
            'total_sales': float(totals['total_sales']),
            'total_expenses': float(totals['total_expenses']),
            'total_investments': float(totals['total_investments']),
            'net_profit': float(totals['total_sales'] - totals['total_expenses']),
            'transactions_by_category': by_category,
        }

    # =========================================================================
    # 2. HEALTH
    # =========================================================================

    def health_report(self, now=None) -> Dict[str, Any]:
        """
        Health summary for the farm.

        ``now`` fixes the reference time for upcoming follow-ups
        (defaults to the current time).
        """
        records = EntityRepository(HealthRecord).for_farm(self.farm.id)

        return {
            'total_vaccinations': records.filter(type=HealthRecordType.VACCINATION).count(),
            'active_diseases': list(
                records.filter(type=HealthRecordType.DISEASE).filter(
                    Q(treatment__isnull=True) | Q(treatment='')
                )
            ),
            'upcoming_follow_ups': self.upcoming_follow_ups(now),
        }

    def upcoming_follow_ups(self, now=None) -> List[HealthRecord]:
        """Health records whose next follow-up is strictly after ``now``."""
        now = now or timezone.now()
        return list(
            EntityRepository(HealthRecord).for_farm(self.farm.id).filter(
                next_follow_up__gt=now
            ).order_by('next_follow_up', 'id')
        )

    # =========================================================================
    # 3. ANALYTICS
    # =========================================================================

    def analytics_metrics(self, period) -> Dict[str, float]:
        """
        Compute the analytics metrics for the farm.

        - mortality_rate: deceased birds / all birds * 100
        - feed_conversion_ratio: feed consumed / total live weight
        - production_rate: from FARM_OPS['PRODUCTION_RATE_CALCULATOR'], else 0
        - revenue / expenses: financial totals
        - profit_margin: (revenue - expenses) / revenue * 100
        """
        self._check_period(period)

        birds = EntityRepository(Bird).for_farm(self.farm.id)
        flock = birds.aggregate(
            total_birds=Coalesce(Sum('quantity'), 0),
            deceased_birds=Coalesce(
                Sum('quantity', filter=Q(status=BirdStatus.DECEASED)), 0
            ),
            total_feed=Coalesce(Sum('feed_consumption'), Decimal('0')),
        )
        total_weight = sum(
            (weight * quantity for weight, quantity in birds.values_list('weight', 'quantity')),
            Decimal('0')
        )

        financial = self.financial_report()
        revenue = financial['total_sales']
        expenses = financial['total_expenses']

        metrics = {
            'mortality_rate': _ratio(flock['deceased_birds'], flock['total_birds'], 100),
            'feed_conversion_ratio': _ratio(flock['total_feed'], total_weight),
            'production_rate': self._production_rate(period),
            'revenue': round(revenue, 2),
            'expenses': round(expenses, 2),
            'profit_margin': _ratio(revenue - expenses, revenue, 100),
        }
        logger.debug(f"Analytics metrics for farm {self.farm.id} ({period}): {metrics}")
        return metrics

    def generate_analytics(self, period, generated_at=None) -> Analytics:
        """Compute metrics and append a new Analytics snapshot."""
        metrics = self.analytics_metrics(period)
        snapshot = Analytics.objects.create(
            farm=self.farm,
            period=period,
            metrics=metrics,
            generated_at=generated_at or timezone.now(),
        )
        logger.info(f"Generated {period} analytics {snapshot.id} for farm {self.farm.id}")
        return snapshot

    def _production_rate(self, period) -> float:
        path = _farm_ops_setting('PRODUCTION_RATE_CALCULATOR')
        if not path:
            return 0.0
        calculator = import_string(path)
        return round(float(calculator(self.farm.id, period) or 0), 2)

    @staticmethod
    def _check_period(period):
        if period not in AnalyticsPeriod.values:
            raise InvalidInput('period', f"must be one of {AnalyticsPeriod.values}")


def _as_comparable(value):
    # Compare dates and datetimes on the calendar day when they are mixed
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    raise InvalidInput('date', f"'{value}' is not a date")


# =============================================================================
# Module-level operations
# =============================================================================

def financial_report(farm_id, start_date=None, end_date=None, mode='summary'):
    return FarmMetricsAggregator(farm_id).financial_report(start_date, end_date, mode)


def health_report(farm_id, now=None):
    return FarmMetricsAggregator(farm_id).health_report(now)


def analytics_metrics(farm_id, period):
    return FarmMetricsAggregator(farm_id).analytics_metrics(period)


def generate_analytics(farm_id, period, generated_at=None):
    return FarmMetricsAggregator(farm_id).generate_analytics(period, generated_at)
