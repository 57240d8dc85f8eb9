"""
Report Cache

Bounded TTL cache around report assembly, backed by the Django cache
(LocMemCache with MAX_ENTRIES in development, Redis in production).

- Key: report name + farm + a hash of the call arguments + the farm's
  report version
- Value: {'report': <assembled report>, 'cached_at': <ISO timestamp>}
- TTL: FARM_OPS['REPORT_CACHE_TTL'] seconds

Any write to a farm-scoped record bumps the farm's report version (see
dashboards.signals), so cached reports never outlive the data they were
built from.

Usage:
    from dashboards.services.report_cache import cached_report

    @cached_report('financial')
    def get_financial_report(farm_id, start_date=None, end_date=None):
        ...
"""

import hashlib
import inspect
import logging
from functools import wraps
from typing import Any, Callable, Dict

from django.conf import settings
from django.core.cache import cache
from django.utils import timezone

logger = logging.getLogger(__name__)

CACHE_PREFIX = 'farm_report'


def _farm_ops_setting(name, default=None):
    return getattr(settings, 'FARM_OPS', {}).get(name, default)


def _version_key(farm_id) -> str:
    return f"{CACHE_PREFIX}:version:{str(farm_id).lower()}"


def _fresh_version() -> int:
    # Time based so a lost version key never resurrects older entries
    return int(timezone.now().timestamp() * 1000)


def get_report_version(farm_id) -> int:
    """Current report version of a farm."""
    key = _version_key(farm_id)
    version = cache.get(key)
    if version is None:
        cache.add(key, _fresh_version(), timeout=None)
        version = cache.get(key) or _fresh_version()
    return version


def invalidate_farm_reports(farm_id):
    """Make every cached report of ``farm_id`` unreachable."""
    key = _version_key(farm_id)
    try:
        cache.incr(key)
    except ValueError:
        # Version key missing or evicted
        cache.set(key, _fresh_version(), timeout=None)
    logger.debug(f"Report cache invalidated for farm {farm_id}")


def _get_cache_key(report_name: str, farm_id, arguments: Dict[str, Any]) -> str:
    """Generate consistent cache key."""
    signature = '&'.join(f"{name}={arguments[name]!s}" for name in sorted(arguments))
    digest = hashlib.md5(signature.encode('utf-8')).hexdigest()
    version = get_report_version(farm_id)
    return f"{CACHE_PREFIX}:{report_name}:{str(farm_id).lower()}:v{version}:{digest}"


def cached_report(report_name: str) -> Callable:
    """
    Decorate a report builder whose first parameter is ``farm_id``.

    The decorated function returns {'report': ..., 'cached_at': ...}. Passing
    ``use_cache=False`` forces a rebuild and refreshes the cache entry.
    """
    def decorator(func):
        signature = inspect.signature(func)

        @wraps(func)
        def wrapper(*args, use_cache=True, **kwargs):
            bound = signature.bind(*args, **kwargs)
            bound.apply_defaults()
            arguments = dict(bound.arguments)
            farm_id = arguments.pop('farm_id')

            if not _farm_ops_setting('REPORT_CACHE_ENABLED', True):
                return {'report': func(*args, **kwargs), 'cached_at': timezone.now().isoformat()}

            key = _get_cache_key(report_name, farm_id, arguments)
            if use_cache:
                entry = cache.get(key)
                if entry is not None:
                    logger.debug(f"Report cache hit: {key}")
                    return entry

            entry = {
                'report': func(*args, **kwargs),
                'cached_at': timezone.now().isoformat(),
            }
            cache.set(key, entry, timeout=_farm_ops_setting('REPORT_CACHE_TTL', 300))
            return entry

        wrapper.uncached = func
        return wrapper

    return decorator
