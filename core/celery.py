"""
Celery configuration for the Poultry Farm Operations backend.

Background work handled here:
- Periodic analytics snapshots per farm (daily, weekly, monthly)
"""
import os
from celery import Celery
from celery.schedules import crontab

# Set the default Django settings module
os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'core.settings')

# Create Celery app
app = Celery('core')

# Load config from Django settings with CELERY_ prefix
app.config_from_object('django.conf:settings', namespace='CELERY')

# Auto-discover tasks in all installed apps
app.autodiscover_tasks()


# =============================================================================
# CELERY BEAT SCHEDULE - Periodic Tasks
# =============================================================================
app.conf.beat_schedule = {
    # Daily analytics snapshot (run at 1 AM)
    'generate-daily-analytics': {
        'task': 'dashboards.tasks.generate_periodic_analytics',
        'schedule': crontab(hour=1, minute=0),
        'args': ('daily',),
    },

    # Weekly analytics snapshot (run Monday 2 AM)
    'generate-weekly-analytics': {
        'task': 'dashboards.tasks.generate_periodic_analytics',
        'schedule': crontab(hour=2, minute=0, day_of_week=1),
        'args': ('weekly',),
    },

    # Monthly analytics snapshot (run on the 1st at 3 AM)
    'generate-monthly-analytics': {
        'task': 'dashboards.tasks.generate_periodic_analytics',
        'schedule': crontab(hour=3, minute=0, day_of_month=1),
        'args': ('monthly',),
    },
}

# Celery configuration
app.conf.update(
    # Task result expiry
    result_expires=3600,  # 1 hour

    # Task time limits
    task_time_limit=300,  # 5 minutes hard limit
    task_soft_time_limit=240,  # 4 minutes soft limit

    task_acks_late=True,
    task_reject_on_worker_lost=True,

    # Prefetch multiplier (1 = fair distribution)
    worker_prefetch_multiplier=1,

    # Serialization
    task_serializer='json',
    result_serializer='json',
    accept_content=['json'],

    timezone='UTC',
    enable_utc=True,
)
