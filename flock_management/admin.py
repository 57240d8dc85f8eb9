"""
Admin interface for flock and health tracking.
"""

from django.contrib import admin
from django.utils.html import format_html
from .models import Bird, Chicken, HealthRecord


# =============================================================================
# BIRD ADMIN
# =============================================================================

@admin.register(Bird)
class BirdAdmin(admin.ModelAdmin):
    """
    Admin interface for bird batches.
    """

    list_display = [
        'batch_number', 'farm', 'breed', 'quantity', 'age',
        'status_badge', 'weight', 'feed_consumption'
    ]
    list_filter = ['status', 'breed']
    search_fields = ['batch_number', 'breed', 'farm__name']
    readonly_fields = ['id', 'created_at', 'updated_at']

    fieldsets = [
        ('Batch Identification', {
            'fields': ['id', 'farm', 'batch_number', 'breed']
        }),
        ('Current Status', {
            'fields': ['quantity', 'age', 'status', 'weight', 'feed_consumption']
        }),
        ('Timestamps', {
            'fields': ['created_at', 'updated_at'],
            'classes': ['collapse']
        }),
    ]

    def status_badge(self, obj):
        colors = {
            'healthy': 'green',
            'sick': 'orange',
            'sold': 'gray',
            'deceased': 'red',
        }
        return format_html(
            '<span style="color: {};">{}</span>',
            colors.get(obj.status, 'black'),
            obj.get_status_display()
        )
    status_badge.short_description = 'Status'


# =============================================================================
# HEALTH RECORD ADMIN
# =============================================================================

@admin.register(HealthRecord)
class HealthRecordAdmin(admin.ModelAdmin):
    list_display = ['batch_number', 'farm', 'type', 'affected_count', 'treatment', 'next_follow_up']
    list_filter = ['type']
    search_fields = ['batch_number', 'description', 'farm__name']
    date_hierarchy = 'created_at'
    readonly_fields = ['id', 'created_at', 'updated_at']


@admin.register(Chicken)
class ChickenAdmin(admin.ModelAdmin):
    list_display = ['id', 'breed', 'age', 'weight', 'egg_production', 'vaccination_status']
    list_filter = ['vaccination_status', 'breed']
    readonly_fields = ['id', 'created_at', 'updated_at']
