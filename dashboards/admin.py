"""
Admin configuration for dashboard models.
"""

from django.contrib import admin

from .models import Analytics


@admin.register(Analytics)
class AnalyticsAdmin(admin.ModelAdmin):
    """Read-only admin for analytics snapshots"""
    list_display = ['farm', 'period', 'generated_at']
    list_filter = ['period']
    search_fields = ['farm__name']
    date_hierarchy = 'generated_at'
    readonly_fields = ['id', 'farm', 'period', 'metrics', 'generated_at', 'created_at', 'updated_at']
    ordering = ['-generated_at']

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False
