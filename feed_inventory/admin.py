"""
Feed Inventory Admin Configuration
"""

from django.contrib import admin
from django.utils.html import format_html

from .models import Feed, Inventory


@admin.register(Inventory)
class InventoryAdmin(admin.ModelAdmin):
    """Admin interface for farm inventory."""

    list_display = ['name', 'farm', 'type', 'quantity', 'unit', 'minimum_threshold', 'stock_status']
    list_filter = ['type', 'low_stock_alert']
    search_fields = ['name', 'farm__name']
    readonly_fields = ['id', 'low_stock_alert', 'created_at', 'updated_at']

    def stock_status(self, obj):
        if obj.low_stock_alert:
            return format_html('<span style="color: red;">{}</span>', 'Low')
        return format_html('<span style="color: green;">{}</span>', 'OK')
    stock_status.short_description = 'Stock'


@admin.register(Feed)
class FeedAdmin(admin.ModelAdmin):
    list_display = ['name', 'quantity', 'purchase_date', 'expiry_date']
    search_fields = ['name']
    readonly_fields = ['id', 'purchase_date', 'created_at', 'updated_at']
