"""
Django Admin Configuration for Farm Models
"""

from django.contrib import admin

from .models import Farm


@admin.register(Farm)
class FarmAdmin(admin.ModelAdmin):
    """Admin for farms"""
    list_display = ['name', 'location', 'owner_id', 'capacity', 'current_stock', 'employee_count', 'created_at']
    search_fields = ['name', 'location', 'owner_id']
    list_per_page = 50
    ordering = ['name']
    readonly_fields = ['id', 'created_at', 'updated_at']

    fieldsets = (
        ('Basic Information', {
            'fields': ('id', 'owner_id', 'name', 'location')
        }),
        ('Capacity', {
            'fields': ('capacity', 'current_stock', 'employee_count')
        }),
        ('Timestamps', {
            'fields': ('created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )
