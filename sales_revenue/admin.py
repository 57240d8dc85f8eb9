"""
Admin configuration for Sales & Revenue models.
"""

from django.contrib import admin

from .models import Order, OrderItem, Product, Transaction


@admin.register(Product)
class ProductAdmin(admin.ModelAdmin):
    """Admin for farm products"""
    list_display = ['name', 'farm', 'type', 'quality', 'quantity', 'price', 'available', 'created_at']
    list_filter = ['type', 'quality', 'available']
    search_fields = ['name', 'farm__name']
    readonly_fields = ['id', 'available', 'created_at', 'updated_at']
    list_per_page = 50


@admin.register(Transaction)
class TransactionAdmin(admin.ModelAdmin):
    """Admin for financial transactions"""
    list_display = ['transaction_date', 'farm', 'type', 'category', 'amount', 'status']
    list_filter = ['type', 'status', 'category']
    search_fields = ['category', 'description', 'farm__name']
    date_hierarchy = 'transaction_date'
    readonly_fields = ['id', 'created_at', 'updated_at']
    ordering = ['-transaction_date']
    list_per_page = 50


class OrderItemInline(admin.TabularInline):
    """Read-only line items; orders are placed through the fulfillment service"""
    model = OrderItem
    extra = 0
    readonly_fields = ['product', 'quantity', 'price', 'line_total']
    fields = ['product', 'quantity', 'price', 'line_total']
    can_delete = False

    def has_add_permission(self, request, obj=None):
        return False


@admin.register(Order)
class OrderAdmin(admin.ModelAdmin):
    """Admin for customer orders"""
    list_display = ['id', 'farm', 'customer_id', 'total_amount', 'status', 'payment_status', 'created_at']
    list_filter = ['status', 'payment_status']
    search_fields = ['customer_id', 'farm__name']
    readonly_fields = ['id', 'farm', 'customer_id', 'total_amount', 'created_at', 'updated_at']
    inlines = [OrderItemInline]
    ordering = ['-created_at']

    def has_add_permission(self, request):
        return False
