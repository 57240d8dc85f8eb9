"""
Sales & Revenue Services

Service layer for order fulfillment and order lifecycle management.
"""

from .order_fulfillment import OrderFulfillmentService, create_order

__all__ = [
    'OrderFulfillmentService',
    'create_order',
]
