"""
Domain errors for farm operations and their HTTP translation.

Services raise these; nothing inside the engine catches them. The DRF
exception handler below turns them into JSON responses of the form
``{'error': <message>, 'code': <code>, 'detail': {...}}``.
"""

import logging

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)


class FarmOpsError(Exception):
    """Base class for every farm operations error."""
    code = 'farm_ops_error'
    http_status = status.HTTP_400_BAD_REQUEST

    def __init__(self, message, **detail):
        super().__init__(message)
        self.message = message
        self.detail = detail


class NotFound(FarmOpsError):
    """Raised when a referenced entity does not exist."""
    code = 'not_found'
    http_status = status.HTTP_404_NOT_FOUND

    def __init__(self, kind, entity_id):
        super().__init__(f"{kind} with id={entity_id} not found", kind=kind, id=str(entity_id))
        self.kind = kind
        self.entity_id = entity_id


class InvalidInput(FarmOpsError):
    """Raised for bad field values, unknown fields, or invalid transitions."""
    code = 'invalid_input'

    def __init__(self, field, reason):
        super().__init__(f"Invalid {field}: {reason}", field=field, reason=reason)
        self.field = field
        self.reason = reason


class InsufficientStock(FarmOpsError):
    """Raised when a product holds less stock than an order requests."""
    code = 'insufficient_stock'
    http_status = status.HTTP_409_CONFLICT

    def __init__(self, product_id, available=None, requested=None):
        message = f"Insufficient stock for product {product_id}"
        if available is not None and requested is not None:
            message += f": available {available}, requested {requested}"
        super().__init__(
            message,
            product_id=str(product_id),
            available=available,
            requested=requested,
        )
        self.product_id = product_id
        self.available = available
        self.requested = requested


def farm_ops_exception_handler(exc, context):
    """
    DRF exception handler that understands FarmOpsError.

    Falls back to DRF's default handling for everything else.
    """
    if isinstance(exc, FarmOpsError):
        view = context.get('view')
        logger.info(
            f"{exc.code} in {view.__class__.__name__ if view else 'unknown view'}: {exc.message}"
        )
        return Response(
            {'error': exc.message, 'code': exc.code, 'detail': exc.detail},
            status=exc.http_status,
        )
    return exception_handler(exc, context)
