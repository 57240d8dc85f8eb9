"""
Order Fulfillment Service

Reserves product stock for incoming orders.

An order is fulfilled in two phases inside a single database transaction:
1. CHECK: lock every referenced product row (in id order) and validate every
   line item against the locked stock. The result is an immutable plan.
   Nothing is written during this phase.
2. COMMIT: apply the plan: decrement each product, then persist the order
   and its line items.

Any failure in phase 1 leaves every product and the order table untouched.

Order status and payment status follow fixed transition tables; cancelling an
order returns its reserved stock to the products.

Usage:
    from sales_revenue.services.order_fulfillment import OrderFulfillmentService

    service = OrderFulfillmentService()
    order = service.create_order(
        farm_id,
        customer_id='cust-42',
        line_items=[{'product_id': product.id, 'quantity': 4, 'price': '2.00'}],
        delivery_info={'address': 'Plot 7, Kumasi'},
    )
"""

import logging
import uuid
from collections import OrderedDict
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Dict, List, Optional, Tuple

from django.db import transaction
from django.utils import timezone
from django.utils.dateparse import parse_datetime

from core.exceptions import InsufficientStock, InvalidInput, NotFound
from core.repository import EntityRepository
from farms.models import Farm
from sales_revenue.models import (
    Order,
    OrderItem,
    OrderStatus,
    PaymentStatus,
    Product,
)

logger = logging.getLogger(__name__)

# Bounds of the price and total DecimalFields on Order and OrderItem
MAX_PRICE = Decimal('10000000000')
MAX_TOTAL = Decimal('1000000000000')
CENT = Decimal('0.01')


# ==============================================================================
# STATE MACHINES
# ==============================================================================

ORDER_STATUS_TRANSITIONS = {
    OrderStatus.PENDING: [OrderStatus.CONFIRMED, OrderStatus.CANCELLED],
    OrderStatus.CONFIRMED: [OrderStatus.SHIPPED, OrderStatus.CANCELLED],
    OrderStatus.SHIPPED: [OrderStatus.DELIVERED],
    OrderStatus.DELIVERED: [],  # Terminal state
    OrderStatus.CANCELLED: [],  # Terminal state
}

PAYMENT_STATUS_TRANSITIONS = {
    PaymentStatus.PENDING: [PaymentStatus.PAID],
    PaymentStatus.PAID: [PaymentStatus.REFUNDED],
    PaymentStatus.REFUNDED: [],  # Terminal state
}

# Accepted delivery_info keys and the order fields they populate
DELIVERY_INFO_FIELDS = {
    'address': 'delivery_address',
    'date': 'delivery_date',
    'notes': 'delivery_notes',
}


def _as_uuid(value) -> Optional[uuid.UUID]:
    try:
        return value if isinstance(value, uuid.UUID) else uuid.UUID(str(value))
    except ValueError:
        return None


def validate_status_transition(current_status: str, new_status: str,
                               transitions: Dict[str, List[str]],
                               field: str = 'status') -> bool:
    """
    Validate that a status transition is allowed.

    Raises:
        InvalidInput if the new status is unknown or not reachable
    """
    if new_status not in transitions:
        raise InvalidInput(field, f"unknown value '{new_status}'")

    if current_status == new_status:
        return True  # No change is always valid

    valid_transitions = transitions.get(current_status, [])
    if new_status not in valid_transitions:
        raise InvalidInput(
            field,
            f"cannot move from '{current_status}' to '{new_status}'. "
            f"Valid transitions: {[str(s) for s in valid_transitions]}"
        )
    return True


# ==============================================================================
# FULFILLMENT PLAN
# ==============================================================================

@dataclass(frozen=True)
class PlannedLine:
    product_id: str
    quantity: int
    price: Decimal

    @property
    def line_total(self) -> Decimal:
        return self.price * self.quantity


@dataclass(frozen=True)
class FulfillmentPlan:
    """Everything the commit phase needs; produced without any writes."""
    farm_id: str
    customer_id: str
    lines: Tuple[PlannedLine, ...]
    # (product_id, total quantity to remove) in lock order
    decrements: Tuple[Tuple[str, int], ...]
    delivery: Tuple[Tuple[str, object], ...] = ()

    @property
    def total_amount(self) -> Decimal:
        return sum((line.line_total for line in self.lines), Decimal('0'))


# ==============================================================================
# SERVICE
# ==============================================================================

class OrderFulfillmentService:
    """
    Creates orders against product stock and moves them through their
    lifecycle.
    """

    def __init__(self):
        self.farms = EntityRepository(Farm)
        self.orders = EntityRepository(Order)

    # ------------------------------------------------------------------
    # Order creation
    # ------------------------------------------------------------------

    def create_order(self, farm_id, customer_id, line_items, delivery_info=None) -> Order:
        """
        Reserve stock for ``line_items`` and persist a pending order.

        Raises:
            NotFound: the farm or a referenced product does not exist
            InsufficientStock: a product holds less than the requested amount
            InvalidInput: empty order, bad quantity/price, foreign product,
                or an unknown delivery_info key
        """
        farm = self.farms.require(farm_id)
        if not customer_id:
            raise InvalidInput('customer_id', 'is required')

        normalized = self._normalize_line_items(line_items)
        delivery = self._normalize_delivery_info(delivery_info)

        try:
            with transaction.atomic():
                locked = self._lock_products(pid for pid, _, _ in normalized)
                plan = self.plan_order(farm, customer_id, normalized, locked, delivery)
                order = self._commit(plan, locked)
        except (NotFound, InsufficientStock, InvalidInput) as exc:
            logger.warning(
                f"Order rejected for farm {farm.id} (customer {customer_id}): {exc}"
            )
            raise

        logger.info(
            f"Order {order.id} created for farm {farm.id}: "
            f"{len(plan.lines)} line(s), total {order.total_amount}"
        )
        return order

    def plan_order(self, farm, customer_id, normalized_lines, locked_products,
                   delivery=()) -> FulfillmentPlan:
        """
        Check phase: validate every line against the locked stock.

        ``locked_products`` maps product id (str) to a locked Product row.
        Quantities for a product appearing on several lines are summed
        before comparing against its stock.
        """
        requested = OrderedDict()
        lines = []
        for product_id, quantity, price in normalized_lines:
            product = locked_products.get(product_id)
            if product is None:
                raise NotFound('Product', product_id)
            if product.farm_id != farm.id:
                raise InvalidInput(
                    'product_id', f"product {product_id} does not belong to farm {farm.id}"
                )
            requested[product_id] = requested.get(product_id, 0) + quantity
            if product.quantity < requested[product_id]:
                raise InsufficientStock(
                    product_id,
                    available=product.quantity,
                    requested=requested[product_id],
                )
            lines.append(PlannedLine(product_id=product_id, quantity=quantity, price=price))

        decrements = tuple(
            (pid, requested[pid]) for pid in sorted(requested)
        )
        plan = FulfillmentPlan(
            farm_id=str(farm.id),
            customer_id=str(customer_id),
            lines=tuple(lines),
            decrements=decrements,
            delivery=tuple(delivery),
        )
        if plan.total_amount >= MAX_TOTAL:
            raise InvalidInput('line_items', f'order total must be below {MAX_TOTAL}')
        return plan

    def _commit(self, plan: FulfillmentPlan, locked_products) -> Order:
        """Commit phase: apply a validated plan. Must run inside the same atomic block."""
        now = timezone.now()
        for product_id, quantity in plan.decrements:
            product = locked_products[product_id]
            product.quantity -= quantity
            product.updated_at = now
            product.save(update_fields=['quantity', 'available', 'updated_at'])

        order = Order(
            farm_id=plan.farm_id,
            customer_id=plan.customer_id,
            total_amount=plan.total_amount,
            status=OrderStatus.PENDING,
            payment_status=PaymentStatus.PENDING,
            created_at=now,
        )
        for field, value in plan.delivery:
            setattr(order, field, value)
        self.orders.insert(order)

        OrderItem.objects.bulk_create([
            OrderItem(
                order=order,
                product_id=line.product_id,
                quantity=line.quantity,
                price=line.price,
                line_total=line.line_total,
            )
            for line in plan.lines
        ])
        return order

    def _lock_products(self, product_ids) -> Dict[str, Product]:
        # Lock all product rows in a consistent order (by ID) to prevent deadlocks
        ids = sorted(pid for pid in set(product_ids) if _as_uuid(pid) is not None)
        return {
            str(p.id): p for p in Product.objects.filter(
                id__in=ids
            ).select_for_update().order_by('id')
        }

    # ------------------------------------------------------------------
    # Input normalization
    # ------------------------------------------------------------------

    def _normalize_line_items(self, line_items) -> List[Tuple[str, int, Decimal]]:
        if not line_items:
            raise InvalidInput('line_items', 'an order needs at least one line item')

        normalized = []
        for index, item in enumerate(line_items):
            if not isinstance(item, dict):
                raise InvalidInput(f'line_items[{index}]', 'must be an object')
            unknown = set(item) - {'product_id', 'quantity', 'price'}
            if unknown:
                raise InvalidInput(f'line_items[{index}]', f"unknown field(s) {sorted(unknown)}")

            product_id = item.get('product_id')
            if not product_id:
                raise InvalidInput(f'line_items[{index}].product_id', 'is required')

            quantity = item.get('quantity')
            if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity <= 0:
                raise InvalidInput(
                    f'line_items[{index}].quantity', 'must be a positive integer'
                )

            try:
                price = Decimal(str(item.get('price')))
            except (InvalidOperation, ValueError):
                raise InvalidInput(f'line_items[{index}].price', 'must be a number')
            if not price.is_finite() or price < 0:
                raise InvalidInput(f'line_items[{index}].price', 'must be zero or greater')
            if price >= MAX_PRICE:
                raise InvalidInput(f'line_items[{index}].price', f'must be below {MAX_PRICE}')
            if price != price.quantize(CENT):
                raise InvalidInput(f'line_items[{index}].price', 'must have at most 2 decimal places')

            parsed_id = _as_uuid(product_id)
            normalized.append((str(parsed_id or product_id), quantity, price))
        return normalized

    def _normalize_delivery_info(self, delivery_info) -> Tuple[Tuple[str, object], ...]:
        if not delivery_info:
            return ()

        unknown = set(delivery_info) - set(DELIVERY_INFO_FIELDS)
        if unknown:
            raise InvalidInput('delivery_info', f"unknown field(s) {sorted(unknown)}")

        values = []
        for key, field in DELIVERY_INFO_FIELDS.items():
            if key not in delivery_info or delivery_info[key] is None:
                continue
            value = delivery_info[key]
            if key == 'date':
                value = self._parse_delivery_date(value)
            else:
                value = str(value)
            values.append((field, value))
        return tuple(values)

    def _parse_delivery_date(self, value):
        if hasattr(value, 'tzinfo'):
            parsed = value
        else:
            parsed = parse_datetime(str(value))
            if parsed is None:
                raise InvalidInput('delivery_info.date', 'must be an ISO-8601 datetime')
        if timezone.is_naive(parsed):
            parsed = timezone.make_aware(parsed)
        return parsed

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    @transaction.atomic
    def update_order_status(self, order_id, new_status) -> Order:
        """
        Move an order to ``new_status``.

        Cancelling returns every line item's quantity to its product.
        """
        order = self.orders.require(order_id)
        order = Order.objects.select_for_update().get(pk=order.pk)

        previous = order.status
        validate_status_transition(previous, new_status, ORDER_STATUS_TRANSITIONS, 'status')
        if previous == new_status:
            return order

        if new_status == OrderStatus.CANCELLED:
            self._restock(order)

        order.status = new_status
        order.updated_at = timezone.now()
        order.save(update_fields=['status', 'updated_at'])
        logger.info(f"Order {order.id} status: {previous} -> {new_status}")
        return order

    @transaction.atomic
    def update_payment_status(self, order_id, new_status) -> Order:
        order = self.orders.require(order_id)

        previous = order.payment_status
        validate_status_transition(
            previous, new_status, PAYMENT_STATUS_TRANSITIONS, 'payment_status'
        )
        if previous == new_status:
            return order

        order.payment_status = new_status
        order.updated_at = timezone.now()
        order.save(update_fields=['payment_status', 'updated_at'])
        logger.info(f"Order {order.id} payment status: {previous} -> {new_status}")
        return order

    def _restock(self, order):
        returned = OrderedDict()
        for item in order.items.all():
            key = str(item.product_id)
            returned[key] = returned.get(key, 0) + item.quantity

        locked = self._lock_products(returned)
        now = timezone.now()
        for product_id in sorted(returned):
            product = locked.get(product_id)
            if product is None:
                logger.warning(
                    f"Order {order.id}: product {product_id} no longer exists, "
                    f"{returned[product_id]} unit(s) not restocked"
                )
                continue
            product.quantity += returned[product_id]
            product.updated_at = now
            product.save(update_fields=['quantity', 'available', 'updated_at'])


def create_order(farm_id, customer_id, line_items, delivery_info=None) -> Order:
    """Module-level shortcut for OrderFulfillmentService().create_order()."""
    return OrderFulfillmentService().create_order(
        farm_id, customer_id, line_items, delivery_info
    )
