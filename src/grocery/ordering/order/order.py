"""Order aggregate: order lifecycle and line items.

State Machine:
    PENDING → CONFIRMED → FULFILLED
    PENDING → CANCELLED
    CONFIRMED → CANCELLED
FULFILLED and CANCELLED are terminal. Items can only change while PENDING.
"""

import math
from datetime import UTC, datetime
from enum import Enum

from protean import atomic_change, invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, HasMany, Identifier, Integer, String

from grocery.domain import grocery
from grocery.errors import InvalidOrderData, OrderItemNotFound, OrderStatusInvalid
from grocery.ordering.order.events import (
    OrderItemAdded,
    OrderItemRemoved,
    OrderPlaced,
    OrderStatusChanged,
)


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------
class OrderStatus(Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    FULFILLED = "fulfilled"
    CANCELLED = "cancelled"


# State machine transition map
_VALID_TRANSITIONS = {
    OrderStatus.PENDING: {OrderStatus.CONFIRMED, OrderStatus.CANCELLED},
    OrderStatus.CONFIRMED: {OrderStatus.FULFILLED, OrderStatus.CANCELLED},
    OrderStatus.FULFILLED: set(),  # Terminal
    OrderStatus.CANCELLED: set(),  # Terminal
}


def can_transition(current, target):
    """Whether ``current → target`` is one of the permitted edges."""
    return target in _VALID_TRANSITIONS[current]


def parse_status(value):
    """Turn a status string into an `OrderStatus`, or raise `OrderStatusInvalid`."""
    if isinstance(value, OrderStatus):
        return value
    try:
        return OrderStatus((value or "").strip().lower())
    except ValueError:
        raise OrderStatusInvalid(
            f"Unknown order status {value!r}",
            status=value,
        ) from None


def validate_quantity(quantity):
    # bool is an int subclass; True must not pass as a quantity of 1
    if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity <= 0:
        raise InvalidOrderData(f"Quantity must be a positive integer, got {quantity!r}")


# ---------------------------------------------------------------------------
# Entities
# ---------------------------------------------------------------------------
@grocery.entity(part_of="Order")
class OrderItem:
    """A product and quantity on an order.

    ``unit_price`` is the product price at the moment the item was added; later
    catalogue price changes do not affect it. Items are never edited in place.
    """

    product_id = Identifier(required=True)
    quantity = Integer(required=True, min_value=1)
    unit_price = Float(required=True, min_value=0.0)
    position = Integer(default=0, min_value=0)

    @property
    def subtotal(self):
        return self.unit_price * self.quantity


# ---------------------------------------------------------------------------
# Aggregate Root
# ---------------------------------------------------------------------------
@grocery.aggregate
class Order:
    customer_id = Identifier(required=True)
    items = HasMany(OrderItem)
    status = String(
        choices=OrderStatus,
        default=OrderStatus.PENDING.value,
    )
    total = Float(default=0.0)
    created_at = DateTime()
    updated_at = DateTime()
    created_by = Identifier()
    updated_by = Identifier()

    @invariant.post
    def total_matches_items(self):
        if not math.isclose(self.total or 0.0, self.compute_total(), rel_tol=1e-9, abs_tol=1e-6):
            raise ValidationError({"total": ["Order total must equal the sum of its item subtotals"]})

    # -------------------------------------------------------------------
    # Factory method
    # -------------------------------------------------------------------
    @classmethod
    def place(cls, customer_id, lines, created_by=None):
        """Create a pending order.

        Args:
            customer_id: The customer placing the order. Must already be resolved.
            lines: Iterable of ``(product_id, quantity, unit_price)`` tuples, in order.
            created_by: ID of the principal placing the order, if any.
        """
        items = []
        for position, (product_id, quantity, unit_price) in enumerate(lines):
            validate_quantity(quantity)
            items.append(
                OrderItem(
                    product_id=product_id,
                    quantity=quantity,
                    unit_price=unit_price,
                    position=position,
                )
            )

        now = datetime.now(UTC)
        order = cls(
            customer_id=customer_id,
            items=items,
            status=OrderStatus.PENDING.value,
            total=sum(item.subtotal for item in items),
            created_at=now,
            updated_at=now,
            created_by=created_by,
            updated_by=created_by,
        )
        order.raise_(
            OrderPlaced(
                order_id=str(order.id),
                customer_id=str(customer_id),
                item_count=len(items),
                total=order.total,
                placed_by=created_by,
                placed_at=now,
            )
        )
        return order

    # -------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------
    @property
    def current_status(self):
        return OrderStatus(self.status)

    @property
    def line_items(self):
        """Items in the order they were added."""
        return sorted(self.items, key=lambda item: item.position or 0)

    def compute_total(self):
        return sum(item.subtotal for item in self.items)

    def find_item(self, item_id):
        return next((item for item in self.items if str(item.id) == str(item_id)), None)

    # -------------------------------------------------------------------
    # Item changes (PENDING only)
    # -------------------------------------------------------------------
    def ensure_items_editable(self):
        if self.current_status != OrderStatus.PENDING:
            raise OrderStatusInvalid(
                f"Items can only be changed while the order is pending (current: {self.status})",
                order_id=self.id,
                status=self.status,
            )

    def add_item(self, product_id, quantity, unit_price, updated_by=None):
        self.ensure_items_editable()
        validate_quantity(quantity)

        now = datetime.now(UTC)
        next_position = max((item.position or 0 for item in self.items), default=-1) + 1
        item = OrderItem(
            product_id=product_id,
            quantity=quantity,
            unit_price=unit_price,
            position=next_position,
        )

        with atomic_change(self):
            self.add_items(item)
            self.total = self.compute_total()
            self.updated_at = now
            self.updated_by = updated_by

        self.raise_(
            OrderItemAdded(
                order_id=str(self.id),
                item_id=str(item.id),
                product_id=str(product_id),
                quantity=quantity,
                unit_price=unit_price,
                new_total=self.total,
            )
        )
        return item

    def remove_item(self, item_id, updated_by=None):
        self.ensure_items_editable()

        item = self.find_item(item_id)
        if item is None:
            raise OrderItemNotFound(self.id, item_id)

        now = datetime.now(UTC)
        with atomic_change(self):
            self.remove_items(item)
            self.total = self.compute_total()
            self.updated_at = now
            self.updated_by = updated_by

        self.raise_(
            OrderItemRemoved(
                order_id=str(self.id),
                item_id=str(item.id),
                product_id=str(item.product_id),
                quantity=item.quantity,
                new_total=self.total,
            )
        )
        return item

    # -------------------------------------------------------------------
    # Status
    # -------------------------------------------------------------------
    def change_status(self, new_status, updated_by=None):
        target = parse_status(new_status)
        current = self.current_status

        if not can_transition(current, target):
            raise OrderStatusInvalid(
                f"Cannot transition order from {current.value} to {target.value}",
                order_id=self.id,
                status=current.value,
                requested=target.value,
            )

        now = datetime.now(UTC)
        self.status = target.value
        self.updated_at = now
        self.updated_by = updated_by

        self.raise_(
            OrderStatusChanged(
                order_id=str(self.id),
                customer_id=str(self.customer_id),
                previous_status=current.value,
                new_status=target.value,
                changed_by=updated_by,
                changed_at=now,
            )
        )
