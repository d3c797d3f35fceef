"""Tests for the Order aggregate: placement, totals and item changes."""

import pytest
from grocery.errors import InvalidOrderData, OrderItemNotFound, OrderStatusInvalid
from grocery.ordering.order.events import OrderItemAdded, OrderItemRemoved, OrderPlaced
from grocery.ordering.order.order import Order, OrderStatus
from protean.exceptions import ValidationError


def _order(lines=None):
    return Order.place(
        customer_id="cust-001",
        lines=lines if lines is not None else [("prod-001", 2, 3.5), ("prod-002", 1, 10.0)],
        created_by="user-1",
    )


class TestPlaceOrder:
    def test_new_order_is_pending(self):
        order = _order()
        assert order.status == OrderStatus.PENDING.value
        assert order.created_by == "user-1"
        assert order.updated_by == "user-1"
        assert order.created_at is not None

    def test_total_is_sum_of_item_subtotals(self):
        order = _order()
        assert order.total == pytest.approx(2 * 3.5 + 10.0)

    def test_order_without_items_is_allowed(self):
        order = _order(lines=[])
        assert len(order.items) == 0
        assert order.total == 0.0

    def test_items_keep_payload_order(self):
        order = _order(lines=[("b", 1, 1.0), ("a", 1, 1.0), ("c", 1, 1.0)])
        assert [item.product_id for item in order.line_items] == ["b", "a", "c"]

    @pytest.mark.parametrize("quantity", [0, -3, 1.5, "2", True, None])
    def test_non_positive_or_non_integer_quantity_is_rejected(self, quantity):
        with pytest.raises(InvalidOrderData):
            _order(lines=[("prod-001", quantity, 1.0)])

    def test_raises_order_placed_event(self):
        order = _order()

        assert len(order._events) == 1
        event = order._events[0]
        assert isinstance(event, OrderPlaced)
        assert event.order_id == str(order.id)
        assert event.item_count == 2
        assert event.total == pytest.approx(17.0)

    def test_total_must_match_items(self):
        order = _order()
        with pytest.raises(ValidationError):
            order.total = 1.0


class TestAddItem:
    def test_add_item_updates_total(self):
        order = _order(lines=[])
        order.add_item("prod-001", 3, 1.25)

        assert len(order.items) == 1
        assert order.total == pytest.approx(3.75)

    def test_added_item_goes_last(self):
        order = _order()
        item = order.add_item("prod-003", 1, 2.0)
        assert order.line_items[-1].id == item.id

    def test_add_item_raises_event(self):
        order = _order(lines=[])
        order._events.clear()
        item = order.add_item("prod-001", 2, 4.0, updated_by="user-2")

        assert order.updated_by == "user-2"
        assert len(order._events) == 1
        event = order._events[0]
        assert isinstance(event, OrderItemAdded)
        assert event.item_id == str(item.id)
        assert event.new_total == pytest.approx(8.0)

    def test_zero_quantity_is_rejected(self):
        order = _order()
        with pytest.raises(InvalidOrderData):
            order.add_item("prod-001", 0, 1.0)
        assert len(order.items) == 2

    @pytest.mark.parametrize("status", ["confirmed", "cancelled"])
    def test_rejected_unless_pending(self, status):
        order = _order()
        order.change_status(status)
        total_before = order.total

        with pytest.raises(OrderStatusInvalid):
            order.add_item("prod-009", 1, 1.0)

        assert len(order.items) == 2
        assert order.total == total_before


class TestRemoveItem:
    def test_remove_item_updates_total(self):
        order = _order()
        item = next(i for i in order.items if i.product_id == "prod-002")

        removed = order.remove_item(item.id)

        assert removed.id == item.id
        assert len(order.items) == 1
        assert order.total == pytest.approx(7.0)

    def test_remove_last_item_leaves_zero_total(self):
        order = _order(lines=[("prod-001", 5, 2.0)])
        order.remove_item(order.items[0].id)

        assert len(order.items) == 0
        assert order.total == 0.0

    def test_remove_item_raises_event(self):
        order = _order()
        order._events.clear()
        item = order.items[0]
        order.remove_item(item.id)

        assert isinstance(order._events[0], OrderItemRemoved)
        assert order._events[0].quantity == item.quantity

    def test_unknown_item(self):
        order = _order()
        with pytest.raises(OrderItemNotFound):
            order.remove_item("no-such-item")

    def test_rejected_unless_pending(self):
        order = _order()
        order.change_status("confirmed")

        with pytest.raises(OrderStatusInvalid):
            order.remove_item(order.items[0].id)

        assert len(order.items) == 2
