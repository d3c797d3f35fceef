"""Domain events for the Order aggregate."""

from protean.fields import DateTime, Float, Identifier, Integer, String

from grocery.domain import grocery


@grocery.event(part_of="Order")
class OrderPlaced:
    """A new pending order was created and its stock reserved."""

    __version__ = 1

    order_id = Identifier(required=True)
    customer_id = Identifier(required=True)
    item_count = Integer(required=True)
    total = Float(required=True)
    placed_by = Identifier()
    placed_at = DateTime(required=True)


@grocery.event(part_of="Order")
class OrderItemAdded:
    """A line item was added to a pending order."""

    __version__ = 1

    order_id = Identifier(required=True)
    item_id = Identifier(required=True)
    product_id = Identifier(required=True)
    quantity = Integer(required=True)
    unit_price = Float(required=True)
    new_total = Float(required=True)


@grocery.event(part_of="Order")
class OrderItemRemoved:
    """A line item was removed from a pending order and its stock released."""

    __version__ = 1

    order_id = Identifier(required=True)
    item_id = Identifier(required=True)
    product_id = Identifier(required=True)
    quantity = Integer(required=True)
    new_total = Float(required=True)


@grocery.event(part_of="Order")
class OrderStatusChanged:
    __version__ = 1

    order_id = Identifier(required=True)
    customer_id = Identifier(required=True)
    previous_status = String(required=True)
    new_status = String(required=True)
    changed_by = Identifier()
    changed_at = DateTime(required=True)
