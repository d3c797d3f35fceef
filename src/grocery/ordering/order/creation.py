"""Order creation: command and handler."""

import json

import structlog
from protean import handle
from protean.fields import Identifier, Text
from protean.utils.globals import current_domain

from grocery.domain import grocery
from grocery.errors import InvalidOrderData, ProductNotFound
from grocery.identity.customer.customer import Customer
from grocery.ordering.order.order import Order, validate_quantity
from grocery.ordering.stock import StockLedger

logger = structlog.get_logger(__name__)


@grocery.command(part_of="Order")
class CreateOrder:
    customer_id = Identifier(required=True)
    items = Text()  # JSON: list of {"product_id": ..., "quantity": ...}
    requested_by = Identifier()


def parse_items(raw):
    """Decode and structurally validate the item payload of `CreateOrder`."""
    if raw is None or raw == "":
        return []
    try:
        items = json.loads(raw) if isinstance(raw, str) else raw
    except json.JSONDecodeError as exc:
        raise InvalidOrderData(f"Order items are not valid JSON: {exc.msg}") from exc

    if not isinstance(items, list):
        raise InvalidOrderData("Order items must be a list")

    parsed = []
    for index, item in enumerate(items):
        if not isinstance(item, dict) or not item.get("product_id"):
            raise InvalidOrderData(f"Item {index} must have a product_id", index=index)
        validate_quantity(item.get("quantity"))
        parsed.append((str(item["product_id"]), item["quantity"]))
    return parsed


@grocery.command_handler(part_of=Order)
class CreateOrderHandler:
    @handle(CreateOrder)
    def create_order(self, command):
        requested = parse_items(command.items)

        if not current_domain.repository_for(Customer).exists(command.customer_id):
            raise InvalidOrderData(
                f"Customer '{command.customer_id}' does not exist",
                customer_id=command.customer_id,
            )

        ledger = StockLedger()
        lines = []
        for product_id, quantity in requested:
            try:
                product = ledger.product(product_id)
            except ProductNotFound as exc:
                raise InvalidOrderData(
                    f"Product '{product_id}' does not exist",
                    product_id=product_id,
                ) from exc
            lines.append((product_id, quantity, product.price))

        order = Order.place(command.customer_id, lines, created_by=command.requested_by)

        # Repeated products accumulate against the same loaded stock count
        for product_id, quantity, _ in lines:
            ledger.check_and_reserve(product_id, quantity, order_id=order.id)

        ledger.flush()
        current_domain.repository_for(Order).add(order)

        logger.info(
            "order_created",
            order_id=str(order.id),
            customer_id=str(order.customer_id),
            item_count=len(lines),
            total=order.total,
        )
        return str(order.id)
