"""Order modification: adding and removing line items.

Both operations are only allowed while the order is pending. Stock moves
through the `StockLedger` in the same Unit of Work as the order write.
"""

import structlog
from protean import handle
from protean.fields import Identifier, Integer
from protean.utils.globals import current_domain

from grocery.domain import grocery
from grocery.errors import InvalidOrderData, ProductNotFound
from grocery.ordering.order.order import Order, validate_quantity
from grocery.ordering.stock import StockLedger

logger = structlog.get_logger(__name__)


@grocery.command(part_of="Order")
class AddOrderItem:
    """Add a product line to a pending order, reserving its stock."""

    order_id = Identifier(required=True)
    product_id = Identifier(required=True)
    quantity = Integer(required=True)
    requested_by = Identifier()


@grocery.command(part_of="Order")
class RemoveOrderItem:
    """Remove a line from a pending order, releasing its stock."""

    order_id = Identifier(required=True)
    item_id = Identifier(required=True)
    requested_by = Identifier()


@grocery.command_handler(part_of=Order)
class ModifyOrderHandler:
    @handle(AddOrderItem)
    def add_order_item(self, command):
        repo = current_domain.repository_for(Order)
        order = repo.get_order(command.order_id)
        order.ensure_items_editable()
        validate_quantity(command.quantity)

        ledger = StockLedger()
        try:
            product = ledger.product(command.product_id)
        except ProductNotFound as exc:
            raise InvalidOrderData(
                f"Product '{command.product_id}' does not exist",
                product_id=command.product_id,
            ) from exc

        ledger.check_and_reserve(command.product_id, command.quantity, order_id=order.id)
        item = order.add_item(
            product_id=command.product_id,
            quantity=command.quantity,
            unit_price=product.price,
            updated_by=command.requested_by,
        )

        ledger.flush()
        repo.add(order)

        logger.info(
            "order_item_added",
            order_id=str(order.id),
            item_id=str(item.id),
            product_id=str(command.product_id),
            quantity=command.quantity,
            total=order.total,
        )
        return str(item.id)

    @handle(RemoveOrderItem)
    def remove_order_item(self, command):
        repo = current_domain.repository_for(Order)
        order = repo.get_order(command.order_id)

        item = order.remove_item(command.item_id, updated_by=command.requested_by)

        ledger = StockLedger()
        ledger.release(item.product_id, item.quantity, order_id=order.id)

        ledger.flush()
        repo.add(order)

        logger.info(
            "order_item_removed",
            order_id=str(order.id),
            item_id=str(command.item_id),
            product_id=str(item.product_id),
            quantity=item.quantity,
            total=order.total,
        )
