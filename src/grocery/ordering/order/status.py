"""Order status transitions: command and handler."""

import structlog
from protean import handle
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from grocery.domain import grocery
from grocery.ordering.order.order import Order

logger = structlog.get_logger(__name__)


@grocery.command(part_of="Order")
class UpdateOrderStatus:
    order_id = Identifier(required=True)
    status = String(required=True, max_length=20)
    requested_by = Identifier()


@grocery.command_handler(part_of=Order)
class OrderStatusHandler:
    @handle(UpdateOrderStatus)
    def update_order_status(self, command):
        repo = current_domain.repository_for(Order)
        order = repo.get_order(command.order_id)
        previous = order.status

        order.change_status(command.status, updated_by=command.requested_by)
        repo.add(order)

        logger.info(
            "order_status_changed",
            order_id=str(order.id),
            previous_status=previous,
            new_status=order.status,
        )
