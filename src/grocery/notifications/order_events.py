"""Order notifications: reacts to Order events by messaging the customer.

Delivery is best-effort: failures are logged and never reach the order
operation that raised the event.
"""

import structlog
from protean.utils.globals import current_domain
from protean.utils.mixins import handle

from grocery.domain import grocery
from grocery.errors import CustomerNotFound, OrderNotFound
from grocery.identity.customer.customer import Customer
from grocery.notifications.notifier import NotificationFailed, get_notifier
from grocery.ordering.order.events import OrderPlaced, OrderStatusChanged
from grocery.ordering.order.order import Order

logger = structlog.get_logger(__name__)


def _load(order_id, customer_id):
    order = current_domain.repository_for(Order).get_order(order_id)
    customer = current_domain.repository_for(Customer).get_customer(customer_id)
    return order, customer


def _notify(kind: str, event, send) -> None:
    try:
        order, customer = _load(event.order_id, event.customer_id)
        send(order, customer)
    except (OrderNotFound, CustomerNotFound) as exc:
        logger.warning(
            "order_notification_skipped",
            kind=kind,
            order_id=str(event.order_id),
            reason=exc.message,
        )
        return
    except NotificationFailed as exc:
        logger.warning(
            "order_notification_failed",
            kind=kind,
            order_id=str(event.order_id),
            failures=exc.failures,
        )
        return
    except Exception:
        logger.exception("order_notification_error", kind=kind, order_id=str(event.order_id))
        return

    logger.info("order_notification_sent", kind=kind, order_id=str(event.order_id))


@grocery.event_handler(part_of=Order)
class OrderNotificationsHandler:
    @handle(OrderPlaced)
    def on_order_placed(self, event: OrderPlaced) -> None:
        """Send the order confirmation."""
        _notify("confirmation", event, get_notifier().send_order_confirmation)

    @handle(OrderStatusChanged)
    def on_order_status_changed(self, event: OrderStatusChanged) -> None:
        """Tell the customer about the new status."""
        _notify("status_update", event, get_notifier().send_order_status_update)
