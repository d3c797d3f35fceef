"""Order notifications: the `Notifier` port and its SMS, email and composite implementations."""

from abc import ABC, abstractmethod

import structlog

from grocery.notifications.channel import EMAIL, SMS, get_channel

logger = structlog.get_logger(__name__)


class NotificationFailed(Exception):
    """One or more channels could not deliver a notification."""

    def __init__(self, failures: list[str]):
        super().__init__("; ".join(failures))
        self.failures = failures


class Notifier(ABC):
    @abstractmethod
    def send_order_confirmation(self, order, customer) -> None: ...

    @abstractmethod
    def send_order_status_update(self, order, customer) -> None: ...


def _check(result: dict, channel: str) -> None:
    if result.get("status") != "sent":
        raise NotificationFailed([f"{channel}: {result.get('error') or 'unknown error'}"])


class SMSNotifier(Notifier):
    """Short text messages to the customer's phone. Customers without a phone are skipped."""

    def __init__(self, adapter=None):
        self._adapter = adapter

    @property
    def adapter(self):
        return self._adapter or get_channel(SMS)

    def send_order_confirmation(self, order, customer) -> None:
        if not customer.phone:
            logger.debug("sms_skipped_no_phone", customer_id=str(customer.id), order_id=str(order.id))
            return
        body = (
            f"Hi {customer.name}, Order #{order.id} confirmed. Total: {order.total:.2f}. "
            f"Delivery to: {customer.address or 'N/A'}. Thank you for your order!"
        )
        _check(self.adapter.send(to=customer.phone, body=body), SMS)

    def send_order_status_update(self, order, customer) -> None:
        if not customer.phone:
            logger.debug("sms_skipped_no_phone", customer_id=str(customer.id), order_id=str(order.id))
            return
        body = (
            f"Hi {customer.name}, Order #{order.id} status updated to: {order.status}. "
            f"Delivery to: {customer.address or 'N/A'}"
        )
        _check(self.adapter.send(to=customer.phone, body=body), SMS)


class EmailNotifier(Notifier):
    def __init__(self, adapter=None):
        self._adapter = adapter

    @property
    def adapter(self):
        return self._adapter or get_channel(EMAIL)

    def send_order_confirmation(self, order, customer) -> None:
        lines = "\n".join(
            f"  - {item.quantity} x {item.product_id} @ {item.unit_price:.2f}" for item in order.line_items
        )
        body = (
            f"Dear {customer.name},\n\n"
            f"Thank you for your order #{order.id}.\n\n"
            f"Items:\n{lines or '  (none)'}\n\n"
            f"Total: {order.total:.2f}\n"
        )
        result = self.adapter.send(
            to=customer.email,
            subject=f"Order Confirmation #{order.id}",
            body=body,
        )
        _check(result, EMAIL)

    def send_order_status_update(self, order, customer) -> None:
        body = f"Dear {customer.name},\n\nYour order #{order.id} is now {order.status}.\n"
        result = self.adapter.send(
            to=customer.email,
            subject=f"Order Status Update #{order.id}",
            body=body,
        )
        _check(result, EMAIL)


class CompositeNotifier(Notifier):
    """Fans out to every notifier; one channel failing does not stop the others."""

    def __init__(self, notifiers: list[Notifier]):
        self.notifiers = notifiers

    def _fan_out(self, method: str, order, customer) -> None:
        failures = []
        for notifier in self.notifiers:
            try:
                getattr(notifier, method)(order, customer)
            except NotificationFailed as exc:
                failures.extend(exc.failures)
            except Exception as exc:
                logger.exception(
                    "notifier_crashed",
                    notifier=type(notifier).__name__,
                    order_id=str(order.id),
                )
                failures.append(f"{type(notifier).__name__}: {exc}")

        if failures:
            raise NotificationFailed(failures)

    def send_order_confirmation(self, order, customer) -> None:
        self._fan_out("send_order_confirmation", order, customer)

    def send_order_status_update(self, order, customer) -> None:
        self._fan_out("send_order_status_update", order, customer)


_notifier_instance = None


def get_notifier() -> Notifier:
    """Return the configured notifier (singleton): SMS and email together."""
    global _notifier_instance
    if _notifier_instance is None:
        _notifier_instance = CompositeNotifier([SMSNotifier(), EmailNotifier()])
    return _notifier_instance


def set_notifier(notifier: Notifier) -> None:
    global _notifier_instance
    _notifier_instance = notifier


def reset_notifier() -> None:
    """Reset the notifier singleton (useful for testing)."""
    global _notifier_instance
    _notifier_instance = None
