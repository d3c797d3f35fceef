"""Read side of the order manager: fetch one order, all orders, or a customer's orders."""

from protean.utils.globals import current_domain

from grocery.errors import CustomerNotFound
from grocery.identity.customer.customer import Customer
from grocery.ordering.order.order import Order


def get_order(order_id) -> Order:
    """Return the order or raise `OrderNotFound`."""
    return current_domain.repository_for(Order).get_order(order_id)


def list_orders() -> list[Order]:
    return current_domain.repository_for(Order).list_all()


def list_orders_for_customer(customer_id) -> list[Order]:
    """Return the customer's orders, newest first; `CustomerNotFound` if the customer is unknown."""
    if not current_domain.repository_for(Customer).exists(customer_id):
        raise CustomerNotFound(customer_id)
    return current_domain.repository_for(Order).list_by_customer(customer_id)
