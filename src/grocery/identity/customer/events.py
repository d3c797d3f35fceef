"""Domain events for the Customer aggregate."""

from protean.fields import Identifier, String

from grocery.domain import grocery


@grocery.event(part_of="Customer")
class CustomerRegistered:
    """A new customer account was created."""

    __version__ = 1

    customer_id: Identifier(required=True)
    name: String(required=True)
    email: String(required=True)
    phone: String()


@grocery.event(part_of="Customer")
class CustomerUpdated:
    """A customer's contact details changed."""

    __version__ = 1

    customer_id: Identifier(required=True)
    name: String(required=True)
    email: String(required=True)
    phone: String()
    address: String()
