"""Customer aggregate."""

import re
from datetime import UTC, datetime

from protean.fields import DateTime, Identifier, String

from grocery.domain import grocery
from grocery.errors import InvalidCustomerData

EMAIL_PATTERN = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")
# E.164: optional +, no leading zero, at most 15 digits
PHONE_PATTERN = re.compile(r"^\+?[1-9]\d{1,14}$")

_UNSET = object()


def normalize_email(email):
    return email.strip().lower() if email else email


def _validate(name, email, phone):
    if not name or not name.strip():
        raise InvalidCustomerData("Customer name is required")
    if len(name) > 100:
        raise InvalidCustomerData("Customer name cannot exceed 100 characters")
    if not email:
        raise InvalidCustomerData("Email is required")
    if not EMAIL_PATTERN.match(email):
        raise InvalidCustomerData(f"Invalid email format: {email!r}")
    if phone and not PHONE_PATTERN.match(phone):
        raise InvalidCustomerData(f"Invalid phone format: {phone!r}")


@grocery.aggregate
class Customer:
    """A shopper who places orders.

    Email addresses are stored lower-cased and are unique across customers.
    """

    name: String(required=True, max_length=100)
    email: String(required=True, max_length=254, unique=True)
    phone: String(max_length=16)
    address: String(max_length=500)
    created_at: DateTime()
    updated_at: DateTime()
    created_by: Identifier()
    updated_by: Identifier()

    @classmethod
    def register(cls, name, email, phone=None, address=None, created_by=None):
        from grocery.identity.customer.events import CustomerRegistered

        email = normalize_email(email)
        _validate(name, email, phone)

        now = datetime.now(UTC)
        customer = cls(
            name=name,
            email=email,
            phone=phone or None,
            address=address,
            created_at=now,
            updated_at=now,
            created_by=created_by,
            updated_by=created_by,
        )
        customer.raise_(
            CustomerRegistered(
                customer_id=customer.id,
                name=name,
                email=email,
                phone=customer.phone,
            )
        )
        return customer

    def update_details(self, name=_UNSET, email=_UNSET, phone=_UNSET, address=_UNSET, updated_by=None):
        from grocery.identity.customer.events import CustomerUpdated

        new_name = self.name if name is _UNSET or name is None else name
        new_email = self.email if email is _UNSET or email is None else normalize_email(email)
        new_phone = self.phone if phone is _UNSET else (phone or None)
        new_address = self.address if address is _UNSET else address
        _validate(new_name, new_email, new_phone)

        self.name = new_name
        self.email = new_email
        self.phone = new_phone
        self.address = new_address
        self.updated_at = datetime.now(UTC)
        self.updated_by = updated_by

        self.raise_(
            CustomerUpdated(
                customer_id=self.id,
                name=self.name,
                email=self.email,
                phone=self.phone,
                address=self.address,
            )
        )
