"""Tests for the Customer aggregate."""

import pytest
from grocery.errors import InvalidCustomerData
from grocery.identity.customer.customer import Customer
from grocery.identity.customer.events import CustomerRegistered, CustomerUpdated


def _register(**overrides):
    data = {"name": "Juma Mwangi", "email": "juma@example.com", "phone": "+254711000111"}
    data.update(overrides)
    return Customer.register(**data)


class TestRegister:
    def test_register(self):
        customer = _register(address="1 Lake Road")

        assert customer.name == "Juma Mwangi"
        assert customer.address == "1 Lake Road"
        assert isinstance(customer._events[0], CustomerRegistered)

    def test_email_is_normalized(self):
        customer = _register(email="  Juma@Example.COM ")
        assert customer.email == "juma@example.com"

    def test_phone_is_optional(self):
        assert _register(phone=None).phone is None

    @pytest.mark.parametrize("email", ["", "juma", "juma@", "juma@example", "ju ma@example.com"])
    def test_invalid_email(self, email):
        with pytest.raises(InvalidCustomerData):
            _register(email=email)

    @pytest.mark.parametrize("phone", ["0712345678", "+0712345678", "phone", "+1234567890123456"])
    def test_invalid_phone(self, phone):
        with pytest.raises(InvalidCustomerData, match="phone"):
            _register(phone=phone)

    def test_name_is_required(self):
        with pytest.raises(InvalidCustomerData):
            _register(name="")

    def test_name_length(self):
        with pytest.raises(InvalidCustomerData):
            _register(name="n" * 101)


class TestUpdate:
    def test_partial_update(self):
        customer = _register()
        customer._events.clear()

        customer.update_details(address="9 Hill Street", updated_by="user-7")

        assert customer.address == "9 Hill Street"
        assert customer.email == "juma@example.com"
        assert customer.updated_by == "user-7"
        assert isinstance(customer._events[0], CustomerUpdated)

    def test_phone_can_be_cleared(self):
        customer = _register()
        customer.update_details(phone="")
        assert customer.phone is None

    def test_invalid_update_is_rejected(self):
        customer = _register()
        with pytest.raises(InvalidCustomerData):
            customer.update_details(email="not-an-email")
        assert customer.email == "juma@example.com"
