"""Application tests for customer registration and maintenance."""

import pytest
from grocery.errors import CustomerAlreadyExists, CustomerNotFound, InvalidCustomerData
from grocery.identity.customer.customer import Customer
from grocery.identity.customer.management import DeleteCustomer, RegisterCustomer, UpdateCustomer
from grocery.ordering.order.creation import CreateOrder
from protean import current_domain


def _register(name="Wanjiru Kamau", email="wanjiru@example.com", **kwargs):
    return current_domain.process(RegisterCustomer(name=name, email=email, **kwargs), asynchronous=False)


def _get(customer_id):
    return current_domain.repository_for(Customer).get(customer_id)


class TestRegisterCustomer:
    def test_register(self):
        customer_id = _register(phone="+254722000222", address="3 Moi Avenue")

        customer = _get(customer_id)
        assert customer.name == "Wanjiru Kamau"
        assert customer.phone == "+254722000222"

    def test_duplicate_email(self):
        _register()
        with pytest.raises(CustomerAlreadyExists):
            _register(name="Someone Else")

    def test_duplicate_email_ignores_case(self):
        _register()
        with pytest.raises(CustomerAlreadyExists):
            _register(email="WANJIRU@example.com")

    def test_invalid_email(self):
        with pytest.raises(InvalidCustomerData):
            _register(email="wanjiru-at-example")

    def test_lookup_by_email(self):
        customer_id = _register()

        found = current_domain.repository_for(Customer).find_by_email("Wanjiru@Example.com")

        assert str(found.id) == customer_id


class TestUpdateCustomer:
    def test_update(self):
        customer_id = _register()

        current_domain.process(
            UpdateCustomer(customer_id=customer_id, address="12 Kenyatta Road"), asynchronous=False
        )

        customer = _get(customer_id)
        assert customer.address == "12 Kenyatta Road"
        assert customer.email == "wanjiru@example.com"

    def test_email_taken_by_someone_else(self):
        _register(email="taken@example.com")
        customer_id = _register()

        with pytest.raises(CustomerAlreadyExists):
            current_domain.process(
                UpdateCustomer(customer_id=customer_id, email="taken@example.com"), asynchronous=False
            )

    def test_keeping_own_email(self):
        customer_id = _register()

        current_domain.process(
            UpdateCustomer(customer_id=customer_id, email="wanjiru@example.com", name="W. Kamau"),
            asynchronous=False,
        )

        assert _get(customer_id).name == "W. Kamau"

    def test_unknown_customer(self):
        with pytest.raises(CustomerNotFound):
            current_domain.process(UpdateCustomer(customer_id="missing", name="X"), asynchronous=False)


class TestDeleteCustomer:
    def test_delete(self):
        customer_id = _register()

        current_domain.process(DeleteCustomer(customer_id=customer_id), asynchronous=False)

        assert not current_domain.repository_for(Customer).exists(customer_id)

    def test_with_orders(self):
        customer_id = _register()
        current_domain.process(CreateOrder(customer_id=customer_id, items="[]"), asynchronous=False)

        with pytest.raises(InvalidCustomerData, match="orders"):
            current_domain.process(DeleteCustomer(customer_id=customer_id), asynchronous=False)

    def test_unknown_customer(self):
        with pytest.raises(CustomerNotFound):
            current_domain.process(DeleteCustomer(customer_id="missing"), asynchronous=False)
