"""Shared BDD fixtures and step definitions for ordering."""

import json

import pytest
from grocery.catalogue.category.management import CreateCategory
from grocery.catalogue.product.management import CreateProduct
from grocery.catalogue.product.product import Product
from grocery.identity.customer.management import RegisterCustomer
from grocery.ordering.order.creation import CreateOrder
from grocery.ordering.order.order import Order
from grocery.ordering.order.status import UpdateOrderStatus
from protean import current_domain
from pytest_bdd import given, parsers, then


@pytest.fixture()
def context():
    """Scenario state shared between steps."""
    return {"products": {}, "order_id": None, "error": None}


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(parsers.cfparse('a customer "{name}"'))
def a_customer(context, name):
    email = name.lower().replace(" ", ".") + "@example.com"
    context["customer_id"] = current_domain.process(
        RegisterCustomer(name=name, email=email), asynchronous=False
    )


@given(parsers.cfparse('a product "{name}" priced {price:f} with {stock:d} in stock'))
def a_product(context, name, price, stock):
    if "category_id" not in context:
        context["category_id"] = current_domain.process(CreateCategory(name="Produce"), asynchronous=False)
    context["products"][name] = current_domain.process(
        CreateProduct(name=name, price=price, stock=stock, category_id=context["category_id"]),
        asynchronous=False,
    )


@given(parsers.cfparse('the customer has ordered {quantity:d} of "{name}"'))
def existing_order(context, quantity, name):
    items = [{"product_id": context["products"][name], "quantity": quantity}]
    context["order_id"] = current_domain.process(
        CreateOrder(customer_id=context["customer_id"], items=json.dumps(items)),
        asynchronous=False,
    )


@given("the order is confirmed")
def order_confirmed(context):
    current_domain.process(
        UpdateOrderStatus(order_id=context["order_id"], status="confirmed"),
        asynchronous=False,
    )


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse('"{name}" has {stock:d} in stock'))
def product_stock(context, name, stock):
    product = current_domain.repository_for(Product).get(context["products"][name])
    assert product.stock == stock


@then(parsers.cfparse("the order total is {total:f}"))
def order_total(context, total):
    order = current_domain.repository_for(Order).get(context["order_id"])
    assert order.total == pytest.approx(total)


@then(parsers.cfparse("the order has {count:d} item"))
def order_item_count(context, count):
    order = current_domain.repository_for(Order).get(context["order_id"])
    assert len(order.items) == count
