import os
from pathlib import Path

import pytest
from protean.integrations.pytest import DomainFixture


def pytest_addoption(parser):
    parser.addoption(
        "--env",
        action="store",
        default="test",
        help="Config environment to run tests on",
    )


def pytest_sessionstart(session):
    """Select the config overlay before any test module imports the domain."""
    os.environ["PROTEAN_ENV"] = session.config.option.env


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their directory location."""
    for item in items:
        test_path = str(Path(item.fspath))

        if "/domain/" in test_path:
            item.add_marker(pytest.mark.domain)
        elif "/application/" in test_path:
            item.add_marker(pytest.mark.application)
        elif "/integration/" in test_path:
            item.add_marker(pytest.mark.integration)
            # Integration tests are often slower
            if not any(m.name == "fast" for m in item.iter_markers()):
                item.add_marker(pytest.mark.slow)


@pytest.fixture(scope="session")
def grocery_bed():
    from grocery.domain import grocery

    bed = DomainFixture(grocery)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(scope="session", autouse=True)
def setup_db(grocery_bed):
    from grocery.domain import grocery
    from grocery.utils.db import drop_db, setup_db

    setup_db(grocery)

    yield

    drop_db(grocery)


@pytest.fixture(autouse=True)
def _ctx(grocery_bed):
    """Push domain context before each test, cleanup after."""
    with grocery_bed.domain_context():
        yield

        from protean import current_domain

        for _, provider in current_domain.providers.items():
            provider._data_reset()

        current_domain.event_store.store._data_reset()


@pytest.fixture(autouse=True)
def _reset_notifications():
    from grocery.notifications.channel import reset_channels
    from grocery.notifications.notifier import reset_notifier

    reset_channels()
    reset_notifier()
    yield
    reset_channels()
    reset_notifier()


# ---------------------------------------------------------------------------
# Shared builders
# ---------------------------------------------------------------------------
@pytest.fixture
def customer_id():
    from grocery.identity.customer.management import RegisterCustomer
    from protean import current_domain

    return current_domain.process(
        RegisterCustomer(
            name="Amina Otieno",
            email="amina@example.com",
            phone="+254700000001",
            address="7 Market Street, Kisumu",
        ),
        asynchronous=False,
    )


@pytest.fixture
def category_id():
    from grocery.catalogue.category.management import CreateCategory
    from protean import current_domain

    return current_domain.process(CreateCategory(name="Produce"), asynchronous=False)


@pytest.fixture
def make_product(category_id):
    """Return a builder that creates a product and returns its ID."""
    from grocery.catalogue.product.management import CreateProduct
    from protean import current_domain

    def _make(name="Apples (1kg)", price=2.5, stock=10):
        return current_domain.process(
            CreateProduct(name=name, price=price, stock=stock, category_id=category_id),
            asynchronous=False,
        )

    return _make


@pytest.fixture
def stock_of():
    """Return a function that reads a product's current stock from the repository."""
    from grocery.catalogue.product.product import Product
    from protean import current_domain

    def _stock(product_id):
        return current_domain.repository_for(Product).get(product_id).stock

    return _stock


# ---------------------------------------------------------------------------
# HTTP
# ---------------------------------------------------------------------------
def _auth_headers(user_id, email, role):
    from grocery.auth.principal import Principal
    from grocery.auth.tokens import issue_token

    token = issue_token(Principal(user_id=user_id, email=email, role=role))
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def client():
    from fastapi.testclient import TestClient
    from grocery.domain import grocery
    from grocery.web import create_app

    return TestClient(create_app(grocery))


@pytest.fixture
def admin_headers():
    from grocery.auth.principal import Role

    return _auth_headers("admin-1", "admin@example.com", Role.ADMIN)


@pytest.fixture
def customer_headers():
    from grocery.auth.principal import Role

    return _auth_headers("user-1", "amina@example.com", Role.CUSTOMER)


@pytest.fixture
def no_role_headers():
    return _auth_headers("guest-1", "guest@example.com", None)
