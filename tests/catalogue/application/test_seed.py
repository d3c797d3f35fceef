"""Demo data loading through the regular commands."""

from grocery.catalogue.category.category import Category
from grocery.catalogue.product.product import Product
from grocery.domain import grocery
from grocery.identity.customer.customer import Customer
from grocery.seed import seed
from protean import current_domain


class TestSeed:
    def test_loads_catalogue_and_customer(self):
        created = seed(grocery)

        assert created == {"categories": 20, "products": 24, "customers": 1}
        assert len(current_domain.repository_for(Category).list_all()) == 20
        assert len(current_domain.repository_for(Product).list_all()) == 24
        assert current_domain.repository_for(Customer).find_by_email("test.user@example.com") is not None

    def test_builds_paths(self):
        seed(grocery)

        paths = {category.path for category in current_domain.repository_for(Category).list_all()}
        assert "Produce/Fruits" in paths
        assert "Meat & Seafood/Poultry" in paths

    def test_second_run_is_skipped(self):
        seed(grocery)

        assert seed(grocery) == {"categories": 0, "products": 0, "customers": 0}
        assert len(current_domain.repository_for(Product).list_all()) == 24
