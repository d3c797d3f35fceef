"""Demo data: a two-level category tree, a stocked product range and one customer.

Everything goes through the regular commands, so the same validation and
events apply as for API writes. Seeding is skipped when any category exists.
"""

import structlog
from protean.domain import Domain
from protean.utils.globals import current_domain

logger = structlog.get_logger(__name__)

# root category -> subcategory -> [(name, description, price, stock)]
CATALOGUE = {
    "Produce": {
        "Fruits": [
            ("Banana", "Fresh bananas from Ecuador", 0.99, 100),
            ("Apple", "Red delicious apples", 0.75, 150),
            ("Orange", "Sweet navel oranges", 1.29, 120),
        ],
        "Vegetables": [
            ("Carrot", "Organic carrots", 1.99, 80),
            ("Tomato", "Vine-ripened tomatoes", 2.49, 90),
            ("Spinach", "Fresh baby spinach", 3.99, 50),
        ],
        "Herbs": [
            ("Basil", "Fresh basil leaves", 2.99, 40),
            ("Cilantro", "Fresh cilantro bunch", 1.99, 45),
            ("Mint", "Fresh mint leaves", 2.49, 35),
        ],
    },
    "Dairy": {
        "Milk & Cream": [
            ("Whole Milk", "Fresh whole milk, 1 gallon", 3.99, 40),
            ("Heavy Cream", "Fresh heavy cream", 4.29, 25),
            ("Half & Half", "Fresh half & half", 3.49, 30),
        ],
        "Cheese": [
            ("Cheddar", "Sharp cheddar cheese", 5.99, 30),
            ("Mozzarella", "Fresh mozzarella", 4.99, 35),
            ("Swiss", "Swiss cheese", 6.99, 25),
        ],
        "Yogurt": [
            ("Greek Yogurt", "Plain greek yogurt", 1.99, 45),
            ("Vanilla Yogurt", "Vanilla flavored yogurt", 2.49, 40),
            ("Strawberry Yogurt", "Strawberry yogurt", 2.49, 40),
        ],
    },
    "Bakery": {
        "Bread": [
            ("Whole Wheat", "Whole wheat bread", 3.49, 40),
            ("Sourdough", "Fresh sourdough loaf", 4.99, 30),
            ("Rye Bread", "Fresh rye bread", 4.49, 25),
        ],
        "Pastries": [
            ("Croissants", "Butter croissants, 4 pack", 6.99, 20),
            ("Danish", "Assorted danish pastries", 5.99, 25),
            ("Muffins", "Blueberry muffins, 4 pack", 5.99, 30),
        ],
        "Cakes & Desserts": [],
    },
    "Meat & Seafood": {
        "Poultry": [],
        "Beef": [],
        "Seafood": [],
    },
    "Pantry": {
        "Spices & Seasonings": [],
        "Canned Goods": [],
        "Condiments": [],
    },
}

CUSTOMERS = [
    {
        "name": "Test User",
        "email": "test.user@example.com",
        "phone": "+254700000000",
        "address": "123 Test Street, Test City, 12345",
    },
]


def _process(command):
    return current_domain.process(command, asynchronous=False)


def seed(domain: Domain) -> dict:
    """Load the demo data into ``domain``; returns how many records were created."""
    from grocery.catalogue.category.category import Category
    from grocery.catalogue.category.management import CreateCategory
    from grocery.catalogue.product.management import CreateProduct
    from grocery.identity.customer.management import RegisterCustomer

    created = {"categories": 0, "products": 0, "customers": 0}

    with domain.domain_context():
        if domain.repository_for(Category).list_all():
            logger.warning("seed_skipped", reason="catalogue is not empty")
            return created

        for root_name, subcategories in CATALOGUE.items():
            root_id = _process(CreateCategory(name=root_name))
            created["categories"] += 1

            for sub_name, products in subcategories.items():
                sub_id = _process(CreateCategory(name=sub_name, parent_category_id=root_id))
                created["categories"] += 1

                for name, description, price, stock in products:
                    _process(
                        CreateProduct(
                            name=name,
                            description=description,
                            price=price,
                            stock=stock,
                            category_id=sub_id,
                        )
                    )
                    created["products"] += 1

        for customer in CUSTOMERS:
            _process(RegisterCustomer(**customer))
            created["customers"] += 1

    logger.info("seed_completed", **created)
    return created
