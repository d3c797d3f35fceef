from grocery.catalogue.category import (  # noqa: F401
    category,
    events as category_events,
    management as category_management,
    repository as category_repository,
)
from grocery.catalogue.product import (  # noqa: F401
    events as product_events,
    management as product_management,
    product,
    repository as product_repository,
)
