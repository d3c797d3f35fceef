from grocery.ordering.order import (  # noqa: F401
    creation,
    events,
    modification,
    order,
    repository,
    status,
)
