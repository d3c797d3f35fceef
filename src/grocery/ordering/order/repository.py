"""Repository for the Order aggregate."""

from protean.exceptions import ObjectNotFoundError

from grocery.domain import grocery
from grocery.errors import OrderNotFound
from grocery.ordering.order.order import Order, OrderStatus

LIST_LIMIT = 1000
SCAN_BATCH = 500


@grocery.repository(part_of=Order)
class OrderRepository:
    def get_order(self, order_id) -> Order:
        """Load an order or raise `OrderNotFound`."""
        try:
            return self.get(order_id)
        except ObjectNotFoundError as exc:
            raise OrderNotFound(order_id) from exc

    def list_all(self) -> list[Order]:
        return self._dao.query.order_by("-created_at").limit(LIST_LIMIT).all().items

    def list_by_customer(self, customer_id) -> list[Order]:
        return (
            self._dao.query.filter(customer_id=customer_id)
            .order_by("-created_at")
            .limit(LIST_LIMIT)
            .all()
            .items
        )

    def has_pending_order_with_product(self, product_id) -> bool:
        """Whether any pending order holds ``product_id``, scanning every pending order."""
        offset = 0
        while True:
            page = (
                self._dao.query.filter(status=OrderStatus.PENDING.value)
                .order_by("created_at")
                .offset(offset)
                .limit(SCAN_BATCH)
                .all()
            )
            for order in page.items:
                if any(str(item.product_id) == str(product_id) for item in order.items):
                    return True
            offset += len(page.items)
            if not page.items or offset >= page.total:
                return False
