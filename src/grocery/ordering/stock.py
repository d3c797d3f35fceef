"""Stock ledger: the only writer of product stock on the order path.

The ledger loads each product once per operation, so several reservations
against the same product see each other. Nothing is written until `flush`,
which command handlers call after every check has passed; the surrounding
Unit of Work then commits the products together with the order.

A product written by another operation since it was loaded fails Protean's
version check on `flush`. The ledger then re-reads it: a net reservation
that no longer fits raises `InsufficientStock`, anything else is applied
again to the fresh copy.
"""

from collections import Counter

import structlog
from protean.exceptions import ExpectedVersionError
from protean.utils.globals import current_domain

from grocery.catalogue.product.product import Product
from grocery.errors import InsufficientStock

logger = structlog.get_logger(__name__)


class StockLedger:
    def __init__(self, repository=None):
        self._repository = repository or current_domain.repository_for(Product)
        self._products: dict[str, Product] = {}
        self._touched: set[str] = set()
        # Net units taken per product since the last flush; negative means released
        self._reserved: Counter = Counter()
    def product(self, product_id) -> Product:
        """Return the operation's copy of a product, or raise `ProductNotFound`."""
        key = str(product_id)
        if key not in self._products:
            self._products[key] = self._repository.get_product(product_id)
        return self._products[key]

    def check_and_reserve(self, product_id, quantity, order_id=None) -> Product:
        """Decrement stock by ``quantity`` if at least that much is available.

        Raises `InsufficientStock` when it is not, and `ProductNotFound` for
        an unknown product. Stock is unchanged on failure.
        """
        product = self.product(product_id)
        product.reserve(quantity, order_id=order_id)
        self._touched.add(str(product_id))
        self._reserved[str(product_id)] += quantity

        logger.debug(
            "stock_reserved",
            product_id=str(product_id),
            order_id=str(order_id) if order_id else None,
            quantity=quantity,
            remaining_stock=product.stock,
        )
        return product

    def release(self, product_id, quantity, order_id=None) -> Product:
        """Increment stock by ``quantity``. Raises `ProductNotFound` for an unknown product."""
        product = self.product(product_id)
        product.release(quantity, order_id=order_id)
        self._touched.add(str(product_id))
        self._reserved[str(product_id)] -= quantity

        logger.debug(
            "stock_released",
            product_id=str(product_id),
            order_id=str(order_id) if order_id else None,
            quantity=quantity,
            remaining_stock=product.stock,
        )
        return product

    def flush(self) -> None:
        """Hand every product changed since the last flush to the repository."""
        for key in sorted(self._touched):
            try:
                self._repository.add(self._products[key])
            except ExpectedVersionError:
                self._rebase(key)
        self._touched.clear()
        self._reserved.clear()

    def _rebase(self, key) -> None:
        """Re-apply this operation's net stock change to a freshly loaded product."""
        fresh = self._repository.get_product(key)
        net = self._reserved[key]

        logger.info(
            "stock_write_conflict",
            product_id=key,
            net_reserved=net,
            stale_stock=self._products[key].stock + net,
            current_stock=fresh.stock,
        )
        if net > fresh.stock:
            raise InsufficientStock(key, requested=net, available=fresh.stock)

        if net > 0:
            fresh.reserve(net)
        elif net < 0:
            fresh.release(-net)
        self._products[key] = fresh
        self._repository.add(fresh)
