"""Tests for the StockLedger against an in-memory product source."""

import pytest
from grocery.catalogue.product.product import Product
from grocery.errors import InsufficientStock, ProductNotFound
from grocery.ordering.stock import StockLedger


class _ProductSource:
    """Stands in for ProductRepository: serves products and records writes."""

    def __init__(self, *products):
        self.products = {str(p.id): p for p in products}
        self.loads = []
        self.added = []

    def get_product(self, product_id):
        self.loads.append(str(product_id))
        if str(product_id) not in self.products:
            raise ProductNotFound(product_id)
        return self.products[str(product_id)]

    def add(self, product):
        self.added.append(product)


def _product(stock=10):
    return Product.create(name="Milk (1L)", price=1.2, stock=stock, category_id="cat-001")


class TestCheckAndReserve:
    def test_decrements_stock(self):
        product = _product(stock=10)
        ledger = StockLedger(_ProductSource(product))

        ledger.check_and_reserve(product.id, 4)

        assert product.stock == 6

    def test_exact_stock_can_be_reserved(self):
        product = _product(stock=3)
        ledger = StockLedger(_ProductSource(product))

        ledger.check_and_reserve(product.id, 3)

        assert product.stock == 0

    def test_insufficient_stock_leaves_count_unchanged(self):
        product = _product(stock=5)
        ledger = StockLedger(_ProductSource(product))

        with pytest.raises(InsufficientStock) as exc:
            ledger.check_and_reserve(product.id, 6)

        assert exc.value.requested == 6
        assert exc.value.available == 5
        assert product.stock == 5

    def test_repeated_reservations_see_each_other(self):
        product = _product(stock=5)
        source = _ProductSource(product)
        ledger = StockLedger(source)

        ledger.check_and_reserve(product.id, 3)
        with pytest.raises(InsufficientStock):
            ledger.check_and_reserve(product.id, 3)

        assert source.loads == [str(product.id)]

    def test_unknown_product(self):
        ledger = StockLedger(_ProductSource())
        with pytest.raises(ProductNotFound):
            ledger.check_and_reserve("missing", 1)


class TestRelease:
    def test_increments_stock(self):
        product = _product(stock=2)
        ledger = StockLedger(_ProductSource(product))

        ledger.release(product.id, 5)

        assert product.stock == 7

    def test_unknown_product(self):
        ledger = StockLedger(_ProductSource())
        with pytest.raises(ProductNotFound):
            ledger.release("missing", 1)


class TestFlush:
    def test_nothing_is_written_before_flush(self):
        product = _product()
        source = _ProductSource(product)
        ledger = StockLedger(source)

        ledger.check_and_reserve(product.id, 1)

        assert source.added == []

    def test_flush_writes_each_touched_product_once(self):
        first, second, untouched = _product(), _product(), _product()
        source = _ProductSource(first, second, untouched)
        ledger = StockLedger(source)

        ledger.check_and_reserve(first.id, 1)
        ledger.check_and_reserve(first.id, 1)
        ledger.release(second.id, 1)
        ledger.product(untouched.id)
        ledger.flush()

        assert sorted(str(p.id) for p in source.added) == sorted([str(first.id), str(second.id)])

        ledger.flush()
        assert len(source.added) == 2


class TestConcurrentWriters:
    """Two ledgers that loaded the same product before either one flushed."""

    def _ledgers(self, product_id):
        first, second = StockLedger(), StockLedger()
        first.product(product_id)
        second.product(product_id)
        return first, second

    def test_second_oversell_is_rejected(self, make_product, stock_of):
        product_id = make_product(stock=10)
        first, second = self._ledgers(product_id)

        first.check_and_reserve(product_id, 6)
        first.flush()
        second.check_and_reserve(product_id, 6)

        with pytest.raises(InsufficientStock) as exc:
            second.flush()

        assert exc.value.requested == 6
        assert exc.value.available == 4
        assert stock_of(product_id) == 4

    def test_second_reservation_that_still_fits_is_applied(self, make_product, stock_of):
        product_id = make_product(stock=10)
        first, second = self._ledgers(product_id)

        first.check_and_reserve(product_id, 6)
        first.flush()
        second.check_and_reserve(product_id, 3)
        second.flush()

        assert stock_of(product_id) == 1

    def test_stale_release_is_not_lost(self, make_product, stock_of):
        product_id = make_product(stock=10)
        first, second = self._ledgers(product_id)

        first.check_and_reserve(product_id, 6)
        first.flush()
        second.release(product_id, 2)
        second.flush()

        assert stock_of(product_id) == 6
