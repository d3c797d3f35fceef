"""Product aggregate: catalogue details plus the on-hand stock count."""

from datetime import UTC, datetime

from protean.fields import DateTime, Float, Identifier, Integer, String, Text

from grocery.domain import grocery
from grocery.errors import InsufficientStock, InvalidProductData


def _validate_details(name, price):
    if not name or not name.strip():
        raise InvalidProductData("Product name is required")
    if len(name) > 255:
        raise InvalidProductData("Product name cannot exceed 255 characters")
    if price is None or price <= 0:
        raise InvalidProductData("Product price must be greater than zero")


def _validate_stock(stock):
    if stock is None or stock < 0:
        raise InvalidProductData("Product stock cannot be negative")


@grocery.aggregate
class Product:
    """A sellable item with a unit price and a stock count that never drops below zero.

    Stock changes on the order path go through `reserve` and `release` only;
    `set_stock` is the administrative correction used by the catalogue.
    """

    name: String(required=True, max_length=255)
    description: Text()
    price: Float(required=True)
    stock: Integer(default=0, min_value=0)
    category_id: Identifier(required=True)
    created_at: DateTime()
    updated_at: DateTime()
    created_by: Identifier()
    updated_by: Identifier()

    @classmethod
    def create(cls, name, price, stock, category_id, description=None, created_by=None):
        from grocery.catalogue.product.events import ProductCreated

        _validate_details(name, price)
        _validate_stock(stock)

        now = datetime.now(UTC)
        product = cls(
            name=name,
            description=description,
            price=price,
            stock=stock,
            category_id=category_id,
            created_at=now,
            updated_at=now,
            created_by=created_by,
            updated_by=created_by,
        )
        product.raise_(
            ProductCreated(
                product_id=product.id,
                name=name,
                price=price,
                stock=stock,
                category_id=category_id,
            )
        )
        return product

    def update_details(self, name=None, description=None, price=None, category_id=None, updated_by=None):
        from grocery.catalogue.product.events import ProductUpdated

        new_name = name if name is not None else self.name
        new_price = price if price is not None else self.price
        _validate_details(new_name, new_price)

        self.name = new_name
        self.price = new_price
        if description is not None:
            self.description = description
        if category_id is not None:
            self.category_id = category_id
        self.updated_at = datetime.now(UTC)
        self.updated_by = updated_by

        self.raise_(
            ProductUpdated(
                product_id=self.id,
                name=self.name,
                price=self.price,
                category_id=self.category_id,
            )
        )

    def set_stock(self, stock, updated_by=None):
        from grocery.catalogue.product.events import StockAdjusted

        _validate_stock(stock)

        previous = self.stock
        self.stock = stock
        self.updated_at = datetime.now(UTC)
        self.updated_by = updated_by

        self.raise_(StockAdjusted(product_id=self.id, previous_stock=previous, new_stock=stock))

    def reserve(self, quantity, order_id=None):
        """Take ``quantity`` units out of stock, or raise `InsufficientStock`."""
        from grocery.catalogue.product.events import StockReserved

        if quantity <= 0:
            raise InvalidProductData("Reserved quantity must be positive")
        if self.stock < quantity:
            raise InsufficientStock(self.id, requested=quantity, available=self.stock)

        self.stock -= quantity
        self.updated_at = datetime.now(UTC)

        self.raise_(
            StockReserved(
                product_id=self.id,
                order_id=order_id,
                quantity=quantity,
                remaining_stock=self.stock,
            )
        )

    def release(self, quantity, order_id=None):
        """Put ``quantity`` units back into stock."""
        from grocery.catalogue.product.events import StockReleased

        if quantity <= 0:
            raise InvalidProductData("Released quantity must be positive")

        self.stock += quantity
        self.updated_at = datetime.now(UTC)

        self.raise_(
            StockReleased(
                product_id=self.id,
                order_id=order_id,
                quantity=quantity,
                remaining_stock=self.stock,
            )
        )
