"""Domain events for the Product aggregate."""

from protean.fields import Float, Identifier, Integer, String

from grocery.domain import grocery


@grocery.event(part_of="Product")
class ProductCreated:
    """A new product was added to the catalogue."""

    __version__ = 1

    product_id: Identifier(required=True)
    name: String(required=True)
    price: Float(required=True)
    stock: Integer(required=True)
    category_id: Identifier(required=True)


@grocery.event(part_of="Product")
class ProductUpdated:
    """A product's name, description, price or category changed."""

    __version__ = 1

    product_id: Identifier(required=True)
    name: String(required=True)
    price: Float(required=True)
    category_id: Identifier(required=True)


@grocery.event(part_of="Product")
class StockAdjusted:
    """An administrator corrected the stock count."""

    __version__ = 1

    product_id: Identifier(required=True)
    previous_stock: Integer(required=True)
    new_stock: Integer(required=True)


@grocery.event(part_of="Product")
class StockReserved:
    """Units were taken out of stock for an order."""

    __version__ = 1

    product_id: Identifier(required=True)
    order_id: Identifier()
    quantity: Integer(required=True)
    remaining_stock: Integer(required=True)


@grocery.event(part_of="Product")
class StockReleased:
    """Units were returned to stock after an order item was removed."""

    __version__ = 1

    product_id: Identifier(required=True)
    order_id: Identifier()
    quantity: Integer(required=True)
    remaining_stock: Integer(required=True)
