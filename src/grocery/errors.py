"""Typed business errors for the grocery service.

Every error carries a stable code and the HTTP status the API layer maps it to.
Command handlers raise these; nothing below the routers knows about HTTP, the
status is only read by the exception handler registered in ``web.py``.
"""

from datetime import UTC, datetime


class GroceryError(Exception):
    """Base exception for all grocery business errors."""

    code = "INTERNAL_ERROR"
    http_status = 500

    def __init__(self, message: str, **details):
        super().__init__(message)
        self.message = message
        self.details = details
        self.timestamp = datetime.now(UTC)

    def to_response(self) -> dict:
        """Convert to the REST error envelope."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "details": {key: str(value) for key, value in self.details.items()},
                "timestamp": self.timestamp.isoformat(),
            }
        }


# ─── Orders ──────────────────────────────────────────────────────


class InvalidOrderData(GroceryError):
    code = "ORD002"
    http_status = 400


class OrderNotFound(GroceryError):
    code = "ORD001"
    http_status = 404

    def __init__(self, order_id):
        super().__init__(f"Order '{order_id}' not found", order_id=order_id)


class OrderItemNotFound(GroceryError):
    code = "ORD005"
    http_status = 404

    def __init__(self, order_id, item_id):
        super().__init__(
            f"Item '{item_id}' not found on order '{order_id}'",
            order_id=order_id,
            item_id=item_id,
        )


class OrderStatusInvalid(GroceryError):
    """The order's current status does not allow the requested change."""

    code = "ORD003"
    http_status = 409


# ─── Products / stock ────────────────────────────────────────────


class InsufficientStock(GroceryError):
    code = "PROD003"
    http_status = 409

    def __init__(self, product_id, requested: int, available: int):
        super().__init__(
            f"Insufficient stock for product '{product_id}': requested {requested}, available {available}",
            product_id=product_id,
            requested=requested,
            available=available,
        )
        self.product_id = product_id
        self.requested = requested
        self.available = available


class ProductNotFound(GroceryError):
    code = "PROD001"
    http_status = 404

    def __init__(self, product_id):
        super().__init__(f"Product '{product_id}' not found", product_id=product_id)
        self.product_id = product_id


class InvalidProductData(GroceryError):
    code = "PROD002"
    http_status = 400


# ─── Customers ───────────────────────────────────────────────────


class CustomerNotFound(GroceryError):
    code = "CUST001"
    http_status = 404

    def __init__(self, customer_id):
        super().__init__(f"Customer '{customer_id}' not found", customer_id=customer_id)


class InvalidCustomerData(GroceryError):
    code = "CUST002"
    http_status = 400


class CustomerAlreadyExists(GroceryError):
    code = "CUST003"
    http_status = 409

    def __init__(self, email):
        super().__init__(f"A customer with email '{email}' already exists", email=email)


# ─── Categories ──────────────────────────────────────────────────


class CategoryNotFound(GroceryError):
    code = "CAT001"
    http_status = 404

    def __init__(self, category_id):
        super().__init__(f"Category '{category_id}' not found", category_id=category_id)


class InvalidCategoryData(GroceryError):
    code = "CAT002"
    http_status = 400


# ─── Auth ────────────────────────────────────────────────────────


class AuthenticationFailed(GroceryError):
    code = "AUTH003"
    http_status = 401


class PermissionDenied(GroceryError):
    code = "AUTH004"
    http_status = 403
