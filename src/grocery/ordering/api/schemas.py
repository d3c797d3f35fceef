"""Pydantic request/response schemas for the Ordering API."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

# --- Request Schemas ---


class OrderItemRequest(BaseModel):
    product_id: str
    quantity: int


class CreateOrderRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "customer_id": "a1b2c3d4-e5f6-7890-abcd-ef1234567890",
                    "items": [
                        {"product_id": "0c6f3b8e-5a4d-4e2b-8f1c-7d9a2b3c4e5f", "quantity": 2},
                    ],
                }
            ]
        }
    }

    customer_id: str
    items: list[OrderItemRequest] = Field(default_factory=list)


class AddOrderItemRequest(BaseModel):
    model_config = {
        "json_schema_extra": {"examples": [{"product_id": "0c6f3b8e-5a4d-4e2b-8f1c-7d9a2b3c4e5f", "quantity": 1}]}
    }

    product_id: str
    quantity: int


class UpdateOrderStatusRequest(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"status": "confirmed"}]}}

    status: str


# --- Response Schemas ---


class OrderIdResponse(BaseModel):
    order_id: str


class OrderItemIdResponse(BaseModel):
    item_id: str


class StatusResponse(BaseModel):
    status: str = "ok"


class OrderItemResponse(BaseModel):
    item_id: str
    product_id: str
    quantity: int
    unit_price: float
    subtotal: float


class OrderResponse(BaseModel):
    order_id: str
    customer_id: str
    status: str
    total: float
    items: list[OrderItemResponse]
    created_at: datetime | None = None
    updated_at: datetime | None = None
    created_by: str | None = None
    updated_by: str | None = None

    @classmethod
    def from_order(cls, order) -> OrderResponse:
        return cls(
            order_id=str(order.id),
            customer_id=str(order.customer_id),
            status=order.status,
            total=order.total,
            items=[
                OrderItemResponse(
                    item_id=str(item.id),
                    product_id=str(item.product_id),
                    quantity=item.quantity,
                    unit_price=item.unit_price,
                    subtotal=item.subtotal,
                )
                for item in order.line_items
            ],
            created_at=order.created_at,
            updated_at=order.updated_at,
            created_by=str(order.created_by) if order.created_by else None,
            updated_by=str(order.updated_by) if order.updated_by else None,
        )
