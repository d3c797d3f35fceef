"""FastAPI endpoints for orders.

Customers (and admins) place orders and edit their items; listing every
order, reading one by ID and changing status are admin-only.
"""

import json

from fastapi import APIRouter, Depends
from protean.utils.globals import current_domain

from grocery.auth.dependencies import require_admin, require_customer
from grocery.auth.principal import Principal
from grocery.ordering.api.schemas import (
    AddOrderItemRequest,
    CreateOrderRequest,
    OrderIdResponse,
    OrderItemIdResponse,
    OrderResponse,
    StatusResponse,
    UpdateOrderStatusRequest,
)
from grocery.ordering.order.creation import CreateOrder
from grocery.ordering.order.modification import AddOrderItem, RemoveOrderItem
from grocery.ordering.order.queries import get_order, list_orders, list_orders_for_customer
from grocery.ordering.order.status import UpdateOrderStatus

router = APIRouter(prefix="/orders", tags=["orders"])


@router.post("", status_code=201, response_model=OrderIdResponse)
async def create_order(body: CreateOrderRequest, principal: Principal = Depends(require_customer)) -> OrderIdResponse:
    command = CreateOrder(
        customer_id=body.customer_id,
        items=json.dumps([item.model_dump() for item in body.items]),
        requested_by=principal.user_id,
    )
    result = current_domain.process(command, asynchronous=False)
    return OrderIdResponse(order_id=result)


@router.get("", response_model=list[OrderResponse])
async def list_all_orders(principal: Principal = Depends(require_admin)) -> list[OrderResponse]:
    return [OrderResponse.from_order(order) for order in list_orders()]


@router.get("/customer/{customer_id}", response_model=list[OrderResponse])
async def list_customer_orders(
    customer_id: str, principal: Principal = Depends(require_customer)
) -> list[OrderResponse]:
    return [OrderResponse.from_order(order) for order in list_orders_for_customer(customer_id)]


@router.get("/{order_id}", response_model=OrderResponse)
async def get_order_by_id(order_id: str, principal: Principal = Depends(require_admin)) -> OrderResponse:
    return OrderResponse.from_order(get_order(order_id))


@router.put("/{order_id}/status", response_model=StatusResponse)
async def update_order_status(
    order_id: str, body: UpdateOrderStatusRequest, principal: Principal = Depends(require_admin)
) -> StatusResponse:
    command = UpdateOrderStatus(order_id=order_id, status=body.status, requested_by=principal.user_id)
    current_domain.process(command, asynchronous=False)
    return StatusResponse()


@router.post("/{order_id}/items", status_code=201, response_model=OrderItemIdResponse)
async def add_order_item(
    order_id: str, body: AddOrderItemRequest, principal: Principal = Depends(require_customer)
) -> OrderItemIdResponse:
    command = AddOrderItem(
        order_id=order_id,
        product_id=body.product_id,
        quantity=body.quantity,
        requested_by=principal.user_id,
    )
    result = current_domain.process(command, asynchronous=False)
    return OrderItemIdResponse(item_id=result)


@router.delete("/{order_id}/items/{item_id}", response_model=StatusResponse)
async def remove_order_item(
    order_id: str, item_id: str, principal: Principal = Depends(require_customer)
) -> StatusResponse:
    command = RemoveOrderItem(order_id=order_id, item_id=item_id, requested_by=principal.user_id)
    current_domain.process(command, asynchronous=False)
    return StatusResponse()
