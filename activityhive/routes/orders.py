"""
ActivityHive Backend — Order Route
===================================

What:  POST /api/orders: validate and insert one order document.

Request body (extra fields are stored as sent):
    {
        "customerName": "Ada",
        "customerPhone": "555-0100",
        "items": [{"sku": "A1", "qty": 2}]
    }

Responses:
    201  {"message": "Order created successfully", "orderId": "<ObjectId>"}
    400  Invalid order data
    500  Error creating order
"""

from typing import Any, Optional

from fastapi import APIRouter, Depends

from activityhive.database import MongoStore, get_store
from activityhive.dependencies import read_json_body
from activityhive.schemas.responses import OrderCreatedResponse
from activityhive.services.order_service import order_service

router = APIRouter(prefix="/api", tags=["Orders"])


@router.post(
    "/orders",
    status_code=201,
    response_model=OrderCreatedResponse,
    responses={
        400: {"description": "Invalid order data", "content": {"text/plain": {}}},
        500: {"description": "Error creating order", "content": {"text/plain": {}}},
    },
    summary="Create an order",
)
async def create_order(
    body: Optional[Any] = Depends(read_json_body),
    store: MongoStore = Depends(get_store),
) -> OrderCreatedResponse:
    return await order_service.create_order(store=store, body=body)
