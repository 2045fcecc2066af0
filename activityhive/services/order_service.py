"""
ActivityHive Backend — Order Creation
======================================

What:  Validates an order body and inserts it into the `orders` collection.
Who:   POST /api/orders.

Flow:
    validate_order(body) ──fail──▶ ValidationError (400), nothing written
            │
            ▼
    orders.insert_one(body) ──fail──▶ DatabaseError (500)
            │
            ▼
    OrderCreatedResponse(orderId=<inserted ObjectId>)

The body is stored as sent, extra fields included. There is no idempotency
key: a client that retries a request gets a second order document.
"""

import logging
from typing import Any, Optional

from activityhive.database import MongoStore
from activityhive.exceptions import DatabaseError
from activityhive.schemas.responses import OrderCreatedResponse
from activityhive.validators import validate_order

logger = logging.getLogger(__name__)

ORDERS_COLLECTION = "orders"


class OrderService:
    """Business logic for order documents."""

    async def create_order(self, store: MongoStore, body: Optional[Any]) -> OrderCreatedResponse:
        """
        Persist one new order.

        Args:
            store: The process-wide MongoStore
            body:  Parsed JSON body (None when the request had no body)

        Raises:
            ValidationError: Body missing or not an order shape (→ 400)
            DatabaseError:   insert_one failed (→ 500)
        """
        validate_order(body).raise_for_errors()

        document = dict(body)
        try:
            result = await store.collection(ORDERS_COLLECTION).insert_one(document)
        except Exception as e:
            logger.error("Error creating order: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Error creating order",
                context={"error_type": type(e).__name__},
            ) from e

        order_id = str(result.inserted_id)
        logger.info("Order %s created with %d items", order_id, len(document["items"]))
        return OrderCreatedResponse(message="Order created successfully", orderId=order_id)


order_service = OrderService()
