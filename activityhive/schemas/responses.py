"""
ActivityHive Backend — Pydantic Response Schemas
=================================================

What:  Response bodies returned by the write routes and the health check.
How:   FastAPI serializes these via `response_model` and publishes them in
       the OpenAPI document. Field names follow the JSON contract exactly
       (camelCase `orderId`).

Request bodies are not modelled here: they are free-form documents checked
by activityhive.validators and stored as sent.
"""

from pydantic import BaseModel, Field


class OrderCreatedResponse(BaseModel):
    """Returned by POST /api/orders with HTTP 201."""

    message: str = Field(default="Order created successfully")
    orderId: str = Field(description="Store-assigned identity of the new order (ObjectId hex)")


class ProductUpdatedResponse(BaseModel):
    """Returned by PUT /api/products/{id} with HTTP 200."""

    message: str = Field(default="Product updated successfully")


class HealthResponse(BaseModel):
    """
    Returned by GET /health.

    status is "healthy" when MongoDB answers a ping, "unhealthy" otherwise.
    """

    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="MongoDB connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
