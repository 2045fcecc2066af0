from activityhive.schemas.responses import (
    HealthResponse,
    OrderCreatedResponse,
    ProductUpdatedResponse,
)

__all__ = ["HealthResponse", "OrderCreatedResponse", "ProductUpdatedResponse"]
