"""
ActivityHive Backend — Product Route
=====================================

What:  PUT /api/products/{id}: merge the body into the product whose
       integer `id` field matches the path segment.

The path segment is taken as a string and parsed leniently by
ProductService ("12abc" addresses product 12), so FastAPI's own int
coercion is not used here.

Responses:
    200  {"message": "Product updated successfully"}
    400  Invalid product data
    404  Product not found
    500  Error updating product
"""

from typing import Any, Optional

from fastapi import APIRouter, Depends, Path

from activityhive.database import MongoStore, get_store
from activityhive.dependencies import read_json_body
from activityhive.schemas.responses import ProductUpdatedResponse
from activityhive.services.product_service import product_service

router = APIRouter(prefix="/api", tags=["Products"])


@router.put(
    "/products/{id}",
    response_model=ProductUpdatedResponse,
    responses={
        400: {"description": "Invalid product data", "content": {"text/plain": {}}},
        404: {"description": "Product not found", "content": {"text/plain": {}}},
        500: {"description": "Error updating product", "content": {"text/plain": {}}},
    },
    summary="Partially update a product",
)
async def update_product(
    id: str = Path(..., description="Application-level product id"),
    body: Optional[Any] = Depends(read_json_body),
    store: MongoStore = Depends(get_store),
) -> ProductUpdatedResponse:
    return await product_service.update_product(store=store, raw_id=id, body=body)
