"""
ActivityHive Backend — Generic Collection Route
================================================

What:  GET /api/{collection_name}: every document in the named collection.
How:   resolve_collection binds the handle (or answers 400); the handler
       delegates to CollectionService and returns the JSON array.
"""

from typing import Any, Dict, List

from fastapi import APIRouter, Depends
from motor.motor_asyncio import AsyncIOMotorCollection

from activityhive.dependencies import resolve_collection
from activityhive.services.collection_service import collection_service

router = APIRouter(prefix="/api", tags=["Collections"])


@router.get(
    "/{collection_name}",
    responses={
        200: {"description": "All documents in the collection (possibly empty)"},
        400: {"description": "Invalid collection name", "content": {"text/plain": {}}},
        500: {"description": "Error fetching documents", "content": {"text/plain": {}}},
    },
    summary="List every document in a collection",
)
async def list_collection(
    collection: AsyncIOMotorCollection = Depends(resolve_collection),
) -> List[Dict[str, Any]]:
    return await collection_service.list_documents(collection)
