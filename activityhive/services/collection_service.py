"""
ActivityHive Backend — Generic Collection Reads
================================================

What:  Lists every document of a resolved collection as JSON-safe dicts.
Who:   GET /api/{collection_name}.

No filter, projection, sort or limit is applied: the documents come back
in whatever order MongoDB returns them, which is not stable across calls.
"""

import logging
from typing import Any, Dict, List

from bson import ObjectId
from fastapi.encoders import jsonable_encoder
from motor.motor_asyncio import AsyncIOMotorCollection

from activityhive.exceptions import DatabaseError

logger = logging.getLogger(__name__)


def serialize_documents(documents: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """ObjectId → hex string, datetime → ISO 8601, recursively."""
    return jsonable_encoder(documents, custom_encoder={ObjectId: str})


class CollectionService:
    """Read-only access to arbitrary collections."""

    async def list_documents(self, collection: AsyncIOMotorCollection) -> List[Dict[str, Any]]:
        """
        Fetch all documents from `collection`.

        Returns:
            List of documents (possibly empty; a collection that was never
            written is indistinguishable from an empty one)

        Raises:
            DatabaseError: Cursor creation or iteration failed (→ 500)
        """
        try:
            documents = await collection.find({}).to_list(length=None)
        except Exception as e:
            logger.error(
                "Error fetching documents from '%s': %s",
                getattr(collection, "name", "?"),
                str(e),
                exc_info=True,
            )
            raise DatabaseError(
                message="Error fetching documents",
                context={"collection": getattr(collection, "name", None), "error_type": type(e).__name__},
            ) from e

        logger.debug("Fetched %d documents from '%s'", len(documents), collection.name)
        return serialize_documents(documents)


collection_service = CollectionService()
