"""
ActivityHive Backend — Request Dependencies
============================================

What:  Per-request bindings injected into route handlers with Depends().

    read_json_body       Body parser. Empty body → None, malformed JSON or
                         the NaN/Infinity extensions → 400.
    resolve_collection   Collection resolver for `{collection_name}` routes.
                         Binds the handle to request.state.collection before
                         the handler runs; a rejected name ends the request
                         with 400 and the handler is never called.
"""

import json
import logging
from typing import Any, Optional

from fastapi import Depends, Path, Request
from motor.motor_asyncio import AsyncIOMotorCollection

from activityhive.database import MongoStore, get_store
from activityhive.exceptions import InvalidCollectionError, ValidationError

logger = logging.getLogger(__name__)


def _reject_constant(name: str) -> Any:
    # NaN, Infinity and -Infinity are not JSON
    raise ValueError(f"{name} is not a valid JSON value")


async def read_json_body(request: Request) -> Optional[Any]:
    raw = await request.body()
    if not raw.strip():
        return None
    try:
        return json.loads(raw, parse_constant=_reject_constant)
    except (ValueError, UnicodeDecodeError) as e:
        raise ValidationError(message="Invalid JSON body", context={"detail": str(e)}) from e


async def resolve_collection(
    request: Request,
    collection_name: str = Path(..., description="Name of the MongoDB collection"),
    store: MongoStore = Depends(get_store),
) -> AsyncIOMotorCollection:
    """
    Map the `collection_name` path segment to a collection handle.

    The name is used verbatim. Existence is not checked, so an unknown
    collection reads as empty.

    Raises:
        InvalidCollectionError: the driver rejected the name (→ 400)
    """
    lookup = store.lookup(collection_name)
    if not lookup.ok:
        logger.info("Rejected collection name %r: %s", collection_name, lookup.error)
        raise InvalidCollectionError(collection_name=collection_name, reason=lookup.error)

    request.state.collection = lookup.collection
    return lookup.collection
