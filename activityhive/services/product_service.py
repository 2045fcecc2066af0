"""
ActivityHive Backend — Product Updates
=======================================

What:  Partial update of one product, addressed by its application-level
       integer `id` field.
Who:   PUT /api/products/{id}.

Two identities:
    Products carry both the store-assigned `_id` and an integer `id`. The
    URL addresses `id`. The two are never reconciled or cross-checked.

Id parsing:
    The path segment is read leniently as base-10: leading whitespace and a
    sign are allowed, and a leading run of digits is taken even when text
    follows ("12abc" → 12). A segment with no leading digits is "not a
    number", as is a digit run too wide for a BSON int64. Such a value can
    never equal a stored id, so the request is answered 404 without a query.

Flow:
    validate_product_update(body) ──fail──▶ ValidationError (400)
            │
    parse_product_id(raw) ──None──▶ NotFoundError (404)
            │
    products.update_one({"id": n}, {"$set": body})
            ├─ error ─────────▶ DatabaseError (500)
            ├─ matched == 0 ──▶ NotFoundError (404)
            ▼
    ProductUpdatedResponse
"""

import logging
import re
from typing import Any, Optional

from activityhive.database import MongoStore
from activityhive.exceptions import DatabaseError, NotFoundError
from activityhive.schemas.responses import ProductUpdatedResponse
from activityhive.validators import validate_product_update

logger = logging.getLogger(__name__)

PRODUCTS_COLLECTION = "products"

_LEADING_INT = re.compile(r"^\s*([+-]?)([0-9]+)")

# Stored ids are BSON int64; anything wider can never match
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1
_INT64_MAX_DIGITS = len(str(_INT64_MAX))


def parse_product_id(raw: str) -> Optional[int]:
    """
    Lenient base-10 integer parse of a path segment.

    >>> parse_product_id("42")
    42
    >>> parse_product_id("7days")
    7
    >>> parse_product_id("abc") is None
    True

    Only ASCII digits count. Values outside the int64 range come back as
    None, the same as text with no digits.
    """
    match = _LEADING_INT.match(raw)
    if match is None:
        return None
    sign, digits = match.groups()
    digits = digits.lstrip("0") or "0"
    if len(digits) > _INT64_MAX_DIGITS:
        return None
    value = int(sign + digits)
    if not _INT64_MIN <= value <= _INT64_MAX:
        return None
    return value


class ProductService:
    """Business logic for product documents."""

    async def update_product(
        self,
        store: MongoStore,
        raw_id: str,
        body: Optional[Any],
    ) -> ProductUpdatedResponse:
        """
        Merge the body's fields into the product whose `id` matches.

        Only the fields named in the body are overwritten ($set); every
        other field on the stored document is preserved.

        Raises:
            ValidationError: Body missing or `spaces` not numeric (→ 400)
            NotFoundError:   No product with that id (→ 404)
            DatabaseError:   update_one failed (→ 500)
        """
        validate_product_update(body).raise_for_errors()

        product_id = parse_product_id(raw_id)
        if product_id is None:
            logger.info("Product id %r is not a number", raw_id)
            raise NotFoundError(message="Product not found", context={"raw_id": raw_id})

        try:
            result = await store.collection(PRODUCTS_COLLECTION).update_one(
                {"id": product_id},
                {"$set": dict(body)},
            )
        except Exception as e:
            logger.error("Error updating product %d: %s", product_id, str(e), exc_info=True)
            raise DatabaseError(
                message="Error updating product",
                context={"product_id": product_id, "error_type": type(e).__name__},
            ) from e

        if result.matched_count == 0:
            raise NotFoundError(message="Product not found", context={"product_id": product_id})

        logger.info("Product %d updated (fields: %s)", product_id, ", ".join(sorted(body)))
        return ProductUpdatedResponse(message="Product updated successfully")


product_service = ProductService()
