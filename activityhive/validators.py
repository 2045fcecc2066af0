"""
ActivityHive Backend — Request Body Validators
===============================================

What:  One reusable validator per accepted document shape (order,
       product update), each returning a ValidationResult.
How:   Pydantic models with `extra="allow"` describe the required fields
       only. Anything else in the body passes through untouched, so the
       services can store the caller's document as sent.
Who:   OrderService and ProductService, before any store call.

Shapes:
    Order           customerName: non-empty str
                    customerPhone: non-empty str
                    items: list (may be empty)
    Product update  spaces: int or finite float (not bool, not a numeric string)
"""

from dataclasses import dataclass, field
from typing import Annotated, Any, List, Optional, Type, Union

from pydantic import BaseModel, ConfigDict, Field, Strict, StrictInt, StrictStr
from pydantic import ValidationError as PydanticValidationError
from pydantic.types import AllowInfNan

from activityhive.exceptions import ValidationError


# JSON numbers only: no bools, no numeric strings, no NaN/Infinity
FiniteStrictFloat = Annotated[float, Strict(), AllowInfNan(False)]


class OrderIn(BaseModel):
    model_config = ConfigDict(extra="allow")

    customerName: StrictStr = Field(min_length=1)
    customerPhone: StrictStr = Field(min_length=1)
    items: List[Any]


class ProductUpdateIn(BaseModel):
    model_config = ConfigDict(extra="allow")

    spaces: Union[StrictInt, FiniteStrictFloat]


@dataclass
class ValidationResult:
    """
    Structured outcome of a body check.

    Attributes:
        ok:      True when the body has the required shape
        message: Fixed client-facing message used for the 400 response
        errors:  Field-level problems (logged, not returned)
    """

    ok: bool
    message: str = ""
    errors: List[dict] = field(default_factory=list)

    def raise_for_errors(self) -> None:
        if not self.ok:
            raise ValidationError(message=self.message, errors=self.errors)


def _validate(model: Type[BaseModel], body: Optional[Any], message: str) -> ValidationResult:
    if not isinstance(body, dict):
        return ValidationResult(
            ok=False,
            message=message,
            errors=[{"loc": [], "msg": "body must be a JSON object"}],
        )
    try:
        model.model_validate(body)
    except PydanticValidationError as e:
        return ValidationResult(
            ok=False,
            message=message,
            errors=[{"loc": list(err["loc"]), "msg": err["msg"]} for err in e.errors()],
        )
    return ValidationResult(ok=True)


def validate_order(body: Optional[Any]) -> ValidationResult:
    """Check an order body: named customer, phone, and an items array."""
    return _validate(OrderIn, body, "Invalid order data")


def validate_product_update(body: Optional[Any]) -> ValidationResult:
    """Check a product update body: numeric `spaces` is mandatory."""
    return _validate(ProductUpdateIn, body, "Invalid product data")
