"""Cart models"""

from collections.abc import Mapping
from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from ..errors import ValidationError


class LineItem(BaseModel):
    """One product placed in the cart"""

    # No coercion: "10" is not a price and 2.0 is not a quantity
    model_config = ConfigDict(strict=True)

    id: str
    name: str
    price: float = Field(ge=0, allow_inf_nan=False)
    quantity: int = Field(gt=0)


def validate_line_item(candidate: Any) -> LineItem:
    """
    Validate a candidate line item and return a fresh LineItem.

    Accepts a LineItem or a mapping with id, name, price and quantity.
    The returned instance never shares state with the candidate.

    Raises:
        ValidationError: if any field is missing, of the wrong type or out of range.
    """
    if isinstance(candidate, LineItem):
        candidate = candidate.model_dump()
    elif isinstance(candidate, Mapping):
        candidate = dict(candidate)

    try:
        return LineItem.model_validate(candidate)
    except PydanticValidationError as e:
        fields = ", ".join(
            ".".join(str(part) for part in err["loc"]) or "item" for err in e.errors()
        )
        raise ValidationError(
            f"Invalid line item ({fields})",
            errors=e.errors(include_url=False),
        ) from e


class CartSummary(BaseModel):
    """Read-only snapshot of a cart"""
    cart_id: str
    items: list[LineItem] = []
    item_count: int = 0
    subtotal: float = 0.0
    discount_rate: float = 0.0
    total: float = 0.0
    created_at: datetime
    updated_at: datetime


class ApplyDiscountRequest(BaseModel):
    """Request to apply a promo code"""
    code: str


class CartResponse(BaseModel):
    """Cart API response"""
    cart: CartSummary
    message: Optional[str] = None
