# Cart Models

from .cart import (
    LineItem,
    validate_line_item,
    CartSummary,
    ApplyDiscountRequest,
    CartResponse,
)

__all__ = [
    "LineItem",
    "validate_line_item",
    "CartSummary",
    "ApplyDiscountRequest",
    "CartResponse",
]
