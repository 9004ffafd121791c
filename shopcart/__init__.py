"""
shopcart

In-memory shopping cart: line items, quantity tally, promo code discount.
"""

from .errors import CartError, ValidationError, InvalidPromoCode
from .models.cart import LineItem, CartSummary, validate_line_item
from .services.cart import Cart
from .services.pricing import PromoCatalog

__version__ = "1.0.0"

__all__ = [
    "Cart",
    "CartError",
    "CartSummary",
    "InvalidPromoCode",
    "LineItem",
    "PromoCatalog",
    "ValidationError",
    "validate_line_item",
]
