"""Cart exceptions"""

from typing import Any, Optional


class CartError(Exception):
    """Base exception for shopping cart errors"""
    pass


class ValidationError(CartError):
    """A candidate line item failed field validation"""

    def __init__(self, message: str, errors: Optional[list[dict[str, Any]]] = None):
        super().__init__(message)
        self.errors = errors or []


class InvalidPromoCode(CartError):
    """Promo code is not in the catalog"""

    def __init__(self, code: Any):
        super().__init__(f"Invalid promo code: {code!r}")
        self.code = code
