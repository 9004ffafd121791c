"""
Shopping cart

An in-memory cart of line items with a single active discount rate.
A Cart has no lock: one instance belongs to one caller (one session).
Use CartDatabase to hand out a cart per session.
"""

import logging
import uuid
from datetime import datetime, timezone
from typing import Any, Mapping, Optional, Union

from ..errors import InvalidPromoCode
from ..models.cart import CartSummary, LineItem, validate_line_item
from .pricing import PromoCatalog, apply_rate, calculate_subtotal, count_items

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Cart:
    """
    Shopping cart holding line items and the active discount rate.

    Usage:
        cart = Cart()
        cart.add_product({"id": "1", "name": "T-shirt", "price": 20, "quantity": 2})
        cart.apply_discount("PROMO10")
        cart.get_total()  # 36.0
    """

    def __init__(
        self,
        cart_id: Optional[str] = None,
        promo_codes: Optional[Mapping[str, float]] = None,
    ):
        now = _utcnow()
        self.cart_id = cart_id or str(uuid.uuid4())
        self.created_at = now
        self.updated_at = now
        self.promo_catalog = PromoCatalog.from_settings(promo_codes)
        self._items: list[LineItem] = []
        self._discount_rate = 0.0

    def __repr__(self) -> str:
        return (
            f"Cart(cart_id={self.cart_id!r}, items={len(self._items)}, "
            f"discount_rate={self._discount_rate})"
        )

    @property
    def items(self) -> list[LineItem]:
        """Copies of the stored line items, in insertion order"""
        return [item.model_copy() for item in self._items]

    @property
    def discount_rate(self) -> float:
        return self._discount_rate

    def _find(self, product_id: str) -> Optional[LineItem]:
        return next((item for item in self._items if item.id == product_id), None)

    def _touch(self) -> None:
        self.updated_at = _utcnow()

    # ==================== Mutators ====================

    def add_product(self, item: Union[LineItem, Mapping[str, Any]]) -> None:
        """
        Add a product to the cart.

        If a product with the same id is already in the cart, its quantity is
        increased by the incoming quantity; the stored name and price are kept.
        Otherwise a copy of the item is appended.

        Raises:
            ValidationError: if the item is invalid. The cart is left unchanged.
        """
        candidate = validate_line_item(item)

        existing = self._find(candidate.id)
        if existing:
            existing.quantity += candidate.quantity
            logger.debug(
                f"Cart {self.cart_id}: {candidate.id} quantity now {existing.quantity}"
            )
        else:
            self._items.append(candidate)
            logger.debug(
                f"Cart {self.cart_id}: added {candidate.quantity}x {candidate.id}"
            )

        self._touch()

    def remove_product(self, product_id: str) -> None:
        """Remove a product by id. Unknown ids are ignored."""
        remaining = [item for item in self._items if item.id != product_id]
        if len(remaining) == len(self._items):
            return

        self._items = remaining
        self._touch()
        logger.debug(f"Cart {self.cart_id}: removed {product_id}")

    def apply_discount(self, code: str) -> None:
        """
        Apply a promo code, replacing any discount already in effect.

        Raises:
            InvalidPromoCode: if the code is not recognized. The current
                discount stays in effect.
        """
        try:
            rate = self.promo_catalog.rate_for(code)
        except InvalidPromoCode:
            logger.warning(f"Cart {self.cart_id}: rejected promo code {code!r}")
            raise

        self._discount_rate = rate
        self._touch()
        logger.info(f"Cart {self.cart_id}: applied promo code {code} ({rate:.0%} off)")

    def reset_cart(self) -> None:
        """Clear all items and drop the discount"""
        self._items = []
        self._discount_rate = 0.0
        self._touch()
        logger.debug(f"Cart {self.cart_id}: reset")

    # ==================== Queries ====================

    def get_product_count(self) -> int:
        """Total quantity of products in the cart"""
        return count_items(self._items)

    def get_subtotal(self) -> float:
        """Total before discount"""
        return calculate_subtotal(self._items)

    def get_total(self) -> float:
        """Total after the active discount"""
        subtotal = self.get_subtotal()
        logger.debug(f"Cart {self.cart_id}: total before discount: {subtotal}")
        return apply_rate(subtotal, self._discount_rate)

    def summary(self) -> CartSummary:
        """Snapshot of the cart for API responses"""
        subtotal = self.get_subtotal()
        return CartSummary(
            cart_id=self.cart_id,
            items=self.items,
            item_count=self.get_product_count(),
            subtotal=subtotal,
            discount_rate=self._discount_rate,
            total=apply_rate(subtotal, self._discount_rate),
            created_at=self.created_at,
            updated_at=self.updated_at,
        )
