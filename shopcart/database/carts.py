"""Cart storage, one cart per session"""

import logging
from datetime import datetime, timezone
from typing import Mapping, Optional

from ..services.cart import Cart

logger = logging.getLogger(__name__)


class CartDatabase:
    """In-memory cart storage keyed by cart id"""

    def __init__(self, promo_codes: Optional[Mapping[str, float]] = None):
        self.carts: dict[str, Cart] = {}
        self.promo_codes = promo_codes

    def __len__(self) -> int:
        return len(self.carts)

    def create_cart(self) -> Cart:
        """Create a new empty cart"""
        cart = Cart(promo_codes=self.promo_codes)
        self.carts[cart.cart_id] = cart
        logger.info(f"Created cart {cart.cart_id}")
        return cart

    def get_cart(self, cart_id: str) -> Optional[Cart]:
        """Get a cart by ID"""
        return self.carts.get(cart_id)

    def get_or_create_cart(self, cart_id: Optional[str] = None) -> Cart:
        """Get existing cart or create new one"""
        if cart_id and cart_id in self.carts:
            return self.carts[cart_id]
        return self.create_cart()

    def delete_cart(self, cart_id: str) -> bool:
        """Delete a cart"""
        if cart_id in self.carts:
            del self.carts[cart_id]
            logger.info(f"Deleted cart {cart_id}")
            return True
        return False

    def cleanup_old_carts(self, max_age_hours: int = 24) -> int:
        """Remove carts not updated in the last max_age_hours"""
        now = datetime.now(timezone.utc)
        old_carts = [
            cid for cid, cart in self.carts.items()
            if (now - cart.updated_at).total_seconds() > max_age_hours * 3600
        ]
        for cid in old_carts:
            del self.carts[cid]
        if old_carts:
            logger.info(f"Removed {len(old_carts)} idle cart(s)")
        return len(old_carts)


# Singleton instance
cart_db = CartDatabase()
