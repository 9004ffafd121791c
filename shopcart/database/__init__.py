# Cart storage

from .carts import cart_db, CartDatabase

__all__ = ["cart_db", "CartDatabase"]
