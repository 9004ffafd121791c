# Cart services

from .cart import Cart
from .pricing import (
    PromoCatalog,
    apply_rate,
    calculate_subtotal,
    calculate_total,
    count_items,
)

__all__ = [
    "Cart",
    "PromoCatalog",
    "apply_rate",
    "calculate_subtotal",
    "calculate_total",
    "count_items",
]
