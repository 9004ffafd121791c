"""
Cart pricing

Pure functions over line items. Nothing here logs or mutates a cart;
callers decide what to report.
"""

from typing import Iterable, Mapping, Optional

from ..core.config import get_settings
from ..errors import InvalidPromoCode
from ..models.cart import LineItem


def count_items(items: Iterable[LineItem]) -> int:
    """Total quantity across all items"""
    return sum(item.quantity for item in items)


def calculate_subtotal(items: Iterable[LineItem]) -> float:
    """Sum of price x quantity, before any discount"""
    return sum(item.price * item.quantity for item in items)


def apply_rate(subtotal: float, discount_rate: float) -> float:
    return subtotal * (1 - discount_rate)


def calculate_total(items: Iterable[LineItem], discount_rate: float = 0.0) -> float:
    """Subtotal with the fractional discount taken off"""
    return apply_rate(calculate_subtotal(items), discount_rate)


class PromoCatalog:
    """
    Recognized promo codes and the discount rate each one grants.

    Codes match exactly (case-sensitive). Rates are fractions in [0, 1),
    e.g. {"PROMO10": 0.10} means 10% off the cart total.
    """

    def __init__(self, codes: Mapping[str, float]):
        for code, rate in codes.items():
            if not 0 <= rate < 1:
                raise ValueError(f"Discount rate for {code!r} must be in [0, 1), got {rate}")
        self._codes: dict[str, float] = dict(codes)

    @classmethod
    def from_settings(cls, codes: Optional[Mapping[str, float]] = None) -> "PromoCatalog":
        """Build a catalog from explicit codes, or from configured settings"""
        if codes is None:
            codes = get_settings().promo_codes
        return cls(codes)

    @property
    def codes(self) -> list[str]:
        return sorted(self._codes)

    def __contains__(self, code: object) -> bool:
        return code in self._codes

    def __len__(self) -> int:
        return len(self._codes)

    def rate_for(self, code: str) -> float:
        """
        Get the discount rate for a code.

        Raises:
            InvalidPromoCode: if the code is not in the catalog.
        """
        try:
            return self._codes[code]
        except (KeyError, TypeError):
            raise InvalidPromoCode(code) from None
