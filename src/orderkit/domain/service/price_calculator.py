"""Sums product prices into an undiscounted order total."""

from __future__ import annotations

from decimal import Decimal
from typing import Iterable

from orderkit.domain.model.product import Product


class PriceCalculator:

    def calculate(self, products: Iterable[Product]) -> Decimal:
        """Return the sum of ``price`` over *products* (0 when empty)."""
        total = Decimal("0")
        for product in products:
            total += product.price
        return total
