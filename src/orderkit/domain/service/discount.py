"""Discount strategies and the manager an Order depends on.

A strategy is a pure price transform.  It knows nothing about the
customer: deciding *which* strategy a customer is entitled to happens in
the composition root (see ``orderkit.infrastructure.bootstrap``).
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from decimal import Decimal


class DiscountStrategy(ABC):

    name: str = ""

    @abstractmethod
    def apply(self, total: Decimal) -> Decimal:
        """Return the discounted total.  No clamping is performed."""


class NoDiscount(DiscountStrategy):

    name = "none"

    def apply(self, total: Decimal) -> Decimal:
        return total


class PercentageDiscount(DiscountStrategy):
    """Multiply the total by a fixed factor."""

    factor: Decimal = Decimal("1")

    def apply(self, total: Decimal) -> Decimal:
        return total * self.factor


class LoyalCustomerDiscount(PercentageDiscount):

    name = "loyal"
    factor = Decimal("0.9")


class SeasonalDiscount(PercentageDiscount):

    name = "seasonal"
    factor = Decimal("0.85")


class DiscountManager:
    """Stable dependency for Order that delegates to one strategy."""

    def __init__(self, strategy: DiscountStrategy) -> None:
        self._strategy = strategy

    @property
    def strategy(self) -> DiscountStrategy:
        return self._strategy

    def apply(self, total: Decimal) -> Decimal:
        return self._strategy.apply(total)
