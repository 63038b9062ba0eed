"""Abstract repository for the product catalog.

Defined in the domain layer so the domain never depends on
infrastructure.  The concrete in-memory catalog lives in the
infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from orderkit.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def get_by_name(self, name: str) -> Product | None:
        """Return a product by name (case-insensitive), or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product in the catalog."""

    @abstractmethod
    def save(self, product: Product) -> None:
        """Add a product, replacing any existing entry with the same name."""
