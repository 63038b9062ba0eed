"""Dict-backed implementation of ProductRepository."""

from __future__ import annotations

from typing import Iterable

from orderkit.domain.model.product import Product
from orderkit.domain.repository.product_repository import ProductRepository


class InMemoryProductRepository(ProductRepository):

    def __init__(self, products: Iterable[Product] = ()) -> None:
        # keyed by lower-cased name, insertion order preserved for listing
        self._store: dict[str, Product] = {}
        for product in products:
            self.save(product)

    def get_by_name(self, name: str) -> Product | None:
        return self._store.get(name.strip().lower())

    def list_all(self) -> list[Product]:
        return list(self._store.values())

    def save(self, product: Product) -> None:
        self._store[product.name.lower()] = product
