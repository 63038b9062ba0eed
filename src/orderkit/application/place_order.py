"""Application service: Place Order use case.

Resolves product names against the catalog and assembles an Order with
the strategy and formatter the caller chose.
"""

from __future__ import annotations

import logging

from orderkit.domain.exceptions import EntityNotFoundError
from orderkit.domain.model.order import Order
from orderkit.domain.model.product import Product
from orderkit.domain.repository.product_repository import ProductRepository
from orderkit.domain.service.discount import DiscountStrategy
from orderkit.domain.service.invoice import InvoiceFormatter

logger = logging.getLogger(__name__)


class PlaceOrderHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        order_id: int,
        customer_name: str,
        product_names: list[str],
        discount_strategy: DiscountStrategy,
        invoice_formatter: InvoiceFormatter,
    ) -> Order:
        """Create a new order.

        Raises EntityNotFoundError if any product name is not in the
        catalog.  Repeated names yield repeated products.
        """
        products: list[Product] = []
        for name in product_names:
            product = self._product_repo.get_by_name(name)
            if product is None:
                raise EntityNotFoundError(f"Product not found: '{name}'")
            products.append(product)

        order = Order.create(
            order_id=order_id,
            customer_name=customer_name,
            products=products,
            discount_strategy=discount_strategy,
            invoice_formatter=invoice_formatter,
        )
        logger.debug(
            "Placed %r with %d product(s), discount=%s, format=%s",
            order,
            len(products),
            order.discount_strategy.name,
            order.invoice_formatter.name,
        )
        return order
