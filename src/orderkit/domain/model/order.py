"""Order aggregate.

An Order owns a fixed product list and its current lifecycle state.
Pricing, discounting and invoice rendering are injected collaborators;
the only way to swap them is to build a new Order.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import TYPE_CHECKING, Iterable

from orderkit.domain.model.order_state import NewState, OrderState, OrderStatus
from orderkit.domain.model.product import Product
from orderkit.domain.service.discount import DiscountManager, DiscountStrategy
from orderkit.domain.service.price_calculator import PriceCalculator

if TYPE_CHECKING:
    from orderkit.domain.service.invoice import InvoiceFormatter

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProductLine:
    """One product as it appears on an invoice."""

    name: str
    price: Decimal


@dataclass(frozen=True)
class OrderSnapshot:
    """Read-only view of an order handed to invoice formatters."""

    order_id: int
    customer_name: str
    products: tuple[ProductLine, ...]
    total_price: Decimal
    status: OrderStatus


class Order:
    """Aggregate root for a single customer purchase.

    ``get_total_price()`` is recomputed on every call from the product
    list and the bound discount; nothing is cached.  Duplicate ids, empty
    product lists and negative prices are all accepted.
    """

    def __init__(
        self,
        order_id: int,
        customer_name: str,
        products: Iterable[Product],
        discount_manager: DiscountManager,
        invoice_formatter: InvoiceFormatter,
        price_calculator: PriceCalculator | None = None,
    ) -> None:
        self._id = order_id
        self._customer_name = customer_name
        self._products: tuple[Product, ...] = tuple(products)
        self._discount_manager = discount_manager
        self._invoice_formatter = invoice_formatter
        self._price_calculator = price_calculator or PriceCalculator()
        self._state: OrderState = NewState()

    # --- Factory ----------------------------------------------------------------

    @classmethod
    def create(
        cls,
        order_id: int,
        customer_name: str,
        products: Iterable[Product],
        discount_strategy: DiscountStrategy,
        invoice_formatter: InvoiceFormatter,
    ) -> Order:
        """Build an order, wrapping *discount_strategy* in a DiscountManager."""
        return cls(
            order_id=order_id,
            customer_name=customer_name,
            products=products,
            discount_manager=DiscountManager(discount_strategy),
            invoice_formatter=invoice_formatter,
        )

    # --- Read-only attributes ---------------------------------------------------

    @property
    def id(self) -> int:
        return self._id

    @property
    def customer_name(self) -> str:
        return self._customer_name

    @property
    def products(self) -> tuple[Product, ...]:
        return self._products

    @property
    def state(self) -> OrderState:
        return self._state

    @property
    def status(self) -> OrderStatus:
        return self._state.status

    @property
    def discount_strategy(self) -> DiscountStrategy:
        return self._discount_manager.strategy

    @property
    def invoice_formatter(self) -> InvoiceFormatter:
        return self._invoice_formatter

    # --- Lifecycle events -------------------------------------------------------

    def process(self) -> None:
        self._state.process(self)

    def cancel(self) -> None:
        self._state.cancel(self)

    def transition_to(self, state: OrderState) -> None:
        """Rebind the current state.  Called only by OrderState handlers."""
        logger.debug(
            "Order #%s: %s -> %s", self._id, self._state.status.value, state.status.value
        )
        self._state = state

    # --- Pricing and rendering --------------------------------------------------

    def get_total_price(self) -> Decimal:
        subtotal = self._price_calculator.calculate(self._products)
        return self._discount_manager.apply(subtotal)

    def snapshot(self) -> OrderSnapshot:
        return OrderSnapshot(
            order_id=self._id,
            customer_name=self._customer_name,
            products=tuple(ProductLine(p.name, p.price) for p in self._products),
            total_price=self.get_total_price(),
            status=self.status,
        )

    def render_invoice(self) -> str:
        return self._invoice_formatter.format(self.snapshot())

    def __repr__(self) -> str:
        return (
            f"Order(id={self._id!r}, customer_name={self._customer_name!r}, "
            f"status={self.status.value})"
        )
