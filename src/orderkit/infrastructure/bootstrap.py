"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers,
and the only place that decides which discount a customer is entitled
to.  Strategies themselves never look at the customer.
"""

from __future__ import annotations

from orderkit.domain.exceptions import ValidationError
from orderkit.domain.model.product import DEFAULT_CATALOG
from orderkit.domain.service.discount import (
    DiscountStrategy,
    LoyalCustomerDiscount,
    NoDiscount,
    SeasonalDiscount,
)
from orderkit.domain.service.invoice import (
    ConsoleInvoiceFormatter,
    HtmlInvoiceFormatter,
    InvoiceFormatter,
    JsonInvoiceFormatter,
)
from orderkit.infrastructure.persistence.in_memory_product_repository import (
    InMemoryProductRepository,
)

# Registries are keyed by each class's own ``name``.
DISCOUNT_STRATEGIES: dict[str, type[DiscountStrategy]] = {
    cls.name: cls for cls in (NoDiscount, LoyalCustomerDiscount, SeasonalDiscount)
}

INVOICE_FORMATTERS: dict[str, type[InvoiceFormatter]] = {
    cls.name: cls
    for cls in (ConsoleInvoiceFormatter, HtmlInvoiceFormatter, JsonInvoiceFormatter)
}

# Eligibility rule for "auto" discount selection.
LOYAL_CUSTOMERS = frozenset({"alice"})
AUTO_DISCOUNT = "auto"


def product_repository() -> InMemoryProductRepository:
    return InMemoryProductRepository(DEFAULT_CATALOG)


def select_discount(customer_name: str) -> DiscountStrategy:
    """Pick the discount a customer is entitled to."""
    if customer_name.strip().lower() in LOYAL_CUSTOMERS:
        return LoyalCustomerDiscount()
    return NoDiscount()


def discount_strategy(name: str, customer_name: str = "") -> DiscountStrategy:
    if name == AUTO_DISCOUNT:
        return select_discount(customer_name)
    try:
        return DISCOUNT_STRATEGIES[name]()
    except KeyError:
        raise ValidationError(
            f"Unknown discount '{name}'. "
            f"Expected one of: {', '.join([*DISCOUNT_STRATEGIES, AUTO_DISCOUNT])}"
        ) from None


def invoice_formatter(name: str) -> InvoiceFormatter:
    try:
        return INVOICE_FORMATTERS[name]()
    except KeyError:
        raise ValidationError(
            f"Unknown invoice format '{name}'. "
            f"Expected one of: {', '.join(INVOICE_FORMATTERS)}"
        ) from None
