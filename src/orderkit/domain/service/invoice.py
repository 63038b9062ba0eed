"""Invoice formatters.

Each formatter adapts the same ``OrderSnapshot`` to a different textual
representation.  Formatters only return strings; writing them to a
console, file or response is the caller's business.
"""

from __future__ import annotations

import html
import json
from abc import ABC, abstractmethod
from decimal import Decimal

from orderkit.domain.model.order import OrderSnapshot


def plain_number(amount: Decimal) -> int | float:
    """Convert a Decimal to a JSON-friendly number.

    Integral amounts become ``int`` (``Decimal("1350.0")`` -> ``1350``),
    anything else a ``float``.  No currency formatting or rounding.
    """
    if amount == amount.to_integral_value():
        return int(amount)
    return float(amount)


class InvoiceFormatter(ABC):

    name: str = ""

    @abstractmethod
    def format(self, order: OrderSnapshot) -> str:
        """Render *order* as text."""


class ConsoleInvoiceFormatter(InvoiceFormatter):

    name = "console"

    def format(self, order: OrderSnapshot) -> str:
        lines = [
            f"Invoice for Order #{order.order_id}",
            f"Customer: {order.customer_name}",
            "",
            f"  {'Product':<20} {'Price':>10}",
            f"  {'-' * 31}",
        ]
        for product in order.products:
            lines.append(f"  {product.name:<20} {plain_number(product.price):>10}")
        lines.append(f"  {'-' * 31}")
        lines.append(f"  {'Total Price':<20} {plain_number(order.total_price):>10}")
        return "\n".join(lines)


class HtmlInvoiceFormatter(InvoiceFormatter):

    name = "html"

    def format(self, order: OrderSnapshot) -> str:
        items = "\n".join(
            f"  <li>{html.escape(p.name)}: {plain_number(p.price)}</li>"
            for p in order.products
        )
        return (
            f"<h1>Invoice for Order #{order.order_id}</h1>\n"
            f"<p>Customer: {html.escape(order.customer_name)}</p>\n"
            f"<ul>\n{items}\n</ul>\n"
            f"<p>Total Price: {plain_number(order.total_price)}</p>"
        )


class JsonInvoiceFormatter(InvoiceFormatter):

    name = "json"

    def __init__(self, indent: int | None = 2) -> None:
        self._indent = indent

    def format(self, order: OrderSnapshot) -> str:
        payload = {
            "OrderId": order.order_id,
            "Customer": order.customer_name,
            "Products": [
                {"Name": p.name, "Price": plain_number(p.price)}
                for p in order.products
            ],
            "TotalPrice": plain_number(order.total_price),
        }
        return json.dumps(payload, indent=self._indent)
