"""Data Transfer Objects: plain containers that cross layer boundaries."""

from __future__ import annotations

from dataclasses import dataclass

from orderkit.domain.model.order import Order
from orderkit.domain.service.invoice import plain_number


@dataclass(frozen=True)
class OrderSummaryDTO:
    """Output: the headline facts about an order as displayed to the user."""

    id: int
    customer_name: str
    status: str
    product_count: int
    total: str

    @staticmethod
    def from_order(order: Order) -> OrderSummaryDTO:
        return OrderSummaryDTO(
            id=order.id,
            customer_name=order.customer_name,
            status=order.status.value,
            product_count=len(order.products),
            total=str(plain_number(order.get_total_price())),
        )
