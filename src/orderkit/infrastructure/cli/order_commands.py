"""CLI commands for the Order aggregate."""

from __future__ import annotations

import click

from orderkit.application.dto import OrderSummaryDTO
from orderkit.application.order_actions import ACTIONS, apply_actions
from orderkit.application.place_order import PlaceOrderHandler
from orderkit.domain.exceptions import DomainException
from orderkit.domain.model.order import Order
from orderkit.domain.model.product import LAPTOP, PHONE
from orderkit.domain.service.discount import LoyalCustomerDiscount
from orderkit.domain.service.invoice import ConsoleInvoiceFormatter, plain_number
from orderkit.infrastructure.bootstrap import (
    AUTO_DISCOUNT,
    DISCOUNT_STRATEGIES,
    INVOICE_FORMATTERS,
    discount_strategy,
    invoice_formatter,
    product_repository,
)


def _parse_items(raw: str) -> list[str]:
    """Parse 'Laptop,Phone' into a list of product names."""
    names = [name.strip() for name in raw.split(",")]
    if any(not name for name in names):
        raise click.BadParameter(
            f"Invalid item list '{raw}'. Expected 'Product,Product'."
        )
    return names


def _display_summary(dto: OrderSummaryDTO) -> None:
    click.echo(
        f"Order #{dto.id}  (status={dto.status}, products={dto.product_count}, "
        f"total={dto.total})"
    )


@click.command("invoice")
@click.option("--id", "order_id", default=1, show_default=True, type=int, help="Order ID.")
@click.option("--customer", required=True, help="Customer name.")
@click.option("--items", required=True, help="Products as 'Product,Product'.")
@click.option(
    "--discount",
    default=AUTO_DISCOUNT,
    show_default=True,
    type=click.Choice([*DISCOUNT_STRATEGIES, AUTO_DISCOUNT]),
    help="Discount strategy; 'auto' applies the loyalty rule.",
)
@click.option(
    "--format",
    "fmt",
    default="console",
    show_default=True,
    type=click.Choice(list(INVOICE_FORMATTERS)),
    help="Invoice format.",
)
@click.option(
    "--action",
    "actions",
    multiple=True,
    type=click.Choice(ACTIONS),
    help="Lifecycle event to fire, in order. May be repeated.",
)
def order_invoice(
    order_id: int,
    customer: str,
    items: str,
    discount: str,
    fmt: str,
    actions: tuple[str, ...],
) -> None:
    """Build an order, run lifecycle events and print its invoice."""
    names = _parse_items(items)
    handler = PlaceOrderHandler(product_repo=product_repository())

    try:
        order = handler.handle(
            order_id=order_id,
            customer_name=customer,
            product_names=names,
            discount_strategy=discount_strategy(discount, customer),
            invoice_formatter=invoice_formatter(fmt),
        )
        apply_actions(order, actions)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_summary(OrderSummaryDTO.from_order(order))
    click.echo()
    click.echo(order.render_invoice())


@click.command("demo")
def demo() -> None:
    """Run the fixed demonstration order through its lifecycle."""
    order = Order.create(
        order_id=1,
        customer_name="Alice",
        products=[LAPTOP, PHONE],
        discount_strategy=LoyalCustomerDiscount(),
        invoice_formatter=ConsoleInvoiceFormatter(),
    )

    click.echo(f"Total price: {plain_number(order.get_total_price())}")
    order.process()
    order.cancel()
    click.echo(order.render_invoice())

    # Same order data through the other adapters.
    for name in ("html", "json"):
        click.echo()
        click.echo(invoice_formatter(name).format(order.snapshot()))

    click.echo()
    _display_summary(OrderSummaryDTO.from_order(order))
