import logging

import click

from orderkit.infrastructure.cli.order_commands import demo, order_invoice
from orderkit.infrastructure.cli.product_commands import product_list


def setup_logging(verbose: bool = False) -> None:
    """Route lifecycle notices to stderr."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
    )


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """orderkit: order lifecycle, discounts and invoices"""
    setup_logging(verbose)


@cli.group()
def order() -> None:
    """Manage orders."""


@cli.group()
def product() -> None:
    """Browse the product catalog."""


# Register subcommands
cli.add_command(demo)
order.add_command(order_invoice)
product.add_command(product_list)
