"""CLI commands for the product catalog."""

from __future__ import annotations

import click

from orderkit.domain.service.invoice import plain_number
from orderkit.infrastructure.bootstrap import product_repository


@click.command("list")
def product_list() -> None:
    """List all products in the catalog."""
    products = product_repository().list_all()

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'Name':<20} {'Price':>10}")
    click.echo("-" * 31)
    for p in products:
        click.echo(f"{p.name:<20} {plain_number(p.price):>10}")
