"""CLI commands for inventory management."""

from __future__ import annotations

import click

from posledger.application.adjust_inventory import AdjustInventoryHandler
from posledger.application.show_inventory import ShowInventoryHandler
from posledger.domain.exceptions import DomainException
from posledger.infrastructure.bootstrap import product_repository
from posledger.infrastructure.config import get_settings


@click.command("adjust")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--quantity", required=True, type=int, help="Units to add or remove.")
@click.option(
    "--direction",
    type=click.Choice(["add", "subtract"]),
    default="add",
    show_default=True,
    help="Add stock or remove it.",
)
def inventory_adjust(product_id: str, quantity: int, direction: str) -> None:
    """Add or remove stock for a product."""
    handler = AdjustInventoryHandler(product_repo=product_repository())

    try:
        product = handler.handle(product_id, quantity, direction)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    verb = "increased" if direction == "add" else "decreased"
    click.echo(f"{product.name} inventory {verb} by {quantity}; now {product.inventory} units")


@click.command("show")
@click.option("--search", default=None, help="Only show products matching this term.")
def inventory_show(search: str | None) -> None:
    """Show stock levels, stock value and low-stock items."""
    handler = ShowInventoryHandler(
        product_repo=product_repository(),
        low_stock_threshold=get_settings().low_stock_threshold,
    )
    summary = handler.handle(search)

    click.echo(f"Total products:  {len(summary.lines)}")
    click.echo(f"Total units:     {summary.total_units}")
    click.echo(f"Inventory value: {summary.total_value}")
    click.echo(f"Low stock (<{summary.low_stock_threshold}): {summary.low_stock_count}")
    click.echo()

    if not summary.lines:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<14} {'Product':<20} {'Stock':>8} {'Value':>12}")
    click.echo("-" * 57)
    for line in summary.lines:
        flag = "  LOW" if line.low_stock else ""
        click.echo(
            f"{line.product_id:<14} {line.product_name:<20} {line.inventory:>8} {line.value:>12}{flag}"
        )
